"""Domain classifier: free-text career label -> resource pool.

Rules live in an ordered table instead of a chain of string checks.
Evaluation is strictly tier by tier (SPECIFIC, BROAD, GENERIC) and in
declaration order within a tier; the first rule with a keyword contained in
the label wins. Overlaps are resolved by that order alone, never by which
keyword is the "better" textual match:

    "senior data scientist"   -> Data Science      (SPECIFIC beats BROAD "scientist")
    "react native developer"  -> Frontend          (BROAD "react" is declared before Mobile)
    "software developer"      -> Software (Generic)
    ""                        -> Generic Professional (Fallback)
"""

import logging
from collections.abc import Iterable

from models.schemas.domain_rule import DomainRule, RuleTier
from models.schemas.resource import ResourceRecord
from services.recommender.catalog import ResourceCatalog
from services.recommender.exceptions import CatalogError

logger = logging.getLogger(__name__)

FALLBACK_POOL_NAME = "Generic Professional (Fallback)"


def _rule(tier: RuleTier, name: str, pools: str | tuple[str, ...], *keywords: str) -> DomainRule:
    pools = (pools,) if isinstance(pools, str) else pools
    return DomainRule(tier=tier, name=name, pools=pools, keywords=keywords)


DOMAIN_RULES: tuple[DomainRule, ...] = (
    # --- Specific job titles ---
    _rule(RuleTier.SPECIFIC, "Quality Engineering", "quality_engineer",
          "quality engineer", "quality assurance", "qa engineer", "qa tester", "software tester"),
    _rule(RuleTier.SPECIFIC, "Data Science", "data_science",
          "data scientist", "machine learning", "ml engineer", "ai engineer"),
    _rule(RuleTier.SPECIFIC, "Cybersecurity", "cybersecurity",
          "penetration tester", "pentester", "ethical hacker", "cybersecurity", "security analyst"),
    _rule(RuleTier.SPECIFIC, "Engineering", "engineering",
          "civil engineer", "structural engineer", "mechanical engineer", "electrical engineer"),
    _rule(RuleTier.SPECIFIC, "Surveying", "surveyor",
          "surveyor", "land surveyor", "quantity surveyor"),
    _rule(RuleTier.SPECIFIC, "Motion Graphics", "motion_graphics",
          "motion graphics", "motion designer", "animator", "3d artist", "vfx artist"),
    _rule(RuleTier.SPECIFIC, "Graphic Design", "graphic_design",
          "graphic designer", "visual designer", "brand designer"),
    _rule(RuleTier.SPECIFIC, "UI/UX Design", "ui_ux",
          "ui designer", "ux designer", "product designer", "ui/ux"),
    _rule(RuleTier.SPECIFIC, "Data Analytics", "data_analyst",
          "data analyst", "business analyst", "business intelligence"),
    _rule(RuleTier.SPECIFIC, "Product Management", "product_management",
          "product manager", "product owner", "program manager"),

    # --- Broad disciplines ---
    # Short tokens that hide inside other titles ("api" in therapist) are given as phrases
    _rule(RuleTier.BROAD, "Frontend Development", "frontend",
          "frontend", "react", "vue", "angular", "web developer"),
    _rule(RuleTier.BROAD, "Backend Development", "backend",
          "backend", "server", "api developer", "api engineer", "node", "django", "flask"),
    _rule(RuleTier.BROAD, "Full Stack Development", ("frontend", "backend"),
          "fullstack", "full stack", "full-stack"),
    _rule(RuleTier.BROAD, "Mobile Development", "mobile",
          "mobile", "ios", "android", "react native", "flutter"),
    _rule(RuleTier.BROAD, "DevOps", "devops",
          "devops", "cloud", "aws", "azure", "kubernetes", "docker"),
    _rule(RuleTier.BROAD, "Architecture", "architecture",
          "architect", "architecture"),
    _rule(RuleTier.BROAD, "Music/Audio", "music_audio",
          "music", "audio", "sound"),
    _rule(RuleTier.BROAD, "Film Production", "film_production",
          "film", "cinemat", "film director", "movie director", "video production"),
    _rule(RuleTier.BROAD, "Photography", "photography",
          "photo", "photography"),
    _rule(RuleTier.BROAD, "Startup/Entrepreneurship", "startup_founder",
          "startup", "founder", "entrepreneur"),
    _rule(RuleTier.BROAD, "Business/Marketing", "business_marketing",
          "business", "marketing", "sales"),
    _rule(RuleTier.BROAD, "Healthcare", "healthcare",
          "doctor", "physician", "nurse", "medic", "healthcare", "therapist", "pharmacist"),
    _rule(RuleTier.BROAD, "Construction", "construction",
          "construction", "builder", "carpenter", "electrician", "plumber"),
    _rule(RuleTier.BROAD, "Education", "education",
          "teacher", "professor", "educator", "instructor"),
    _rule(RuleTier.BROAD, "Legal", "legal",
          "lawyer", "attorney", "legal", "paralegal"),
    _rule(RuleTier.BROAD, "Finance/Accounting", "finance",
          "accountant", "finance", "financial", "auditor", "cpa"),
    _rule(RuleTier.BROAD, "Science/Research", "science_research",
          "scientist", "researcher", "research", "lab"),
    # Generic tech only when no discipline matched
    _rule(RuleTier.BROAD, "Software Development (Generic)", "generic_software",
          "software", "developer", "programmer", "coding"),

    # --- Catch-all ---
    _rule(RuleTier.GENERIC, FALLBACK_POOL_NAME, "generic_professional"),
)


def normalize_label(career_label: str) -> str:
    return (career_label or "").strip().lower()


def order_rules(rules: Iterable[DomainRule]) -> tuple[DomainRule, ...]:
    """Sort by tier; sorted() is stable so declaration order survives within a tier."""
    return tuple(sorted(rules, key=lambda r: r.tier))


def check_rules(rules: tuple[DomainRule, ...], catalog: ResourceCatalog) -> None:
    """Raise CatalogError unless the ordered rule table is usable with ``catalog``.

    Requires unique rule names, known pool keys, and exactly one fallback
    rule evaluated last.
    """
    if not rules:
        raise CatalogError("Rule table is empty")

    names = [r.name for r in rules]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate rule names: {', '.join(duplicates)}")

    fallbacks = [r for r in rules if r.is_fallback]
    if len(fallbacks) != 1:
        raise CatalogError(f"Rule table needs exactly one fallback rule, found {len(fallbacks)}")
    if rules[-1] is not fallbacks[0]:
        raise CatalogError(f"Fallback rule {fallbacks[0].name!r} must be evaluated last")

    for rule in rules:
        missing = [p for p in rule.pools if not catalog.has_pool(p)]
        if missing:
            raise CatalogError(f"Rule {rule.name!r} references unknown pools: {', '.join(missing)}")


class DomainClassifier:
    """Routes career labels to catalog pools using an ordered rule table."""

    def __init__(self, catalog: ResourceCatalog, rules: Iterable[DomainRule] = DOMAIN_RULES) -> None:
        self._rules = order_rules(rules)
        check_rules(self._rules, catalog)
        # Pools are resolved once; rules combining several pools concatenate them
        self._pools: dict[str, tuple[ResourceRecord, ...]] = {
            rule.name: tuple(r for key in rule.pools for r in catalog.pool(key))
            for rule in self._rules
        }

    @property
    def rules(self) -> tuple[DomainRule, ...]:
        return self._rules

    @property
    def fallback_rule(self) -> DomainRule:
        return self._rules[-1]

    @property
    def fallback_pool(self) -> tuple[ResourceRecord, ...]:
        return self._pools[self.fallback_rule.name]

    def pool_for(self, rule: DomainRule) -> tuple[ResourceRecord, ...]:
        return self._pools[rule.name]

    def match_rule(self, career_label: str) -> DomainRule:
        label = normalize_label(career_label)
        for rule in self._rules:
            if rule.matches(label):
                return rule
        # check_rules guarantees a trailing fallback
        raise CatalogError("No fallback rule matched")

    def classify(self, career_label: str) -> tuple[tuple[ResourceRecord, ...], str]:
        """Return the matched pool and its diagnostic name. Never fails."""
        rule = self.match_rule(career_label)
        if rule.is_fallback:
            logger.warning("No specific match for career %r, using %s", career_label, rule.name)
        else:
            logger.info("Career match: %r -> %s", career_label, rule.name)
        return self._pools[rule.name], rule.name
