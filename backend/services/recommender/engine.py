"""Recommendation engine: wires the components into one synchronous call.

Flow:
    RecommendationRequest
      ├─ bucket(years)             → ExperienceTier   (InvalidInputError if negative)
      ├─ classifier.classify(label) → pool, pool name
      ├─ check_classification()     → diagnostic only, never blocks
      ├─ rank(pool ∩ tier, skills)  → ScoredResource[] (best first)
      └─ partition(ranked, tier)    → ResourceCategory[]

Everything is pure over the loaded catalog, so one engine instance can serve
any number of requests in parallel.
"""

import logging
from collections.abc import Iterable

from config import Settings
from models.requests import RecommendationRequest
from models.schemas.domain_rule import DomainRule
from models.schemas.recommendation import RecommendationResult, ResourceCategory
from models.schemas.resource import ExperienceTier
from services.recommender.catalog import ResourceCatalog, load_catalog
from services.recommender.classifier import DOMAIN_RULES, DomainClassifier
from services.recommender.exceptions import CatalogError
from services.recommender.experience import bucket
from services.recommender.partitioner import DEFAULT_CAPS, CategoryCaps, partition
from services.recommender.scorer import DEFAULT_WEIGHTS, ScoringWeights, rank
from services.recommender.validator import MAX_WEB_RATIO, check_classification

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Personalized learning resource recommendations.

    The catalog can be injected (tests, alternative data sets); otherwise it
    is loaded from ``catalog_path`` or the packaged catalog on first use.
    """

    def __init__(
        self,
        catalog: ResourceCatalog | None = None,
        *,
        catalog_path: str | None = None,
        rules: Iterable[DomainRule] = DOMAIN_RULES,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        caps: CategoryCaps = DEFAULT_CAPS,
        max_web_ratio: float = MAX_WEB_RATIO,
    ) -> None:
        self._catalog = catalog
        self._catalog_path = catalog_path
        self._rules = tuple(rules)
        self._weights = weights
        self._caps = caps
        self._max_web_ratio = max_web_ratio
        self._classifier: DomainClassifier | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecommendationEngine":
        return cls(
            catalog_path=settings.catalog_path or None,
            weights=ScoringWeights(
                difficulty_match=settings.difficulty_match_bonus,
                per_skill=settings.skill_match_bonus,
                free_for_beginners=settings.free_beginner_bonus,
            ),
            caps=CategoryCaps(
                fundamentals=settings.fundamentals_cap,
                core=settings.core_cap,
                advanced=settings.advanced_cap,
                free=settings.free_cap,
            ),
            max_web_ratio=settings.max_web_ratio,
        )

    @property
    def is_loaded(self) -> bool:
        return self._classifier is not None

    def load(self) -> None:
        """Load the catalog and build the classifier. Raises CatalogError."""
        if self._catalog is None:
            self._catalog = load_catalog(self._catalog_path)
        classifier = DomainClassifier(self._catalog, self._rules)

        # The fallback pool backs every tier so a response is never empty
        covered = set().union(*(self._catalog.tiers_covered(key) for key in classifier.fallback_rule.pools))
        uncovered = [t.value for t in ExperienceTier if t not in covered]
        if uncovered:
            raise CatalogError(
                f"Fallback pool {classifier.fallback_rule.name!r} has no resources for: {', '.join(uncovered)}"
            )
        self._classifier = classifier

    def ensure_loaded(self) -> None:
        if not self.is_loaded:
            logger.info("Loading recommendation engine")
            self.load()
            logger.info("Recommendation engine ready: %d resources, %d rules",
                        len(self._catalog), len(self._classifier.rules))

    @property
    def catalog(self) -> ResourceCatalog:
        self.ensure_loaded()
        return self._catalog

    @property
    def classifier(self) -> DomainClassifier:
        self.ensure_loaded()
        return self._classifier

    def recommend(self, request: RecommendationRequest) -> list[ResourceCategory]:
        """Categories for the request, in display order."""
        return self.recommend_detailed(request).categories

    def recommend_detailed(self, request: RecommendationRequest) -> RecommendationResult:
        """Categories plus classification diagnostics."""
        tier = bucket(request.years_of_experience)
        classifier = self.classifier
        pool, matched_pool = classifier.classify(request.career_label)

        warnings: list[str] = []
        diagnostic = check_classification(pool, request.career_label, matched_pool, self._max_web_ratio)
        if diagnostic is not None:
            warnings.append(diagnostic.message)

        suited = [r for r in pool if r.suits(tier)]
        if not suited:
            logger.warning("Pool %s has no %s resources, using %s",
                           matched_pool, tier.value, classifier.fallback_rule.name)
            warnings.append(f"No {matched_pool} resources for {tier.value} level; showing general resources")
            suited = [r for r in classifier.fallback_pool if r.suits(tier)]

        ranked = rank(suited, tier, request.skills, self._weights)
        categories = partition(ranked, tier, self._caps)
        logger.debug("Recommended %d categories for %r (%s, %s)",
                     len(categories), request.career_label, matched_pool, tier.value)

        return RecommendationResult(
            categories=categories,
            matched_pool=matched_pool,
            tier=tier,
            plausible=diagnostic is None,
            warnings=warnings,
        )
