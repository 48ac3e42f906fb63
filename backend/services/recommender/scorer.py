"""Relevance scoring for catalog resources.

score = base_relevance
      + difficulty bonus    (difficulty is the tier's canonical difficulty)
      + per-skill bonus     (x number of resource tags matching a user skill)
      + free bonus          (cost == 0 and tier is Entry/Junior)
clamped to 0-100.

A tag matches a user skill when either is a case-insensitive substring of
the other, so "React" matches "React.js" and vice versa.
"""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from models.schemas.recommendation import ScoredResource
from models.schemas.resource import ExperienceTier, ResourceRecord
from services.recommender.experience import BEGINNER_TIERS, CANONICAL_DIFFICULTY

MIN_SCORE = 0
MAX_SCORE = 100


class ScoringWeights(BaseModel):
    """Score bonuses. Defaults are the values the catalog was tuned against."""
    model_config = {"frozen": True}

    difficulty_match: int = 15
    per_skill: int = 5
    free_for_beginners: int = 10


DEFAULT_WEIGHTS = ScoringWeights()


def _normalize_skills(skills: Iterable[str]) -> list[str]:
    # blank skills would be a substring of every tag
    return [s.strip().lower() for s in skills if s and s.strip()]


def matching_skills(resource_skills: Iterable[str], user_skills: Iterable[str]) -> list[str]:
    """Resource tags matching at least one user skill, in resource order."""
    wanted = _normalize_skills(user_skills)
    if not wanted:
        return []
    matched = []
    for tag in resource_skills:
        tag_lower = tag.lower()
        if any(u in tag_lower or tag_lower in u for u in wanted):
            matched.append(tag)
    return matched


def score(
    resource: ResourceRecord,
    tier: ExperienceTier,
    skills: Sequence[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Relevance of ``resource`` for a caller at ``tier`` with ``skills``. Pure."""
    total = resource.base_relevance

    if resource.difficulty == CANONICAL_DIFFICULTY[tier]:
        total += weights.difficulty_match

    total += weights.per_skill * len(matching_skills(resource.skills, skills))

    if tier in BEGINNER_TIERS and resource.is_free:
        total += weights.free_for_beginners

    return min(MAX_SCORE, max(MIN_SCORE, total))


def score_resource(
    resource: ResourceRecord,
    tier: ExperienceTier,
    skills: Sequence[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> ScoredResource:
    return ScoredResource(
        **resource.model_dump(),
        relevance_score=score(resource, tier, skills, weights),
        matched_skills=matching_skills(resource.skills, skills),
    )


def rank(
    resources: Iterable[ResourceRecord],
    tier: ExperienceTier,
    skills: Sequence[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredResource]:
    """Score every resource and sort by score, highest first.

    The sort is stable, so equal scores keep catalog order.
    """
    scored = [score_resource(r, tier, skills, weights) for r in resources]
    return sorted(scored, key=lambda r: r.relevance_score, reverse=True)
