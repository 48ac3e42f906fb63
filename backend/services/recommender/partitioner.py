"""Group ranked resources into the categories shown on the learning page."""

from collections.abc import Callable, Iterable
from typing import NamedTuple

from pydantic import BaseModel

from models.schemas.recommendation import ResourceCategory, ScoredResource
from models.schemas.resource import Difficulty, ExperienceTier

FUNDAMENTALS = "Fundamentals & Getting Started"
CORE = "Core Skills Development"
ADVANCED = "Advanced & Specialization"
FREE = "Free Learning Resources"

_ALL_TIERS = frozenset(ExperienceTier)
_EARLY_TIERS = frozenset({ExperienceTier.ENTRY, ExperienceTier.JUNIOR})
_LATER_TIERS = _ALL_TIERS - _EARLY_TIERS


class CategoryCaps(BaseModel):
    """Maximum number of resources per category."""
    model_config = {"frozen": True}

    fundamentals: int = 5
    core: int = 8
    advanced: int = 5
    free: int = 6


DEFAULT_CAPS = CategoryCaps()


class _CategorySpec(NamedTuple):
    name: str
    description: str
    tiers: frozenset[ExperienceTier]
    accepts: Callable[[ScoredResource], bool]
    cap: Callable[[CategoryCaps], int]


# Emission order is the display order
_CATEGORIES: tuple[_CategorySpec, ...] = (
    _CategorySpec(
        FUNDAMENTALS,
        "Core concepts and beginner-friendly courses",
        _EARLY_TIERS,
        lambda r: r.difficulty in (Difficulty.BEGINNER, Difficulty.ALL_LEVELS),
        lambda caps: caps.fundamentals,
    ),
    _CategorySpec(
        CORE,
        "Essential skills for your career path",
        _ALL_TIERS,
        lambda r: True,
        lambda caps: caps.core,
    ),
    _CategorySpec(
        ADVANCED,
        "Deep-dive into advanced topics",
        _LATER_TIERS,
        lambda r: r.difficulty in (Difficulty.ADVANCED, Difficulty.INTERMEDIATE),
        lambda caps: caps.advanced,
    ),
    _CategorySpec(
        FREE,
        "High-quality free courses and tutorials",
        _ALL_TIERS,
        lambda r: r.is_free,
        lambda caps: caps.free,
    ),
)


def eligible_for(scored: Iterable[ScoredResource], tier: ExperienceTier) -> list[ScoredResource]:
    """Resources suited to ``tier``, best first. Ties keep input order."""
    suited = [r for r in scored if r.suits(tier)]
    return sorted(suited, key=lambda r: r.relevance_score, reverse=True)


def partition(
    scored: Iterable[ScoredResource],
    tier: ExperienceTier,
    caps: CategoryCaps = DEFAULT_CAPS,
) -> list[ResourceCategory]:
    """Build the categories applicable to ``tier``. Empty categories are omitted."""
    ranked = eligible_for(scored, tier)

    categories = []
    for spec in _CATEGORIES:
        if tier not in spec.tiers:
            continue
        selected = [r for r in ranked if spec.accepts(r)][: spec.cap(caps)]
        if selected:
            categories.append(
                ResourceCategory(category=spec.name, description=spec.description, resources=selected)
            )
    return categories
