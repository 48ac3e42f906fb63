"""Years of experience to experience tier."""

import math

from models.schemas.resource import Difficulty, ExperienceTier
from services.recommender.exceptions import InvalidInputError

# (exclusive upper bound in years, tier); 0 years is Entry, >= 10 is Expert
_TIER_UPPER_BOUNDS: tuple[tuple[float, ExperienceTier], ...] = (
    (2, ExperienceTier.JUNIOR),
    (5, ExperienceTier.MID),
    (10, ExperienceTier.SENIOR),
)

# Difficulty a resource should have to be a natural fit for the tier
CANONICAL_DIFFICULTY: dict[ExperienceTier, Difficulty] = {
    ExperienceTier.ENTRY: Difficulty.BEGINNER,
    ExperienceTier.JUNIOR: Difficulty.BEGINNER,
    ExperienceTier.MID: Difficulty.INTERMEDIATE,
    ExperienceTier.SENIOR: Difficulty.ADVANCED,
    ExperienceTier.EXPERT: Difficulty.ADVANCED,
}

BEGINNER_TIERS = frozenset({ExperienceTier.ENTRY, ExperienceTier.JUNIOR})


def bucket(years: float) -> ExperienceTier:
    """Map years of experience to a tier.

    Boundaries are closed-open: 2 years is Mid, not Junior.
    Raises InvalidInputError for negative or non-numeric input.
    """
    if isinstance(years, bool) or not isinstance(years, (int, float)):
        raise InvalidInputError(f"years of experience must be a number, got {years!r}")
    if math.isnan(years) or years < 0:
        raise InvalidInputError(f"years of experience must be >= 0, got {years}")

    if years == 0:
        return ExperienceTier.ENTRY
    for upper, tier in _TIER_UPPER_BOUNDS:
        if years < upper:
            return tier
    return ExperienceTier.EXPERT
