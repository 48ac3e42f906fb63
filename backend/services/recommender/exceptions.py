"""Errors raised by the recommendation engine."""


class RecommendationError(Exception):
    """Base class for recommendation engine errors."""


class InvalidInputError(RecommendationError, ValueError):
    """Request data the engine refuses to coerce, e.g. negative experience."""


class CatalogError(RecommendationError):
    """The resource catalog or the rule table is unusable."""
