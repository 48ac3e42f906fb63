"""Process-wide recommendation engine, created and loaded on first use."""

from config import settings
from models.requests import RecommendationRequest
from models.schemas.recommendation import ResourceCategory
from services.recommender.engine import RecommendationEngine

_engine: RecommendationEngine | None = None


def get_engine() -> RecommendationEngine:
    """Get the shared engine, building and loading it on first access."""
    global _engine
    if _engine is None:
        _engine = RecommendationEngine.from_settings(settings)
    _engine.ensure_loaded()
    return _engine


def set_engine(engine: RecommendationEngine) -> None:
    """Replace the shared engine, e.g. with one built on a test catalog."""
    global _engine
    _engine = engine


def preload() -> None:
    """Load the catalog eagerly (e.g. at startup) so bad data fails fast."""
    get_engine()


def clear() -> None:
    """Drop the shared engine. Useful for testing."""
    global _engine
    _engine = None


def recommend(request: RecommendationRequest) -> list[ResourceCategory]:
    return get_engine().recommend(request)
