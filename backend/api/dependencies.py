"""Shared dependencies for API routes."""

from services.recommender.engine import RecommendationEngine
from services.recommender.registry import get_engine


def get_recommendation_engine() -> RecommendationEngine:
    return get_engine()
