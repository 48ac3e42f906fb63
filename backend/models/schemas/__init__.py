"""Pydantic contracts shared by the recommendation engine and the API."""

from models.schemas.resource import Difficulty, ExperienceTier, ResourceRecord
from models.schemas.domain_rule import DomainRule, RuleTier
from models.schemas.recommendation import (
    RecommendationResult,
    ResourceCategory,
    ScoredResource,
)

__all__ = [
    "Difficulty",
    "ExperienceTier",
    "ResourceRecord",
    "DomainRule",
    "RuleTier",
    "RecommendationResult",
    "ResourceCategory",
    "ScoredResource",
]
