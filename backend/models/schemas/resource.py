"""Catalog records: one learning resource and its classification tags."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ExperienceTier(str, Enum):
    """Discretized years of experience."""
    ENTRY = "Entry"
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    EXPERT = "Expert"


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ALL_LEVELS = "All Levels"


Provider = Literal[
    "Udemy", "Coursera", "YouTube", "Google", "freeCodeCamp", "edX", "Pluralsight",
]


class ResourceRecord(BaseModel):
    """A single learning resource from the catalog.

    Records are built once when the catalog loads and never change afterwards.
    ``base_relevance`` is the author-assigned prior that seeds scoring.
    """
    model_config = {"frozen": True, "extra": "forbid"}

    id: str = Field(..., min_length=1)
    title: str
    provider: Provider
    url: str
    description: str = ""
    duration: str = ""  # free text, e.g. "40 hours", "6 months"
    difficulty: Difficulty
    cost: float = Field(0.0, ge=0)  # 0 = free
    rating: float | None = Field(None, ge=0, le=5)
    base_relevance: int = Field(..., ge=0, le=100)
    skills: tuple[str, ...] = ()
    experience_levels: tuple[ExperienceTier, ...] = Field(..., min_length=1)

    @field_validator("experience_levels")
    @classmethod
    def _dedupe_levels(cls, levels: tuple[ExperienceTier, ...]) -> tuple[ExperienceTier, ...]:
        return tuple(dict.fromkeys(levels))

    @property
    def is_free(self) -> bool:
        return self.cost == 0

    def suits(self, tier: ExperienceTier) -> bool:
        return tier in self.experience_levels
