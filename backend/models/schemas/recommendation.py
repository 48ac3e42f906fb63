"""Engine output: scored resources grouped into presentation categories."""

from pydantic import BaseModel, Field

from models.schemas.resource import ExperienceTier, ResourceRecord


class ScoredResource(ResourceRecord):
    """A catalog record scored for one request. Recomputed per request."""
    relevance_score: int = Field(0, ge=0, le=100)
    matched_skills: list[str] = []  # resource tags that matched the user's skills


class ResourceCategory(BaseModel):
    """A named, capped, ranked slice of resources shown together."""
    category: str
    description: str = ""
    resources: list[ScoredResource] = []


class RecommendationResult(BaseModel):
    """Full engine answer.

    ``categories`` is the primary result. The remaining fields are
    diagnostics: which pool the label routed to, the derived tier, and
    whether the classification looked plausible.
    """
    categories: list[ResourceCategory] = []
    matched_pool: str = ""
    tier: ExperienceTier = ExperienceTier.ENTRY
    plausible: bool = True
    warnings: list[str] = []
