from pydantic import BaseModel, Field


class RecommendationRequest(BaseModel):
    career_label: str = Field("", description="Free-text career, e.g. 'Frontend Developer'")
    # Negative values are rejected by the engine with InvalidInputError, not here
    years_of_experience: float = Field(0.0, description="Years of professional experience")
    skills: list[str] = Field(default_factory=list, description="Self-reported skills")
