"""Classification rules that route a career label to a resource pool."""

from enum import IntEnum

from pydantic import BaseModel, Field, field_validator


class RuleTier(IntEnum):
    """Evaluation priority. Lower values are consulted first."""
    SPECIFIC = 1  # precise job titles
    BROAD = 2  # general disciplines
    GENERIC = 3  # catch-all


class DomainRule(BaseModel):
    """One row of the classifier's rule table.

    A rule matches when any keyword is a substring of the normalized career
    label. A rule without keywords is the fallback and matches everything.
    ``pools`` are catalog pool keys; their records are concatenated in order.
    """
    model_config = {"frozen": True}

    tier: RuleTier
    name: str = Field(..., min_length=1)  # diagnostic pool name
    pools: tuple[str, ...] = Field(..., min_length=1)
    keywords: tuple[str, ...] = ()

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, keywords: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(k.strip().lower() for k in keywords)
        if any(not k for k in cleaned):
            raise ValueError("keywords must be non-empty strings")
        return cleaned

    @property
    def is_fallback(self) -> bool:
        return not self.keywords

    def matches(self, label: str) -> bool:
        """Check a label that has already been lower-cased and trimmed."""
        if self.is_fallback:
            return True
        return any(keyword in label for keyword in self.keywords)
