"""Sanity check on classifier output.

Catches the classic misroute: a non-web career landing in a pool that is
mostly web development content. The verdict is advisory. It is logged and
attached to the result so the rule table can be corrected, but it never
changes or blocks the response.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel

from models.schemas.resource import ResourceRecord
from services.recommender.classifier import normalize_label

logger = logging.getLogger(__name__)

WEB_DEV_KEYWORDS: tuple[str, ...] = ("javascript", "react", "html", "css", "web", "frontend", "backend")
# Labels that route to the web pools; spaced and hyphenated spellings included
WEB_CAREER_MARKERS: tuple[str, ...] = (
    "web", "frontend", "front end", "front-end", "backend", "back end", "back-end",
    "fullstack", "full stack", "full-stack", "react", "vue", "angular", "javascript", "node",
)
MAX_WEB_RATIO = 0.5


class ImplausibleClassification(BaseModel):
    """Diagnostic for a classification that looks wrong."""
    career_label: str
    matched_pool: str
    web_resources: int = 0
    pool_size: int = 0

    @property
    def message(self) -> str:
        if self.pool_size == 0:
            return f"Pool {self.matched_pool!r} for career {self.career_label!r} is empty"
        return (
            f"Pool {self.matched_pool!r} looks wrong for career {self.career_label!r}: "
            f"{self.web_resources}/{self.pool_size} resources are web development"
        )


def is_web_career(career_label: str) -> bool:
    label = normalize_label(career_label)
    return any(marker in label for marker in WEB_CAREER_MARKERS)


def is_web_resource(resource: ResourceRecord) -> bool:
    title = resource.title.lower()
    tags = [s.lower() for s in resource.skills]
    return any(kw in title or any(kw in tag for tag in tags) for kw in WEB_DEV_KEYWORDS)


def validate(
    pool: Sequence[ResourceRecord],
    career_label: str,
    max_web_ratio: float = MAX_WEB_RATIO,
) -> bool:
    """True when the pool is a plausible match for the career label."""
    if not pool:
        return False
    if is_web_career(career_label):
        return True
    web_count = sum(1 for r in pool if is_web_resource(r))
    return web_count <= len(pool) * max_web_ratio


def check_classification(
    pool: Sequence[ResourceRecord],
    career_label: str,
    matched_pool: str,
    max_web_ratio: float = MAX_WEB_RATIO,
) -> ImplausibleClassification | None:
    """Run ``validate`` and log a diagnostic when it fails."""
    if validate(pool, career_label, max_web_ratio):
        return None

    diagnostic = ImplausibleClassification(
        career_label=career_label,
        matched_pool=matched_pool,
        web_resources=sum(1 for r in pool if is_web_resource(r)),
        pool_size=len(pool),
    )
    logger.warning("Implausible classification: %s", diagnostic.message)
    return diagnostic
