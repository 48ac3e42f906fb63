from pydantic import BaseModel

from models.schemas.resource import ResourceRecord
from services.recommender.platforms import PlatformLink


class HealthResponse(BaseModel):
    status: str = "ok"
    catalog_size: int = 0
    pools: int = 0


class RuleSummary(BaseModel):
    tier: str
    name: str
    keywords: list[str] = []
    pools: list[str] = []
    resource_count: int = 0


class ClassificationResponse(BaseModel):
    career_label: str
    matched_pool: str
    is_fallback: bool = False
    plausible: bool = True


class ResourceDetail(BaseModel):
    resource: ResourceRecord
    platform_links: list[PlatformLink] = []
