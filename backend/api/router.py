from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_recommendation_engine
from config import settings
from models.requests import RecommendationRequest
from models.responses import ClassificationResponse, HealthResponse, ResourceDetail, RuleSummary
from models.schemas.recommendation import RecommendationResult
from services.recommender.engine import RecommendationEngine
from services.recommender.exceptions import InvalidInputError
from services.recommender.platforms import platform_links
from services.recommender.validator import validate

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(engine: RecommendationEngine = Depends(get_recommendation_engine)):
    return HealthResponse(
        status="ok",
        catalog_size=len(engine.catalog),
        pools=len(engine.catalog.pool_keys()),
    )


@router.post("/recommendations", response_model=RecommendationResult)
@limiter.limit(settings.rate_limit)
def recommendations(
    request: Request,
    body: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    try:
        return engine.recommend_detailed(body)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/classify", response_model=ClassificationResponse)
async def classify(
    career: str = Query("", description="Free-text career label"),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    rule = engine.classifier.match_rule(career)
    pool = engine.classifier.pool_for(rule)
    return ClassificationResponse(
        career_label=career,
        matched_pool=rule.name,
        is_fallback=rule.is_fallback,
        plausible=validate(pool, career),
    )


@router.get("/pools", response_model=list[RuleSummary])
async def pools(engine: RecommendationEngine = Depends(get_recommendation_engine)):
    return [
        RuleSummary(
            tier=rule.tier.name.lower(),
            name=rule.name,
            keywords=list(rule.keywords),
            pools=list(rule.pools),
            resource_count=len(engine.classifier.pool_for(rule)),
        )
        for rule in engine.classifier.rules
    ]


@router.get("/resources/{resource_id}", response_model=ResourceDetail)
async def resource_detail(
    resource_id: str,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    resource = engine.catalog.get(resource_id)
    if resource is None:
        raise HTTPException(status_code=404, detail=f"Unknown resource: {resource_id}")
    return ResourceDetail(resource=resource, platform_links=platform_links(resource))
