"""Search links for a resource on the major learning platforms.

Lets the UI offer "find similar on ..." links next to a catalog resource.
"""

from urllib.parse import quote

from pydantic import BaseModel

from models.schemas.resource import ResourceRecord

MAX_KEYWORDS = 4
_STOP_WORDS = frozenset({"the", "and", "for", "with", "course", "learn", "learning"})
_BUSINESS_MARKERS = ("management", "business")
_BUSINESS_PLATFORMS = frozenset({"linkedin-learning", "coursera"})


class LearningPlatform(BaseModel):
    model_config = {"frozen": True}

    id: str
    display_name: str
    base_url: str
    search_template: str  # "{keywords}" is replaced by the url-encoded query
    strengths: tuple[str, ...] = ()


class PlatformLink(BaseModel):
    platform: str
    display_name: str
    url: str
    is_recommended: bool = False


PLATFORMS: tuple[LearningPlatform, ...] = (
    LearningPlatform(
        id="udemy",
        display_name="Udemy",
        base_url="https://www.udemy.com",
        search_template="https://www.udemy.com/courses/search/?q={keywords}",
        strengths=("programming", "business", "design"),
    ),
    LearningPlatform(
        id="coursera",
        display_name="Coursera",
        base_url="https://www.coursera.org",
        search_template="https://www.coursera.org/search?query={keywords}",
        strengths=("academic", "certifications", "data-science"),
    ),
    LearningPlatform(
        id="linkedin-learning",
        display_name="LinkedIn Learning",
        base_url="https://www.linkedin.com/learning",
        search_template="https://www.linkedin.com/learning/search?keywords={keywords}",
        strengths=("business", "soft-skills", "professional"),
    ),
    LearningPlatform(
        id="freecodecamp",
        display_name="freeCodeCamp",
        base_url="https://www.freecodecamp.org",
        search_template="https://www.freecodecamp.org/learn",
        strengths=("programming", "web-development"),
    ),
)


def get_platform(platform_id: str) -> LearningPlatform | None:
    return next((p for p in PLATFORMS if p.id == platform_id), None)


def extract_keywords(resource: ResourceRecord) -> list[str]:
    """Title words, skill tags and provider, minus short words and stop words."""
    candidates = resource.title.lower().split(" ")
    candidates += [s.lower() for s in resource.skills]
    candidates.append(resource.provider.lower())

    keywords = [k for k in candidates if len(k) > 2 and k not in _STOP_WORDS][:MAX_KEYWORDS]
    return keywords or [resource.title.lower()]


def build_search_url(platform: LearningPlatform, keywords: list[str]) -> str:
    # same escaping as JavaScript's encodeURIComponent
    query = quote(" ".join(keywords), safe="!~*'()")
    return platform.search_template.replace("{keywords}", query)


def is_recommended(platform: LearningPlatform, resource: ResourceRecord) -> bool:
    text = " ".join([resource.title.lower(), *(s.lower() for s in resource.skills)])
    for strength in platform.strengths:
        if strength in text or strength.replace("-", " ") in text:
            return True
    if any(marker in text for marker in _BUSINESS_MARKERS):
        return platform.id in _BUSINESS_PLATFORMS
    return False


def platform_links(resource: ResourceRecord) -> list[PlatformLink]:
    keywords = extract_keywords(resource)
    return [
        PlatformLink(
            platform=p.id,
            display_name=p.display_name,
            url=build_search_url(p, keywords),
            is_recommended=is_recommended(p, resource),
        )
        for p in PLATFORMS
    ]
