"""Shared test configuration: small injected catalogs and factories."""

import pytest

from models.schemas.domain_rule import DomainRule, RuleTier
from models.schemas.resource import ResourceRecord
from services.recommender.catalog import ResourceCatalog, load_catalog

ALL_TIERS = ("Entry", "Junior", "Mid", "Senior", "Expert")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "catalog: reads the packaged learning resource catalog"
    )


def _resource(id: str, **overrides) -> ResourceRecord:
    fields = dict(
        id=id,
        title=id.replace("-", " ").title(),
        provider="Coursera",
        url=f"https://example.com/{id}",
        description="",
        duration="10 hours",
        difficulty="Beginner",
        cost=0,
        rating=4.5,
        base_relevance=80,
        skills=(),
        experience_levels=ALL_TIERS,
    )
    fields.update(overrides)
    return ResourceRecord(**fields)


@pytest.fixture
def make_resource():
    """Factory for ResourceRecord with sensible defaults."""
    return _resource


@pytest.fixture
def small_catalog() -> ResourceCatalog:
    return ResourceCatalog({
        "web": [
            _resource("html-basics", skills=("HTML", "CSS"), experience_levels=("Entry", "Junior")),
            _resource("react-guide", difficulty="All Levels", cost=12.99, base_relevance=90,
                      skills=("React", "JavaScript")),
            _resource("web-performance", difficulty="Advanced", cost=49, base_relevance=85,
                      skills=("Web Performance",), experience_levels=("Senior", "Expert")),
        ],
        "testing": [
            _resource("selenium-webdriver", difficulty="All Levels", cost=12.99, base_relevance=90,
                      skills=("Selenium", "Test Automation"), experience_levels=("Entry", "Junior", "Mid")),
            _resource("manual-testing", difficulty="Beginner", cost=12.99, base_relevance=88,
                      skills=("Manual Testing",), experience_levels=("Entry", "Junior", "Mid")),
        ],
        "general": [
            _resource("communication", difficulty="All Levels", base_relevance=80,
                      skills=("Communication",)),
            _resource("leadership", difficulty="Advanced", cost=49, base_relevance=82,
                      skills=("Leadership",), experience_levels=("Mid", "Senior", "Expert")),
        ],
    })


@pytest.fixture
def small_rules() -> tuple[DomainRule, ...]:
    # BROAD declared before SPECIFIC on purpose: tier order must still win
    return (
        DomainRule(tier=RuleTier.BROAD, name="Web", pools=("web",), keywords=("web", "frontend")),
        DomainRule(tier=RuleTier.SPECIFIC, name="Testing", pools=("testing",),
                   keywords=("qa engineer", "quality")),
        DomainRule(tier=RuleTier.BROAD, name="Everything Tech", pools=("web", "testing"),
                   keywords=("tech",)),
        DomainRule(tier=RuleTier.GENERIC, name="General", pools=("general",)),
    )


@pytest.fixture(scope="session")
def packaged_catalog() -> ResourceCatalog:
    return load_catalog()
