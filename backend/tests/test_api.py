import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_recommendation_engine
from main import app
from services.recommender.engine import RecommendationEngine

client = TestClient(app)


@pytest.fixture(autouse=True)
def small_engine(small_catalog, small_rules):
    engine = RecommendationEngine(small_catalog, rules=small_rules)
    app.dependency_overrides[get_recommendation_engine] = lambda: engine
    yield engine
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["catalog_size"] == 7
    assert data["pools"] == 3


def test_recommendations():
    response = client.post(
        "/recommendations",
        json={"career_label": "Frontend Dev", "years_of_experience": 0, "skills": ["HTML"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["matched_pool"] == "Web"
    assert data["tier"] == "Entry"
    assert data["plausible"] is True
    assert [c["category"] for c in data["categories"]] == [
        "Fundamentals & Getting Started",
        "Core Skills Development",
        "Free Learning Resources",
    ]
    top = data["categories"][0]["resources"][0]
    assert top["id"] == "html-basics"
    assert top["relevance_score"] == 100
    assert top["matched_skills"] == ["HTML"]
    assert top["difficulty"] == "Beginner"


def test_recommendations_defaults():
    response = client.post("/recommendations", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["matched_pool"] == "General"
    assert data["tier"] == "Entry"


def test_recommendations_rejects_negative_years():
    response = client.post(
        "/recommendations",
        json={"career_label": "-5", "years_of_experience": -1},
    )
    assert response.status_code == 400
    assert "years of experience" in response.json()["detail"]


def test_recommendations_rejects_non_numeric_years():
    response = client.post(
        "/recommendations",
        json={"career_label": "Frontend Dev", "years_of_experience": "lots"},
    )
    assert response.status_code == 422


def test_classify():
    response = client.get("/classify", params={"career": "Quality Web Tester"})
    assert response.status_code == 200
    data = response.json()
    assert data["matched_pool"] == "Testing"
    assert data["is_fallback"] is False


def test_classify_flags_implausible_pool():
    data = client.get("/classify", params={"career": "tech generalist"}).json()
    assert data["matched_pool"] == "Everything Tech"
    assert data["plausible"] is False


def test_classify_without_label():
    data = client.get("/classify").json()
    assert data["matched_pool"] == "General"
    assert data["is_fallback"] is True


def test_pools():
    response = client.get("/pools")
    assert response.status_code == 200
    data = response.json()
    assert [r["name"] for r in data] == ["Testing", "Web", "Everything Tech", "General"]
    assert data[0]["tier"] == "specific"
    assert data[2]["resource_count"] == 5
    assert data[-1]["keywords"] == []


def test_resource_detail():
    response = client.get("/resources/react-guide")
    assert response.status_code == 200
    data = response.json()
    assert data["resource"]["title"] == "React Guide"
    assert len(data["platform_links"]) == 4


def test_resource_detail_unknown():
    response = client.get("/resources/does-not-exist")
    assert response.status_code == 404
