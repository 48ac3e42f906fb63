"""Tests for platform search links."""

from services.recommender.platforms import (
    PLATFORMS,
    build_search_url,
    extract_keywords,
    get_platform,
    is_recommended,
    platform_links,
)


def test_get_platform():
    assert get_platform("udemy").display_name == "Udemy"
    assert get_platform("nope") is None


def test_extract_keywords_drops_stop_and_short_words(make_resource):
    r = make_resource("ml", title="Machine Learning for Everyone", skills=("Python",))
    assert extract_keywords(r) == ["machine", "everyone", "python", "coursera"]


def test_extract_keywords_limit(make_resource):
    r = make_resource("x", title="Alpha Beta Gamma Delta Epsilon")
    assert len(extract_keywords(r)) == 4


def test_build_search_url_encodes_query():
    url = build_search_url(get_platform("udemy"), ["c++", "node.js"])
    assert url == "https://www.udemy.com/courses/search/?q=c%2B%2B%20node.js"


def test_build_search_url_without_placeholder():
    assert build_search_url(get_platform("freecodecamp"), ["react"]) == "https://www.freecodecamp.org/learn"


class TestIsRecommended:
    def test_strength_in_title(self, make_resource):
        r = make_resource("x", title="Graphic Design Basics")
        assert is_recommended(get_platform("udemy"), r)
        assert not is_recommended(get_platform("coursera"), r)

    def test_hyphenated_strength(self, make_resource):
        r = make_resource("x", title="Intro to Data Science")
        assert is_recommended(get_platform("coursera"), r)

    def test_business_content_goes_to_business_platforms(self, make_resource):
        r = make_resource("x", title="Project Management Essentials")
        assert is_recommended(get_platform("coursera"), r)
        assert is_recommended(get_platform("linkedin-learning"), r)
        assert not is_recommended(get_platform("freecodecamp"), r)

    def test_no_match(self, make_resource):
        r = make_resource("x", title="Pottery", skills=("Ceramics",))
        assert not any(is_recommended(p, r) for p in PLATFORMS)


def test_platform_links_cover_every_platform(make_resource):
    links = platform_links(make_resource("x", title="Programming in Go"))
    assert [link.platform for link in links] == [p.id for p in PLATFORMS]
    by_id = {link.platform: link for link in links}
    assert by_id["udemy"].is_recommended
    assert by_id["freecodecamp"].is_recommended
    assert "programming" in by_id["coursera"].url
