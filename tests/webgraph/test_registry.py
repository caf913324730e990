"""Page registry tests."""

from __future__ import annotations

import pytest

from searchengine.webgraph.errors import DuplicateURLError, MalformedInputError, PageNotFoundError
from searchengine.webgraph.registry import PageRegistry


def _registry(*urls: str) -> PageRegistry:
    registry = PageRegistry()
    for url in urls:
        registry.add(url, [url.split(".")[0]])
    return registry


def test_add_assigns_next_index():
    registry = _registry("a.com", "b.com")
    page = registry.add("c.com", ["x", "y"])

    assert page.index == 2
    assert page.rank == 0
    assert page.keywords == ["x", "y"]
    assert len(registry) == 3
    assert "c.com" in registry


def test_add_duplicate_url_leaves_registry_unchanged():
    registry = _registry("a.com", "b.com")

    with pytest.raises(DuplicateURLError):
        registry.add("a.com", ["other"])

    assert len(registry) == 2
    assert registry.find_by_url("a.com").keywords == ["a"]


@pytest.mark.parametrize("url", ["", None])
def test_add_rejects_empty_url(url):
    registry = PageRegistry()
    with pytest.raises(DuplicateURLError):
        registry.add(url, [])
    assert len(registry) == 0


@pytest.mark.parametrize("keywords", [None, "news"])
def test_add_rejects_missing_or_unsplit_keywords(keywords):
    registry = PageRegistry()
    with pytest.raises(MalformedInputError):
        registry.add("a.com", keywords)
    assert len(registry) == 0


def test_remove_renumbers_later_pages():
    registry = _registry("a.com", "b.com", "c.com", "d.com")

    removed = registry.remove("b.com")

    assert removed == 1
    assert [(page.url, page.index) for page in registry] == [("a.com", 0), ("c.com", 1), ("d.com", 2)]
    assert registry.find_by_url("b.com") is None


def test_remove_last_and_first():
    registry = _registry("a.com", "b.com", "c.com")

    assert registry.remove("c.com") == 2
    assert registry.remove("a.com") == 0
    assert [(page.url, page.index) for page in registry] == [("b.com", 0)]


def test_remove_missing_page_raises():
    registry = _registry("a.com")
    with pytest.raises(PageNotFoundError):
        registry.remove("zzz.com")
    assert len(registry) == 1


def test_keywords_are_copied_on_add():
    keywords = ["x"]
    registry = PageRegistry()
    registry.add("a.com", keywords)
    keywords.append("y")

    assert registry.find_by_url("a.com").keywords == ["x"]
