"""Graph engine tests: mutations, rank consistency, search and construction."""

from __future__ import annotations

import random

import pytest

from searchengine.webgraph.config import EngineConfig
from searchengine.webgraph.errors import (
    CapacityExceededError,
    DuplicateLinkError,
    DuplicateURLError,
    EndpointNotFoundError,
    MalformedInputError,
    PageNotFoundError,
)
from searchengine.webgraph.graph import WebGraph, build_graph
from searchengine.webgraph.ordering import OrderBy

from .conftest import assert_dense_indices, assert_ranks_match_in_degree, make_graph


def test_build_graph_computes_ranks():
    graph = build_graph([("a.com", ["x"]), ("b.com", ["y"])], [("a.com", "b.com")])

    assert graph.get_page("b.com").rank == 1
    assert graph.get_page("a.com").rank == 0


def test_sample_graph_ranks(sample_graph):
    ranks = {page.url: page.rank for page in sample_graph.list_pages()}
    assert ranks == {"a.com": 1, "b.com": 1, "c.com": 3, "d.com": 1, "e.com": 0}
    assert_ranks_match_in_degree(sample_graph)


def test_add_page_appends_with_zero_rank(sample_graph):
    page = sample_graph.add_page("f.com", ["news"])

    assert page.index == 5
    assert page.rank == 0
    assert_dense_indices(sample_graph)


def test_add_duplicate_page_leaves_size_unchanged(sample_graph):
    with pytest.raises(DuplicateURLError):
        sample_graph.add_page("a.com", ["other"])
    assert len(sample_graph) == 5
    assert sample_graph.get_page("a.com").keywords == ["news", "sports"]


def test_add_link_updates_rank(sample_graph):
    sample_graph.add_link("e.com", "a.com")
    assert sample_graph.get_page("a.com").rank == 2
    assert_ranks_match_in_degree(sample_graph)


def test_add_existing_link_raises_and_keeps_matrix(sample_graph):
    before = sample_graph.adjacency()

    with pytest.raises(DuplicateLinkError):
        sample_graph.add_link("a.com", "b.com")

    assert sample_graph.adjacency() == before
    assert sample_graph.get_page("b.com").rank == 1


@pytest.mark.parametrize(
    "source, destination, missing",
    [("zzz.com", "a.com", "zzz.com"), ("a.com", "zzz.com", "zzz.com"), ("x.com", "y.com", "x.com")],
)
def test_link_with_unknown_endpoint(sample_graph, source, destination, missing):
    before = sample_graph.adjacency()

    with pytest.raises(EndpointNotFoundError) as excinfo:
        sample_graph.add_link(source, destination)
    assert excinfo.value.url == missing

    with pytest.raises(EndpointNotFoundError):
        sample_graph.remove_link(source, destination)
    assert sample_graph.adjacency() == before


def test_remove_link_updates_rank(sample_graph):
    sample_graph.remove_link("a.com", "c.com")
    assert sample_graph.get_page("c.com").rank == 2
    assert not sample_graph.has_link("a.com", "c.com")


def test_remove_missing_link_is_a_noop_not_an_error(sample_graph):
    # Unlike add_link on an existing edge, this must succeed silently.
    before = sample_graph.adjacency()

    sample_graph.remove_link("b.com", "a.com")

    assert sample_graph.adjacency() == before
    assert_ranks_match_in_degree(sample_graph)


def test_self_link_counts_toward_rank():
    graph = make_graph({"a.com": []}, [("a.com", "a.com")])
    assert graph.get_page("a.com").rank == 1


def test_remove_page_compacts_links(sample_graph):
    links_before = set(sample_graph.links())

    sample_graph.remove_page("b.com")

    assert "b.com" not in sample_graph
    assert len(sample_graph.adjacency()) == 4
    assert_dense_indices(sample_graph)
    assert [(page.url, page.index) for page in sample_graph.list_pages()] == [
        ("a.com", 0),
        ("c.com", 1),
        ("d.com", 2),
        ("e.com", 3),
    ]
    expected = {link for link in links_before if "b.com" not in link}
    assert set(sample_graph.links()) == expected
    assert sample_graph.get_page("c.com").rank == 2
    assert_ranks_match_in_degree(sample_graph)


def test_remove_missing_page_raises(sample_graph):
    with pytest.raises(PageNotFoundError):
        sample_graph.remove_page("zzz.com")
    assert len(sample_graph) == 5


def test_remove_every_page():
    graph = make_graph({"a.com": [], "b.com": []}, [("a.com", "b.com"), ("b.com", "a.com")])
    graph.remove_page("a.com")
    graph.remove_page("b.com")

    assert len(graph) == 0
    assert graph.adjacency() == []
    assert graph.links() == []


def test_random_mutations_keep_invariants():
    rng = random.Random(410)
    graph = WebGraph(EngineConfig({"max_pages": None}))
    counter = 0

    for _ in range(300):
        urls = graph.urls()
        action = rng.random()
        if action < 0.3 or len(urls) < 2:
            counter += 1
            graph.add_page(f"site{counter}.com", [f"k{counter % 3}"])
        elif action < 0.45:
            graph.remove_page(rng.choice(urls))
        elif action < 0.8:
            source, destination = rng.choice(urls), rng.choice(urls)
            if not graph.has_link(source, destination):
                graph.add_link(source, destination)
        else:
            graph.remove_link(rng.choice(urls), rng.choice(urls))

        assert_dense_indices(graph)
        assert_ranks_match_in_degree(graph)
        assert len(graph.adjacency()) == len(graph)


def test_search_orders_by_rank_with_stable_ties():
    graph = make_graph(
        {
            "a.com": ["x"],
            "b.com": ["x"],
            "c.com": ["x"],
            "p1.com": [],
            "p2.com": [],
            "p3.com": [],
            "p4.com": [],
            "p5.com": [],
        },
        [("p1.com", "a.com"), ("p2.com", "a.com"), ("p3.com", "a.com")]
        + [(f"p{n}.com", "b.com") for n in range(1, 6)]
        + [("p3.com", "c.com"), ("p4.com", "c.com"), ("p5.com", "c.com")],
    )

    results = graph.search("x")

    assert [(page.url, page.rank) for page in results] == [("b.com", 5), ("a.com", 3), ("c.com", 3)]


def test_search_is_exact_and_case_sensitive(sample_graph):
    assert [page.url for page in sample_graph.search("news")] == ["c.com", "a.com", "b.com"]
    assert sample_graph.search("News") == []
    assert sample_graph.search("new") == []


@pytest.mark.parametrize("keyword", ["", "nothing"])
def test_search_without_matches_returns_empty(sample_graph, keyword):
    assert sample_graph.search(keyword) == []


def test_snapshots_do_not_alias_graph_state(sample_graph):
    page = sample_graph.list_pages()[0]
    page.rank = 99
    page.keywords.append("hacked")

    fresh = sample_graph.get_page(page.url)
    assert fresh.rank == 1
    assert "hacked" not in fresh.keywords


def test_list_pages_orderings(sample_graph):
    by_url = [page.url for page in sample_graph.list_pages(OrderBy.URL)]
    by_rank = [page.url for page in sample_graph.list_pages(OrderBy.RANK)]

    assert by_url == ["a.com", "b.com", "c.com", "d.com", "e.com"]
    assert by_rank == ["c.com", "a.com", "b.com", "d.com", "e.com"]
    assert [page.index for page in sample_graph.list_pages()] == [0, 1, 2, 3, 4]


def test_capacity_is_enforced(engine_config):
    engine_config.raw["max_pages"] = 2
    graph = WebGraph(engine_config)
    graph.add_page("a.com", [])
    graph.add_page("b.com", [])

    with pytest.raises(CapacityExceededError):
        graph.add_page("c.com", [])
    assert len(graph) == 2


def test_default_capacity_is_forty():
    graph = make_graph([(f"site{n}.com", []) for n in range(40)])
    with pytest.raises(CapacityExceededError):
        graph.add_page("one-too-many.com", [])


@pytest.mark.parametrize(
    "pages, links",
    [
        ([("a.com",)], []),
        ([("", ["x"])], []),
        ([("a.com", "x")], []),
        ([("a.com", None)], []),
        ([("a.com", [1])], []),
        ([("a.com", [])], [("a.com",)]),
        ([("a.com", [])], [("a.com", "")]),
    ],
)
def test_build_graph_rejects_malformed_entries(pages, links):
    with pytest.raises(MalformedInputError):
        build_graph(pages, links)


def test_build_graph_rejects_unknown_link_endpoint():
    with pytest.raises(EndpointNotFoundError):
        build_graph([("a.com", [])], [("a.com", "b.com")])


def test_build_graph_rejects_duplicates():
    with pytest.raises(DuplicateURLError):
        build_graph([("a.com", []), ("a.com", [])], [])
    with pytest.raises(DuplicateLinkError):
        build_graph([("a.com", []), ("b.com", [])], [("a.com", "b.com"), ("a.com", "b.com")])


def test_find_by_url_returns_snapshot_or_none(sample_graph):
    page = sample_graph.find_by_url("c.com")

    assert (page.url, page.index, page.rank) == ("c.com", 2, 3)
    assert sample_graph.find_by_url("zzz.com") is None


def test_add_page_rejects_string_keywords(sample_graph):
    with pytest.raises(MalformedInputError):
        sample_graph.add_page("f.com", "news")

    assert sample_graph.find_by_url("f.com") is None
    assert_dense_indices(sample_graph)
