from __future__ import annotations

import pytest

from textrank_keyword import TaggedTerm, build_adjacency, build_cooccurrence_graph, tokenize


def _terms(*words: str, tag: str = "n") -> list[TaggedTerm]:
    return [TaggedTerm(word=w, tag=tag) for w in words]


def test_window_links_four_previous_words_only() -> None:
    graph = build_cooccurrence_graph(_terms("a", "b", "c", "d", "e", "f"))
    assert graph.neighbors("f") == {"b", "c", "d", "e"}
    assert "a" not in graph.neighbors("f")
    assert graph.neighbors("a") == {"b", "c", "d", "e"}


def test_adjacency_is_symmetric_without_self_loops() -> None:
    text = (
        "Graph based ranking algorithms decide the importance of a vertex within a graph. "
        "The ranking of a vertex is recursively computed from the ranking of the vertices linked to it."
    )
    graph = build_cooccurrence_graph(tokenize(text))
    assert len(graph) > 0
    for word in graph:
        assert word not in graph.neighbors(word)
        for other in graph.neighbors(word):
            assert word in graph.neighbors(other)


def test_repeated_words_collapse_into_one_vertex() -> None:
    graph = build_cooccurrence_graph(_terms("natural", "language", "processing", "natural", "language"))
    assert graph.vertices == ["language", "natural", "processing"]
    assert graph.neighbors("natural") == {"language", "processing"}
    assert graph.neighbors("language") == {"natural", "processing"}
    assert graph.neighbors("processing") == {"natural", "language"}
    assert graph.edge_count == 3


def test_filtered_terms_do_not_occupy_window_slots() -> None:
    terms = [
        TaggedTerm("alpha", "n"),
        TaggedTerm(",", "w"),
        TaggedTerm("the", "u"),
        TaggedTerm("of", "u"),
        TaggedTerm("42", "m"),
        TaggedTerm("and", "u"),
        TaggedTerm("beta", "n"),
    ]
    graph = build_cooccurrence_graph(terms)
    assert graph.vertices == ["alpha", "beta"]
    assert graph.neighbors("alpha") == {"beta"}


def test_same_word_with_different_tags_is_one_vertex() -> None:
    terms = [TaggedTerm("run", "n"), TaggedTerm("fast", "a"), TaggedTerm("run", "v")]
    graph = build_cooccurrence_graph(terms)
    assert graph.vertices == ["fast", "run"]
    assert graph.neighbors("run") == {"fast"}


def test_custom_filter_and_window_size() -> None:
    terms = _terms("a", "b", "c", "d")
    graph = build_cooccurrence_graph(terms, candidate_filter=lambda t: t.word != "b", window_size=2)
    assert graph.vertices == ["a", "c", "d"]
    assert graph.neighbors("a") == {"c"}
    assert graph.neighbors("c") == {"a", "d"}


def test_window_of_one_builds_no_edges() -> None:
    adjacency = build_adjacency(["a", "b", "c"], window_size=1)
    assert adjacency == {"a": set(), "b": set(), "c": set()}


def test_empty_and_fully_filtered_input_give_empty_graph() -> None:
    assert len(build_cooccurrence_graph([])) == 0
    assert len(build_cooccurrence_graph(_terms(".", ",", tag="w"))) == 0


def test_edges_lists_each_pair_once() -> None:
    graph = build_cooccurrence_graph(_terms("b", "a", "c"), window_size=2)
    assert graph.edges() == [("a", "b"), ("a", "c")]
    assert graph.degree("a") == 2
    assert graph.degree("missing") == 0


def test_window_size_below_one_is_rejected() -> None:
    with pytest.raises(ValueError, match="window_size must be >= 1"):
        build_cooccurrence_graph(_terms("a", "b"), window_size=0)
    with pytest.raises(ValueError):
        build_adjacency(["a"], window_size=-3)


def test_neighbors_cannot_alter_the_graph() -> None:
    graph = build_cooccurrence_graph(_terms("a", "b"))
    nbrs = graph.neighbors("a")
    assert nbrs == {"b"}
    with pytest.raises(AttributeError):
        nbrs.add("c")  # type: ignore[attr-defined]
    assert graph.neighbors("a") == {"b"}
    assert graph.neighbors("missing") == frozenset()
