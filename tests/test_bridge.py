"""
Unit tests for bridge-word queries.
"""

import itertools

import pytest

from textgraph.errors import NoBridgeWords, UnknownWord
from textgraph.graph import build_graph
from textgraph.queries import bridge_words_or_empty, query_bridge_words


class TestQueryBridgeWords:
    """Test the raising bridge query."""

    def test_single_bridge(self, cat_graph):
        """the -> cat -> sat makes cat the only bridge."""
        assert query_bridge_words(cat_graph, "the", "sat") == ["cat"]

    def test_multiple_bridges_sorted(self):
        """Several bridges should come back sorted."""
        graph = build_graph(["a y b", "a x b", "a z c"])
        assert query_bridge_words(graph, "a", "b") == ["x", "y"]

    def test_unknown_second_word(self, cat_graph):
        """A missing word2 should be reported by name."""
        with pytest.raises(UnknownWord) as excinfo:
            query_bridge_words(cat_graph, "the", "zzz")
        assert excinfo.value.word == "zzz"

    def test_unknown_first_word_reported_first(self, cat_graph):
        """When both words are missing only word1 is reported."""
        with pytest.raises(UnknownWord) as excinfo:
            query_bridge_words(cat_graph, "xxx", "yyy")
        assert excinfo.value.word == "xxx"

    def test_no_bridge(self, cat_graph):
        """Existing words with no bridge should raise NoBridgeWords."""
        with pytest.raises(NoBridgeWords) as excinfo:
            query_bridge_words(cat_graph, "the", "cat")
        assert (excinfo.value.word1, excinfo.value.word2) == ("the", "cat")

    def test_self_loop_bridge(self):
        """A self-loop lets a word bridge to its own successor."""
        graph = build_graph(["go go on"])
        assert query_bridge_words(graph, "go", "on") == ["go"]

    def test_matches_definition(self, sample_graph):
        """Every pair should match {x : w(u,x)>0 and w(x,v)>0}."""
        for u, v in itertools.product(sample_graph.nodes, repeat=2):
            expected = sorted(
                x for x in sample_graph.nodes
                if sample_graph.weight(u, x) > 0 and sample_graph.weight(x, v) > 0
            )
            assert bridge_words_or_empty(sample_graph, u, v) == expected


class TestBridgeWordsOrEmpty:
    """Test the non-raising variant used by text generation."""

    def test_unknown_words_give_empty(self, cat_graph):
        """Missing words should degrade to an empty list."""
        assert bridge_words_or_empty(cat_graph, "dog", "sat") == []
        assert bridge_words_or_empty(cat_graph, "the", "dog") == []

    def test_no_bridge_gives_empty(self, cat_graph):
        """No bridge should give an empty list."""
        assert bridge_words_or_empty(cat_graph, "mat", "the") == []
