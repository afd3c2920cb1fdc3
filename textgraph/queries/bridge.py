"""
Bridge-word queries.

A bridge word for (word1, word2) is any x with edges word1 -> x and
x -> word2. Callers are expected to pass lowercase words.
"""

from __future__ import annotations

import logging

from textgraph.errors import NoBridgeWords, UnknownWord
from textgraph.graph.model import WordGraph

logger = logging.getLogger(__name__)


def _bridges(graph: WordGraph, word1: str, word2: str) -> list[str]:
    return sorted(
        candidate
        for candidate in graph.neighbors(word1)
        if word2 in graph.neighbors(candidate)
    )


def query_bridge_words(graph: WordGraph, word1: str, word2: str) -> list[str]:
    """
    Find all bridge words from word1 to word2.

    Only the first missing word is reported when both are absent;
    check membership separately if both need reporting.

    Returns:
        Bridge words sorted alphabetically (never empty)

    Raises:
        UnknownWord: If word1 or word2 is not in the graph
        NoBridgeWords: If both exist but nothing bridges them
    """
    if word1 not in graph:
        raise UnknownWord(word1)
    if word2 not in graph:
        raise UnknownWord(word2)

    bridges = _bridges(graph, word1, word2)
    logger.debug(f"Bridge words {word1!r} -> {word2!r}: {bridges}")
    if not bridges:
        raise NoBridgeWords(word1, word2)
    return bridges


def bridge_words_or_empty(graph: WordGraph, word1: str, word2: str) -> list[str]:
    """Same as query_bridge_words, but returns [] instead of raising."""
    if word1 not in graph or word2 not in graph:
        return []
    return _bridges(graph, word1, word2)
