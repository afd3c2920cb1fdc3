"""
Error kinds raised by graph queries.

Every error is local to the query that raised it; the graph stays valid
and later queries are unaffected.
"""

from __future__ import annotations


class TextGraphError(Exception):
    """Base class for all query failures."""


class UnknownWord(TextGraphError):
    """A queried word is not a node in the graph."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"No {word} in the graph!")


class NoBridgeWords(TextGraphError):
    """Both words exist but no bridge word connects them."""

    def __init__(self, word1: str, word2: str) -> None:
        self.word1 = word1
        self.word2 = word2
        super().__init__(f"No bridge words from {word1} to {word2}!")


class NoPath(TextGraphError):
    """Both words exist but no directed path connects them."""

    def __init__(self, word1: str, word2: str) -> None:
        self.word1 = word1
        self.word2 = word2
        super().__init__(f"No path from {word1} to {word2}!")


class EmptyGraph(TextGraphError):
    """The graph has no nodes, so there is nowhere to start a walk."""

    def __init__(self) -> None:
        super().__init__("The graph is empty!")
