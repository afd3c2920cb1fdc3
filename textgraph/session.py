"""
Session facade for interactive drivers.

Wraps a built graph and the four queries, lowercases user input, and
turns results and query errors into the messages shown to the user.

Usage:
    from textgraph.graph import build_graph_from_file
    from textgraph.session import TextGraphSession

    session = TextGraphSession(build_graph_from_file("corpus.txt"), seed=42)
    print(session.query_bridge_words("the", "sat"))
    print(session.calc_shortest_path("the", "mat"))
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from textgraph.config import FILE_ENCODING, RANDOM_SEED
from textgraph.errors import EmptyGraph, NoBridgeWords, NoPath, UnknownWord
from textgraph.graph.model import Edge, WordGraph
from textgraph.queries.bridge import query_bridge_words
from textgraph.queries.generator import TextGenerator
from textgraph.queries.random_walk import ContinueCallback, RandomWalker
from textgraph.queries.results import WalkResult
from textgraph.queries.shortest_path import ShortestPathFinder

logger = logging.getLogger(__name__)


def write_walk(result: WalkResult, path: str | Path) -> Path:
    """Write a walk to a text file as "a -> b -> c"."""
    path = Path(path)
    path.write_text(result.render(), encoding=FILE_ENCODING)
    logger.info(f"Random walk path written to {path}")
    return path


class TextGraphSession:
    """
    User-facing operations over one immutable WordGraph.

    A failed query returns its message and leaves the session usable
    for the next one.
    """

    def __init__(self, graph: WordGraph, seed: int | None = RANDOM_SEED) -> None:
        """
        Initialize the session.

        Args:
            graph: Graph built from the input text
            seed: Seed shared by text generation and random walks
        """
        self.graph = graph
        self._rng = random.Random(seed)
        self._generator = TextGenerator(graph, rng=self._rng)
        self._finder = ShortestPathFinder(graph)
        self._walker = RandomWalker(graph, rng=self._rng)
        self.last_walk: WalkResult | None = None

    def show_graph(self) -> tuple[list[str], list[Edge]]:
        """Node and edge enumeration for a renderer."""
        return self.graph.export()

    def query_bridge_words(self, word1: str, word2: str) -> str:
        word1, word2 = word1.lower(), word2.lower()
        try:
            bridges = query_bridge_words(self.graph, word1, word2)
        except UnknownWord as e:
            logger.warning(f"Bridge query for unknown word {e.word!r}")
            return str(e)
        except NoBridgeWords as e:
            return str(e)
        return f"The bridge words from {word1} to {word2} are: {', '.join(bridges)}."

    def generate_new_text(self, text: str) -> str:
        return self._generator.generate(text)

    def calc_shortest_path(self, word1: str, word2: str) -> str:
        word1, word2 = word1.lower(), word2.lower()
        try:
            result = self._finder.find(word1, word2)
        except UnknownWord as e:
            logger.warning(f"Shortest path query for unknown word {e.word!r}")
            return str(e)
        except NoPath as e:
            return str(e)
        return (
            f"Shortest path from {word1} to {word2}: {result.render()}\n"
            f"Path weight: {result.weight}"
        )

    def calc_shortest_paths(self, word: str) -> str:
        """Shortest paths from one word to every word reachable from it."""
        word = word.lower()
        try:
            results = self._finder.find_all(word)
        except UnknownWord as e:
            logger.warning(f"Shortest path query for unknown word {e.word!r}")
            return str(e)
        if not results:
            return f"No path from {word} to any other word!"
        return "\n".join(
            f"{target}: {result.render()} (weight {result.weight})"
            for target, result in sorted(results.items())
        )

    def random_walk(
        self,
        should_continue: ContinueCallback | None = None,
        output_path: str | Path | None = None,
    ) -> str:
        """
        Run a random walk and optionally persist it.

        Args:
            should_continue: Cancellation callback checked once per step
            output_path: File to write the rendered walk to (skipped if None)

        Returns:
            The rendered walk, or the EmptyGraph message

        Raises:
            OSError: If the walk cannot be written to output_path
        """
        try:
            self.last_walk = self._walker.walk(should_continue=should_continue)
        except EmptyGraph as e:
            logger.warning("Random walk requested on an empty graph")
            return str(e)
        if output_path is not None:
            write_walk(self.last_walk, output_path)
        return self.last_walk.render()
