"""
Random walks over the word graph.

A walk starts at a uniformly random word and keeps following a
uniformly random outgoing edge. It ends at a word with no outgoing
edges, or just before it would traverse a directed edge a second time.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator

from textgraph.errors import EmptyGraph, UnknownWord
from textgraph.graph.model import WordGraph
from textgraph.queries.results import StopReason, WalkResult

logger = logging.getLogger(__name__)

# Called with the path so far at each step boundary; False stops the walk
ContinueCallback = Callable[[list[str]], bool]


class RandomWalker:
    """
    Samples random walks from a WordGraph.

    The visited-edge set lives inside a single walk, so the same walker
    can produce any number of independent walks.
    """

    def __init__(
        self,
        graph: WordGraph,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the walker.

        Args:
            graph: Graph to walk
            seed: Random seed for reproducibility (ignored if rng is given)
            rng: Random source for the start word and each step
        """
        self._graph = graph
        self._rng = rng if rng is not None else random.Random(seed)

    def iter_walk(self, start: str | None = None) -> Iterator[str]:
        """
        Yield the words of one walk as they are visited.

        The caller can stop early by abandoning the iterator; no state
        outlives it.

        Args:
            start: Word to start from (default: uniformly random)

        Raises:
            EmptyGraph: If the graph has no nodes
            UnknownWord: If start is given but is not in the graph
        """
        if self._graph.is_empty:
            raise EmptyGraph()
        if start is not None and start not in self._graph:
            raise UnknownWord(start)

        current = start if start is not None else self._rng.choice(self._graph.nodes)
        visited_edges: set[tuple[str, str]] = set()

        while True:
            yield current
            neighbors = list(self._graph.neighbors(current))
            if not neighbors:
                return

            following = self._rng.choice(neighbors)
            edge = (current, following)
            if edge in visited_edges:
                return

            visited_edges.add(edge)
            current = following

    def walk(
        self,
        should_continue: ContinueCallback | None = None,
        start: str | None = None,
    ) -> WalkResult:
        """
        Run one complete walk.

        Args:
            should_continue: Checked once per step, after an edge is chosen
                and before the next word is recorded. Returning False ends
                the walk with StopReason.CANCELLED.
            start: Word to start from (default: uniformly random)

        Returns:
            WalkResult with the visited words and why the walk ended

        Raises:
            EmptyGraph: If the graph has no nodes
            UnknownWord: If start is given but is not in the graph
        """
        result = WalkResult()
        steps = self.iter_walk(start)

        for word in steps:
            if result.path and should_continue is not None and not should_continue(result.path):
                result.stop_reason = StopReason.CANCELLED
                steps.close()
                break
            result.path.append(word)
            logger.debug(f"Walk step {len(result.path)}: {word}")
        else:
            last = result.path[-1]
            if self._graph.neighbors(last):
                result.stop_reason = StopReason.REPEATED_EDGE
            else:
                result.stop_reason = StopReason.DEAD_END

        logger.info(
            f"Random walk visited {len(result.path)} words ({result.stop_reason.value})"
        )
        return result
