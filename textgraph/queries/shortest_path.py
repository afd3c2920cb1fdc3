"""
Weighted shortest paths between words using Dijkstra's algorithm.

Edge weights are pair counts (always >= 1), so the non-negative weight
precondition always holds. When several paths share the minimum weight,
which one is returned depends on heap insertion order and is not part
of the contract.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from textgraph.errors import NoPath, UnknownWord
from textgraph.graph.model import WordGraph
from textgraph.queries.results import PathResult

logger = logging.getLogger(__name__)


class ShortestPathFinder:
    """
    Finds minimum-weight directed paths in a WordGraph.

    Holds no per-query state, so one finder can serve any number of
    queries on the same graph.
    """

    def __init__(self, graph: WordGraph) -> None:
        self._graph = graph

    def _dijkstra(
        self, source: str, target: str | None = None
    ) -> tuple[dict[str, int], dict[str, str | None]]:
        """
        Run Dijkstra from source, stopping early once target is settled.

        Returns:
            Tuple of (distances, previous) for every node reached
        """
        distances: dict[str, int] = {source: 0}
        previous: dict[str, str | None] = {source: None}
        settled: set[str] = set()

        counter = itertools.count()
        heap = [(0, next(counter), source)]

        while heap:
            current_distance, _, current = heapq.heappop(heap)
            if current in settled:
                continue  # Stale entry from an earlier relaxation
            settled.add(current)

            if current == target:
                break

            for neighbor, weight in self._graph.neighbors(current).items():
                new_distance = current_distance + weight
                if new_distance < distances.get(neighbor, float("inf")):
                    distances[neighbor] = new_distance
                    previous[neighbor] = current
                    heapq.heappush(heap, (new_distance, next(counter), neighbor))

        # Heap exhausted: anything not in distances is unreachable
        return distances, previous

    @staticmethod
    def _reconstruct(previous: dict[str, str | None], target: str) -> list[str]:
        path = []
        word: str | None = target
        while word is not None:
            path.append(word)
            word = previous[word]
        return list(reversed(path))

    def find(self, word1: str, word2: str) -> PathResult:
        """
        Find the minimum-weight path from word1 to word2.

        Returns:
            PathResult whose weight equals the sum of its edge weights

        Raises:
            UnknownWord: If either word is not in the graph (word1 checked first)
            NoPath: If word2 cannot be reached from word1
        """
        for word in (word1, word2):
            if word not in self._graph:
                raise UnknownWord(word)

        distances, previous = self._dijkstra(word1, word2)
        if word2 not in distances:
            logger.debug(f"No path from {word1!r} to {word2!r}")
            raise NoPath(word1, word2)

        result = PathResult(
            source=word1,
            target=word2,
            path=self._reconstruct(previous, word2),
            weight=distances[word2],
        )
        logger.debug(f"Shortest path ({result.weight}): {result.render()}")
        return result

    def find_all(self, word1: str) -> dict[str, PathResult]:
        """
        Find shortest paths from word1 to every word reachable from it.

        The source itself is excluded from the result.

        Raises:
            UnknownWord: If word1 is not in the graph
        """
        if word1 not in self._graph:
            raise UnknownWord(word1)

        distances, previous = self._dijkstra(word1)
        return {
            word: PathResult(
                source=word1,
                target=word,
                path=self._reconstruct(previous, word),
                weight=distance,
            )
            for word, distance in distances.items()
            if word != word1
        }
