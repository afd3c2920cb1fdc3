"""
WordGraph: directed, weighted word-adjacency graph.

Usage:
    from textgraph.graph import build_graph

    graph = build_graph(["the cat sat on the mat"])
    "cat" in graph               # True
    graph.neighbors("the")       # {"cat": 1, "mat": 1}
    graph.weight("the", "mat")   # 1
    nodes, edges = graph.export()
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

_NO_NEIGHBORS: Mapping[str, int] = MappingProxyType({})


@dataclass(frozen=True)
class Edge:
    """
    A directed edge in the exported graph.

    Attributes:
        source: Word the edge starts from
        target: Word that immediately followed source
        weight: Number of times the pair was observed
    """

    source: str
    target: str
    weight: int


class WordGraph:
    """
    Read-only adjacency structure mapping each word to its successors.

    Every word that appears as a successor is also a node, and every
    stored weight is a positive count. Neighbor maps are handed out as
    read-only views, so nothing outside the builder can change the graph.

    Attributes:
        nodes: All words in first-seen order
        edge_count: Number of distinct directed edges
    """

    def __init__(self, adjacency: Mapping[str, Mapping[str, int]] | None = None) -> None:
        """
        Create a graph from a word -> {neighbor: weight} mapping.

        Args:
            adjacency: Successor weights per word. Copied, so later changes
                to the argument do not leak into the graph.

        Raises:
            ValueError: If any weight is not a positive integer
        """
        adjacency = adjacency or {}
        edges: dict[str, dict[str, int]] = {}

        for source, targets in adjacency.items():
            row = edges.setdefault(source, {})
            for target, weight in targets.items():
                if weight < 1:
                    raise ValueError(
                        f"Edge {source!r} -> {target!r} has non-positive weight {weight}"
                    )
                row[target] = weight
                # Successors are nodes even when they never start a pair
                edges.setdefault(target, {})

        self._edges = edges
        self._views = {word: MappingProxyType(row) for word, row in edges.items()}
        self._edge_count = sum(len(row) for row in edges.values())

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def __contains__(self, word: object) -> bool:
        return word in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[str]:
        return iter(self._edges)

    def __repr__(self) -> str:
        return f"WordGraph(nodes={len(self)}, edges={self._edge_count})"

    @property
    def nodes(self) -> list[str]:
        """All words in the order they were first seen."""
        return list(self._edges)

    @property
    def edge_count(self) -> int:
        """Number of distinct directed edges."""
        return self._edge_count

    @property
    def is_empty(self) -> bool:
        return not self._edges

    def neighbors(self, word: str) -> Mapping[str, int]:
        """Get successor weights for a word (empty for unknown or dead-end words)."""
        return self._views.get(word, _NO_NEIGHBORS)

    def weight(self, source: str, target: str) -> int:
        """Get the weight of source -> target, or 0 if there is no such edge."""
        return self._edges.get(source, {}).get(target, 0)

    def out_degree(self, word: str) -> int:
        """Number of distinct successors of a word."""
        return len(self._edges.get(word, ()))

    # =========================================================================
    # Export
    # =========================================================================

    def edges(self) -> list[Edge]:
        """All directed edges as (source, target, weight) records."""
        return [
            Edge(source, target, weight)
            for source, row in self._edges.items()
            for target, weight in row.items()
        ]

    def export(self) -> tuple[list[str], list[Edge]]:
        """
        Node and edge enumeration for a renderer.

        Returns:
            Tuple of (nodes, edges). No other internals are exposed.
        """
        return self.nodes, self.edges()

    def stats(self) -> dict:
        """Get summary statistics about the graph."""
        return {
            "nodes": len(self._edges),
            "edges": self._edge_count,
            "total_weight": sum(sum(row.values()) for row in self._edges.values()),
            "self_loops": sum(1 for word, row in self._edges.items() if word in row),
            "dead_ends": sum(1 for row in self._edges.values() if not row),
        }
