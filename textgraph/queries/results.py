"""
Result records for path queries and random walks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from textgraph.config import PATH_SEPARATOR


class StopReason(str, Enum):
    """Why a random walk ended."""

    DEAD_END = "dead_end"
    REPEATED_EDGE = "repeated_edge"
    CANCELLED = "cancelled"


@dataclass
class PathResult:
    """
    A shortest path between two words.

    Attributes:
        source: Word the path starts from
        target: Word the path ends at
        path: Words along the path (including source and target)
        weight: Sum of the edge weights along the path
    """

    source: str
    target: str
    path: list[str]
    weight: int

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.path) - 1

    def render(self) -> str:
        return PATH_SEPARATOR.join(self.path)


@dataclass
class WalkResult:
    """
    Record of a finished random walk.

    Attributes:
        path: Words visited, in order (the start word first)
        stop_reason: Why the walk ended
    """

    path: list[str] = field(default_factory=list)
    stop_reason: StopReason = StopReason.DEAD_END

    @property
    def edges(self) -> list[tuple[str, str]]:
        """Directed edges traversed by the walk."""
        return list(zip(self.path, self.path[1:]))

    def render(self) -> str:
        """Text form written to storage, e.g. "a -> b -> c"."""
        return PATH_SEPARATOR.join(self.path)
