"""
Queries module.

Provides the algorithms that run on a built WordGraph:
- query_bridge_words: Words linking one word to another in two hops
- TextGenerator: Inserts bridge words into new text
- ShortestPathFinder: Weighted shortest path (Dijkstra)
- RandomWalker: Random walk that stops on a dead end or repeated edge
"""

from textgraph.queries.bridge import bridge_words_or_empty, query_bridge_words
from textgraph.queries.generator import TextGenerator
from textgraph.queries.random_walk import RandomWalker
from textgraph.queries.results import PathResult, StopReason, WalkResult
from textgraph.queries.shortest_path import ShortestPathFinder

__all__ = [
    "query_bridge_words",
    "bridge_words_or_empty",
    "TextGenerator",
    "ShortestPathFinder",
    "RandomWalker",
    "PathResult",
    "WalkResult",
    "StopReason",
]
