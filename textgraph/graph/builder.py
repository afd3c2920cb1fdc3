"""
Graph construction from lines of text.

Each line is tokenized on its own and every consecutive token pair in
that line adds 1 to the weight of the matching edge. Pairs never span
a line boundary.

Usage:
    from textgraph.graph.builder import build_graph_from_file

    graph = build_graph_from_file("corpus.txt")
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from textgraph.config import FILE_ENCODING
from textgraph.graph.model import WordGraph
from textgraph.graph.tokenizer import tokenize

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Accumulates line-local word pairs into edge weights.

    Feed lines with add_line() or add_lines(), then call build() once to
    get an immutable WordGraph.
    """

    def __init__(self) -> None:
        self._counts: defaultdict[str, dict[str, int]] = defaultdict(dict)
        self._lines_seen = 0
        self._lines_skipped = 0
        self._pairs_seen = 0

    def add_line(self, line: str) -> None:
        """Add every consecutive token pair of one line."""
        self._lines_seen += 1
        tokens = tokenize(line)
        if not tokens:
            self._lines_skipped += 1
            return

        # Cursor starts empty on each line
        previous: str | None = None
        for token in tokens:
            if previous is not None:
                row = self._counts[previous]
                row[token] = row.get(token, 0) + 1
                self._pairs_seen += 1
            previous = token

    def add_lines(self, lines: Iterable[str]) -> GraphBuilder:
        """Add many lines. Returns self so calls can be chained."""
        for line in lines:
            self.add_line(line)
        return self

    def build(self) -> WordGraph:
        """Freeze the accumulated counts into a WordGraph."""
        graph = WordGraph(self._counts)
        stats = graph.stats()
        logger.info(
            f"Built graph with {stats['nodes']:,} words and {stats['edges']:,} edges "
            f"from {self._lines_seen:,} lines ({self._pairs_seen:,} word pairs)"
        )
        logger.info(
            f"Total weight {stats['total_weight']:,}, {stats['self_loops']:,} self-loops, "
            f"{stats['dead_ends']:,} dead ends"
        )
        if self._lines_skipped:
            logger.debug(f"Skipped {self._lines_skipped:,} lines with no words")
        return graph


def build_graph(lines: Iterable[str]) -> WordGraph:
    """Build a graph from any iterable of text lines."""
    return GraphBuilder().add_lines(lines).build()


def build_graph_from_text(text: str) -> WordGraph:
    """Build a graph from a block of text, split on newline characters only."""
    return build_graph(text.split("\n"))


def build_graph_from_file(path: str | Path) -> WordGraph:
    """
    Build a graph from a text file.

    Undecodable bytes are replaced rather than failing, since anything
    that is not a letter is a separator anyway.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    logger.info(f"Reading text from {path}...")
    with open(path, encoding=FILE_ENCODING, errors="replace") as f:
        return build_graph(f)
