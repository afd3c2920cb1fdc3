"""
Graph module.

Provides the word-adjacency graph and its construction:
- tokenize / split_words: Letter-only tokenization
- WordGraph: Read-only adjacency structure with edge export
- GraphBuilder: Accumulates line-local word pairs into a WordGraph
"""

from textgraph.graph.builder import (
    GraphBuilder,
    build_graph,
    build_graph_from_file,
    build_graph_from_text,
)
from textgraph.graph.model import Edge, WordGraph
from textgraph.graph.tokenizer import split_words, tokenize

__all__ = [
    "Edge",
    "WordGraph",
    "GraphBuilder",
    "build_graph",
    "build_graph_from_file",
    "build_graph_from_text",
    "split_words",
    "tokenize",
]
