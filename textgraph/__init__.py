"""
Text-to-Graph toolkit.

Builds a directed, weighted word-adjacency graph from plain text and
answers structural queries over it: bridge words, bridge-augmented text
generation, weighted shortest paths, and random walks.
"""

__version__ = "0.1.0"
