"""
Shared fixtures: small corpora, the graphs built from them, and a seeded rng.
"""

import random

import pytest

from textgraph.graph import WordGraph, build_graph


@pytest.fixture
def cat_graph() -> WordGraph:
    """Graph of the single line "the cat sat on the mat"."""
    return build_graph(["the cat sat on the mat"])


@pytest.fixture
def sample_lines() -> list[str]:
    """Return a small multi-line corpus with punctuation and repeats."""
    return [
        "To explore strange new worlds,",
        "To seek out new life and new civilizations!",
        "The data shows that the team wrote the report;",
        "and the team shared the report with the data team.",
        "",
        "Go go go",
    ]


@pytest.fixture
def sample_graph(sample_lines: list[str]) -> WordGraph:
    """Return the graph built from sample_lines."""
    return build_graph(sample_lines)


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source for deterministic tests."""
    return random.Random(1234)
