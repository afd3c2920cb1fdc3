"""
Letter-only tokenization.

Anything that is not an ASCII letter acts as a separator, so
"don't-stop" becomes ["don", "t", "stop"].
"""

from __future__ import annotations

import re

_NON_LETTER = re.compile(r"[^A-Za-z]+")


def split_words(text: str) -> list[str]:
    """Split text into alphabetic words, preserving case."""
    return [word for word in _NON_LETTER.split(text) if word]


def tokenize(line: str) -> list[str]:
    """Split a line into lowercase alphabetic tokens (graph node keys)."""
    return [word.lower() for word in split_words(line)]
