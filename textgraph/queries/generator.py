"""
Bridge-augmented text generation.

Walks the words of new input text and, between each adjacent pair,
inserts one randomly chosen bridge word when the graph has any.
"""

from __future__ import annotations

import logging
import random

from textgraph.graph.model import WordGraph
from textgraph.graph.tokenizer import split_words
from textgraph.queries.bridge import bridge_words_or_empty

logger = logging.getLogger(__name__)


class TextGenerator:
    """
    Generates new text by inserting bridge words between input words.

    Input words keep their original case in the output. Bridge lookups
    use the lowercased word so "The Cat" matches graph nodes "the" and
    "cat"; pass case_sensitive=True to look words up verbatim instead.
    """

    def __init__(
        self,
        graph: WordGraph,
        seed: int | None = None,
        rng: random.Random | None = None,
        case_sensitive: bool = False,
    ) -> None:
        """
        Initialize the generator.

        Args:
            graph: Graph to draw bridge words from
            seed: Random seed for reproducibility (ignored if rng is given)
            rng: Random source to use for choosing among bridge words
            case_sensitive: Look up input words without lowercasing them
        """
        self._graph = graph
        self._rng = rng if rng is not None else random.Random(seed)
        self._case_sensitive = case_sensitive

    def _key(self, word: str) -> str:
        return word if self._case_sensitive else word.lower()

    def generate_tokens(self, text: str) -> list[tuple[str, bool]]:
        """
        Generate the output word by word.

        Returns:
            List of (word, inserted) pairs; inserted is True for bridge words
        """
        words = split_words(text)
        output: list[tuple[str, bool]] = []

        for word1, word2 in zip(words, words[1:]):
            output.append((word1, False))
            bridges = bridge_words_or_empty(self._graph, self._key(word1), self._key(word2))
            if bridges:
                choice = self._rng.choice(bridges)
                logger.debug(f"Inserting {choice!r} between {word1!r} and {word2!r}")
                output.append((choice, True))

        if words:
            output.append((words[-1], False))
        return output

    def generate(self, text: str) -> str:
        """Generate new text with bridge words inserted, joined by single spaces."""
        return " ".join(word for word, _ in self.generate_tokens(text))
