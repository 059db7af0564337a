"""A word list stored as a prefix tree."""

from __future__ import annotations

import os
from typing import Iterable


class _Node:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_word = False


class Lexicon:
    """A set of lower-case words that also answers prefix queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        self._longest = 0
        for word in words:
            self._add(word)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "Lexicon":
        """Build a lexicon from a file holding one word per line."""
        with open(path, encoding="utf-8") as handle:
            return cls(line.rstrip("\n") for line in handle)

    def _add(self, word: str) -> None:
        word = word.lower()
        self._longest = max(self._longest, len(word))
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _Node())
        node.is_word = True

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for letter in text:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        """Return whether some stored word starts with ``prefix``."""
        return self._find(prefix) is not None

    @property
    def longest_word_length(self) -> int:
        """Length of the longest word that was added."""
        return self._longest