"""A 4x4 Boggle board that finds every lexicon word it contains."""

from __future__ import annotations

import random as _random
from typing import Iterable

from pocketalgo.lexicon import Lexicon

STANDARD_CUBES = (
    "AAEEGN", "ABBJOO", "ACHOPS", "AFFKPS",
    "AOOTTW", "CIMOTU", "DEILRX", "DELRVY",
    "DISTTY", "EEGHNW", "EEINSU", "EHRTVW",
    "EIOSST", "ELRTTY", "HIMNQU", "HLNNRZ",
)

BOARD_SIZE = 4
BOARD_AREA = BOARD_SIZE * BOARD_SIZE
CUBE_FACES = 6
MIN_WORD_LENGTH = 4

_RULE = "-" * 17


def _neighbours(pos: int) -> tuple[int, ...]:
    row, col = divmod(pos, BOARD_SIZE)
    return tuple(
        r * BOARD_SIZE + c
        for r in (row - 1, row, row + 1)
        for c in (col - 1, col, col + 1)
        if (r, c) != (row, col) and 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE
    )


_NEIGHBOURS = tuple(_neighbours(pos) for pos in range(BOARD_AREA))


def roll_letters(rng: _random.Random | None = None) -> str:
    """Shake the standard cubes into random places and roll each one."""
    rng = _random if rng is None else rng
    cubes = rng.sample(STANDARD_CUBES, BOARD_AREA)
    return "".join(rng.choice(cube) for cube in cubes)


def score_word(word: str) -> int:
    """Points earned for a word: one for the minimum length, one per extra letter."""
    return len(word) - MIN_WORD_LENGTH + 1


class BoggleBoard:
    """A board of sixteen letters with all its lexicon words precomputed."""

    def __init__(self, lexicon: Lexicon, letters: str) -> None:
        letters = letters.upper()
        if len(letters) != BOARD_AREA or not letters.isalpha():
            raise ValueError(f"a board needs exactly {BOARD_AREA} letters, got {letters!r}")
        self.letters = letters
        self._lexicon = lexicon
        self._paths: dict[str, frozenset[int]] = {}
        self._words: set[str] = set()
        self._max_score = 0
        for start in range(BOARD_AREA):
            found: set[str] = set()
            self._search(start, [], "", found)
            self._words |= found
            # A word reachable from several starting cells counts once per cell.
            self._max_score += sum(score_word(word) for word in found)

    @classmethod
    def random(cls, lexicon: Lexicon, rng: _random.Random | None = None) -> "BoggleBoard":
        """Build a board from a fresh roll of the standard cubes."""
        return cls(lexicon, roll_letters(rng))

    def _search(self, pos: int, path: list[int], prefix: str, found: set[str]) -> None:
        if pos in path or not self._lexicon.contains_prefix(prefix):
            return
        path.append(pos)
        word = prefix + self.letters[pos].lower()
        if len(word) >= MIN_WORD_LENGTH and word in self._lexicon:
            found.add(word)
            self._paths[word] = frozenset(path)
        for neighbour in _NEIGHBOURS[pos]:
            self._search(neighbour, path, word, found)
        path.pop()

    def render(self, highlight: Iterable[int] = ()) -> str:
        """Draw the board, bracketing the cells whose positions are highlighted."""
        marked = set(highlight)
        lines = [_RULE]
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                pos = row * BOARD_SIZE + col
                letter = self.letters[pos]
                cells.append(f"[{letter}]|" if pos in marked else f" {letter} |")
            lines.append("|" + "".join(cells))
            lines.append(_RULE)
        return "\n".join(lines) + "\n"

    def render_word(self, word: str) -> str:
        """Draw the board with the cells spelling ``word`` highlighted."""
        return self.render(self.path_for(word))

    def path_for(self, word: str) -> frozenset[int]:
        """Cell positions used to spell ``word``, or an empty set if it is absent."""
        return self._paths.get(word, frozenset())

    @property
    def valid_words(self) -> frozenset[str]:
        """Every lexicon word that can be traced on the board."""
        return frozenset(self._words)

    @property
    def word_count(self) -> int:
        """Number of distinct words on the board."""
        return len(self._words)

    @property
    def max_score(self) -> int:
        """Total score available on the board."""
        return self._max_score

    def is_valid(self, word: str) -> bool:
        """Return whether ``word`` can be traced on the board."""
        return word in self._words