"""Interactive Boggle game played against the computer."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import Iterator, TextIO

from pocketalgo.boggle import MIN_WORD_LENGTH, BoggleBoard, score_word
from pocketalgo.lexicon import Lexicon

DEFAULT_LEXICON = "20k.txt"


class Verdict(Enum):
    """Outcome of a word the player entered."""

    TOO_SHORT = "Word too short!"
    NOT_IN_LEXICON = "Word not found in the lexicon."
    NOT_ON_BOARD = "Word cannot be found on the board."
    ALREADY_FOUND = "Word already found before."
    ACCEPTED = "Word accepted."

    @property
    def message(self) -> str:
        return self.value


def judge_word(board: BoggleBoard, lexicon: Lexicon, found: set[str], word: str) -> Verdict:
    """Decide whether a player's word scores, checking the rules in order."""
    word = word.lower()
    if len(word) < MIN_WORD_LENGTH:
        return Verdict.TOO_SHORT
    if word not in lexicon:
        return Verdict.NOT_IN_LEXICON
    if not board.is_valid(word):
        return Verdict.NOT_ON_BOARD
    if word in found:
        return Verdict.ALREADY_FOUND
    return Verdict.ACCEPTED


def _tokens(stdin: TextIO) -> Iterator[str]:
    for line in stdin:
        yield from line.split()


def play_round(board: BoggleBoard, lexicon: Lexicon, stdin: TextIO, stdout: TextIO) -> int:
    """Play one round on ``board`` and return the player's score."""
    stdout.write(board.render())
    stdout.write("Player's turn. (Enter '!' once you give up)\n")
    stdout.write(f"{board.word_count} words in total\n")

    found: set[str] = set()
    score = 0
    tokens = _tokens(stdin)
    while True:
        stdout.write("Enter word: ")
        token = next(tokens, None)
        if token is None or token == "!":
            break
        word = token.lower()
        verdict = judge_word(board, lexicon, found, word)
        if verdict is not Verdict.ACCEPTED:
            stdout.write(verdict.message + "\n")
            continue
        found.add(word)
        score += score_word(word)
        stdout.write(f"Words found: {len(found)}; Score: {score}\n")
        stdout.write(board.render_word(word))

    stdout.write("Words you found:\n")
    for word in sorted(found):
        stdout.write(word + "\n")
    stdout.write("\n")
    stdout.write("Words you missed:\n")
    for word in sorted(board.valid_words - found):
        stdout.write(word + "\n")
    stdout.write(f"HUMAN: {score}; COMPUTER {board.max_score - score}\n")
    return score


def ask_replay(stdin: TextIO, stdout: TextIO) -> bool:
    """Ask whether to play again until the answer starts with 'y' or 'n'."""
    stdout.write("\nWant to play again? (y/n)\n")
    for line in stdin:
        answer = line.strip()
        if answer and answer[0] in "yn":
            return answer[0] == "y"
    return False


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_LEXICON
    try:
        lexicon = Lexicon.from_file(path)
    except OSError:
        print("Failed to open lexicon.", file=sys.stderr)
        return 1

    rng = random.Random()
    while True:
        board = BoggleBoard.random(lexicon, rng)
        play_round(board, lexicon, sys.stdin, sys.stdout)
        if not ask_replay(sys.stdin, sys.stdout):
            break
    sys.stdout.write("bye!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())