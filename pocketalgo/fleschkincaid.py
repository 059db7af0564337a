"""Flesch-Kincaid grade level of English text."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence, TextIO

COEFFICIENTS = (-15.59, 0.39, 11.8)
FILE_NOT_FOUND = "File not found."

_SPACE = frozenset(" \t\n\v\f\r")
_VOWELS = frozenset("aeiouy")
_SENTENCE_BREAKS = frozenset(".?!")

_HELP = (
    "USAGE: FleschKincaid [OPTIONS]... [FILE]...\n"
    "Evaluate grade level of text file(s).\n"
    "\n"
    "With no files read the standard input for file paths.\n"
    "\n"
    "\t-i, --input\t input files\n"
    "\t-p, --pathFile\t evaluate files whose path is stored in the following files\n"
    "\t-r, --raw\t evaluate text from standard input\n"
    "\t-h, --help\t display help message\n"
    "\n"
)


@dataclass(frozen=True)
class Report:
    """Counts and grade for one text; ``error`` is set when it could not be read."""

    words: int = 0
    sentences: int = 0
    syllables: int = 0
    grade: float = 0.0
    path: str = ""
    error: str = ""


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_vowel(ch: str) -> bool:
    return ch in _VOWELS


def tokenize(text: str) -> list[str]:
    """Split text into words, numbers and single punctuation marks.

    An apostrophe between two letters or digits stays inside the word.
    """
    tokens: list[str] = []
    token = ""
    before = prev = " "
    for ch in text:
        if _is_alnum(ch) and prev == "'" and _is_alnum(before):
            token = tokens[-2] + tokens[-1] + token
            del tokens[-2:]
        before, prev = prev, ch
        if _is_alnum(ch):
            token += ch
            continue
        if token:
            tokens.append(token)
            token = ""
        if ch not in _SPACE:
            tokens.append(ch)
    if token:
        tokens.append(token)
    return tokens


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups; a final 'e' is silent."""
    if not word or not _is_alpha(word[0]):
        return 0
    if len(word) == 1:
        return 1
    count = int(_is_vowel(word[0]))
    count += sum(
        1 for prev, ch in zip(word, word[1:-1]) if _is_vowel(ch) and not _is_vowel(prev)
    )
    last, before = word[-1], word[-2]
    if _is_vowel(last) and not _is_vowel(before) and last != "e":
        count += 1
    return max(count, 1)


def evaluate_text(text: str) -> Report:
    """Count words, sentences and syllables of ``text`` and grade it."""
    tokens = tokenize(text)
    words = [token for token in tokens if _is_alpha(token[0])]
    syllables = sum(count_syllables(word) for word in words)
    sentences = sum(1 for token in tokens if token[0] in _SENTENCE_BREAKS)
    word_count = max(len(words), 1)
    sentence_count = max(sentences, 1)
    base, per_sentence, per_word = COEFFICIENTS
    grade = base + per_sentence * word_count / sentence_count + per_word * syllables / word_count
    return Report(word_count, sentence_count, syllables, grade)


def evaluate_file(path: str) -> Report:
    """Grade the text in the file at ``path``."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError:
        return Report(path=path, error=FILE_NOT_FOUND)
    return dataclasses.replace(evaluate_text(text), path=path)


def format_report(report: Report, detailed: bool = False) -> str:
    """Render a report the way the command line prints it."""
    prefix = f"{report.path}: " if report.path else ""
    if report.error:
        return f"{prefix}{report.error}\n"
    if not detailed:
        return f"{prefix}{report.grade:g}\n"
    return (
        f"{prefix}\n"
        f"Words: {report.words}\n"
        f"Sentences: {report.sentences}\n"
        f"Syllables: {report.syllables}\n"
        f"Grade: {report.grade:g}\n\n"
    )


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Grade files named on the command line, in path files or on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    detailed = False
    if args and args[0] in ("-d", "--detailed"):
        detailed = True
        args = args[1:]

    if not args:
        for path in _words(sys.stdin):
            out.write(format_report(evaluate_file(path), detailed))
        return 0

    option, rest = args[0], args[1:]
    if option in ("-h", "--help"):
        out.write(_HELP)
    elif option in ("-i", "--input"):
        for path in rest:
            out.write(format_report(evaluate_file(path), detailed))
    elif option in ("-p", "--pathFile"):
        for list_path in rest:
            try:
                with open(list_path, encoding="latin-1") as handle:
                    paths = list(_words(handle))
            except OSError:
                continue
            for path in paths:
                out.write(format_report(evaluate_file(path), detailed))
    elif option in ("-r", "--raw"):
        out.write(format_report(evaluate_text(sys.stdin.read()), detailed))
    else:
        out.write("Wrong command line arguments.\n")
        out.write("Try `FleschKincaid --help` for help.\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())