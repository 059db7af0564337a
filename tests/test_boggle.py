import random

import pytest

from pocketalgo.boggle import (
    BOARD_AREA,
    MIN_WORD_LENGTH,
    STANDARD_CUBES,
    BoggleBoard,
    roll_letters,
    score_word,
)
from pocketalgo.lexicon import Lexicon

CATS_BOARD = "CATS" + "X" * 12


def _cube_assignment(letters):
    """Match letters to distinct cubes showing them; maps cube index to position."""
    owner = {}

    def place(position, seen):
        for cube, faces in enumerate(STANDARD_CUBES):
            if letters[position] in faces and cube not in seen:
                seen.add(cube)
                if cube not in owner or place(owner[cube], seen):
                    owner[cube] = position
                    return True
        return False

    for position in range(len(letters)):
        place(position, set())
    return owner


@pytest.fixture
def lexicon():
    return Lexicon(["cats", "cat", "acts", "cast", "acac", "stac"])


@pytest.fixture
def board(lexicon):
    return BoggleBoard(lexicon, CATS_BOARD)


def test_short_and_untraceable_words_are_rejected(board):
    assert not board.is_valid("cat")
    assert not board.is_valid("acts")
    assert not board.is_valid("cast")
    assert not board.is_valid("acac")


def test_path_for_known_and_unknown_word(board):
    assert board.path_for("cats") == frozenset({0, 1, 2, 3})
    assert board.path_for("dogs") == frozenset()


def test_word_from_several_starting_cells_scores_each_time():
    letters = "AAXX" + "AAXX" + "X" * 8
    board = BoggleBoard(Lexicon(["aaaa"]), letters)
    assert board.word_count == 1
    assert board.max_score == 4


def test_score_word_minimum():
    assert score_word("a" * MIN_WORD_LENGTH) == 1
    assert score_word("a" * (MIN_WORD_LENGTH + 3)) == score_word("a" * MIN_WORD_LENGTH) + 3


def test_render_without_highlight(board):
    lines = board.render().splitlines()
    assert len(lines) == 9
    assert lines[0] == "-" * 17
    assert lines[1] == "| C | A | T | S |"
    assert "[" not in board.render()


def test_render_word_highlights_path(board):
    lines = board.render_word("cats").splitlines()
    assert lines[1] == "|[C]|[A]|[T]|[S]|"
    assert lines[3] == "| X | X | X | X |"


def test_render_unknown_word_matches_plain(board):
    assert board.render_word("dogs") == board.render()


def test_lowercase_letters_are_normalised(lexicon):
    board = BoggleBoard(lexicon, CATS_BOARD.lower())
    assert board.letters == CATS_BOARD
    assert board.is_valid("cats")


@pytest.mark.parametrize("letters", ["CATS", "C" * (BOARD_AREA + 1), "CAT1" + "X" * 12])
def test_bad_letters_raise(lexicon, letters):
    with pytest.raises(ValueError):
        BoggleBoard(lexicon, letters)


@pytest.mark.parametrize("seed", range(20))
def test_roll_letters_matches_cubes_one_to_one(seed):
    letters = roll_letters(random.Random(seed))
    assert len(letters) == BOARD_AREA
    assignment = _cube_assignment(letters)
    assert sorted(assignment.values()) == list(range(BOARD_AREA))
    for cube, position in assignment.items():
        assert letters[position] in STANDARD_CUBES[cube]


@pytest.mark.parametrize("seed", range(20))
def test_roll_letters_uses_each_cube_once(seed):
    letters = roll_letters(random.Random(seed))
    assert len(letters) == BOARD_AREA
    faces = "".join(STANDARD_CUBES)
    assert all(letter in faces for letter in letters)
    for rare in "QZJX":
        cubes_with_letter = sum(rare in cube for cube in STANDARD_CUBES)
        assert letters.count(rare) <= cubes_with_letter


def test_random_board_uses_rolled_letters(lexicon):
    board = BoggleBoard.random(lexicon, random.Random(3))
    assert board.letters == roll_letters(random.Random(3))


def test_every_found_word_is_in_lexicon_and_long_enough():
    lexicon = Lexicon(["gear", "rage", "ages", "sage", "gears", "seat", "east", "eats"])
    board = BoggleBoard(lexicon, "GEAR" + "SATE" + "X" * 8)
    assert board.word_count > 0
    for word in board.valid_words:
        assert word in lexicon
        assert len(word) >= MIN_WORD_LENGTH
        assert len(board.path_for(word)) == len(word)