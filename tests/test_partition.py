"""Tests for splitting a board by completion."""

from kanbanprobe.models import Board, Card, Parsed, Unparsable
from kanbanprobe.partition import split_by_completion

DONE = Card("done", Parsed(2, 2))
HALF = Card("half", Parsed(1, 2))
EMPTY = Card("empty", Parsed(0, 0))
ODD = Card("odd", Unparsable("??"))


def test_split_keeps_every_column():
    split = split_by_completion(Board({"Todo": [], "Doing": [HALF], "Done": [DONE]}))
    for part in (split.completed, split.incomplete, split.unparsable):
        assert part.columns == ["Todo", "Doing", "Done"]


def test_split_buckets():
    split = split_by_completion(Board({"Doing": [HALF, DONE, ODD, EMPTY]}))
    assert split.completed["Doing"] == (DONE, EMPTY)
    assert split.incomplete["Doing"] == (HALF,)
    assert split.unparsable["Doing"] == (ODD,)


def test_split_cards_land_in_exactly_one_bucket():
    board = Board({"A": [HALF, ODD], "B": [DONE, EMPTY]})
    split = split_by_completion(board)
    for column in board:
        merged = split.completed[column] + split.incomplete[column] + split.unparsable[column]
        assert sorted(c.name for c in merged) == sorted(c.name for c in board[column])


def test_split_keeps_card_order():
    other = Card("other", Parsed(0, 3))
    split = split_by_completion(Board({"Doing": [other, DONE, HALF]}))
    assert split.incomplete["Doing"] == (other, HALF)


def test_split_leaves_input_untouched():
    board = Board({"Doing": [HALF, DONE]})
    copy = Board({"Doing": [HALF, DONE]})
    split_by_completion(board)
    assert board == copy


def test_split_empty_board():
    split = split_by_completion(Board())
    assert split.completed == split.incomplete == split.unparsable == Board()
