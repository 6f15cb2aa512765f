"""Tests for label parsing."""

import math

import pytest

from kanbanprobe.errors import ParseFailure
from kanbanprobe.models import Parsed, Unparsable
from kanbanprobe.parser import column_name, parse_subtasks, require_counts


def test_parse_subtasks_of_label():
    info = parse_subtasks("2 of 5 subtasks")
    assert info == Parsed(completed=2, total=5, raw="2 of 5 subtasks")
    assert not info.is_complete


def test_parse_subtasks_trims_raw():
    info = parse_subtasks("  3 of 3 subtasks \n")
    assert info.raw == "3 of 3 subtasks"
    assert info.is_complete


def test_parse_subtasks_word_first():
    info = parse_subtasks("Subtasks (1 of 4)")
    assert (info.completed, info.total) == (1, 4)


def test_parse_subtasks_extra_numbers_ignored():
    info = parse_subtasks("7/9 done, 12 comments")
    assert (info.completed, info.total) == (7, 9)


def test_parse_subtasks_zero_of_zero_is_complete():
    info = parse_subtasks("0 of 0 subtasks")
    assert info.ok
    assert info.is_complete


def test_parse_subtasks_no_numbers():
    info = parse_subtasks("no numbers here")
    assert isinstance(info, Unparsable)
    assert not info.ok
    assert not math.isfinite(info.completed)
    assert not math.isfinite(info.total)
    assert info.raw == "no numbers here"


def test_parse_subtasks_single_number():
    assert isinstance(parse_subtasks("3 subtasks"), Unparsable)


def test_parse_subtasks_empty():
    assert parse_subtasks("") == Unparsable(raw="")


def test_parse_subtasks_no_grouping():
    """Digit grouping is not understood: '1,000' is two tokens."""
    info = parse_subtasks("1,000 of 2000")
    assert (info.completed, info.total) == (1, 0)


def test_parse_subtasks_ascii_digits_only():
    """Non-ASCII digits are treated as separators."""
    assert isinstance(parse_subtasks("٣ of ٥"), Unparsable)


def test_require_counts_passes_parsed():
    info = parse_subtasks("1 of 2")
    assert require_counts(info) is info


def test_require_counts_raises_for_unparsable():
    with pytest.raises(ParseFailure, match="Fix bug"):
        require_counts(parse_subtasks("none"), "Fix bug")


@pytest.mark.parametrize(
    "header,expected",
    [
        ("Todo (3)", "Todo"),
        ("  In Progress  (12)", "In Progress"),
        ("Done", "Done"),
        ("Review (2) (old)", "Review"),
        ("(4)", ""),
    ],
)
def test_column_name(header, expected):
    assert column_name(header) == expected
