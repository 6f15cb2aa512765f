"""Tests for post-action checks."""

import pytest

from kanbanprobe.checks import (
    card_absent,
    card_in_column,
    card_not_in_column,
    column_card_count,
    expect,
    subtasks_info,
    subtasks_struck_through,
)
from kanbanprobe.errors import DuplicateCardName, NotFound, ReconciliationFailure
from kanbanprobe.models import Board, Card, Parsed, Unparsable


def _card(name):
    return Card(name, Parsed(0, 1))


def test_expect():
    expect(True, "fine")
    with pytest.raises(ReconciliationFailure, match="boom"):
        expect(False, "boom")


@pytest.mark.asyncio
async def test_card_absent(fake_surface):
    assert await card_absent(fake_surface, "Nope")
    assert not await card_absent(fake_surface, "Record demo")


def test_card_in_column():
    board = Board({"Todo": [_card("a")], "Done": []})
    assert card_in_column(board, "a", "Todo")
    assert not card_in_column(board, "a", "Done")
    assert card_not_in_column(board, "a", "Done")


def test_card_in_missing_column_is_false():
    assert not card_in_column(Board({"Todo": [_card("a")]}), "a", "Archive")


def test_card_in_column_rejects_duplicates():
    board = Board({"Todo": [_card("a")], "Done": [_card("a")]})
    with pytest.raises(DuplicateCardName):
        card_in_column(board, "a", "Todo")
    with pytest.raises(DuplicateCardName):
        card_not_in_column(board, "a", "Todo")


@pytest.mark.asyncio
async def test_column_card_count(fake_surface):
    assert await column_card_count(fake_surface, "Doing") == 2
    assert await column_card_count(fake_surface, "Todo") == 1


@pytest.mark.asyncio
async def test_column_card_count_exact_name(make_surface):
    surface = make_surface([("Doing later (1)", [("a", "0 of 1")]), ("Doing (0)", [])])
    assert await column_card_count(surface, "Doing") == 0


@pytest.mark.asyncio
async def test_column_card_count_missing(fake_surface):
    with pytest.raises(NotFound):
        await column_card_count(fake_surface, "Archive")


@pytest.mark.asyncio
async def test_subtasks_struck_through(make_surface):
    surface = make_surface([], marks=[("a", True, True), ("b", False, False), ("c", True, True)])
    assert await subtasks_struck_through(surface) == 2


@pytest.mark.asyncio
async def test_subtasks_struck_through_missing_strike(make_surface):
    surface = make_surface([], marks=[("a", True, True), ("b", True, False)])
    with pytest.raises(ReconciliationFailure, match="'b'"):
        await subtasks_struck_through(surface)


@pytest.mark.asyncio
async def test_subtasks_struck_through_none_checked(make_surface):
    assert await subtasks_struck_through(make_surface([], marks=[("a", False, False)])) == 0


@pytest.mark.asyncio
async def test_subtasks_info(make_surface):
    surface = make_surface([], labels={"a": "Subtasks (2 of 4)", "b": "soon"})
    assert await subtasks_info(surface, "a") == Parsed(2, 4, "Subtasks (2 of 4)")
    assert await subtasks_info(surface, "b") == Unparsable("soon")
