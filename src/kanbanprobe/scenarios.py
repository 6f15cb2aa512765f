"""Reference scenarios: delete a card, edit a card.

Each scenario picks its target from a fresh snapshot, drives the surface
and then verifies the result. Any failed assumption or check raises a
``ProbeError`` and aborts the scenario.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass

from kanbanprobe.checks import (
    card_absent,
    card_in_column,
    card_not_in_column,
    column_card_count,
    expect,
    subtasks_info,
    subtasks_struck_through,
)
from kanbanprobe.errors import PreconditionViolation
from kanbanprobe.models import Card
from kanbanprobe.parser import require_counts
from kanbanprobe.partition import split_by_completion
from kanbanprobe.query import ensure_unique, first_column_name, first_non_empty_column
from kanbanprobe.snapshot import build_board
from kanbanprobe.surface import Action, RenderingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteResult:
    """What the delete scenario verified."""

    card: str
    column: str
    count_before: int
    count_after: int


@dataclass(frozen=True)
class EditResult:
    """What the edit scenario verified."""

    card: str
    original_column: str
    first_column: str
    completed_before: int
    completed_after: int
    total: int
    struck: int


@contextmanager
def step(name: str):
    """Log the start and end of a scenario step."""
    logger.info("step: %s", name)
    try:
        yield
    except Exception:
        logger.error("step failed: %s", name)
        raise
    logger.debug("step done: %s", name)


async def _pick_incomplete_card(surface: RenderingSurface, purpose: str) -> tuple[str, Card, str]:
    """Return (column, card, first column) for the first incomplete card past the head column.

    The surface addresses cards by title, so the picked title must be
    unique on the whole board; otherwise DuplicateCardName is raised
    before any command is sent.
    """
    board = await build_board(surface)
    split = split_by_completion(board)
    candidate = first_non_empty_column(split.incomplete, skip_head=True)
    if candidate is None:
        raise PreconditionViolation(f"no incomplete cards found for {purpose}")
    card = candidate.cards[0]
    ensure_unique(board, card.name)
    return candidate.column, card, first_column_name(board)


async def check_all_subtasks(surface: RenderingSurface) -> int:
    """Check every unchecked subtask of the open card. Returns how many were checked."""
    marks = await surface.list_subtask_marks()
    checked = 0
    for index, mark in enumerate(marks):
        if not mark.checked:
            await surface.command(Action.CHECK_SUBTASK, index)
            checked += 1
    return checked


async def delete_card(surface: RenderingSurface) -> DeleteResult:
    """Delete the first incomplete card and verify it is gone.

    The card is deleted as found. It is not completed or moved to the
    first column beforehand, so the count check measures the column the
    card was picked from.
    """
    with step("find deletable card and initial count"):
        column, card, _ = await _pick_incomplete_card(surface, "deletion")
        count_before = await column_card_count(surface, column)
        logger.info("deleting %r from %r (%d cards)", card.name, column, count_before)

    with step("delete the card"):
        await surface.command(Action.OPEN_CARD, card.name)
        await surface.command(Action.OPEN_CARD_MENU, card.name)
        await surface.command(Action.CHOOSE_DELETE)
        await surface.command(Action.CONFIRM)

    with step("verify card is deleted"):
        expect(await card_absent(surface, card.name), f"card {card.name!r} still present after delete")

    with step("verify column count decreased by 1"):
        count_after = await column_card_count(surface, column)
        expect(
            count_after == count_before - 1,
            f"column {column!r} has {count_after} cards, expected {count_before - 1}",
        )

    return DeleteResult(card=card.name, column=column, count_before=count_before, count_after=count_after)


async def edit_card(surface: RenderingSurface) -> EditResult:
    """Complete an incomplete card's subtasks, move it to the first column and verify."""
    with step("find card with incomplete subtasks not in first column"):
        original_column, card, first_column = await _pick_incomplete_card(surface, "editing")
        if original_column == first_column:
            raise PreconditionViolation(f"selected card {card.name!r} is already in the first column")
        before = require_counts(card.subtasks, card.name)
        logger.info("editing %r in %r (%d of %d)", card.name, original_column, before.completed, before.total)

    with step("open card and complete all subtasks"):
        await surface.command(Action.OPEN_CARD, card.name)
        await check_all_subtasks(surface)

    with step("move card to first column"):
        await surface.command(Action.OPEN_STATUS)
        await surface.command(Action.CHOOSE_FIRST_STATUS)

    with step("verify completed subtasks are struck through"):
        struck = await subtasks_struck_through(surface)

    with step("save and close the card"):
        await surface.command(Action.OPEN_CARD_MENU, card.name)
        await surface.command(Action.CHOOSE_EDIT)
        await surface.command(Action.SUBMIT)

    with step("verify subtasks completion count"):
        await surface.command(Action.OPEN_CARD, card.name)
        after = require_counts(await subtasks_info(surface, card.name), card.name)
        expect(after.total == before.total, f"total changed from {before.total} to {after.total}")
        expect(
            after.completed > before.completed,
            f"completed did not increase ({before.completed} -> {after.completed})",
        )
        expect(after.completed <= after.total, f"completed {after.completed} exceeds total {after.total}")

    with step("verify card moved to first column"):
        board = await build_board(surface)
        expect(card_in_column(board, card.name, first_column), f"card {card.name!r} not in {first_column!r}")
        expect(
            card_not_in_column(board, card.name, original_column),
            f"card {card.name!r} still in {original_column!r}",
        )

    return EditResult(
        card=card.name,
        original_column=original_column,
        first_column=first_column,
        completed_before=before.completed,
        completed_after=after.completed,
        total=after.total,
        struck=struck,
    )
