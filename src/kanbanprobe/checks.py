"""Post-action checks against snapshots and the live surface."""

import logging

from kanbanprobe.errors import NotFound, ReconciliationFailure
from kanbanprobe.models import Board, SubtaskInfo
from kanbanprobe.parser import column_name, parse_subtasks
from kanbanprobe.query import ensure_unique
from kanbanprobe.surface import RenderingSurface

logger = logging.getLogger(__name__)


def expect(condition: bool, message: str) -> None:
    """Raise ReconciliationFailure with message unless condition holds."""
    if not condition:
        raise ReconciliationFailure(message)


async def card_absent(surface: RenderingSurface, name: str) -> bool:
    """True if no card called ``name`` is rendered anywhere."""
    return await surface.find_card(name) is None


def card_in_column(board: Board, name: str, column: str) -> bool:
    """True if ``board[column]`` holds a card called ``name``.

    A missing column counts as empty. Card names must be unique on the
    board; a duplicated name raises DuplicateCardName.
    """
    ensure_unique(board, name)
    return any(card.name == name for card in board.cards(column))


def card_not_in_column(board: Board, name: str, column: str) -> bool:
    """Inverse of card_in_column, with the same uniqueness precondition."""
    return not card_in_column(board, name, column)


async def column_card_count(surface: RenderingSurface, column: str) -> int:
    """Live number of cards in the named column."""
    for entry in await surface.list_columns():
        if column_name(entry.header) == column:
            return entry.card_count
    raise NotFound("column", column)


async def subtasks_struck_through(surface: RenderingSurface) -> int:
    """Check every checked subtask carries the strike-through marker.

    Returns the number of checked subtasks verified.
    """
    marks = await surface.list_subtask_marks()
    checked = [mark for mark in marks if mark.checked]
    missing = [mark.label for mark in checked if not mark.struck]
    if missing:
        raise ReconciliationFailure(f"checked subtasks not struck through: {', '.join(map(repr, missing))}")
    logger.debug("%d checked subtasks struck through", len(checked))
    return len(checked)


async def subtasks_info(surface: RenderingSurface, card_name: str) -> SubtaskInfo:
    """Re-read and parse one card's subtask label from the live surface."""
    return parse_subtasks(await surface.read_subtask_label(card_name))
