"""Build board snapshots from a rendering surface."""

import logging

from kanbanprobe.errors import NotFound
from kanbanprobe.models import Board, Card
from kanbanprobe.parser import column_name, parse_subtasks
from kanbanprobe.surface import CardEntry, RenderingSurface

logger = logging.getLogger(__name__)


def _card_from_entry(entry: CardEntry, column: str) -> Card:
    name = entry.title.strip() if entry.title else ""
    if not name:
        raise NotFound("card title", column)
    return Card(name=name, subtasks=parse_subtasks(entry.subtask_label or ""))


async def build_board(surface: RenderingSurface) -> Board:
    """Read every column and card currently rendered into a Board.

    Issues one column listing plus one card listing per column. Nothing
    is cached: each call reflects the surface at that moment.
    """
    columns: dict[str, list[Card]] = {}
    for index, entry in enumerate(await surface.list_columns()):
        if not entry.header or not entry.header.strip():
            raise NotFound("column header", index)
        name = column_name(entry.header)
        if name in columns:
            logger.warning("column %r appears more than once; keeping the later one", name)
        columns[name] = [_card_from_entry(card, name) for card in await surface.list_cards(index)]

    board = Board(columns)
    logger.debug("built %r", board)
    return board
