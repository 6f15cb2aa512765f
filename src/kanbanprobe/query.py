"""Pure lookups over a board snapshot."""

from kanbanprobe.errors import DuplicateCardName, EmptyBoard, NotFound
from kanbanprobe.models import Board, Card, ColumnInfo


def first_non_empty_column(board: Board, *, skip_head: bool = True) -> ColumnInfo | None:
    """Return the first column that has cards.

    With ``skip_head`` the first column is never considered, even when it
    has cards: it is the intake column scenarios must not pick from.
    """
    start = 1 if skip_head else 0
    for column in board.columns[start:]:
        cards = board[column]
        if cards:
            return ColumnInfo(column=column, cards=cards)
    return None


def first_column_name(board: Board) -> str:
    """Name of the left-most column."""
    if not board:
        raise EmptyBoard()
    return board.columns[0]


def card_columns(board: Board, name: str) -> list[str]:
    """Every column holding a card named ``name``, once per occurrence."""
    return [column for column, cards in board.items() for card in cards if card.name == name]


def ensure_unique(board: Board, name: str) -> None:
    """Raise DuplicateCardName if more than one card is called ``name``."""
    columns = card_columns(board, name)
    if len(columns) > 1:
        raise DuplicateCardName(name, columns)


def find_card(board: Board, name: str) -> tuple[str, Card]:
    """Locate a card by name. Names must be unique on the board."""
    ensure_unique(board, name)
    for column, cards in board.items():
        for card in cards:
            if card.name == name:
                return column, card
    raise NotFound("card", name)
