"""Data models for board snapshots."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Parsed:
    """Subtask progress read from a well-formed label."""

    completed: int
    total: int
    raw: str = ""

    ok = True

    @property
    def is_complete(self) -> bool:
        return self.completed == self.total

    def to_dict(self) -> dict:
        return {"completed": self.completed, "total": self.total, "raw": self.raw}


@dataclass(frozen=True)
class Unparsable:
    """A subtask label without two numeric tokens.

    ``completed`` and ``total`` are NaN so that code which only checks
    finiteness still notices the failure.
    """

    raw: str = ""

    ok = False
    completed = math.nan
    total = math.nan

    def to_dict(self) -> dict:
        return {"completed": None, "total": None, "raw": self.raw}


SubtaskInfo = Union[Parsed, Unparsable]


@dataclass(frozen=True)
class Card:
    """A card as rendered on the board."""

    name: str
    subtasks: SubtaskInfo

    def to_dict(self) -> dict:
        return {"name": self.name, "subtasks": self.subtasks.to_dict()}


class Board(Mapping):
    """Point-in-time snapshot: ordered mapping of column name to cards.

    Boards are immutable values. Equality compares columns and cards in
    order, so two snapshots of an unchanged surface compare equal.
    """

    __slots__ = ("_columns",)

    def __init__(self, columns: Mapping[str, Iterable[Card]] | Iterable[tuple[str, Iterable[Card]]] = ()) -> None:
        items = columns.items() if isinstance(columns, Mapping) else columns
        built: dict[str, tuple[Card, ...]] = {}
        for name, cards in items:
            built[name] = tuple(cards)
        object.__setattr__(self, "_columns", built)

    def __setattr__(self, name, value):
        raise AttributeError("Board is immutable")

    def __getitem__(self, column: str) -> tuple[Card, ...]:
        return self._columns[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return list(self._columns.items()) == list(other._columns.items())

    def __hash__(self) -> int:
        return hash(tuple(self._columns.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {len(cards)} cards" for name, cards in self._columns.items())
        return f"Board({{{inner}}})"

    @property
    def columns(self) -> list[str]:
        """Column names in on-screen order."""
        return list(self._columns)

    def cards(self, column: str) -> tuple[Card, ...]:
        """Cards in a column, or an empty tuple if the column is absent."""
        return self._columns.get(column, ())

    def to_dict(self) -> dict:
        return {name: [card.to_dict() for card in cards] for name, cards in self._columns.items()}


@dataclass(frozen=True)
class ColumnInfo:
    """A column picked out of a board by a query."""

    column: str
    cards: tuple[Card, ...]

    @property
    def count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class SplitBoard:
    """A board partitioned by subtask completion.

    All three boards carry the same columns as the board they came from.
    """

    completed: Board
    incomplete: Board
    unparsable: Board
