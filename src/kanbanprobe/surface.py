"""The rendering surface a board snapshot is read from."""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple, Protocol, runtime_checkable


class ColumnEntry(NamedTuple):
    """Raw header text of a rendered column and how many cards it shows."""

    header: str
    card_count: int


class CardEntry(NamedTuple):
    """Raw title and subtask label of a rendered card."""

    title: str
    subtask_label: str


class SubtaskMark(NamedTuple):
    """Presentation state of one subtask in an open card."""

    label: str
    checked: bool
    struck: bool


class Action(Enum):
    """Commands a surface accepts."""

    OPEN_CARD = "open-card"
    CLOSE_CARD = "close-card"
    CHECK_SUBTASK = "check-subtask"
    OPEN_STATUS = "open-status"
    CHOOSE_FIRST_STATUS = "choose-first-status"
    OPEN_CARD_MENU = "open-card-menu"
    CHOOSE_EDIT = "choose-edit"
    CHOOSE_DELETE = "choose-delete"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    SUBMIT = "submit"


@runtime_checkable
class RenderingSurface(Protocol):
    """Live UI state that can be queried and commanded.

    Every method suspends until the underlying UI has answered. Reads of
    missing elements raise ``NotFound``; nothing is retried.
    """

    async def list_columns(self) -> list[ColumnEntry]:
        """Columns in on-screen order."""
        ...

    async def list_cards(self, column_index: int) -> list[CardEntry]:
        """Cards of one column in on-screen order."""
        ...

    async def find_card(self, name: str) -> Any | None:
        """Handle for the card titled ``name``, or None."""
        ...

    async def read_subtask_label(self, card_name: str) -> str:
        """Re-read the subtask label shown for one card."""
        ...

    async def list_subtask_marks(self) -> list[SubtaskMark]:
        """Subtasks of the currently open card."""
        ...

    async def command(self, action: Action, target: str | int | None = None) -> None:
        """Perform a user action and wait for the UI to settle."""
        ...
