"""Rendering surface backed by the bundled Textual board.

Reads go through the widgets currently mounted on the board screen and the
active modal; commands run widget actions and then let the app settle.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.css.query import NoMatches
from textual.pilot import Pilot
from textual.widget import Widget
from textual.widgets import Button

from kanbanprobe.document import BoardDocument
from kanbanprobe.errors import NotFound
from kanbanprobe.surface import Action, CardEntry, ColumnEntry, SubtaskMark
from kanbanprobe.ui.app import KanbanApp
from kanbanprobe.ui.board import BoardScreen
from kanbanprobe.ui.card import CardWidget
from kanbanprobe.ui.column import ColumnWidget
from kanbanprobe.ui.constants import ICON_CHECKED
from kanbanprobe.ui.detail import CardDetailModal, CardMenuButton, StatusSelect, SubtaskRow
from kanbanprobe.ui.menu import ContextMenu, MenuItem
from kanbanprobe.ui.static import PlainStatic, static_text

DEFAULT_SIZE = (160, 50)

_BUTTONS = {
    Action.CONFIRM: "#confirm",
    Action.CANCEL: "#cancel",
    Action.SUBMIT: "#submit",
}

_MENU_CHOICES = {
    Action.CHOOSE_EDIT: "edit",
    Action.CHOOSE_DELETE: "delete",
}


def _text_of(parent: Widget, selector: str, what: str) -> str:
    try:
        return static_text(parent.query_one(selector, PlainStatic))
    except NoMatches:
        raise NotFound(what) from None


class TextualSurface:
    """RenderingSurface over a running KanbanApp."""

    def __init__(self, app: KanbanApp, pilot: Pilot) -> None:
        self._app = app
        self._pilot = pilot

    @property
    def app(self) -> KanbanApp:
        return self._app

    @property
    def _board(self) -> BoardScreen:
        if self._app.board_screen is None:
            raise NotFound("board screen")
        return self._app.board_screen

    def _columns(self) -> list[ColumnWidget]:
        return list(self._board.query(ColumnWidget))

    def _card_widget(self, name: str) -> CardWidget | None:
        for card in self._board.query(CardWidget):
            if _text_of(card, "#card-title", "card title").strip() == name:
                return card
        return None

    def _detail(self, card_name: str | None = None) -> CardDetailModal:
        screen = self._app.screen
        if not isinstance(screen, CardDetailModal):
            raise NotFound("open card", card_name)
        if card_name is not None and _text_of(screen, "#detail-title", "card title").strip() != card_name:
            raise NotFound("open card", card_name)
        return screen

    def _menu(self) -> ContextMenu:
        screen = self._app.screen
        if not isinstance(screen, ContextMenu):
            raise NotFound("menu")
        return screen

    async def _settle(self) -> None:
        # dismiss callbacks are scheduled, so they need a second pass
        await self._pilot.pause()
        await self._pilot.pause()

    # -- reads --

    async def list_columns(self) -> list[ColumnEntry]:
        return [
            ColumnEntry(_text_of(col, "#column-header", "column header"), len(col.query(CardWidget)))
            for col in self._columns()
        ]

    async def list_cards(self, column_index: int) -> list[CardEntry]:
        columns = self._columns()
        if not 0 <= column_index < len(columns):
            raise NotFound("column", column_index)
        return [
            CardEntry(
                _text_of(card, "#card-title", "card title"),
                _text_of(card, "#card-subtasks", "subtask label"),
            )
            for card in columns[column_index].query(CardWidget)
        ]

    async def find_card(self, name: str) -> CardWidget | None:
        return self._card_widget(name)

    async def read_subtask_label(self, card_name: str) -> str:
        screen = self._app.screen
        if isinstance(screen, CardDetailModal):
            if _text_of(screen, "#detail-title", "card title").strip() == card_name:
                return _text_of(screen, "#subtask-summary", "subtask summary")
        card = self._card_widget(card_name)
        if card is None:
            raise NotFound("card", card_name)
        return _text_of(card, "#card-subtasks", "subtask label")

    async def list_subtask_marks(self) -> list[SubtaskMark]:
        detail = self._detail()
        marks = []
        for row in detail.query(SubtaskRow):
            text = static_text(row)
            marks.append(SubtaskMark(text[2:], text.startswith(ICON_CHECKED), row.has_class("-done")))
        return marks

    # -- commands --

    async def command(self, action: Action, target: str | int | None = None) -> None:
        match action:
            case Action.OPEN_CARD:
                card = self._card_widget(str(target))
                if card is None:
                    raise NotFound("card", target)
                await self._app.run_action("open_card", card)
            case Action.CLOSE_CARD:
                self._detail().dismiss()
            case Action.CHECK_SUBTASK:
                rows = list(self._detail().query(SubtaskRow))
                if not isinstance(target, int) or not 0 <= target < len(rows):
                    raise NotFound("subtask", target)
                if not rows[target].subtask.done:
                    await self._app.run_action("toggle", rows[target])
            case Action.OPEN_STATUS:
                await self._app.run_action("open", self._detail().query_one(StatusSelect))
            case Action.CHOOSE_FIRST_STATUS:
                items = list(self._menu().query(MenuItem))
                if not items:
                    raise NotFound("status option")
                items[0].post_message(MenuItem.Selected(items[0]))
            case Action.OPEN_CARD_MENU:
                name = None if target is None else str(target)
                await self._app.run_action("open", self._detail(name).query_one(CardMenuButton))
            case Action.CHOOSE_EDIT | Action.CHOOSE_DELETE:
                item_id = _MENU_CHOICES[action]
                item = next((i for i in self._menu().query(MenuItem) if i.item_id == item_id), None)
                if item is None:
                    raise NotFound("menu item", item_id)
                item.post_message(MenuItem.Selected(item))
            case Action.CONFIRM | Action.CANCEL | Action.SUBMIT:
                try:
                    button = self._app.screen.query_one(_BUTTONS[action], Button)
                except NoMatches:
                    raise NotFound("button", _BUTTONS[action]) from None
                button.press()
        await self._settle()


@asynccontextmanager
async def open_surface(
    document: BoardDocument,
    size: tuple[int, int] = DEFAULT_SIZE,
) -> AsyncIterator[TextualSurface]:
    """Run the board headless and yield a surface over it."""
    app = KanbanApp(document)
    async with app.run_test(size=size) as pilot:
        await pilot.pause()
        yield TextualSurface(app, pilot)
