"""Tests for the card detail modal and its dialogs."""

import pytest
from textual.widgets import Button, Input

from kanbanprobe.document import DocCard, DocSubtask
from kanbanprobe.ui.app import KanbanApp
from kanbanprobe.ui.card import CardWidget
from kanbanprobe.ui.constants import ICON_CHECKED, ICON_UNCHECKED
from kanbanprobe.ui.detail import (
    CardDetailModal,
    CardMenuButton,
    ConfirmDeleteModal,
    EditCardModal,
    StatusSelect,
    SubtaskRow,
    subtask_summary,
)
from kanbanprobe.ui.menu import ContextMenu, MenuItem
from kanbanprobe.ui.static import PlainStatic, static_text


def test_subtask_summary():
    card = DocCard("a", [DocSubtask("x", True), DocSubtask("y")])
    assert subtask_summary(card) == "Subtasks (1 of 2)"


def _board_label(app, title):
    for card in app.board_screen.query(CardWidget):
        if card.card.title == title:
            return static_text(card.query_one("#card-subtasks", PlainStatic))
    return None


async def _open(app, pilot, title):
    app.push_screen(CardDetailModal(app.document.find_card(title)))
    await pilot.pause()
    return app.screen


@pytest.mark.asyncio
async def test_detail_shows_card(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Build landing page")
        assert static_text(detail.query_one("#detail-title", PlainStatic)) == "Build landing page"
        assert static_text(detail.query_one("#subtask-summary", PlainStatic)) == "Subtasks (1 of 3)"
        assert detail.query_one(StatusSelect).current == "Doing"
        rows = list(detail.query(SubtaskRow))
        assert [static_text(r) for r in rows] == [
            f"{ICON_CHECKED} Wireframe",
            f"{ICON_UNCHECKED} Copy",
            f"{ICON_UNCHECKED} Deploy",
        ]
        assert [r.has_class("-done") for r in rows] == [True, False, False]


@pytest.mark.asyncio
async def test_toggle_updates_row_summary_and_board(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Build landing page")
        row = list(detail.query(SubtaskRow))[1]
        row.action_toggle()
        await pilot.pause()
        assert row.has_class("-done")
        assert static_text(row) == f"{ICON_CHECKED} Copy"
        assert static_text(detail.query_one("#subtask-summary", PlainStatic)) == "Subtasks (2 of 3)"
        assert _board_label(app, "Build landing page") == "2 of 3 subtasks"


@pytest.mark.asyncio
async def test_toggle_off_removes_strike(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Build landing page")
        row = list(detail.query(SubtaskRow))[0]
        row.action_toggle()
        await pilot.pause()
        assert not row.has_class("-done")
        assert not document.find_card("Build landing page").subtasks[0].done


@pytest.mark.asyncio
async def test_status_menu_lists_columns(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Build landing page")
        detail.query_one(StatusSelect).action_open()
        await pilot.pause()
        assert isinstance(app.screen, ContextMenu)
        assert [i.item_id for i in app.screen.query(MenuItem)] == ["status:Todo", "status:Doing", "status:Done"]


@pytest.mark.asyncio
async def test_status_change_moves_card(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Build landing page")
        select = detail.query_one(StatusSelect)
        select.post_message(StatusSelect.Changed(select, "Todo"))
        await pilot.pause()
        card = document.find_card("Build landing page")
        assert document.column_of(card).name == "Todo"
        assert select.current == "Todo"
        assert app.screen is detail


@pytest.mark.asyncio
async def test_edit_dialog_renames(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Record demo")
        detail.query_one(CardMenuButton).post_message(CardMenuButton.Chosen("edit"))
        await pilot.pause()
        assert isinstance(app.screen, EditCardModal)
        app.screen.query_one("#title-input", Input).value = "Record final demo"
        app.screen.query_one("#submit", Button).press()
        await pilot.pause()
        await pilot.pause()
        assert app.screen is app.board_screen
        assert document.find_card("Record final demo") is not None
        assert _board_label(app, "Record final demo") == "2 of 2 subtasks"


@pytest.mark.asyncio
async def test_edit_dialog_cancel_keeps_detail(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Record demo")
        detail.query_one(CardMenuButton).post_message(CardMenuButton.Chosen("edit"))
        await pilot.pause()
        app.screen.query_one("#title-input", Input).value = "Changed"
        app.screen.query_one("#cancel", Button).press()
        await pilot.pause()
        await pilot.pause()
        assert app.screen is detail
        assert document.find_card("Record demo") is not None


@pytest.mark.asyncio
async def test_delete_dialog_removes_card(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        detail = await _open(app, pilot, "Record demo")
        detail.query_one(CardMenuButton).post_message(CardMenuButton.Chosen("delete"))
        await pilot.pause()
        assert isinstance(app.screen, ConfirmDeleteModal)
        app.screen.query_one("#confirm", Button).press()
        await pilot.pause()
        await pilot.pause()
        assert app.screen is app.board_screen
        assert document.find_card("Record demo") is None
        assert _board_label(app, "Record demo") is None


@pytest.mark.asyncio
async def test_escape_closes_detail(document):
    app = KanbanApp(document)
    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()
        await _open(app, pilot, "Pick name")
        await pilot.press("escape")
        await pilot.pause()
        assert app.screen is app.board_screen
