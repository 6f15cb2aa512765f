"""Card detail modal and the edit/delete dialogs it opens."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from kanbanprobe.document import DocCard, DocSubtask
from kanbanprobe.ui.constants import (
    ICON_CHECKED,
    ICON_DELETE,
    ICON_DROPDOWN,
    ICON_EDIT,
    ICON_MENU,
    ICON_UNCHECKED,
)
from kanbanprobe.ui.menu import ContextMenu, MenuItem
from kanbanprobe.ui.static import PlainStatic


def subtask_summary(card: DocCard) -> str:
    return f"Subtasks ({card.done_count} of {len(card.subtasks)})"


def _center(widget) -> tuple[int, int]:
    region = widget.region
    return region.x + region.width // 2, region.y + region.height // 2


class SubtaskRow(Static, can_focus=True):
    """One checklist entry. Completed entries are struck through."""

    BINDINGS = [
        ("space", "toggle"),
        ("enter", "toggle"),
    ]

    DEFAULT_CSS = """
    SubtaskRow {
        width: 100%;
        height: auto;
        padding: 0 1;
    }
    SubtaskRow:focus {
        background: $primary-darken-2;
    }
    SubtaskRow.-done {
        text-style: strike;
        color: $text-muted;
    }
    """

    class Toggled(Message):
        """Posted after the entry was checked or unchecked."""

        def __init__(self, row: SubtaskRow) -> None:
            super().__init__()
            self.row = row

        @property
        def control(self) -> SubtaskRow:
            return self.row

    def __init__(self, subtask: DocSubtask, **kwargs) -> None:
        super().__init__(self._render_text(subtask), **kwargs)
        self.subtask = subtask

    @staticmethod
    def _render_text(subtask: DocSubtask) -> Text:
        icon = ICON_CHECKED if subtask.done else ICON_UNCHECKED
        return Text(f"{icon} {subtask.text}")

    def on_mount(self) -> None:
        self.set_class(self.subtask.done, "-done")

    def action_toggle(self) -> None:
        self.subtask.done = not self.subtask.done
        self.update(self._render_text(self.subtask))
        self.set_class(self.subtask.done, "-done")
        self.post_message(self.Toggled(self))

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_toggle()


class StatusSelect(Static, can_focus=True):
    """Shows the card's column; opens a menu of columns to move it."""

    BINDINGS = [
        ("space", "open"),
        ("enter", "open"),
    ]

    DEFAULT_CSS = """
    StatusSelect {
        width: 100%;
        height: 3;
        border: round $surface-lighten-2;
        padding: 0 1;
    }
    StatusSelect:focus {
        border: round $primary;
    }
    """

    class Changed(Message):
        """Posted when a column was chosen."""

        def __init__(self, select: StatusSelect, column: str) -> None:
            super().__init__()
            self.select = select
            self.column = column

        @property
        def control(self) -> StatusSelect:
            return self.select

    def __init__(self, current: str, options: list[str], **kwargs) -> None:
        super().__init__(f"{current} {ICON_DROPDOWN}", markup=False, **kwargs)
        self.current = current
        self.options = options

    def set_current(self, column: str) -> None:
        self.current = column
        self.update(f"{column} {ICON_DROPDOWN}")

    def action_open(self) -> None:
        x, y = _center(self)
        items = [MenuItem(name, f"status:{name}") for name in self.options]
        self.app.push_screen(ContextMenu(items, x, y), self._on_menu_closed)

    def _on_menu_closed(self, item: MenuItem | None) -> None:
        if item and item.item_id and item.item_id.startswith("status:"):
            self.post_message(self.Changed(self, item.item_id[len("status:") :]))

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_open()


class CardMenuButton(Static, can_focus=True):
    """Opens the edit/delete menu for a card."""

    BINDINGS = [
        ("space", "open"),
        ("enter", "open"),
    ]

    DEFAULT_CSS = """
    CardMenuButton {
        width: 3;
        height: 1;
        dock: right;
    }
    CardMenuButton:hover, CardMenuButton:focus {
        background: $primary-darken-2;
    }
    """

    class Chosen(Message):
        """Posted with the id of the chosen menu entry."""

        def __init__(self, item_id: str) -> None:
            super().__init__()
            self.item_id = item_id

    def __init__(self, **kwargs) -> None:
        super().__init__(f" {ICON_MENU} ", **kwargs)

    def action_open(self) -> None:
        x, y = _center(self)
        items = [
            MenuItem(f"{ICON_EDIT} Edit Task", "edit"),
            MenuItem(f"{ICON_DELETE} Delete Task", "delete"),
        ]
        self.app.push_screen(ContextMenu(items, x, y), self._on_menu_closed)

    def _on_menu_closed(self, item: MenuItem | None) -> None:
        if item and item.item_id:
            self.post_message(self.Chosen(item.item_id))

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_open()


class DialogModal(ModalScreen[bool]):
    """Base for the small centred dialogs."""

    DEFAULT_CSS = """
    DialogModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    DialogModal #dialog {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    DialogModal #buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: center middle;
    }
    DialogModal Button {
        margin: 0 2;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, card: DocCard) -> None:
        super().__init__()
        self.card = card

    def action_cancel(self) -> None:
        self.dismiss(False)


class EditCardModal(DialogModal):
    """Edit a card's title; submitting saves and closes."""

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static("Edit Task", id="dialog-title")
            yield Input(value=self.card.title, placeholder="Title", id="title-input")
            with Horizontal(id="buttons"):
                yield Button("Save Changes", id="submit", variant="primary")
                yield Button("Cancel", id="cancel")

    async def _save(self) -> None:
        title = self.query_one("#title-input", Input).value.strip()
        if title and title != self.card.title:
            await self.app.rename_card(self.card, title)
        self.dismiss(True)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "submit":
            await self._save()
        else:
            self.dismiss(False)

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        await self._save()


class ConfirmDeleteModal(DialogModal):
    """Ask before deleting a card."""

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield PlainStatic(f"Delete '{self.card.title}'? This cannot be undone.", id="message")
            with Horizontal(id="buttons"):
                yield Button("Delete", id="confirm", variant="error")
                yield Button("Cancel", id="cancel")

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "confirm":
            await self.app.delete_card(self.card)
            self.dismiss(True)
        else:
            self.dismiss(False)


class CardDetailModal(ModalScreen[None]):
    """Full card view: checklist, status and the card menu."""

    DEFAULT_CSS = """
    CardDetailModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #detail-container {
        width: 70%;
        height: 80%;
        background: $surface;
        padding: 0 1;
    }
    #detail-title-bar {
        width: 100%;
        height: 1;
        background: $primary;
    }
    #detail-title {
        width: 1fr;
        text-style: bold;
    }
    #subtask-summary, #status-label {
        margin-top: 1;
        color: $text-muted;
    }
    #subtask-list {
        height: auto;
        max-height: 60%;
    }
    """

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, card: DocCard) -> None:
        super().__init__()
        self.card = card

    def compose(self) -> ComposeResult:
        document = self.app.document
        column = document.column_of(self.card)
        with Vertical(id="detail-container"):
            with Horizontal(id="detail-title-bar"):
                yield PlainStatic(self.card.title, id="detail-title")
                yield CardMenuButton(id="card-menu")
            yield PlainStatic(subtask_summary(self.card), id="subtask-summary")
            with VerticalScroll(id="subtask-list"):
                for subtask in self.card.subtasks:
                    yield SubtaskRow(subtask)
            yield PlainStatic("Current Status", id="status-label")
            yield StatusSelect(
                column.name if column else "",
                [c.name for c in document.columns],
                id="status",
            )

    def on_mount(self) -> None:
        self.call_after_refresh(self._focus_first)

    def _focus_first(self) -> None:
        rows = list(self.query(SubtaskRow))
        if rows:
            rows[0].focus()

    async def on_subtask_row_toggled(self, event: SubtaskRow.Toggled) -> None:
        event.stop()
        self.query_one("#subtask-summary", PlainStatic).update(subtask_summary(self.card))
        await self.app.refresh_board()

    async def on_status_select_changed(self, event: StatusSelect.Changed) -> None:
        event.stop()
        await self.app.move_card(self.card, event.column)
        event.select.set_current(event.column)

    def on_card_menu_button_chosen(self, event: CardMenuButton.Chosen) -> None:
        event.stop()
        match event.item_id:
            case "edit":
                self.app.push_screen(EditCardModal(self.card), self._on_dialog_closed)
            case "delete":
                self.app.push_screen(ConfirmDeleteModal(self.card), self._on_dialog_closed)

    def _on_dialog_closed(self, done: bool | None) -> None:
        if done:
            self.dismiss()

    def on_click(self, event: Click) -> None:
        """Dismiss when clicking outside the detail container."""
        container = self.query_one("#detail-container")
        if not container.region.contains(event.screen_x, event.screen_y):
            self.dismiss()

    def action_close(self) -> None:
        self.dismiss()
