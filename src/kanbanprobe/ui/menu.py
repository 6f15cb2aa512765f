"""Pop-up menus used by the card detail view."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static


class MenuItem(Static):
    """One choice in a menu, identified by ``item_id``."""

    DEFAULT_CSS = """
    MenuItem {
        width: 100%;
        padding: 0 1;
    }
    MenuItem:hover, MenuItem.-chosen {
        background: $primary-darken-1;
    }
    """

    class Selected(Message):
        """The item was chosen by click or enter."""

        def __init__(self, item: MenuItem) -> None:
            super().__init__()
            self.item = item

        @property
        def control(self) -> MenuItem:
            return self.item

    def __init__(self, label: str, item_id: str) -> None:
        super().__init__(label, markup=False)
        self.label = label
        self.item_id = item_id

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Selected(self))


class MenuList(VerticalScroll):
    """Menu body; up/down move the choice, enter picks."""

    DEFAULT_CSS = """
    MenuList {
        height: auto;
        max-height: 80%;
        background: $surface;
        border: round $primary;
        display: none;
    }
    MenuList.-placed {
        display: block;
    }
    """

    BINDINGS = [
        ("up", "move(-1)", "Up"),
        ("down", "move(1)", "Down"),
        ("enter", "pick", "Select"),
    ]

    choice: reactive[int] = reactive(0)

    def __init__(self, items: list[MenuItem]) -> None:
        super().__init__()
        self.items = items

    def compose(self) -> ComposeResult:
        yield from self.items

    def on_mount(self) -> None:
        self.styles.width = max((len(i.label) for i in self.items), default=0) + 4
        self.watch_choice(self.choice)

    def watch_choice(self, choice: int) -> None:
        for index, item in enumerate(self.items):
            item.set_class(index == choice, "-chosen")

    def action_move(self, step: int) -> None:
        if self.items:
            self.choice = max(0, min(len(self.items) - 1, self.choice + step))

    def action_pick(self) -> None:
        if self.items:
            item = self.items[self.choice]
            item.post_message(MenuItem.Selected(item))


class ContextMenu(ModalScreen[MenuItem | None]):
    """Menu opened near a point; dismisses with the picked item or None."""

    DEFAULT_CSS = """
    ContextMenu {
        background: transparent;
    }
    """

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, items: list[MenuItem], x: int, y: int) -> None:
        super().__init__()
        self.items = items
        self._point = (x, y)

    def compose(self) -> ComposeResult:
        yield MenuList(self.items)

    def on_mount(self) -> None:
        menu = self.query_one(MenuList)
        menu.focus()
        self.call_after_refresh(self._place, menu)

    def _place(self, menu: MenuList) -> None:
        # keep the whole menu on screen
        x = max(0, min(self._point[0], self.app.size.width - menu.outer_size.width))
        y = max(0, min(self._point[1], self.app.size.height - menu.outer_size.height))
        menu.styles.offset = (x, y)
        menu.add_class("-placed")

    def on_menu_item_selected(self, event: MenuItem.Selected) -> None:
        event.stop()
        self.dismiss(event.item)

    def on_click(self, event: Click) -> None:
        if not self.query_one(MenuList).region.contains(event.screen_x, event.screen_y):
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
