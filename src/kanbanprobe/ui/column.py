"""Column widget for the board UI."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Rule

from kanbanprobe.document import DocColumn
from kanbanprobe.ui.card import CardWidget
from kanbanprobe.ui.static import PlainStatic


def column_header(column: DocColumn) -> str:
    """Header text with a count badge, e.g. ``"Todo (3)"``."""
    return f"{column.name} ({len(column.cards)})"


class ColumnWidget(Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > #column-header {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    def __init__(self, column: DocColumn) -> None:
        super().__init__()
        self.column = column

    def compose(self) -> ComposeResult:
        yield PlainStatic(column_header(self.column), id="column-header")
        yield Rule()
        for card in self.column.cards:
            yield CardWidget(card)

    def on_key(self, event) -> None:
        """Up/down moves focus between cards, left/right between columns."""
        if event.key not in ("up", "down", "left", "right"):
            return
        focused = self.screen.focused
        cards = list(self.query(CardWidget))
        if focused not in cards:
            return

        idx = cards.index(focused)
        if event.key == "up" and idx > 0:
            cards[idx - 1].focus()
        elif event.key == "down" and idx < len(cards) - 1:
            cards[idx + 1].focus()
        elif event.key in ("left", "right"):
            siblings = [c for c in self.parent.children if isinstance(c, ColumnWidget)]
            new_idx = siblings.index(self) + (-1 if event.key == "left" else 1)
            if 0 <= new_idx < len(siblings):
                target = list(siblings[new_idx].query(CardWidget))
                if target:
                    target[min(idx, len(target) - 1)].focus()

        event.prevent_default()
        event.stop()
