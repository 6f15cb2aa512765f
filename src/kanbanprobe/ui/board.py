"""Board screen showing columns and cards."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from kanbanprobe.document import BoardDocument
from kanbanprobe.ui.column import ColumnWidget
from kanbanprobe.ui.static import PlainStatic


class BoardScreen(Screen):
    """Main board screen. Rebuilt from the document after every change."""

    DEFAULT_CSS = """
    BoardScreen #board-title {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $primary;
        text-style: bold;
    }
    BoardScreen #columns {
        height: 1fr;
        overflow-x: auto;
    }
    """

    def __init__(self, document: BoardDocument) -> None:
        super().__init__()
        self.document = document

    def compose(self) -> ComposeResult:
        yield PlainStatic(self.document.title, id="board-title")
        with Horizontal(id="columns"):
            for column in self.document.columns:
                yield ColumnWidget(column)
        yield Footer()

    def on_mount(self) -> None:
        self.call_after_refresh(self._focus_first_card)

    def _focus_first_card(self) -> None:
        for col in self.query(ColumnWidget):
            focusable = [c for c in col.children if c.can_focus]
            if focusable:
                focusable[0].focus()
                return

    async def refresh_board(self) -> None:
        """Re-render every column from the document."""
        await self.recompose()
