"""Card widget for the board UI."""

from textual.app import ComposeResult
from textual.widgets import Static

from kanbanprobe.document import DocCard
from kanbanprobe.ui.detail import CardDetailModal
from kanbanprobe.ui.static import PlainStatic


class CardWidget(Static, can_focus=True):
    """A single card in a column: title plus subtask progress."""

    BINDINGS = [
        ("space", "open_card"),
        ("enter", "open_card"),
    ]

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget #card-title {
        text-style: bold;
    }
    CardWidget #card-subtasks {
        color: $text-muted;
    }
    """

    def __init__(self, card: DocCard) -> None:
        super().__init__()
        self.card = card

    def compose(self) -> ComposeResult:
        yield PlainStatic(self.card.title, id="card-title")
        yield PlainStatic(self.card.subtask_label(), id="card-subtasks")

    def action_open_card(self) -> None:
        self.app.push_screen(CardDetailModal(self.card))

    def on_click(self, event) -> None:
        if event.button == 1:
            event.stop()
            self.action_open_card()
