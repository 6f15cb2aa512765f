"""Main Textual application for the bundled board."""

from textual.app import App

from kanbanprobe.document import BoardDocument, DocCard
from kanbanprobe.ui.board import BoardScreen


class KanbanApp(App):
    """Kanban board rendered from a board document."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "kanbanprobe"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, document: BoardDocument):
        super().__init__()
        self.document = document
        self.board_screen: BoardScreen | None = None

    def on_mount(self) -> None:
        self.board_screen = BoardScreen(self.document)
        self.push_screen(self.board_screen)

    async def refresh_board(self) -> None:
        if self.board_screen is not None:
            await self.board_screen.refresh_board()

    async def move_card(self, card: DocCard, column: str) -> None:
        self.document.move_card(card, column)
        await self.refresh_board()

    async def rename_card(self, card: DocCard, title: str) -> None:
        card.title = title
        await self.refresh_board()

    async def delete_card(self, card: DocCard) -> None:
        self.document.delete_card(card)
        await self.refresh_board()
