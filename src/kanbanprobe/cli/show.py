"""Run a board document interactively."""

from kanbanprobe.cli._common import load_document_or_die
from kanbanprobe.ui.app import KanbanApp


def show_board(path: str) -> int:
    document = load_document_or_die(path, json_mode=False)
    KanbanApp(document).run()
    return 0
