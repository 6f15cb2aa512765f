"""Shared helpers for CLI command handlers."""

import asyncio
import json
import logging
import sys
from pathlib import Path

from kanbanprobe.document import BoardDocument, load_document
from kanbanprobe.models import Board, Card
from kanbanprobe.snapshot import build_board
from kanbanprobe.ui.surface import open_surface


def configure_logging(verbose: bool) -> None:
    """Log scenario steps to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            stream=sys.stderr,
            level=logging.INFO,
        )


def load_document_or_die(path: str, json_mode: bool) -> BoardDocument:
    """Load a board document. Exit 1 with message if it can't be read."""
    try:
        return load_document(Path(path))
    except (OSError, ValueError) as e:
        error(str(e), json_mode)


def read_board(document: BoardDocument) -> Board:
    """Render a document headless and snapshot it."""

    async def _read() -> Board:
        async with open_surface(document) as surface:
            return await build_board(surface)

    return asyncio.run(_read())


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def format_card_line(card: Card, indent: str = "    ") -> str:
    """Format a card as a text line: name and progress."""
    info = card.subtasks
    progress = f"{info.completed} of {info.total}" if info.ok else f"unparsable: {info.raw!r}"
    return f"{indent}{card.name:<32} {progress}"


def format_board(board: Board, indent: str = "  ") -> list[str]:
    """Format a board as text lines, one header per column."""
    lines = []
    for column, cards in board.items():
        noun = "card" if len(cards) == 1 else "cards"
        lines.append(f"{indent}{column} ({len(cards)} {noun})")
        lines.extend(format_card_line(card, indent * 2) for card in cards)
    return lines
