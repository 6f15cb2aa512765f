"""Markdown board documents that seed the bundled board.

A document looks like::

    ---
    title: Launch
    ---
    # Launch

    ## Todo

    ### Write copy
    - [x] Outline
    - [ ] Draft

    ## Doing

Each ``##`` heading is a column, each ``###`` heading below it a card, and
the first bullet list in a card body is its checklist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from markdown_it import MarkdownIt

# Matches: "- [ ] task text" or "- [x] task text" (also *, +)
_TASK_RE = re.compile(r"^[\-\*\+]\s+\[([ xX])\]\s*(.*)")


@dataclass
class DocSubtask:
    """A checklist entry on a card."""

    text: str
    done: bool = False


@dataclass
class DocCard:
    """A card in a board document."""

    title: str
    subtasks: list[DocSubtask] = field(default_factory=list)

    @property
    def done_count(self) -> int:
        return sum(1 for s in self.subtasks if s.done)

    def subtask_label(self) -> str:
        """Progress text as shown on the card face."""
        return f"{self.done_count} of {len(self.subtasks)} subtasks"


@dataclass
class DocColumn:
    """A column in a board document."""

    name: str
    cards: list[DocCard] = field(default_factory=list)


@dataclass
class BoardDocument:
    """Mutable board state rendered by the bundled app."""

    title: str = ""
    columns: list[DocColumn] = field(default_factory=list)
    meta: dict = field(default_factory=dict)

    def column(self, name: str) -> DocColumn | None:
        return next((c for c in self.columns if c.name == name), None)

    def column_of(self, card: DocCard) -> DocColumn | None:
        """Find the column holding this card object."""
        return next((c for c in self.columns if any(x is card for x in c.cards)), None)

    def find_card(self, title: str) -> DocCard | None:
        """First card with this title, in board order.

        Public helper for code holding a document, such as setup scripts
        and tests; the app itself tracks card objects, not titles.
        """
        for col in self.columns:
            for card in col.cards:
                if card.title == title:
                    return card
        return None

    def move_card(self, card: DocCard, column_name: str) -> None:
        """Move a card to the end of the named column."""
        target = self.column(column_name)
        if target is None:
            raise KeyError(column_name)
        source = self.column_of(card)
        if source is not None:
            source.cards[:] = [c for c in source.cards if c is not card]
        target.cards.append(card)

    def delete_card(self, card: DocCard) -> None:
        source = self.column_of(card)
        if source is not None:
            source.cards[:] = [c for c in source.cards if c is not card]


def _extract_front_matter(text: str) -> tuple[str, dict]:
    """Extract YAML front-matter from text. Returns (remaining_text, meta)."""
    if not text.startswith("---"):
        return text, {}

    match = re.match(r"^---\n(.*?)\n---\n?", text, re.DOTALL)
    if not match:
        return text, {}

    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        meta = {}

    return text[match.end() :], meta if isinstance(meta, dict) else {}


def parse_checklist(body: str) -> list[DocSubtask]:
    """Read the checklist items of the first bullet list in a card body.

    Bullets without a ``[ ]`` / ``[x]`` box are skipped.
    """
    md = MarkdownIt("commonmark")
    tokens = md.parse(body)
    lines = body.split("\n")

    subtasks: list[DocSubtask] = []
    depth = 0
    for token in tokens:
        if token.type == "bullet_list_open":
            depth += 1
        elif token.type == "bullet_list_close":
            depth -= 1
            if depth == 0:
                break
        elif token.type == "list_item_open" and depth == 1 and token.map:
            # only the item's first line; nested lists are not subtasks
            match = _TASK_RE.match(lines[token.map[0]].strip())
            if match:
                subtasks.append(DocSubtask(text=match.group(2).strip(), done=match.group(1) in "xX"))
    return subtasks


def parse_document(text: str) -> BoardDocument:
    """Parse a markdown board document."""
    text, meta = _extract_front_matter(text)
    doc = BoardDocument(meta=meta)

    card: DocCard | None = None
    body: list[str] = []
    in_code_fence = False

    def flush() -> None:
        nonlocal card
        if card is not None:
            card.subtasks = parse_checklist("\n".join(body))
            doc.columns[-1].cards.append(card)
        card = None
        body.clear()

    for line in text.split("\n"):
        if line.startswith("```"):
            in_code_fence = not in_code_fence
        if not in_code_fence:
            if line.startswith("# "):
                flush()
                doc.title = line[2:].strip()
                continue
            if line.startswith("## "):
                flush()
                doc.columns.append(DocColumn(line[3:].strip()))
                continue
            if line.startswith("### "):
                flush()
                if not doc.columns:
                    raise ValueError(f"card {line[4:].strip()!r} appears before any column")
                card = DocCard(line[4:].strip())
                continue
        if card is not None:
            body.append(line)
    flush()

    if meta.get("title"):
        doc.title = str(meta["title"])
    return doc


def load_document(path: str | Path) -> BoardDocument:
    """Load a board document from a markdown file."""
    return parse_document(Path(path).read_text(encoding="utf-8"))
