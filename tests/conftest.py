"""Shared fixtures: an in-memory rendering surface and sample board documents."""

import pytest

from kanbanprobe.errors import NotFound
from kanbanprobe.surface import CardEntry, ColumnEntry, SubtaskMark

SAMPLE_BOARD = """\
---
title: Launch Plan
---
# Launch Plan

## Todo

### Write brief
- [ ] Collect notes
- [ ] Draft

## Doing

### Build landing page
- [x] Wireframe
- [ ] Copy
- [ ] Deploy

### Record demo
- [x] Script
- [x] Record

## Done

### Pick name
- [x] Shortlist
"""


class FakeSurface:
    """RenderingSurface over plain lists, recording every call."""

    def __init__(self, columns, marks=None, labels=None):
        # columns: list of (header, [(title, subtask_label), ...])
        self.columns = columns
        self.marks = marks or []
        self.labels = labels or {}
        self.calls = []

    async def list_columns(self):
        self.calls.append(("list_columns",))
        return [ColumnEntry(header, len(cards)) for header, cards in self.columns]

    async def list_cards(self, column_index):
        self.calls.append(("list_cards", column_index))
        if not 0 <= column_index < len(self.columns):
            raise NotFound("column", column_index)
        return [CardEntry(title, label) for title, label in self.columns[column_index][1]]

    async def find_card(self, name):
        self.calls.append(("find_card", name))
        for _, cards in self.columns:
            for title, _ in cards:
                if title.strip() == name:
                    return title
        return None

    async def read_subtask_label(self, card_name):
        self.calls.append(("read_subtask_label", card_name))
        if card_name in self.labels:
            return self.labels[card_name]
        raise NotFound("card", card_name)

    async def list_subtask_marks(self):
        self.calls.append(("list_subtask_marks",))
        return [SubtaskMark(*mark) for mark in self.marks]

    async def command(self, action, target=None):
        self.calls.append(("command", action, target))


@pytest.fixture
def fake_surface():
    """A surface with a head column, a mixed column and a done column."""
    return FakeSurface(
        [
            ("Todo (1)", [("Write brief", "0 of 2 subtasks")]),
            (
                "Doing (2)",
                [("Build landing page", "1 of 3 subtasks"), ("Record demo", "2 of 2 subtasks")],
            ),
            ("Done (1)", [("Pick name", "1 of 1 subtasks")]),
        ]
    )


@pytest.fixture
def make_surface():
    """Factory for FakeSurface instances."""
    return FakeSurface


@pytest.fixture
def sample_text():
    return SAMPLE_BOARD


@pytest.fixture
def board_file(tmp_path):
    """The sample board written to disk."""
    path = tmp_path / "board.md"
    path.write_text(SAMPLE_BOARD)
    return path
