"""Snapshot, partition and verify kanban boards rendered by an application."""

from kanbanprobe.checks import (
    card_absent,
    card_in_column,
    card_not_in_column,
    column_card_count,
    expect,
    subtasks_info,
    subtasks_struck_through,
)
from kanbanprobe.errors import (
    DuplicateCardName,
    EmptyBoard,
    NotFound,
    ParseFailure,
    PreconditionViolation,
    ProbeError,
    ReconciliationFailure,
)
from kanbanprobe.models import Board, Card, ColumnInfo, Parsed, SplitBoard, SubtaskInfo, Unparsable
from kanbanprobe.parser import column_name, parse_subtasks, require_counts
from kanbanprobe.partition import split_by_completion
from kanbanprobe.query import find_card, first_column_name, first_non_empty_column
from kanbanprobe.snapshot import build_board
from kanbanprobe.surface import Action, CardEntry, ColumnEntry, RenderingSurface, SubtaskMark

__all__ = [
    "Action",
    "Board",
    "Card",
    "CardEntry",
    "ColumnEntry",
    "ColumnInfo",
    "DuplicateCardName",
    "EmptyBoard",
    "NotFound",
    "ParseFailure",
    "Parsed",
    "PreconditionViolation",
    "ProbeError",
    "ReconciliationFailure",
    "RenderingSurface",
    "SplitBoard",
    "SubtaskInfo",
    "SubtaskMark",
    "Unparsable",
    "build_board",
    "card_absent",
    "card_in_column",
    "card_not_in_column",
    "column_card_count",
    "column_name",
    "expect",
    "find_card",
    "first_column_name",
    "first_non_empty_column",
    "parse_subtasks",
    "require_counts",
    "split_by_completion",
    "subtasks_info",
    "subtasks_struck_through",
]
