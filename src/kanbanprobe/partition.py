"""Partition a board by subtask completion."""

from kanbanprobe.models import Board, Parsed, SplitBoard


def split_by_completion(board: Board) -> SplitBoard:
    """Split each column into completed, incomplete and unparsable cards.

    Every column of the input appears in all three results, even when
    empty. Card order within a column is kept.
    """
    completed = {}
    incomplete = {}
    unparsable = {}
    for column, cards in board.items():
        completed[column] = [c for c in cards if isinstance(c.subtasks, Parsed) and c.subtasks.is_complete]
        incomplete[column] = [c for c in cards if isinstance(c.subtasks, Parsed) and not c.subtasks.is_complete]
        unparsable[column] = [c for c in cards if not isinstance(c.subtasks, Parsed)]
    return SplitBoard(Board(completed), Board(incomplete), Board(unparsable))
