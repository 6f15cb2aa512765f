"""Parse rendered board text into structured values."""

import re

from kanbanprobe.errors import ParseFailure
from kanbanprobe.models import Parsed, SubtaskInfo, Unparsable

# ASCII digits only: no locale digits, no grouping separators
_NON_DIGITS = re.compile(r"[^0-9]+")


def parse_subtasks(label: str) -> SubtaskInfo:
    """Parse a progress label such as ``"2 of 5 subtasks"``.

    The first two numeric tokens are taken as completed and total; all
    other text is discarded. Labels with fewer than two numbers give
    ``Unparsable`` instead of raising.
    """
    raw = label.strip()
    numbers = [token for token in _NON_DIGITS.split(raw) if token]
    if len(numbers) < 2:
        return Unparsable(raw=raw)
    return Parsed(completed=int(numbers[0]), total=int(numbers[1]), raw=raw)


def require_counts(info: SubtaskInfo, card: str | None = None) -> Parsed:
    """Return info if it parsed, otherwise raise ParseFailure."""
    if isinstance(info, Parsed):
        return info
    raise ParseFailure(info.raw, card)


def column_name(header: str) -> str:
    """Strip a trailing count badge from a column header: ``"Todo (3)"`` -> ``"Todo"``."""
    return header.split("(", 1)[0].strip()
