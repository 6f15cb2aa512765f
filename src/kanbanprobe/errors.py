"""Exceptions raised by kanbanprobe."""


class ProbeError(Exception):
    """Base class for every failure surfaced to a scenario."""


class NotFound(ProbeError):
    """An expected column, card or widget is absent."""

    def __init__(self, what: str, name: str | int | None = None) -> None:
        self.what = what
        self.name = name
        message = f"{what} not found" if name is None else f"{what} not found: {name!r}"
        super().__init__(message)


class ParseFailure(ProbeError):
    """A subtask label did not contain two numeric tokens."""

    def __init__(self, raw: str, card: str | None = None) -> None:
        self.raw = raw
        self.card = card
        where = f" on card {card!r}" if card else ""
        super().__init__(f"unparsable subtask label{where}: {raw!r}")


class PreconditionViolation(ProbeError):
    """A scenario setup assumption does not hold."""


class EmptyBoard(PreconditionViolation):
    """The board has no columns."""

    def __init__(self) -> None:
        super().__init__("empty board")


class DuplicateCardName(PreconditionViolation):
    """A card name occurs more than once, so lookup by name is ambiguous."""

    def __init__(self, name: str, columns: list[str]) -> None:
        self.name = name
        self.columns = columns
        super().__init__(f"card name {name!r} is not unique (found in {', '.join(columns)})")


class ReconciliationFailure(ProbeError):
    """A post-action check did not hold."""
