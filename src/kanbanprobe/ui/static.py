"""Static widget variants."""

from textual.widgets import Static


class PlainStatic(Static):
    """Static that shows text verbatim and doesn't allow text selection."""

    ALLOW_SELECT = False

    def __init__(self, content="", **kwargs) -> None:
        kwargs.setdefault("markup", False)
        super().__init__(content, **kwargs)


def static_text(widget: Static) -> str:
    """Plain text currently shown by a Static."""
    return str(widget.content)
