"""Textual board used as a rendering surface."""

from kanbanprobe.ui.app import KanbanApp
from kanbanprobe.ui.surface import TextualSurface, open_surface

__all__ = [
    "KanbanApp",
    "TextualSurface",
    "open_surface",
]
