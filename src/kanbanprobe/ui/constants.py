"""Icons used by the board widgets."""

ICON_CHECKED = "☑"
ICON_UNCHECKED = "☐"
ICON_MENU = "⋮"
ICON_DROPDOWN = "▾"
ICON_EDIT = "✎"
ICON_DELETE = "🗑"
