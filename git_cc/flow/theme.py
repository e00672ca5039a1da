"""Presentation constants for the commit wizard.

Rich style strings and glyphs shared by the view and the terminal host.
"""

TITLE_STYLE = "bold color(170)"
PROMPT_STYLE = "color(212)"
ERROR_STYLE = "bold color(196)"
SELECTED_STYLE = "color(205)"
MUTED_STYLE = "dim"

POINTER = "❯ "
CURSOR = "█"

# Width of the tag column on the type list
TAG_COLUMN_WIDTH = 10

SCOPE_PLACEHOLDER = "scope (optional)"
MESSAGE_PLACEHOLDER = "commit message"
TYPE_SELECT_HELP = "↑/↓ navigate • type to filter • enter select • esc quit"
INPUT_HELP = "enter confirm • ctrl+u clear • esc quit"
