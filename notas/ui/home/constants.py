"""Constants used by the home screen."""

from __future__ import annotations

TAB_NOTES = 0
TAB_TASKS = 1
TAB_TITLES = {
    TAB_NOTES: "Notes",
    TAB_TASKS: "Tasks",
}

SEARCH_PLACEHOLDER = "Search"
EMPTY_NOTES_TEXT = "No notes"
EMPTY_TASKS_TEXT = "No tasks"
DONE_TEXT = "Done"
OVERDUE_TEXT = "Overdue"

DEFAULT_WINDOW_WIDTH = 420
DEFAULT_WINDOW_HEIGHT = 720
SCREEN_MARGIN_H = 16
SCREEN_MARGIN_V = 12
CARD_SPACING = 12
CARD_PADDING = 16
LIST_BOTTOM_PADDING = 96
DESCRIPTION_MAX_LINES = 2

FAB_SIZE = 56
FAB_MARGIN = 16
FAB_COLOR = "#99d6ff"
OVERDUE_COLOR = "#d32f2f"
