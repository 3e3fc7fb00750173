"""Home screen UI components."""

from notas.ui.home.entry_cards import NoteCard, TaskCard
from notas.ui.home.entry_list import EntryListWidget
from notas.ui.home.home_screen import HomeScreen
from notas.ui.home.options import HomeScreenOptions

__all__ = [
    "EntryListWidget",
    "HomeScreen",
    "HomeScreenOptions",
    "NoteCard",
    "TaskCard",
]
