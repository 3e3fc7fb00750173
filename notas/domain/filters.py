"""Free-text search over notes and tasks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from notas.domain.models import NoteItem, TaskItem

Entry = TypeVar("Entry", NoteItem, TaskItem)


def matches_query(entry: NoteItem | TaskItem, query: str) -> bool:
    """Return True when the entry should stay visible for ``query``.

    Blank queries match everything. Otherwise the stripped query must appear
    in the title or the description, ignoring case.
    """
    needle = query.strip().casefold()
    if not needle:
        return True
    return needle in entry.title.casefold() or needle in entry.description.casefold()


def filter_entries(entries: Iterable[Entry], query: str) -> list[Entry]:
    return [entry for entry in entries if matches_query(entry, query)]
