"""Run-time options for the home screen."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import QLocale

from notas.domain.errors import InvalidTabError
from notas.ui.home.constants import TAB_NOTES, TAB_TITLES


def validate_tab(index: int) -> int:
    if index not in TAB_TITLES:
        raise InvalidTabError(index)
    return index


@dataclass(slots=True)
class HomeScreenOptions:
    initial_tab: int = TAB_NOTES
    # None keeps the application's default locale.
    locale: QLocale | None = None

    def __post_init__(self):
        validate_tab(self.initial_tab)
