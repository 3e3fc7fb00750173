"""Main application window for Notas."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QLocale
from PyQt6.QtWidgets import QMainWindow

from notas.application.usecases.load_demo_entries import LoadDemoEntriesUseCase
from notas.styles import MAIN_STYLESHEET
from notas.ui.home import HomeScreen, HomeScreenOptions
from notas.ui.home.constants import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, TAB_TITLES

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Hosts the home screen and receives its add/sort intents."""

    def __init__(
        self,
        options: HomeScreenOptions | None = None,
        load_entries: LoadDemoEntriesUseCase | None = None,
    ):
        super().__init__()
        options = options or HomeScreenOptions()
        if options.locale is not None:
            QLocale.setDefault(options.locale)

        self.setWindowTitle("Notas")
        self.setStyleSheet(MAIN_STYLESHEET)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        use_case = load_entries or LoadDemoEntriesUseCase()
        entries = use_case.execute()
        logger.info("Loaded %d notes and %d tasks", len(entries.notes), len(entries.tasks))

        self.home_screen = HomeScreen(entries, options, clock=use_case.clock)
        self.home_screen.add_requested.connect(self._on_add_requested)
        self.home_screen.sort_requested.connect(self._on_sort_requested)
        self.setCentralWidget(self.home_screen)

    def _on_add_requested(self):
        logger.info("Add requested on %s tab", TAB_TITLES[self.home_screen.current_tab])

    def _on_sort_requested(self, tab_index: int):
        logger.info("Sort requested on %s tab", TAB_TITLES[tab_index])
