"""Home screen: header with sort, search box, Notes/Tasks tabs and an add button."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QStackedWidget,
    QTabBar,
    QVBoxLayout,
    QWidget,
)

from notas.application.usecases.load_demo_entries import DemoEntries
from notas.domain.filters import filter_entries
from notas.ui.home.constants import (
    EMPTY_NOTES_TEXT,
    EMPTY_TASKS_TEXT,
    FAB_MARGIN,
    FAB_SIZE,
    SCREEN_MARGIN_H,
    SCREEN_MARGIN_V,
    SEARCH_PLACEHOLDER,
    TAB_NOTES,
    TAB_TASKS,
    TAB_TITLES,
)
from notas.ui.home.entry_cards import NoteCard, TaskCard
from notas.ui.home.entry_list import EntryListWidget
from notas.ui.home.icons import build_add_icon, build_search_icon, build_sort_icon
from notas.ui.home.options import HomeScreenOptions, validate_tab


class HomeScreen(QWidget):
    """Notes/Tasks list screen. Every query or tab change re-filters synchronously."""

    add_requested = pyqtSignal()
    sort_requested = pyqtSignal(int)  # tab index

    def __init__(
        self,
        entries: DemoEntries,
        options: HomeScreenOptions | None = None,
        clock: Callable[[], datetime] = datetime.now,
        parent=None,
    ):
        super().__init__(parent)
        options = options or HomeScreenOptions()
        self._entries = entries
        self._locale = options.locale
        self._clock = clock

        self.setObjectName("homeScreen")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(SCREEN_MARGIN_H, SCREEN_MARGIN_V, SCREEN_MARGIN_H, SCREEN_MARGIN_V)
        layout.setSpacing(0)

        header_row = QWidget()
        header_layout = QHBoxLayout(header_row)
        header_layout.setContentsMargins(0, 0, 0, 0)
        header_layout.setSpacing(8)

        self.header_label = QLabel()
        self.header_label.setObjectName("headerLabel")
        header_layout.addWidget(self.header_label, 1)

        self.sort_btn = QPushButton("")
        self.sort_btn.setObjectName("sortButton")
        self.sort_btn.setFixedSize(36, 36)
        self.sort_btn.setIcon(build_sort_icon())
        self.sort_btn.setIconSize(QSize(20, 20))
        self.sort_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.sort_btn.setToolTip("Sort")
        self.sort_btn.clicked.connect(self._on_sort_clicked)
        header_layout.addWidget(self.sort_btn)

        layout.addWidget(header_row)

        sep = QFrame()
        sep.setObjectName("separator")
        sep.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(sep)
        layout.addSpacing(8)

        self.search_field = QLineEdit()
        self.search_field.setObjectName("searchInput")
        self.search_field.setPlaceholderText(SEARCH_PLACEHOLDER)
        self.search_field.addAction(build_search_icon(), QLineEdit.ActionPosition.TrailingPosition)
        self.search_field.textChanged.connect(self._on_query_changed)
        layout.addWidget(self.search_field)
        layout.addSpacing(10)

        self.tab_bar = QTabBar()
        self.tab_bar.setObjectName("entryTabs")
        self.tab_bar.setExpanding(True)
        self.tab_bar.setDrawBase(False)
        for index in (TAB_NOTES, TAB_TASKS):
            self.tab_bar.addTab(TAB_TITLES[index])
        self.tab_bar.setCurrentIndex(options.initial_tab)
        self.tab_bar.currentChanged.connect(self._on_tab_changed)
        layout.addWidget(self.tab_bar)
        layout.addSpacing(8)

        self.notes_list = EntryListWidget(EMPTY_NOTES_TEXT)
        self.tasks_list = EntryListWidget(EMPTY_TASKS_TEXT)
        self.list_stack = QStackedWidget()
        self.list_stack.addWidget(self.notes_list)
        self.list_stack.addWidget(self.tasks_list)
        layout.addWidget(self.list_stack, 1)

        # Floats above the lists; positioned in resizeEvent.
        self.add_btn = QPushButton("", self)
        self.add_btn.setObjectName("addButton")
        self.add_btn.setFixedSize(FAB_SIZE, FAB_SIZE)
        self.add_btn.setIcon(build_add_icon())
        self.add_btn.setIconSize(QSize(24, 24))
        self.add_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_btn.setToolTip("Add")
        self.add_btn.clicked.connect(self.add_requested.emit)

        self._on_tab_changed(options.initial_tab)

    @property
    def current_tab(self) -> int:
        return self.tab_bar.currentIndex()

    @property
    def query(self) -> str:
        return self.search_field.text()

    def set_tab(self, index: int):
        validate_tab(index)
        self.tab_bar.setCurrentIndex(index)

    def set_query(self, text: str):
        self.search_field.setText(text)

    def visible_note_ids(self) -> list[int]:
        if self.current_tab != TAB_NOTES:
            return []
        return self.notes_list.entry_ids()

    def visible_task_ids(self) -> list[int]:
        if self.current_tab != TAB_TASKS:
            return []
        return self.tasks_list.entry_ids()

    def refresh(self):
        query = self.search_field.text()
        if self.current_tab == TAB_NOTES:
            notes = filter_entries(self._entries.notes, query)
            self.notes_list.show_entries(notes, lambda note: NoteCard(note, self._locale))
            return

        # Due labels are relative to the moment of rendering.
        now = self._clock()
        tasks = filter_entries(self._entries.tasks, query)
        self.tasks_list.show_entries(tasks, lambda task: TaskCard(task, now, self._locale))

    def _on_tab_changed(self, index: int):
        if index < 0:
            return
        self.header_label.setText(TAB_TITLES[index])
        self.list_stack.setCurrentIndex(index)
        self.refresh()

    def _on_query_changed(self, _text: str):
        self.refresh()

    def _on_sort_clicked(self):
        self.sort_requested.emit(self.current_tab)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.add_btn.move(
            self.width() - FAB_SIZE - FAB_MARGIN,
            self.height() - FAB_SIZE - FAB_MARGIN,
        )
        self.add_btn.raise_()
