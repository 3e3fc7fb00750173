"""Scrollable card list with an empty state."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QScrollArea, QVBoxLayout, QWidget

from notas.domain.models import NoteItem, TaskItem
from notas.ui.home.constants import CARD_SPACING, LIST_BOTTOM_PADDING
from notas.ui.home.entry_cards import EntryCard


class EntryListWidget(QWidget):
    def __init__(self, empty_text: str, parent=None):
        super().__init__(parent)
        self._cards: dict[int, EntryCard] = {}
        self._order: list[int] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)

        self.card_container = QWidget()
        self.card_layout = QVBoxLayout(self.card_container)
        # Bottom padding keeps the last card clear of the floating add button.
        self.card_layout.setContentsMargins(0, 0, 0, LIST_BOTTOM_PADDING)
        self.card_layout.setSpacing(CARD_SPACING)
        self.card_layout.addStretch()

        self.scroll_area.setWidget(self.card_container)
        layout.addWidget(self.scroll_area)

        self.empty_label = QLabel(empty_text)
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.card_layout.insertWidget(0, self.empty_label)

    def show_entries(
        self,
        entries: Sequence[NoteItem | TaskItem],
        build_card: Callable[[NoteItem | TaskItem], EntryCard],
    ):
        self._clear_all()
        for entry in entries:
            card = build_card(entry)
            idx = self.card_layout.count() - 1
            self.card_layout.insertWidget(idx, card)
            self._cards[entry.id] = card
            self._order.append(entry.id)
        self._update_empty_state()

    def entry_ids(self) -> list[int]:
        return list(self._order)

    def card(self, entry_id: int) -> EntryCard | None:
        return self._cards.get(entry_id)

    def is_empty(self) -> bool:
        return not self._order

    def _clear_all(self):
        for card in self._cards.values():
            self.card_layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()
        self._order.clear()

    def _update_empty_state(self):
        self.empty_label.setVisible(self.is_empty())
