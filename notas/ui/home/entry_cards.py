"""Note and task cards rendered in the home screen lists."""

from __future__ import annotations

from datetime import datetime

from PyQt6.QtCore import QLocale, Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from notas.domain.models import NoteItem, TaskItem, TaskState
from notas.ui.date_labels import note_date_lines, task_due_lines
from notas.ui.home.constants import CARD_PADDING, DESCRIPTION_MAX_LINES, DONE_TEXT, OVERDUE_TEXT


class ElidedLabel(QLabel):
    """Single-line label that elides its text to the available width."""

    def __init__(self, text: str = "", parent=None):
        super().__init__(parent)
        self._full_text = ""
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
        self.setText(text)

    def full_text(self) -> str:
        return self._full_text

    def setText(self, text: str):
        self._full_text = text
        self.setToolTip(text)
        self._elide()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._elide()

    def _elide(self):
        width = self.width()
        if width <= 0:
            super().setText(self._full_text)
            return
        elided = self.fontMetrics().elidedText(self._full_text, Qt.TextElideMode.ElideRight, width)
        super().setText(elided)


class EntryCard(QFrame):
    """Shared layout: title and description on the left, a side column on the right."""

    def __init__(self, entry_id: int, title: str, description: str, parent=None):
        super().__init__(parent)
        self.entry_id = entry_id

        self.setObjectName("entryCard")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(CARD_PADDING, CARD_PADDING, CARD_PADDING, CARD_PADDING)
        layout.setSpacing(12)

        text_container = QWidget()
        text_layout = QVBoxLayout(text_container)
        text_layout.setContentsMargins(0, 0, 0, 0)
        text_layout.setSpacing(4)

        self.title_label = ElidedLabel(title)
        self.title_label.setObjectName("entryTitle")
        text_layout.addWidget(self.title_label)

        self.description_label = QLabel(description)
        self.description_label.setObjectName("entryDescription")
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        line_height = self.description_label.fontMetrics().lineSpacing()
        self.description_label.setMaximumHeight(line_height * DESCRIPTION_MAX_LINES)
        text_layout.addWidget(self.description_label)
        text_layout.addStretch()

        layout.addWidget(text_container, 1)

        side_container = QWidget()
        self._side_layout = QVBoxLayout(side_container)
        self._side_layout.setContentsMargins(0, 0, 0, 0)
        self._side_layout.setSpacing(0)
        self._side_layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignRight)
        self.side_labels: list[QLabel] = []
        layout.addWidget(side_container, 0, Qt.AlignmentFlag.AlignTop)

    def _add_side_label(self, text: str, object_name: str = "sideLine") -> QLabel:
        label = QLabel(text)
        label.setObjectName(object_name)
        label.setAlignment(Qt.AlignmentFlag.AlignRight)
        self._side_layout.addWidget(label)
        self.side_labels.append(label)
        return label

    def side_texts(self) -> list[str]:
        return [label.text() for label in self.side_labels]


class NoteCard(EntryCard):
    def __init__(self, note: NoteItem, locale: QLocale | None = None, parent=None):
        super().__init__(note.id, note.title, note.description, parent)
        self.note = note
        for line in note_date_lines(note.created_at, locale):
            self._add_side_label(line)


class TaskCard(EntryCard):
    """Task card; pending tasks show their due label, others only their state."""

    def __init__(self, task: TaskItem, now: datetime, locale: QLocale | None = None, parent=None):
        super().__init__(task.id, task.title, task.description, parent)
        self.task = task

        if task.state == TaskState.DONE:
            self._add_side_label(DONE_TEXT, "taskStatusDone")
        elif task.state == TaskState.OVERDUE:
            self._add_side_label(OVERDUE_TEXT, "taskStatusOverdue")
        else:
            for line in task_due_lines(task.due_at, now, locale):
                self._add_side_label(line)
