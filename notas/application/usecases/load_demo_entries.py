from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from notas.domain.models import NoteItem, TaskItem, TaskState


@dataclass(frozen=True, slots=True)
class DemoEntries:
    notes: tuple[NoteItem, ...]
    tasks: tuple[TaskItem, ...]


def _at(value: datetime, hour: int, minute: int) -> datetime:
    return value.replace(hour=hour, minute=minute, second=0, microsecond=0)


class LoadDemoEntriesUseCase:
    """Builds the in-memory sample notes and tasks shown on the home screen."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def execute(self) -> DemoEntries:
        now = self.clock()
        yesterday = now - timedelta(days=1)
        tomorrow = now + timedelta(days=1)

        notes = (
            NoteItem(1, "Note 1", "Description of note 1", _at(yesterday, 5, 2)),
            NoteItem(2, "Note 2", "Description of note 2", _at(now, 6, 12)),
            NoteItem(3, "Note 3", "Description of note 3", _at(tomorrow, 23, 59)),
            NoteItem(4, "Note 4", "Description of note 4", _at(now, 11, 59)),
        )
        tasks = (
            TaskItem(1, "Task 1", "Description of task 1", yesterday, TaskState.DONE),
            TaskItem(2, "Task 2", "Description of task 2", now - timedelta(hours=3), TaskState.OVERDUE),
            TaskItem(3, "Task 3", "Description of task 3", _at(tomorrow, 23, 59), TaskState.PENDING),
            TaskItem(
                4,
                "Task 4",
                "Description of task 4",
                _at(now + timedelta(days=3), 23, 59),
                TaskState.PENDING,
            ),
        )
        return DemoEntries(notes=notes, tasks=tasks)
