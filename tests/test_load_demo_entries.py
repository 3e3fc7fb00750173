import dataclasses
from datetime import datetime, timedelta

import pytest

from notas.application.usecases.load_demo_entries import LoadDemoEntriesUseCase
from notas.domain.models import TaskState

from .conftest import FIXED_NOW


def test_notes_are_relative_to_clock(clock):
    entries = LoadDemoEntriesUseCase(clock).execute()

    assert [note.id for note in entries.notes] == [1, 2, 3, 4]
    assert [note.created_at for note in entries.notes] == [
        datetime(2022, 6, 14, 5, 2),
        datetime(2022, 6, 15, 6, 12),
        datetime(2022, 6, 16, 23, 59),
        datetime(2022, 6, 15, 11, 59),
    ]


def test_tasks_carry_supplied_states(clock):
    entries = LoadDemoEntriesUseCase(clock).execute()

    assert [task.state for task in entries.tasks] == [
        TaskState.DONE,
        TaskState.OVERDUE,
        TaskState.PENDING,
        TaskState.PENDING,
    ]
    assert entries.tasks[0].due_at == FIXED_NOW - timedelta(days=1)
    assert entries.tasks[1].due_at == FIXED_NOW - timedelta(hours=3)
    assert entries.tasks[3].due_at == datetime(2022, 6, 18, 23, 59)


def test_entries_are_immutable(clock):
    entries = LoadDemoEntriesUseCase(clock).execute()

    assert isinstance(entries.notes, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entries.notes[0].title = "changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        entries.tasks[0].state = TaskState.PENDING


def test_each_execute_builds_fresh_entries():
    moments = iter([datetime(2022, 6, 15, 8, 0), datetime(2022, 6, 20, 8, 0)])
    use_case = LoadDemoEntriesUseCase(lambda: next(moments))

    first = use_case.execute()
    second = use_case.execute()

    assert first.notes[1].created_at.date() != second.notes[1].created_at.date()
