from datetime import datetime

import pytest

from notas.domain.filters import filter_entries, matches_query
from notas.domain.models import NoteItem, TaskItem, TaskState

NOTE = NoteItem(1, "Shopping list", "Milk, eggs and Bread", datetime(2022, 9, 30, 5, 2))
TASK = TaskItem(7, "Call the plumber", "Kitchen sink leaks", datetime(2022, 6, 16, 9, 0), TaskState.PENDING)


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
@pytest.mark.parametrize("entry", [NOTE, TASK])
def test_blank_query_matches_everything(entry, query):
    assert matches_query(entry, query)


@pytest.mark.parametrize("query", ["shopping", "SHOPPING", "ping li", "  list  "])
def test_title_substring_matches_any_case(query):
    assert matches_query(NOTE, query)


@pytest.mark.parametrize("query", ["bread", "MILK, EGGS", "sink"])
def test_description_substring_matches(query):
    entry = NOTE if query != "sink" else TASK
    assert matches_query(entry, query)


@pytest.mark.parametrize("query", ["butter", "plumber!", "[.*]"])
def test_unrelated_query_does_not_match(query):
    assert not matches_query(NOTE, query)


def test_special_characters_are_literal():
    note = NoteItem(2, "Regex (draft)", "uses .* and [a-z]", datetime(2022, 1, 1))
    assert matches_query(note, "(draft)")
    assert matches_query(note, ".*")
    assert not matches_query(note, "d.a")


def test_task_state_does_not_affect_matching():
    done = TaskItem(8, "Call the plumber", "", datetime(2022, 6, 1), TaskState.DONE)
    assert matches_query(done, "plumber")


def test_filter_entries_returns_new_list_and_keeps_source():
    notes = (
        NoteItem(1, "Note 1", "first", datetime(2022, 1, 1)),
        NoteItem(2, "Note 2", "second", datetime(2022, 1, 2)),
        NoteItem(3, "Other", "third note", datetime(2022, 1, 3)),
    )

    result = filter_entries(notes, "note")

    assert [note.id for note in result] == [1, 2, 3]
    assert isinstance(result, list)
    assert len(notes) == 3

    narrowed = filter_entries(notes, "second")
    assert [note.id for note in narrowed] == [2]


def test_filter_entries_is_idempotent():
    tasks = [
        TaskItem(1, "Task 1", "alpha", datetime(2022, 1, 1)),
        TaskItem(2, "Task 2", "beta", datetime(2022, 1, 2)),
        TaskItem(3, "Chore", "alpha beta", datetime(2022, 1, 3)),
    ]

    once = filter_entries(tasks, "alpha")
    twice = filter_entries(once, "alpha")

    assert once == twice
    assert [task.id for task in once] == [1, 3]
