from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskState(str, Enum):
    PENDING = "pending"
    DONE = "done"
    OVERDUE = "overdue"


@dataclass(frozen=True, slots=True)
class NoteItem:
    id: int
    title: str
    description: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class TaskItem:
    id: int
    title: str
    description: str
    due_at: datetime
    # Supplied by the data source; never derived from due_at.
    state: TaskState = TaskState.PENDING
