# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

NO_DEADLINE = "None"
EMPTY_DESCRIPTION_MESSAGE = "Task description cannot be empty."


class TaskError(Exception):
    """Base class for task store errors."""


class TaskValidationError(TaskError, ValueError):
    """User-facing validation failure (the message is shown as-is)."""


class TaskNotFoundError(TaskError, KeyError):
    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"No task with id {self.task_id}."


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise TaskValidationError(
                f"Unknown priority: {raw!r} (expected low, medium or high)."
            ) from None


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class TaskFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    UNCOMPLETED = "uncompleted"


class SortKey(StrEnum):
    PRIORITY = "priority"
    DEADLINE = "deadline"


def parse_deadline(raw: str | date | None) -> date | None:
    """
    Decode a deadline from its wire/user form.

    Accepts:
    - None, "", "None" (any case), "none" -> no deadline
    - "YYYY-MM-DD"
    - full ISO timestamps such as "2024-11-30T00:00:00.000Z" (date part kept)

    Raises ValueError on anything else.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw

    s = raw.strip()
    if not s or s.lower() == NO_DEADLINE.lower():
        return None
    if "T" in s:
        return datetime.fromisoformat(s).date()
    return date.fromisoformat(s)


def format_deadline_wire(deadline: date | None) -> str:
    return deadline.isoformat() if deadline is not None else NO_DEADLINE


def validate_description(description: str) -> str:
    if not description or not description.strip():
        raise TaskValidationError(EMPTY_DESCRIPTION_MESSAGE)
    return description.strip()


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Instances are immutable snapshots; the store replaces records on edit.
    """

    id: str
    description: str
    completed: bool = False
    deadline: date | None = None
    priority: Priority = Priority.MEDIUM

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "deadline": format_deadline_wire(self.deadline),
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        return cls(
            id=str(raw["id"]),
            description=str(raw.get("description") or ""),
            completed=bool(raw.get("completed", False)),
            deadline=parse_deadline(raw.get("deadline")),
            priority=Priority(str(raw.get("priority") or Priority.MEDIUM.value)),
        )
