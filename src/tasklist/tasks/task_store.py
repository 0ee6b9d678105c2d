# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import date
from typing import Any

from .task_models import (
    Priority,
    Task,
    TaskNotFoundError,
    TaskValidationError,
    parse_deadline,
    validate_description,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"description", "deadline", "priority"})


class TaskStore:
    """
    In-memory ordered task store.

    The store is the single writer of task records. Callers get immutable
    Task snapshots and change state only through add/update/remove/toggle.

    Ids are sequential strings ("1", "2", ...); a new id is always greater
    than any id seen so far, so removed ids are never reused.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        for task in tasks or ():
            if self._index_of(task.id) is not None:
                raise ValueError(f"duplicate task id: {task.id}")
            self._tasks.append(task)
            self._bump_next_id(task.id)
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _bump_next_id(self, task_id: str) -> None:
        if task_id.isdigit():
            self._next_id = max(self._next_id, int(task_id) + 1)

    def _allocate_id(self) -> str:
        while self._index_of(str(self._next_id)) is not None:
            self._next_id += 1
        task_id = str(self._next_id)
        self._next_id += 1
        return task_id

    @staticmethod
    def _coerce_patch(patch: Mapping[str, Any]) -> dict[str, Any]:
        unknown = set(patch) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"fields not editable: {', '.join(sorted(unknown))}")

        changes: dict[str, Any] = {}
        if "description" in patch:
            changes["description"] = validate_description(patch["description"])
        if "deadline" in patch:
            try:
                changes["deadline"] = parse_deadline(patch["deadline"])
            except ValueError:
                raise TaskValidationError(
                    f"Invalid deadline: {patch['deadline']!r} (use YYYY-MM-DD or none)."
                ) from None
        if "priority" in patch:
            changes["priority"] = Priority.parse(patch["priority"])
        return changes

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def add(
        self,
        description: str,
        *,
        deadline: date | str | None = None,
        priority: Priority | str = Priority.MEDIUM,
        completed: bool = False,
    ) -> Task:
        changes = self._coerce_patch(
            {"description": description, "deadline": deadline, "priority": priority}
        )
        task = Task(id=self._allocate_id(), completed=completed, **changes)
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s priority=%s deadline=%s",
            task.id,
            task.priority.value,
            task.deadline,
        )
        return task

    def update(self, task_id: str, patch: Mapping[str, Any]) -> Task:
        """
        Replace the record at task_id with the patched fields.

        Validation runs before any mutation: on TaskValidationError,
        TaskNotFoundError or ValueError the store is unchanged.
        """
        idx = self._index_of(task_id)
        if idx is None:
            raise TaskNotFoundError(task_id)

        changes = self._coerce_patch(patch)
        updated = replace(self._tasks[idx], **changes)
        self._tasks[idx] = updated
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return updated

    def remove(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Task remove ignored, unknown id=%s", task_id)
            return False
        del self._tasks[idx]
        logger.debug("Task removed id=%s", task_id)
        return True

    def toggle(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Task toggle ignored, unknown id=%s", task_id)
            return None
        task = self._tasks[idx]
        updated = replace(task, completed=not task.completed)
        self._tasks[idx] = updated
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated


def demo_tasks() -> list[Task]:
    """The two tasks a fresh session starts with."""
    return [
        Task(
            id="1",
            description="Buy groceries",
            completed=False,
            deadline=None,
            priority=Priority.MEDIUM,
        ),
        Task(
            id="2",
            description="Clean the house",
            completed=True,
            deadline=date(2024, 11, 30),
            priority=Priority.LOW,
        ),
    ]
