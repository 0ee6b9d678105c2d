# src/tasklist/tasks/task_query.py

"""
Read-only projections over a task sequence.

Every function here returns new lists and never mutates its input.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .task_models import SortKey, Task, TaskFilter


@dataclass(frozen=True, slots=True)
class TaskSummary:
    total: int
    completed: int
    uncompleted: int
    completion_percentage: Decimal
    uncompleted_tasks: tuple[Task, ...]

    @property
    def percentage_text(self) -> str:
        return f"{self.completion_percentage:.2f}"


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter | str) -> list[Task]:
    task_filter = TaskFilter(task_filter)
    if task_filter is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    if task_filter is TaskFilter.UNCOMPLETED:
        return [t for t in tasks if not t.completed]
    return list(tasks)


def _deadline_key(task: Task) -> tuple[bool, int]:
    # Undated tasks share one key, so the stable sort keeps their order.
    if task.deadline is None:
        return (True, 0)
    return (False, task.deadline.toordinal())


def sort_tasks(tasks: Iterable[Task], sort_key: SortKey | str) -> list[Task]:
    sort_key = SortKey(sort_key)
    if sort_key is SortKey.DEADLINE:
        return sorted(tasks, key=_deadline_key)
    return sorted(tasks, key=lambda t: -t.priority.rank)


def project_tasks(
    tasks: Iterable[Task],
    task_filter: TaskFilter | str = TaskFilter.ALL,
    sort_key: SortKey | str = SortKey.PRIORITY,
) -> list[Task]:
    """Filter then sort, as the list view shows them."""
    return sort_tasks(filter_tasks(tasks, task_filter), sort_key)


def _percentage(part: int, total: int) -> Decimal:
    """Two decimals, ties rounded up (3.125 -> 3.13); 0.00 for an empty list."""
    if not total:
        return Decimal("0.00")
    return (Decimal(part * 100) / Decimal(total)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def summarize_tasks(tasks: Iterable[Task]) -> TaskSummary:
    items = list(tasks)
    uncompleted = [t for t in items if not t.completed]
    total = len(items)
    completed = total - len(uncompleted)
    percentage = _percentage(completed, total)
    return TaskSummary(
        total=total,
        completed=completed,
        uncompleted=len(uncompleted),
        completion_percentage=percentage,
        uncompleted_tasks=tuple(uncompleted),
    )
