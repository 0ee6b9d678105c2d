# src/tasklist/views/edit_view.py

"""
Edit screen for a single task.

The form carries the full editable record (description, deadline-or-none,
priority); saving replaces those fields and keeps the completion flag.
"""

from __future__ import annotations

import logging
from datetime import date

from ..core.ports import TaskRepo
from ..tasks.task_models import Priority, Task
from .formatting import format_date, format_priority

logger = logging.getLogger(__name__)


def render_edit_form(task: Task, *, use_color: bool = False) -> str:
    deadline = format_date(task.deadline) if task.deadline else "No deadline"
    return (
        f"Edit Task {task.id}:\n"
        f"  Description: {task.description}\n"
        f"  Deadline:    {deadline}\n"
        f"  Priority:    {format_priority(task.priority, use_color=use_color)}\n"
        f"  Completed:   {'yes' if task.completed else 'no'}\n"
        f'Save with: /edit {task.id} description="..." deadline=YYYY-MM-DD|none '
        "priority=low|medium|high\n"
        f"Delete with: /delete {task.id}"
    )


def save_task(
    repo: TaskRepo,
    task_id: str,
    *,
    description: str,
    deadline: date | str | None,
    priority: Priority | str,
) -> Task:
    """
    Save the edit form.

    Raises TaskValidationError (store untouched) when the description is
    blank, TaskNotFoundError when the task is gone.
    """
    task = repo.update(
        task_id,
        {"description": description, "deadline": deadline, "priority": priority},
    )
    logger.info("Task %s saved.", task_id)
    return task


def render_delete_prompt(task: Task) -> str:
    return (
        f'Delete task {task.id} "{task.description}"? '
        f"Confirm with /delete {task.id} yes"
    )


def delete_task(repo: TaskRepo, task_id: str) -> bool:
    removed = repo.remove(task_id)
    if removed:
        logger.info("Task %s deleted.", task_id)
    return removed
