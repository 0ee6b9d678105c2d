# src/tasklist/views/list_view.py

from __future__ import annotations

from ..core.ports import TaskRepo
from ..tasks.task_models import SortKey, Task, TaskFilter
from ..tasks.task_query import project_tasks
from .formatting import BOLD, DIM, STRIKE, format_date, format_priority, style

CHECK = "✓"


def render_task_card(task: Task, *, use_color: bool = False) -> str:
    mark = CHECK if task.completed else " "
    title = task.description
    if task.completed:
        title = style(title, STRIKE, DIM, use_color=use_color)
    task_id = style(task.id, BOLD, use_color=use_color)
    return (
        f"[{mark}] {task_id}. {title}\n"
        f"      Deadline: {format_date(task.deadline)}"
        f"  Priority: {format_priority(task.priority, use_color=use_color)}"
    )


def render_list(
    repo: TaskRepo,
    task_filter: TaskFilter,
    sort_key: SortKey,
    *,
    use_color: bool = False,
) -> str:
    tasks = project_tasks(repo.list(), task_filter, sort_key)
    lines = [f"Tasks (filter: {task_filter.value}, sort: {sort_key.value})"]
    if not tasks:
        lines.append("  No tasks.")
    for task in tasks:
        lines.append(render_task_card(task, use_color=use_color))
    return "\n".join(lines)
