# src/tasklist/views/summary_view.py

from __future__ import annotations

from ..core.ports import TaskRepo
from ..tasks.task_query import TaskSummary, summarize_tasks
from .formatting import BOLD, format_date, format_priority, style


def render_summary(summary: TaskSummary, *, use_color: bool = False) -> str:
    lines = [
        style("Summary", BOLD, use_color=use_color),
        f"  Total Tasks: {summary.total}",
        f"  Completed Tasks: {summary.completed}",
        f"  Uncompleted Tasks: {summary.uncompleted}",
        f"  Completion Percentage: {summary.percentage_text}%",
        "",
        "Uncompleted Tasks:",
    ]
    if not summary.uncompleted_tasks:
        lines.append("  No uncompleted tasks")
    for task in summary.uncompleted_tasks:
        lines.append(f"  {task.description}")
        lines.append(f"    Deadline: {format_date(task.deadline)}")
        lines.append(f"    Priority: {format_priority(task.priority, use_color=use_color)}")
    return "\n".join(lines)


def render_summary_view(repo: TaskRepo, *, use_color: bool = False) -> str:
    return render_summary(summarize_tasks(repo.list()), use_color=use_color)
