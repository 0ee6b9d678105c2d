# tests/test_views.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from tasklist.tasks.task_models import Priority, SortKey, Task, TaskFilter, TaskValidationError
from tasklist.tasks.task_store import TaskStore
from tasklist.views.edit_view import delete_task, render_edit_form, save_task
from tasklist.views.formatting import (
    PRIORITY_COLOR,
    RESET,
    color_enabled,
    format_date,
    format_priority,
)
from tasklist.views.list_view import render_list, render_task_card
from tasklist.views.summary_view import render_summary_view


def test_format_date() -> None:
    assert format_date(date(2024, 11, 30)) == "30/11/2024"
    assert format_date(date(2025, 1, 2)) == "02/01/2025"
    assert format_date(None) == "None"


def test_format_priority_colour_only_when_asked() -> None:
    assert format_priority(Priority.HIGH) == "high"
    coloured = format_priority(Priority.HIGH, use_color=True)
    assert coloured == f"{PRIORITY_COLOR[Priority.HIGH]}high{RESET}"
    assert PRIORITY_COLOR[Priority.HIGH] == "\033[38;2;231;76;60m"


def test_color_enabled_respects_setting() -> None:
    assert color_enabled(SimpleNamespace(color=False)) is False
    assert color_enabled(object()) is False


def test_task_card() -> None:
    task = Task(id="2", description="Clean the house", completed=True,
                deadline=date(2024, 11, 30), priority=Priority.LOW)
    card = render_task_card(task)
    assert card.startswith("[✓] 2. Clean the house")
    assert "Deadline: 30/11/2024" in card
    assert "Priority: low" in card


def test_render_list_uses_filter_and_sort(store: TaskStore) -> None:
    text = render_list(store, TaskFilter.UNCOMPLETED, SortKey.DEADLINE)
    lines = text.splitlines()

    assert lines[0] == "Tasks (filter: uncompleted, sort: deadline)"
    assert lines[1].startswith("[ ] 3. Call dentist")
    assert lines[3].startswith("[ ] 1. Write report")
    assert "Water plants" not in text


def test_render_list_empty() -> None:
    text = render_list(TaskStore(), TaskFilter.ALL, SortKey.PRIORITY)
    assert "No tasks." in text


def test_edit_form_shows_current_values(store: TaskStore) -> None:
    form = render_edit_form(store.get("3"))
    assert "Edit Task 3:" in form
    assert "Description: Call dentist" in form
    assert "Deadline:    01/12/2024" in form
    assert "Completed:   no" in form

    form2 = render_edit_form(store.get("2"))
    assert "Deadline:    No deadline" in form2


def test_save_task_full_form(store: TaskStore) -> None:
    saved = save_task(store, "4", description="Renew ID card", deadline="2025-03-01", priority="low")
    assert saved == Task(
        id="4",
        description="Renew ID card",
        completed=True,
        deadline=date(2025, 3, 1),
        priority=Priority.LOW,
    )


def test_save_task_blank_description_keeps_store(store: TaskStore) -> None:
    before = store.list()
    with pytest.raises(TaskValidationError):
        save_task(store, "4", description=" ", deadline=None, priority="low")
    assert store.list() == before


def test_delete_task(store: TaskStore) -> None:
    assert delete_task(store, "1") is True
    assert delete_task(store, "1") is False


def test_summary_view(store: TaskStore) -> None:
    text = render_summary_view(store)

    assert "Total Tasks: 4" in text
    assert "Completed Tasks: 2" in text
    assert "Uncompleted Tasks: 2" in text
    assert "Completion Percentage: 50.00%" in text
    assert text.index("Write report") < text.index("Call dentist")
    assert "Water plants" not in text


def test_summary_view_all_done() -> None:
    store = TaskStore([Task(id="1", description="x", completed=True)])
    text = render_summary_view(store)
    assert "Completion Percentage: 100.00%" in text
    assert "No uncompleted tasks" in text
