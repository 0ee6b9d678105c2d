# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_models import Priority, SortKey, Task, TaskFilter
from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        seed_demo_tasks=False,
        default_filter=TaskFilter.ALL,
        default_sort=SortKey.PRIORITY,
        color=False,
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(id="1", description="Write report", priority=Priority.HIGH, deadline=date(2024, 12, 5)),
        Task(id="2", description="Water plants", completed=True, priority=Priority.LOW),
        Task(id="3", description="Call dentist", priority=Priority.MEDIUM, deadline=date(2024, 12, 1)),
        Task(id="4", description="Renew passport", completed=True, priority=Priority.HIGH),
    ]


@pytest.fixture()
def store(sample_tasks: list[Task]) -> TaskStore:
    return TaskStore(sample_tasks)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
