# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import SortKey, TaskFilter
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo

    # Current list-view selections.
    task_filter: TaskFilter = TaskFilter.ALL
    sort_key: SortKey = SortKey.PRIORITY
