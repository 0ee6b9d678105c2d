# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task store and the initial view selections into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore, demo_tasks

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    seed = demo_tasks() if getattr(settings, "seed_demo_tasks", False) else []
    state = AppState(
        settings=settings,
        task_store=TaskStore(seed),
        task_filter=settings.default_filter,
        sort_key=settings.default_sort,
    )
    logger.debug(
        "Initial state: tasks=%s filter=%s sort=%s",
        len(seed),
        state.task_filter.value,
        state.sort_key.value,
    )
    return state
