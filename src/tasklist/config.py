# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import SortKey, TaskFilter

ENV_PREFIX = "TASKLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_filter(name: str, default: TaskFilter) -> TaskFilter:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return TaskFilter(raw.strip().lower())
    except ValueError:
        return default


def _env_sort(name: str, default: SortKey) -> SortKey:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return SortKey(raw.strip().lower())
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Session ----
    seed_demo_tasks: bool
    default_filter: TaskFilter
    default_sort: SortKey

    # ---- Rendering ----
    color: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))

        seed_demo_tasks = _env_bool(_k("SEED_DEMO_TASKS"), True)
        default_filter = _env_filter(_k("DEFAULT_FILTER"), TaskFilter.ALL)
        default_sort = _env_sort(_k("DEFAULT_SORT"), SortKey.PRIORITY)

        # NO_COLOR (https://no-color.org) wins over our own switch.
        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            seed_demo_tasks=seed_demo_tasks,
            default_filter=default_filter,
            default_sort=default_sort,
            color=color,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
