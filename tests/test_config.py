# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings
from tasklist.logging_setup import _ConsoleNoiseFilter, setup_logging
from tasklist.tasks.task_models import SortKey, TaskFilter

ENV_NAMES = (
    "TASKLIST_APP_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_DATA_DIR",
    "TASKLIST_SEED_DEMO_TASKS",
    "TASKLIST_DEFAULT_FILTER",
    "TASKLIST_DEFAULT_SORT",
    "TASKLIST_COLOR",
    "NO_COLOR",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "WARNING"
    assert s.data_dir == Path(".local/tasklist")
    assert s.seed_demo_tasks is True
    assert s.default_filter is TaskFilter.ALL
    assert s.default_sort is SortKey.PRIORITY
    assert s.color is True


def test_settings_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_APP_NAME", "chores")
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKLIST_SEED_DEMO_TASKS", "no")
    clean_env.setenv("TASKLIST_DEFAULT_FILTER", "Uncompleted")
    clean_env.setenv("TASKLIST_DEFAULT_SORT", "deadline")

    s = Settings.from_env()
    assert s.app_name == "chores"
    assert s.data_dir == tmp_path
    assert s.seed_demo_tasks is False
    assert s.default_filter is TaskFilter.UNCOMPLETED
    assert s.default_sort is SortKey.DEADLINE


def test_settings_invalid_choices_fall_back(clean_env) -> None:
    clean_env.setenv("TASKLIST_DEFAULT_FILTER", "someday")
    clean_env.setenv("TASKLIST_DEFAULT_SORT", "alphabetical")
    s = Settings.from_env()
    assert s.default_filter is TaskFilter.ALL
    assert s.default_sort is SortKey.PRIORITY


def test_no_color_wins(clean_env) -> None:
    clean_env.setenv("TASKLIST_COLOR", "1")
    clean_env.setenv("NO_COLOR", "")
    assert Settings.from_env().color is False


def test_bootstrap_seeds_demo_tasks(settings) -> None:
    settings.seed_demo_tasks = True
    settings.default_sort = SortKey.DEADLINE

    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert [t.description for t in state.task_store.list()] == ["Buy groceries", "Clean the house"]
    assert state.sort_key is SortKey.DEADLINE
    assert state.task_filter is TaskFilter.ALL


def test_bootstrap_without_seed(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.task_store.count_tasks() == 0


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path)
        logging.getLogger("tasklist.test").debug("hello from test")
        for h in root.handlers:
            h.flush()
        assert log_file == tmp_path / "tasklist.log"
        assert "hello from test" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("tasklist.cli.commands", logging.DEBUG, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("dotenv.main", logging.WARNING, False),
        ("dotenv.main", logging.CRITICAL, True),
    ],
)
def test_console_noise_filter(name: str, level: int, shown: bool) -> None:
    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    assert _ConsoleNoiseFilter().filter(record) is shown
