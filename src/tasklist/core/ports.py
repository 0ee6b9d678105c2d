# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by views and commands.

Views never hold the concrete store; they depend on TaskRepo so the store can
be swapped (and faked in tests) without touching rendering code.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Protocol

from ..tasks.task_models import Priority, Task


class TaskRepo(Protocol):
    def list(self) -> list[Task]: ...
    def get(self, task_id: str) -> Task | None: ...
    def count_tasks(self) -> int: ...

    def add(
            self,
            description: str,
            *,
            deadline: date | str | None = None,
            priority: Priority | str = Priority.MEDIUM,
            completed: bool = False,
    ) -> Task: ...

    def update(self, task_id: str, patch: Mapping[str, Any]) -> Task: ...
    def remove(self, task_id: str) -> bool: ...
    def toggle(self, task_id: str) -> Task | None: ...
