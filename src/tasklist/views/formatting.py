# src/tasklist/views/formatting.py

"""Text helpers shared by the views: date display and ANSI styling.

Colours are emitted only when the caller passes use_color=True.
"""

from __future__ import annotations

import sys
from datetime import date

from ..tasks.task_models import Priority

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

PRIORITY_HEX = {
    Priority.HIGH: "#E74C3C",
    Priority.MEDIUM: "#F1C40F",
    Priority.LOW: "#2ECC71",
}


def _fg_truecolor(hex_code: str) -> str:
    h = hex_code.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"\033[38;2;{r};{g};{b}m"


PRIORITY_COLOR = {p: _fg_truecolor(h) for p, h in PRIORITY_HEX.items()}


def color_enabled(settings: object) -> bool:
    """Colour only when configured and stdout is a terminal."""
    if not bool(getattr(settings, "color", False)):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def style(text: str, *codes: str, use_color: bool = False) -> str:
    if not use_color or not codes:
        return text
    return "".join(codes) + text + RESET


def format_date(value: date | None) -> str:
    """DD/MM/YYYY, or "None" when there is no deadline."""
    if value is None:
        return "None"
    return value.strftime("%d/%m/%Y")


def format_priority(priority: Priority, *, use_color: bool = False) -> str:
    return style(priority.value, PRIORITY_COLOR[priority], use_color=use_color)
