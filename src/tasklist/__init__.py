"""tasklist: terminal task list with filter/sort, edit and completion summary."""

__version__ = "0.1.0"
