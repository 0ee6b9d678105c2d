"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskFilter, SortKey) and errors
- task_store.py: in-memory store, the only writer of task records
- task_query.py: filter/sort projection and the completion summary
"""
