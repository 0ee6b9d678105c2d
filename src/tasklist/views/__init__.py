"""
Console views.

Each view renders plain text from a TaskRepo and never keeps task records:
- list_view.py: filtered/sorted task list
- edit_view.py: edit form, save and delete of one task
- summary_view.py: completion summary
- formatting.py: date display and ANSI styling
"""
