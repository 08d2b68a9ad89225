"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind, ParsedDateTime, RawText)
- task_list.py: the ordered task collection with its mutation/query operations
"""
