"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON collection persisted in one local storage record
- task_filters.py: status / text filters and the visible() projection
"""
