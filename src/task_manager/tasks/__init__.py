"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, load/save reports)
- validation.py: title / priority / due date / id input rules
- task_store.py: in-memory task list + pipe-delimited file load/save
"""
