"""
Task subsystem.

Components:
- task_models.py: data structures (Task, display data, JSON records)
- task_list.py: in-memory store with sorting, lookup and focus
- task_store.py: load/save of the backing JSON file
- errors.py: exception types reported to the user
"""
