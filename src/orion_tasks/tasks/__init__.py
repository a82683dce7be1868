"""
Task subsystem.

Components:
- task_models.py: data structures (Todo, Deadline, Event, TaskKind)
- task_store.py: CSV file storage + storage errors
- fuzzy.py: Levenshtein distance and the search threshold
- task_list.py: engine (read-modify-write per call) + pure list operations
- task_api.py: list rendering helpers for the presentation layer
"""
