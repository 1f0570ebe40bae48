"""
Task subsystem.

Components:
- task_models.py: immutable task variants (Todo, Deadline, Event) and their type tags
- task_codec.py: one-line text encoding + tolerant decoding
- task_list.py: immutable 1-indexed TaskList
- task_store.py: whole-file text storage (load/save)
"""
