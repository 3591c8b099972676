"""
Task subsystem.

Components:
- task_models.py: task variants, priority, date parsing and display rendering
- task_codec.py: one task <-> one pipe-delimited record line
- task_store.py: flat-file load/save with per-line corruption tolerance
- task_list.py: 1-based indexed collection with auto-save on every mutation
"""
