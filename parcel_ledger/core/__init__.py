"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Lifecycle functions are pure: they return new records, never mutate inputs

Design Decisions:
    - Functional core separated from imperative shell: services orchestrate
      store reads/writes around these pure rules
"""
