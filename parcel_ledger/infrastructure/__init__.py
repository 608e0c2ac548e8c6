"""Infrastructure Layer — store implementations and cross-cutting concerns.

Invariants:
    - Infrastructure never imports lifecycle logic from core/, only types and errors
    - All driver exceptions mapped to StorageError before leaving this layer
"""
