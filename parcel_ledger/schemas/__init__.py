"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; ledger rules live in core/
    - Responses mirror the stored record shape (camelCase wire keys)

Design Decisions:
    - Separate from records: schemas are API contracts, records are persistence
"""
