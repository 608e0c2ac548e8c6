"""Services Layer — imperative shell around the pure ledger rules.

Invariants:
    - Services read from injected stores, apply core/ rules, write back
    - Services raise LedgerError subclasses; they never return error values
"""
