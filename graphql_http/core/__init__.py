"""Core Layer — request classification and response negotiation, no IO.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic
"""
