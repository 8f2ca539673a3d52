"""Core Layer — pure task rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from graphql/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
