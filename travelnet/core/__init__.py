"""Core Layer — pure networking vocabulary: errors, value types, descriptors, encoders.

Invariants:
    - No module in core/ imports from services/, schemas/ or infrastructure/
    - No IO, no logging; functions are deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
