"""Pydantic Schemas — wire contracts for requests, responses and query parameters.

Invariants:
    - Schemas validate at the system boundary (backend payloads)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from core domain types: schemas are wire contracts, domain types are
      what callers see (ADR: DDD boundary)
"""
