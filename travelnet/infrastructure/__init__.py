"""Infrastructure Layer — URL/request building, transport, auth interception, response handling.

Invariants:
    - Every raw transport/decoding failure is classified into core/errors.py before
      it leaves this layer
    - Only infrastructure/ imports httpx

Design Decisions:
    - Small single-purpose wrappers composed by container.py (ADR: single responsibility)
"""
