"""Services Layer — endpoint catalogs, mappers and repository facades per resource family.

Invariants:
    - Services translate and delegate; retry, refresh and validation live below them
    - Only domain values and NetworkingError cross the service boundary

Design Decisions:
    - One module per concern (endpoints, mapper, repository) for locality
"""
