"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from graphql/ or api/
    - SQLAlchemy exceptions never escape this package unmapped
"""
