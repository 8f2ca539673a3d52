"""GraphQL Layer — Strawberry schema, types, resolvers and the FastAPI router.

Invariants:
    - Resolvers reach storage only through info.context.repository
    - Domain errors surface as GraphQL errors carrying extensions.code
"""
