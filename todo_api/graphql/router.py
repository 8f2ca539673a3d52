"""GraphQL Router — mounts the schema on FastAPI.

Invariants:
    - POST {prefix} executes operations; GET {prefix} serves GraphiQL when enabled
    - Context built per request by get_context (one DB session per request)
"""

from strawberry.fastapi import GraphQLRouter

from todo_api.graphql.context import get_context
from todo_api.graphql.schema import schema


def build_graphql_router(graphql_ide: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphql_ide else None,
    )
