"""
GraphQL endpoint.
"""

from typing import Any

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from api.dependencies import get_container
from api.gql.options import GraphQLOptions
from core.container import AppContainer


async def get_graphql_context(
    container: AppContainer = Depends(get_container),
) -> dict[str, Any]:
    return {"container": container}


def create_graphql_router(
    schema: strawberry.Schema, options: GraphQLOptions
) -> GraphQLRouter:
    """Mountable router; the GraphiQL IDE is served only with the playground on."""
    return GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if options.playground else None,
    )
