"""
GraphQL module: options, schema generation and the FastAPI endpoint.
"""

from api.gql.options import GraphQLOptions, build_graphql_options
from api.gql.router import create_graphql_router
from api.gql.schema import build_schema, render_schema, write_schema_file

__all__ = [
    "GraphQLOptions",
    "build_graphql_options",
    "build_schema",
    "create_graphql_router",
    "render_schema",
    "write_schema_file",
]
