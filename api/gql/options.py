"""
GraphQL driver options.

Derived once from settings at startup.
"""

from dataclasses import dataclass

from core.config import Settings


@dataclass(frozen=True)
class GraphQLOptions:
    """How the GraphQL endpoint is built and exposed."""

    auto_schema_file: str
    sort_schema: bool
    playground: bool
    introspection: bool


def build_graphql_options(settings: Settings) -> GraphQLOptions:
    """
    Build GraphQL options from settings.

    Introspection is always on while the playground is served, since the
    IDE cannot work without it.
    """
    playground = settings.graphql_playground
    return GraphQLOptions(
        auto_schema_file=settings.graphql_schema_file,
        sort_schema=True,
        playground=playground,
        introspection=playground or settings.graphql_introspection,
    )
