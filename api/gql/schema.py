"""
GraphQL schema: queries, mutations, and schema file generation.
"""

from pathlib import Path
from typing import Optional

import strawberry
from graphql import build_schema as parse_sdl
from graphql import lexicographic_sort_schema, print_schema
from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules
from strawberry.extensions.tracing import OpenTelemetryExtension
from strawberry.types import Info

from api.gql.options import GraphQLOptions
from api.gql.types import (
    AgentCreateInput,
    AgentType,
    AgentUpdateInput,
    AppointmentCreateInput,
    AppointmentType,
    AppointmentUpdateInput,
    ClientCreateInput,
    ClientType,
    ClientUpdateInput,
    MetaQueryPayload,
    PropertyCreateInput,
    PropertyType,
    PropertyUpdateInput,
    get_app_container,
    input_data,
)
from core.logging import get_logger
from core.storage import PropertyStatus


logger = get_logger(__name__)


@strawberry.type
class Query:
    # Clients
    @strawberry.field
    async def clients(
        self, info: Info, skip: int = 0, take: Optional[int] = None
    ) -> list[ClientType]:
        records = await get_app_container(info).clients.find_many(skip=skip, take=take)
        return [ClientType.from_model(r) for r in records]

    @strawberry.field
    async def client(self, info: Info, id: strawberry.ID) -> Optional[ClientType]:
        record = await get_app_container(info).clients.find_one(id)
        return ClientType.from_model(record) if record else None

    @strawberry.field
    async def clients_meta(self, info: Info) -> MetaQueryPayload:
        return MetaQueryPayload(count=await get_app_container(info).clients.count())

    # Agents
    @strawberry.field
    async def agents(
        self, info: Info, skip: int = 0, take: Optional[int] = None
    ) -> list[AgentType]:
        records = await get_app_container(info).agents.find_many(skip=skip, take=take)
        return [AgentType.from_model(r) for r in records]

    @strawberry.field
    async def agent(self, info: Info, id: strawberry.ID) -> Optional[AgentType]:
        record = await get_app_container(info).agents.find_one(id)
        return AgentType.from_model(record) if record else None

    @strawberry.field
    async def agents_meta(self, info: Info) -> MetaQueryPayload:
        return MetaQueryPayload(count=await get_app_container(info).agents.count())

    # Properties
    @strawberry.field
    async def properties(
        self,
        info: Info,
        skip: int = 0,
        take: Optional[int] = None,
        status: Optional[PropertyStatus] = None,
        city: Optional[str] = None,
    ) -> list[PropertyType]:
        records = await get_app_container(info).properties.find_many(
            skip=skip, take=take, status=status, city=city
        )
        return [PropertyType.from_model(r) for r in records]

    @strawberry.field
    async def property(self, info: Info, id: strawberry.ID) -> Optional[PropertyType]:
        record = await get_app_container(info).properties.find_one(id)
        return PropertyType.from_model(record) if record else None

    @strawberry.field
    async def properties_meta(
        self, info: Info, status: Optional[PropertyStatus] = None
    ) -> MetaQueryPayload:
        count = await get_app_container(info).properties.count(status=status)
        return MetaQueryPayload(count=count)

    # Appointments
    @strawberry.field
    async def appointments(
        self, info: Info, skip: int = 0, take: Optional[int] = None
    ) -> list[AppointmentType]:
        records = await get_app_container(info).appointments.find_many(
            skip=skip, take=take
        )
        return [AppointmentType.from_model(r) for r in records]

    @strawberry.field
    async def appointment(
        self, info: Info, id: strawberry.ID
    ) -> Optional[AppointmentType]:
        record = await get_app_container(info).appointments.find_one(id)
        return AppointmentType.from_model(record) if record else None

    @strawberry.field
    async def appointments_meta(self, info: Info) -> MetaQueryPayload:
        count = await get_app_container(info).appointments.count()
        return MetaQueryPayload(count=count)


@strawberry.type
class Mutation:
    # Clients
    @strawberry.mutation
    async def create_client(self, info: Info, data: ClientCreateInput) -> ClientType:
        record = await get_app_container(info).clients.create(input_data(data))
        return ClientType.from_model(record)

    @strawberry.mutation
    async def update_client(
        self, info: Info, id: strawberry.ID, data: ClientUpdateInput
    ) -> ClientType:
        record = await get_app_container(info).clients.update(id, input_data(data))
        return ClientType.from_model(record)

    @strawberry.mutation
    async def delete_client(self, info: Info, id: strawberry.ID) -> ClientType:
        record = await get_app_container(info).clients.delete(id)
        return ClientType.from_model(record)

    # Agents
    @strawberry.mutation
    async def create_agent(self, info: Info, data: AgentCreateInput) -> AgentType:
        record = await get_app_container(info).agents.create(input_data(data))
        return AgentType.from_model(record)

    @strawberry.mutation
    async def update_agent(
        self, info: Info, id: strawberry.ID, data: AgentUpdateInput
    ) -> AgentType:
        record = await get_app_container(info).agents.update(id, input_data(data))
        return AgentType.from_model(record)

    @strawberry.mutation
    async def delete_agent(self, info: Info, id: strawberry.ID) -> AgentType:
        record = await get_app_container(info).agents.delete(id)
        return AgentType.from_model(record)

    # Properties
    @strawberry.mutation
    async def create_property(
        self, info: Info, data: PropertyCreateInput
    ) -> PropertyType:
        record = await get_app_container(info).properties.create(input_data(data))
        return PropertyType.from_model(record)

    @strawberry.mutation
    async def update_property(
        self, info: Info, id: strawberry.ID, data: PropertyUpdateInput
    ) -> PropertyType:
        values = input_data(data, non_null=("address", "status"))
        record = await get_app_container(info).properties.update(id, values)
        return PropertyType.from_model(record)

    @strawberry.mutation
    async def delete_property(self, info: Info, id: strawberry.ID) -> PropertyType:
        record = await get_app_container(info).properties.delete(id)
        return PropertyType.from_model(record)

    # Appointments
    @strawberry.mutation
    async def create_appointment(
        self, info: Info, data: AppointmentCreateInput
    ) -> AppointmentType:
        record = await get_app_container(info).appointments.create(input_data(data))
        return AppointmentType.from_model(record)

    @strawberry.mutation
    async def update_appointment(
        self, info: Info, id: strawberry.ID, data: AppointmentUpdateInput
    ) -> AppointmentType:
        record = await get_app_container(info).appointments.update(
            id, input_data(data)
        )
        return AppointmentType.from_model(record)

    @strawberry.mutation
    async def delete_appointment(
        self, info: Info, id: strawberry.ID
    ) -> AppointmentType:
        record = await get_app_container(info).appointments.delete(id)
        return AppointmentType.from_model(record)


def build_schema(options: GraphQLOptions, *, tracing: bool = False) -> strawberry.Schema:
    """
    Build the executable schema.

    Introspection queries are rejected unless options allow them; resolver
    spans are recorded when tracing is on.
    """
    extensions: list = []
    if not options.introspection:
        extensions.append(lambda: AddValidationRules([NoSchemaIntrospectionCustomRule]))
    if tracing:
        extensions.append(OpenTelemetryExtension)

    return strawberry.Schema(query=Query, mutation=Mutation, extensions=extensions)


def render_schema(schema: strawberry.Schema, sort: bool = True) -> str:
    """Render the schema as SDL, optionally with types and fields sorted."""
    sdl = schema.as_str()
    if not sort:
        return sdl
    return print_schema(lexicographic_sort_schema(parse_sdl(sdl)))


def write_schema_file(schema: strawberry.Schema, options: GraphQLOptions) -> Path:
    """Write the SDL to the configured schema file."""
    path = Path(options.auto_schema_file)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_schema(schema, sort=options.sort_schema) + "\n", encoding="utf-8")

    logger.info("GraphQL schema written", path=str(path), sorted=options.sort_schema)
    return path
