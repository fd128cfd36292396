"""
GraphQL object and input types.

Relation fields resolve through the domain services, so related records
are read through the shared cache like any other lookup.
"""

from datetime import datetime
from typing import Any, Optional

import strawberry
from strawberry.types import Info

from core.container import AppContainer
from core.storage import Agent, Appointment, Client, Property, PropertyStatus


strawberry.enum(PropertyStatus, name="PropertyStatus")


def get_app_container(info: Info) -> AppContainer:
    return info.context["container"]


def input_data(data: Any, non_null: tuple[str, ...] = ()) -> dict[str, Any]:
    """
    Field values of an input object, without the ones left unset.

    Fields named in ``non_null`` may be omitted but not set to null.
    """
    values = {
        name: value
        for name, value in vars(data).items()
        if value is not strawberry.UNSET
    }
    for name in non_null:
        if name in values and values[name] is None:
            raise ValueError(f"Field '{name}' cannot be null")
    return values


@strawberry.type
class MetaQueryPayload:
    count: int


@strawberry.type(name="Agent")
class AgentType:
    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    license_number: Optional[str]

    @strawberry.field
    async def properties(
        self,
        info: Info,
        skip: int = 0,
        take: Optional[int] = None,
    ) -> list["PropertyType"]:
        records = await get_app_container(info).agents.find_properties(
            self.id, skip=skip, take=take
        )
        return [PropertyType.from_model(record) for record in records]

    @classmethod
    def from_model(cls, agent: Agent) -> "AgentType":
        return cls(
            id=strawberry.ID(agent.id),
            created_at=agent.created_at,
            updated_at=agent.updated_at,
            first_name=agent.first_name,
            last_name=agent.last_name,
            email=agent.email,
            phone=agent.phone,
            license_number=agent.license_number,
        )


@strawberry.type(name="Client")
class ClientType:
    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    phone: Optional[str]

    @strawberry.field
    async def appointments(
        self,
        info: Info,
        skip: int = 0,
        take: Optional[int] = None,
    ) -> list["AppointmentType"]:
        records = await get_app_container(info).clients.find_appointments(
            self.id, skip=skip, take=take
        )
        return [AppointmentType.from_model(record) for record in records]

    @classmethod
    def from_model(cls, client: Client) -> "ClientType":
        return cls(
            id=strawberry.ID(client.id),
            created_at=client.created_at,
            updated_at=client.updated_at,
            first_name=client.first_name,
            last_name=client.last_name,
            email=client.email,
            phone=client.phone,
        )


@strawberry.type(name="Property")
class PropertyType:
    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    address: str
    city: Optional[str]
    price: Optional[float]
    bedrooms: Optional[int]
    bathrooms: Optional[int]
    status: PropertyStatus
    agent_id: strawberry.Private[Optional[str]]

    @strawberry.field
    async def agent(self, info: Info) -> Optional[AgentType]:
        if self.agent_id is None:
            return None
        record = await get_app_container(info).agents.find_one(self.agent_id)
        return AgentType.from_model(record) if record else None

    @classmethod
    def from_model(cls, prop: Property) -> "PropertyType":
        return cls(
            id=strawberry.ID(prop.id),
            created_at=prop.created_at,
            updated_at=prop.updated_at,
            address=prop.address,
            city=prop.city,
            price=prop.price,
            bedrooms=prop.bedrooms,
            bathrooms=prop.bathrooms,
            status=prop.status,
            agent_id=prop.agent_id,
        )


@strawberry.type(name="Appointment")
class AppointmentType:
    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    scheduled_at: Optional[datetime]
    notes: Optional[str]
    client_id: strawberry.Private[Optional[str]]
    property_id: strawberry.Private[Optional[str]]
    agent_id: strawberry.Private[Optional[str]]

    @strawberry.field
    async def client(self, info: Info) -> Optional[ClientType]:
        if self.client_id is None:
            return None
        record = await get_app_container(info).clients.find_one(self.client_id)
        return ClientType.from_model(record) if record else None

    @strawberry.field
    async def property(self, info: Info) -> Optional[PropertyType]:
        if self.property_id is None:
            return None
        record = await get_app_container(info).properties.find_one(self.property_id)
        return PropertyType.from_model(record) if record else None

    @strawberry.field
    async def agent(self, info: Info) -> Optional[AgentType]:
        if self.agent_id is None:
            return None
        record = await get_app_container(info).agents.find_one(self.agent_id)
        return AgentType.from_model(record) if record else None

    @classmethod
    def from_model(cls, appointment: Appointment) -> "AppointmentType":
        return cls(
            id=strawberry.ID(appointment.id),
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
            scheduled_at=appointment.scheduled_at,
            notes=appointment.notes,
            client_id=appointment.client_id,
            property_id=appointment.property_id,
            agent_id=appointment.agent_id,
        )


@strawberry.input
class AgentCreateInput:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = None


@strawberry.input
class AgentUpdateInput:
    first_name: Optional[str] = strawberry.UNSET
    last_name: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    license_number: Optional[str] = strawberry.UNSET


@strawberry.input
class ClientCreateInput:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


@strawberry.input
class ClientUpdateInput:
    first_name: Optional[str] = strawberry.UNSET
    last_name: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET


@strawberry.input
class PropertyCreateInput:
    address: str
    city: Optional[str] = None
    price: Optional[float] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    status: PropertyStatus = PropertyStatus.AVAILABLE
    agent_id: Optional[strawberry.ID] = None


@strawberry.input
class PropertyUpdateInput:
    address: Optional[str] = strawberry.UNSET
    city: Optional[str] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    bedrooms: Optional[int] = strawberry.UNSET
    bathrooms: Optional[int] = strawberry.UNSET
    status: Optional[PropertyStatus] = strawberry.UNSET
    agent_id: Optional[strawberry.ID] = strawberry.UNSET


@strawberry.input
class AppointmentCreateInput:
    scheduled_at: Optional[datetime] = None
    notes: Optional[str] = None
    client_id: Optional[strawberry.ID] = None
    property_id: Optional[strawberry.ID] = None
    agent_id: Optional[strawberry.ID] = None


@strawberry.input
class AppointmentUpdateInput:
    scheduled_at: Optional[datetime] = strawberry.UNSET
    notes: Optional[str] = strawberry.UNSET
    client_id: Optional[strawberry.ID] = strawberry.UNSET
    property_id: Optional[strawberry.ID] = strawberry.UNSET
    agent_id: Optional[strawberry.ID] = strawberry.UNSET
