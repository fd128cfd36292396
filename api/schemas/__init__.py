"""
Pydantic schemas for API request/response validation.
"""

from api.schemas.agent import AgentCreate, AgentResponse, AgentUpdate
from api.schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
)
from api.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from api.schemas.common import EntityResponse, MetaResponse
from api.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate

__all__ = [
    "EntityResponse",
    "MetaResponse",
    "AgentCreate",
    "AgentResponse",
    "AgentUpdate",
    "AppointmentCreate",
    "AppointmentResponse",
    "AppointmentUpdate",
    "ClientCreate",
    "ClientResponse",
    "ClientUpdate",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyUpdate",
]
