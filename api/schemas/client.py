"""
Client request and response schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from api.schemas.common import EntityResponse


class ClientCreate(BaseModel):
    """Request body for creating a client."""

    first_name: Optional[str] = Field(default=None, max_length=255, examples=["Jane"])
    last_name: Optional[str] = Field(default=None, max_length=255, examples=["Doe"])
    email: Optional[str] = Field(default=None, max_length=255, examples=["jane@example.com"])
    phone: Optional[str] = Field(default=None, max_length=64, examples=["+1 555 0100"])


class ClientUpdate(ClientCreate):
    """Request body for updating a client. Only provided fields change."""


class ClientResponse(EntityResponse):
    """A stored client."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
