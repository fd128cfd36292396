"""
Agent request and response schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from api.schemas.common import EntityResponse


class AgentCreate(BaseModel):
    """Request body for creating an agent."""

    first_name: Optional[str] = Field(default=None, max_length=255, examples=["Sam"])
    last_name: Optional[str] = Field(default=None, max_length=255, examples=["Lee"])
    email: Optional[str] = Field(default=None, max_length=255, examples=["sam@agency.com"])
    phone: Optional[str] = Field(default=None, max_length=64)
    license_number: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Real-estate license number",
        examples=["RE-2041-88"],
    )


class AgentUpdate(AgentCreate):
    """Request body for updating an agent. Only provided fields change."""


class AgentResponse(EntityResponse):
    """A stored agent."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = None
