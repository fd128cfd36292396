"""
Property request and response schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from api.schemas.common import EntityResponse
from core.storage import PropertyStatus


class PropertyCreate(BaseModel):
    """Request body for creating a property listing."""

    address: str = Field(
        ...,
        min_length=1,
        max_length=512,
        description="Street address",
        examples=["12 Harbour Road"],
    )
    city: Optional[str] = Field(default=None, max_length=255, examples=["Lisbon"])
    price: Optional[float] = Field(default=None, ge=0, description="Asking price")
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    status: PropertyStatus = Field(
        default=PropertyStatus.AVAILABLE,
        description="Listing status",
    )
    agent_id: Optional[str] = Field(
        default=None,
        description="Listing agent",
    )


class PropertyUpdate(BaseModel):
    """Request body for updating a property. Only provided fields change."""

    address: Optional[str] = Field(default=None, min_length=1, max_length=512)
    city: Optional[str] = Field(default=None, max_length=255)
    price: Optional[float] = Field(default=None, ge=0)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    status: Optional[PropertyStatus] = None
    agent_id: Optional[str] = None

    @field_validator("address", "status")
    @classmethod
    def reject_null(cls, value):
        # Both columns are NOT NULL.
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value


class PropertyResponse(EntityResponse):
    """A stored property."""

    address: str
    city: Optional[str] = None
    price: Optional[float] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    status: PropertyStatus
    agent_id: Optional[str] = None
