"""
Appointment request and response schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from api.schemas.common import EntityResponse


class AppointmentCreate(BaseModel):
    """Request body for booking an appointment."""

    scheduled_at: Optional[datetime] = Field(
        default=None,
        description="Date and time of the viewing or meeting",
    )
    notes: Optional[str] = None
    client_id: Optional[str] = None
    property_id: Optional[str] = None
    agent_id: Optional[str] = None


class AppointmentUpdate(AppointmentCreate):
    """Request body for updating an appointment. Only provided fields change."""


class AppointmentResponse(EntityResponse):
    """A stored appointment."""

    scheduled_at: Optional[datetime] = None
    notes: Optional[str] = None
    client_id: Optional[str] = None
    property_id: Optional[str] = None
    agent_id: Optional[str] = None
