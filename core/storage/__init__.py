"""
Storage layer.

Provides:
- Database engine and session management
- ORM models for the CRM entities (agents, clients, properties, appointments)
"""

from core.storage.base import Base, EntityMixin
from core.storage.database import Database
from core.storage.models import (
    Agent,
    Appointment,
    Client,
    Property,
    PropertyStatus,
)

__all__ = [
    # Engine and sessions
    "Database",
    # ORM
    "Base",
    "EntityMixin",
    "Agent",
    "Appointment",
    "Client",
    "Property",
    "PropertyStatus",
]
