"""
ORM models for the CRM entities.

Relations are plain foreign keys; related records are loaded through the
owning service so that every read goes through the shared cache.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.storage.base import Base, EntityMixin


class PropertyStatus(str, Enum):
    """Listing status of a property."""
    AVAILABLE = "available"
    PENDING = "pending"
    SOLD = "sold"


class Agent(EntityMixin, Base):
    __tablename__ = "agents"

    first_name: Mapped[Optional[str]] = mapped_column(String(255))
    last_name: Mapped[Optional[str]] = mapped_column(String(255))
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64))
    license_number: Mapped[Optional[str]] = mapped_column(String(64))


class Client(EntityMixin, Base):
    __tablename__ = "clients"

    first_name: Mapped[Optional[str]] = mapped_column(String(255))
    last_name: Mapped[Optional[str]] = mapped_column(String(255))
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64))


class Property(EntityMixin, Base):
    __tablename__ = "properties"

    address: Mapped[str] = mapped_column(String(512))
    city: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    price: Mapped[Optional[float]] = mapped_column(Numeric(14, 2, asdecimal=False))
    bedrooms: Mapped[Optional[int]] = mapped_column(Integer)
    bathrooms: Mapped[Optional[int]] = mapped_column(Integer)
    status: Mapped[PropertyStatus] = mapped_column(
        SAEnum(PropertyStatus, name="property_status", values_callable=lambda e: [m.value for m in e]),
        default=PropertyStatus.AVAILABLE,
        nullable=False,
    )
    agent_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"), index=True
    )


class Appointment(EntityMixin, Base):
    __tablename__ = "appointments"

    scheduled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    client_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("clients.id", ondelete="SET NULL"), index=True
    )
    property_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("properties.id", ondelete="SET NULL"), index=True
    )
    agent_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"), index=True
    )
