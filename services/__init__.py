"""
Domain services for the CRM entities.

Each service owns CRUD for one entity and shares the database and cache
built by the composition root.
"""

from services.agent import AgentService
from services.appointment import AppointmentService
from services.base import CrudService, NotFoundError
from services.client import ClientService
from services.property import PropertyService

__all__ = [
    "CrudService",
    "NotFoundError",
    "AgentService",
    "AppointmentService",
    "ClientService",
    "PropertyService",
]
