"""Appointment service."""

from core.storage import Appointment
from services.base import CrudService


class AppointmentService(CrudService[Appointment]):
    model = Appointment
    entity_name = "appointment"
    filterable = ("client_id", "property_id", "agent_id")
