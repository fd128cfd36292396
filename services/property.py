"""Property service."""

from core.storage import Appointment, Property
from services.base import CrudService


class PropertyService(CrudService[Property]):
    model = Property
    entity_name = "property"
    filterable = ("status", "city", "agent_id")
    dependents = ((Appointment, "property_id", "appointment"),)
