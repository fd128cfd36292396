"""Client service."""

from sqlalchemy import select

from core.storage import Appointment, Client
from services.base import CrudService


class ClientService(CrudService[Client]):
    model = Client
    entity_name = "client"
    filterable = ("email", "last_name")
    dependents = ((Appointment, "client_id", "appointment"),)

    async def find_appointments(
        self,
        client_id: str,
        *,
        skip: int = 0,
        take: int | None = None,
    ) -> list[Appointment]:
        """Appointments booked for the given client, soonest first."""
        stmt = (
            select(Appointment)
            .where(Appointment.client_id == client_id)
            .order_by(Appointment.scheduled_at, Appointment.id)
            .offset(skip)
        )
        if take is not None:
            stmt = stmt.limit(take)

        async with self._database.session() as session:
            result = await session.scalars(stmt)
            return list(result.all())
