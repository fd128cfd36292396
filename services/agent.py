"""Agent service."""

from sqlalchemy import select

from core.storage import Agent, Appointment, Property
from services.base import CrudService


class AgentService(CrudService[Agent]):
    model = Agent
    entity_name = "agent"
    filterable = ("email", "last_name")
    dependents = (
        (Property, "agent_id", "property"),
        (Appointment, "agent_id", "appointment"),
    )

    async def find_properties(
        self,
        agent_id: str,
        *,
        skip: int = 0,
        take: int | None = None,
    ) -> list[Property]:
        """Properties listed by the given agent."""
        stmt = (
            select(Property)
            .where(Property.agent_id == agent_id)
            .order_by(Property.created_at.desc(), Property.id)
            .offset(skip)
        )
        if take is not None:
            stmt = stmt.limit(take)

        async with self._database.session() as session:
            result = await session.scalars(stmt)
            return list(result.all())
