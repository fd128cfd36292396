"""
FastAPI dependencies for dependency injection.

Provides the services wired by the composition root to route handlers.
The container lives on ``app.state`` and is attached by the app factory.
"""

from fastapi import Depends, Request

from core.container import AppContainer
from services import AgentService, AppointmentService, ClientService, PropertyService


async def get_container(request: Request) -> AppContainer:
    """
    Dependency that provides the application container.

    Usage:
        @router.get("/ready")
        async def ready(container: AppContainer = Depends(get_container)):
            ...
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application container not attached")
    return container


async def get_client_service(
    container: AppContainer = Depends(get_container),
) -> ClientService:
    return container.clients


async def get_agent_service(
    container: AppContainer = Depends(get_container),
) -> AgentService:
    return container.agents


async def get_property_service(
    container: AppContainer = Depends(get_container),
) -> PropertyService:
    return container.properties


async def get_appointment_service(
    container: AppContainer = Depends(get_container),
) -> AppointmentService:
    return container.appointments
