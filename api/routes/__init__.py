"""
API route modules.
"""

from api.routes.agents import router as agents_router
from api.routes.appointments import router as appointments_router
from api.routes.clients import router as clients_router
from api.routes.health import router as health_router
from api.routes.properties import router as properties_router

__all__ = [
    "agents_router",
    "appointments_router",
    "clients_router",
    "health_router",
    "properties_router",
]
