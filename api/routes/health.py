"""
Health check endpoints.

Provides liveness and readiness probes for load balancers and orchestration
systems. Both answer with an empty body; readiness reflects database and
cache connectivity.
"""

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_container
from core.container import AppContainer
from core.logging import get_logger


logger = get_logger(__name__)
router = APIRouter(prefix="/_health", tags=["Health"])


@router.get("/live", status_code=status.HTTP_204_NO_CONTENT)
async def health_live() -> Response:
    """Returns 204 if the service process is running."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/ready", status_code=status.HTTP_204_NO_CONTENT)
async def health_ready(
    container: AppContainer = Depends(get_container),
) -> Response:
    """
    Readiness check.

    Returns 204 when the database and the cache both answer, 404 otherwise.
    """
    database_ok = await container.database.ping()
    try:
        cache_ok = await container.cache.ping()
    except Exception as e:
        logger.warning("Cache ping failed", error=str(e))
        cache_ok = False

    if not (database_ok and cache_ok):
        logger.warning("Service not ready", database=database_ok, cache=cache_ok)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
