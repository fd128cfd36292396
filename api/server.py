"""
FastAPI application entry point.

Sets up the application with:
- Lifespan management (startup/shutdown of the application container)
- GraphQL endpoint and schema file generation
- REST and health route registration
- Tracing instrumentation
- Static file serving
- Middleware configuration
- Error handling
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.gql import (
    build_graphql_options,
    build_schema,
    create_graphql_router,
    write_schema_file,
)
from api.routes import (
    agents_router,
    appointments_router,
    clients_router,
    health_router,
    properties_router,
)
from api.static import build_static_mounts, mount_static
from core.config import Settings, get_settings
from core.container import AppContainer
from core.logging import configure_logging, get_logger
from core.telemetry import instrument_app, setup_tracing, shutdown_tracing
from services import NotFoundError


logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[AppContainer] = None,
) -> FastAPI:
    """
    Application factory.

    Builds the whole object graph from one settings object. The container
    is initialized in the lifespan, before the first request is served.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    container = container or AppContainer(settings)
    tracer_provider = setup_tracing(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting Real Estate CRM service...",
            environment=settings.environment,
        )

        try:
            await container.initialize()
        except Exception:
            logger.error("Startup failed, releasing resources", exc_info=True)
            await container.shutdown()
            shutdown_tracing(tracer_provider)
            raise

        logger.info(
            "Real Estate CRM service started",
            host=settings.server_host,
            port=settings.server_port,
        )

        yield

        # =========================================
        # Shutdown
        # =========================================
        logger.info("Shutting down Real Estate CRM service...")

        await container.shutdown()
        shutdown_tracing(tracer_provider)

        logger.info("Real Estate CRM service stopped")

    app = FastAPI(
        title="Real Estate CRM",
        description="Clients, properties, agents and appointments.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.container = container
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.log_request:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response

    # GraphQL
    graphql_options = build_graphql_options(settings)
    schema = build_schema(graphql_options, tracing=tracer_provider is not None)
    write_schema_file(schema, graphql_options)
    app.include_router(create_graphql_router(schema, graphql_options), prefix="/graphql")

    # Register routes
    app.include_router(health_router)
    app.include_router(clients_router)
    app.include_router(agents_router)
    app.include_router(properties_router)
    app.include_router(appointments_router)

    instrument_app(app, tracer_provider)

    # Static files go last so they never shadow API routes
    mount_static(app, build_static_mounts(settings))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "message": str(exc) if settings.debug else "An error occurred",
            },
        )

    logger.info(
        "Application wired",
        graphql_playground=graphql_options.playground,
        graphql_introspection=graphql_options.introspection,
        tracing=tracer_provider is not None,
    )
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
    )
