"""
Composition root.

Builds the application object graph from a settings object exactly once at
startup: secrets manager, database, cache and the domain services. The
settings are passed by reference to every dependent constructor. After
initialize() the wiring is read-only.
"""

from typing import Optional

from core.cache import RedisCache, create_cache
from core.config import Settings
from core.logging import get_logger
from core.secrets import SecretsManager
from core.storage import Database
from services import AgentService, AppointmentService, ClientService, PropertyService


logger = get_logger(__name__)


class AppContainer:
    """
    Owns every long-lived collaborator of the application.

    Pre-built collaborators may be passed in (tests); anything omitted is
    constructed from settings during initialize(). Construction failures
    propagate to the caller and abort startup.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        database: Optional[Database] = None,
        cache: Optional[RedisCache] = None,
        secrets: Optional[SecretsManager] = None,
    ):
        self._settings = settings
        self._database = database
        self._cache = cache
        self._secrets = secrets
        self._clients: Optional[ClientService] = None
        self._agents: Optional[AgentService] = None
        self._properties: Optional[PropertyService] = None
        self._appointments: Optional[AppointmentService] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Construct and connect all collaborators. Idempotent."""
        if self._initialized:
            return

        logger.info("Initializing application container")

        if self._secrets is None:
            self._secrets = SecretsManager(self._settings)

        if self._database is None:
            self._database = Database(
                self._settings.database_url,
                echo=self._settings.debug,
            )
        self._database.connect()
        if self._settings.database_auto_create:
            await self._database.create_all()

        if self._cache is None:
            self._cache = await create_cache(self._settings, self._secrets)

        self._clients = ClientService(self._database, self._cache)
        self._agents = AgentService(self._database, self._cache)
        self._properties = PropertyService(self._database, self._cache)
        self._appointments = AppointmentService(self._database, self._cache)

        self._initialized = True
        logger.info("Application container initialized")

    async def shutdown(self) -> None:
        """Close the cache and dispose of the database engine."""
        logger.info("Shutting down application container")

        if self._cache is not None:
            await self._cache.close()

        if self._database is not None:
            await self._database.close()

        self._initialized = False
        logger.info("Application container shut down")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError(
                "Container not initialized. Call initialize() first."
            )

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def secrets(self) -> SecretsManager:
        self._ensure_initialized()
        return self._secrets

    @property
    def database(self) -> Database:
        self._ensure_initialized()
        return self._database

    @property
    def cache(self) -> RedisCache:
        self._ensure_initialized()
        return self._cache

    @property
    def clients(self) -> ClientService:
        self._ensure_initialized()
        return self._clients

    @property
    def agents(self) -> AgentService:
        self._ensure_initialized()
        return self._agents

    @property
    def properties(self) -> PropertyService:
        self._ensure_initialized()
        return self._properties

    @property
    def appointments(self) -> AppointmentService:
        self._ensure_initialized()
        return self._appointments
