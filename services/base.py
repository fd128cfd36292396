"""
Generic CRUD service.

Each entity service reads and writes through the shared database and caches
single-record lookups in the shared Redis cache (cache-aside). Writes
invalidate the cached record.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import DateTime, Enum as SAEnum, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.cache import RedisCache
from core.logging import get_logger
from core.storage import Database, EntityMixin
from core.telemetry import get_tracer


logger = get_logger(__name__)
tracer = get_tracer(__name__)

ModelT = TypeVar("ModelT", bound=EntityMixin)


class NotFoundError(Exception):
    """Raised when a write targets a record that does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"No resource was found for {entity_id}")


class CrudService(Generic[ModelT]):
    """
    Create/read/update/delete operations for one ORM model.

    Subclasses set ``model``, ``entity_name``, the columns that may be
    used as equality filters, and the rows referencing this entity.
    """

    model: type[ModelT]
    entity_name: str
    filterable: tuple[str, ...] = ()
    # (model, foreign key attribute, entity name) of rows that reference this
    # entity; their cached copies go stale when it is deleted.
    dependents: tuple[tuple[type, str, str], ...] = ()

    def __init__(self, database: Database, cache: RedisCache):
        self._database = database
        self._cache = cache

    def _cache_key(self, entity_id: str) -> str:
        return f"{self.entity_name}:{entity_id}"

    def _apply_filters(self, stmt: Select, filters: dict[str, Any]) -> Select:
        for name, value in filters.items():
            if value is None:
                continue
            if name not in self.filterable:
                raise ValueError(f"Cannot filter {self.entity_name} by '{name}'")
            stmt = stmt.where(getattr(self.model, name) == value)
        return stmt

    def _from_cache(self, data: dict[str, Any]) -> ModelT:
        """Rebuild a detached model instance from its cached column values."""
        values: dict[str, Any] = {}
        for column in self.model.__table__.columns:
            value = data.get(column.key)
            if value is not None:
                if isinstance(column.type, DateTime):
                    value = datetime.fromisoformat(value)
                elif isinstance(column.type, SAEnum) and column.type.enum_class is not None:
                    value = column.type.enum_class(value)
            values[column.key] = value
        return self.model(**values)

    async def count(self, **filters: Any) -> int:
        with tracer.start_as_current_span(f"{self.entity_name}.count"):
            stmt = self._apply_filters(
                select(func.count()).select_from(self.model), filters
            )
            async with self._database.session() as session:
                result = await session.execute(stmt)
                return result.scalar_one()

    async def find_many(
        self,
        *,
        skip: int = 0,
        take: Optional[int] = None,
        **filters: Any,
    ) -> list[ModelT]:
        """List records, newest first."""
        with tracer.start_as_current_span(f"{self.entity_name}.find_many"):
            stmt = select(self.model).order_by(
                self.model.created_at.desc(), self.model.id
            )
            stmt = self._apply_filters(stmt, filters).offset(skip)
            if take is not None:
                stmt = stmt.limit(take)

            async with self._database.session() as session:
                result = await session.scalars(stmt)
                return list(result.all())

    async def find_one(self, entity_id: str) -> Optional[ModelT]:
        """Get a record by id, or None."""
        with tracer.start_as_current_span(f"{self.entity_name}.find_one") as span:
            key = self._cache_key(entity_id)
            cached = await self._cache.get(key)
            if cached is not None:
                span.set_attribute("cache.hit", True)
                return self._from_cache(cached)

            span.set_attribute("cache.hit", False)
            async with self._database.session() as session:
                record = await session.get(self.model, entity_id)

            if record is None:
                return None

            await self._cache.set(key, record.to_dict())
            return record

    async def create(self, data: dict[str, Any]) -> ModelT:
        with tracer.start_as_current_span(f"{self.entity_name}.create"):
            record = self.model(**data)
            async with self._database.session() as session:
                session.add(record)
                await session.flush()

            logger.info(
                f"{self.entity_name.capitalize()} created",
                entity_id=record.id,
            )
            return record

    async def update(self, entity_id: str, data: dict[str, Any]) -> ModelT:
        """Update the given fields; raises NotFoundError for unknown ids."""
        with tracer.start_as_current_span(f"{self.entity_name}.update"):
            async with self._database.session() as session:
                record = await session.get(self.model, entity_id)
                if record is None:
                    raise NotFoundError(self.entity_name, entity_id)
                for name, value in data.items():
                    setattr(record, name, value)
                await session.flush()

            await self._cache.delete(self._cache_key(entity_id))
            logger.info(
                f"{self.entity_name.capitalize()} updated",
                entity_id=entity_id,
                fields=sorted(data),
            )
            return record

    async def _dependent_cache_keys(
        self, session: AsyncSession, entity_id: str
    ) -> list[str]:
        keys: list[str] = []
        for model, foreign_key, entity_name in self.dependents:
            stmt = select(model.id).where(getattr(model, foreign_key) == entity_id)
            for dependent_id in await session.scalars(stmt):
                keys.append(f"{entity_name}:{dependent_id}")
        return keys

    async def delete(self, entity_id: str) -> ModelT:
        """Delete a record; raises NotFoundError for unknown ids."""
        with tracer.start_as_current_span(f"{self.entity_name}.delete"):
            async with self._database.session() as session:
                record = await session.get(self.model, entity_id)
                if record is None:
                    raise NotFoundError(self.entity_name, entity_id)
                stale_keys = await self._dependent_cache_keys(session, entity_id)
                await session.delete(record)

            await self._cache.delete(self._cache_key(entity_id))
            for key in stale_keys:
                await self._cache.delete(key)
            logger.info(
                f"{self.entity_name.capitalize()} deleted",
                entity_id=entity_id,
            )
            return record
