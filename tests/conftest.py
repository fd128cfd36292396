"""
Pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

import fakeredis
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("TRACING_ENABLED", "false")

from api.server import create_app  # noqa: E402
from core.cache import RedisCache  # noqa: E402
from core.config import Settings  # noqa: E402
from core.container import AppContainer  # noqa: E402


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """Settings for an isolated on-disk SQLite database and schema file."""
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'crm.db'}",
        "database_auto_create": True,
        "graphql_schema_file": str(tmp_path / "schema.graphql"),
        "tracing_enabled": False,
        "graphql_playground": False,
        "graphql_introspection": False,
        "debug": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def fake_redis():
    return fakeredis.FakeAsyncRedis(decode_responses=True)


@pytest.fixture
def cache(fake_redis):
    return RedisCache(fake_redis, ttl=5000)


@pytest.fixture
def container(settings, cache):
    return AppContainer(settings, cache=cache)


@pytest_asyncio.fixture
async def initialized_container(container):
    """Container with database and services ready, for service-level tests."""
    await container.initialize()
    yield container
    await container.shutdown()


@pytest.fixture
def app(settings, container):
    return create_app(settings, container)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
