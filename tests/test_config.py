"""
Tests for settings loading.
"""

from core.config import DEFAULT_REDIS_TTL_MS, Settings


def test_redis_ttl_defaults_to_5000(monkeypatch):
    """REDIS_TTL defaults to 5000 when unset."""
    monkeypatch.delenv("REDIS_TTL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.redis_ttl == 5000
    assert DEFAULT_REDIS_TTL_MS == 5000


def test_reads_recognized_keys_from_environment(monkeypatch):
    """Recognized keys are read from the environment."""
    monkeypatch.setenv("GRAPHQL_PLAYGROUND", "true")
    monkeypatch.setenv("GRAPHQL_INTROSPECTION", "false")
    monkeypatch.setenv("REDIS_HOST", "cache.internal")
    monkeypatch.setenv("REDIS_PORT", "6380")
    monkeypatch.setenv("REDIS_USERNAME", "crm")
    monkeypatch.setenv("REDIS_PASSWORD", "s3cret")
    monkeypatch.setenv("REDIS_TTL", "1200")

    settings = Settings(_env_file=None)

    assert settings.graphql_playground is True
    assert settings.graphql_introspection is False
    assert settings.redis_host == "cache.internal"
    assert settings.redis_port == 6380
    assert settings.redis_username == "crm"
    assert settings.redis_password.get_secret_value() == "s3cret"
    assert settings.redis_ttl == 1200


def test_redis_password_is_masked_in_repr(monkeypatch):
    """The Redis password never appears in the settings repr."""
    monkeypatch.setenv("REDIS_PASSWORD", "s3cret")

    settings = Settings(_env_file=None)

    assert "s3cret" not in repr(settings)


def test_service_defaults():
    """Unset keys fall back to their defaults."""
    settings = Settings(_env_file=None, environment="production")

    assert settings.otel_service_name == "RealEstateCRM"
    assert settings.graphql_schema_file == "schema.graphql"
    assert settings.serve_static_root_path is None
    assert settings.is_development is False
