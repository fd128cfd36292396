"""
Secrets manager.

Resolves named secrets from the application settings, falling back to the
process environment for keys the settings model does not declare.
"""

import os
from enum import Enum
from typing import Optional, Union

from pydantic import SecretStr

from core.config import Settings
from core.logging import get_logger


logger = get_logger(__name__)


class SecretName(str, Enum):
    """Secrets known to the application."""
    JWT_SECRET_KEY = "JWT_SECRET_KEY"
    REDIS_PASSWORD = "REDIS_PASSWORD"


class SecretsManager:
    """Read-only access to secrets by name."""

    def __init__(self, settings: Settings):
        self._settings = settings

    async def get_secret(self, key: Union[SecretName, str]) -> Optional[str]:
        """
        Get a secret value.

        Args:
            key: Secret name (enum member or raw environment key)

        Returns:
            The secret as plain text, or None if it is not configured
        """
        name = key.value if isinstance(key, SecretName) else key

        value = getattr(self._settings, name.lower(), None)
        if value is None:
            value = os.environ.get(name)

        if value is None:
            logger.debug("Secret not configured", secret=name)
            return None

        if isinstance(value, SecretStr):
            return value.get_secret_value()
        return str(value)
