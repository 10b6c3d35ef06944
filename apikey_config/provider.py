"""API-key configuration provider.

Maps the process-wide constants table to an immutable :class:`ApiKeyConfig`
and exposes it under the ``"apiKey"`` namespace of a configuration registry.
"""

import threading
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .config import get_settings
from .constants import API_KEY_NAMESPACE
from .domain.entities import ApiKeyConfig
from .domain.exceptions import (
    ConfigurationInitializationError,
    NamespaceAlreadyRegisteredError,
)
from .logging_config import get_logger
from .registry import ConfigRegistry, default_registry

logger = get_logger(__name__)

REQUIRED_KEYS = ("PREFIX", "EXPIRY_DAYS")


def build_api_key_config(table: Mapping[str, Any]) -> ApiKeyConfig:
    """Build the API-key configuration from a constants table.

    Values are taken as-is; the prefix is neither stripped nor re-cased.

    Args:
        table: Mapping providing ``PREFIX`` and ``EXPIRY_DAYS``

    Returns:
        Validated, immutable configuration record

    Raises:
        ConfigurationInitializationError: If a key is missing or a value is
            malformed
    """
    if not isinstance(table, Mapping):
        raise ConfigurationInitializationError(
            f"API key constants table must be a mapping, got {type(table).__name__}"
        )

    missing = [key for key in REQUIRED_KEYS if key not in table]
    if missing:
        raise ConfigurationInitializationError(
            f"API key constants table is missing: {', '.join(missing)}"
        )

    return ApiKeyConfig(prefix=table["PREFIX"], expiry_days=table["EXPIRY_DAYS"])


def _settings_table() -> Mapping[str, Any]:
    try:
        return get_settings().api_key_table
    except ValidationError as e:
        raise ConfigurationInitializationError(f"Invalid API key settings: {e}") from e


class ApiKeyConfigProvider:
    """Produces the API-key configuration once and hands out the same record."""

    namespace = API_KEY_NAMESPACE

    def __init__(self, table: Mapping[str, Any] | None = None):
        self._table = table
        self._config: ApiKeyConfig | None = None
        self._lock = threading.Lock()

    def get_api_key_config(self) -> ApiKeyConfig:
        if self._config is not None:
            return self._config

        with self._lock:
            if self._config is None:
                table = self._table
                if table is None:
                    table = _settings_table()
                self._config = build_api_key_config(table)
                logger.info(
                    "API key configuration loaded",
                    prefix=self._config.prefix,
                    expiry_days=self._config.expiry_days,
                )
            return self._config

    __call__ = get_api_key_config


def register_api_key_config(
    registry: ConfigRegistry | None = None,
    provider: ApiKeyConfigProvider | None = None,
    *,
    eager: bool = False,
) -> ConfigRegistry:
    """Register the API-key provider under its namespace.

    Registration is skipped when the namespace is already bound, so start-up
    code may call this more than once.
    """
    registry = default_registry if registry is None else registry
    if API_KEY_NAMESPACE not in registry:
        try:
            registry.register(API_KEY_NAMESPACE, provider or ApiKeyConfigProvider())
        except NamespaceAlreadyRegisteredError:
            logger.debug("API key namespace registered concurrently")

    if eager:
        registry.get(API_KEY_NAMESPACE)
    return registry


def get_api_key_config(registry: ConfigRegistry | None = None) -> ApiKeyConfig:
    """Get the API-key configuration from the registry."""
    registry = register_api_key_config(registry)
    return registry.get(API_KEY_NAMESPACE)
