"""Typed configuration provider for the API-key subsystem."""

from .bootstrap import initialize
from .constants import API_KEY_NAMESPACE
from .domain.entities import ApiKeyConfig
from .domain.exceptions import (
    ConfigurationError,
    ConfigurationInitializationError,
    NamespaceAlreadyRegisteredError,
    UnknownNamespaceError,
)
from .provider import (
    ApiKeyConfigProvider,
    build_api_key_config,
    get_api_key_config,
    register_api_key_config,
)
from .registry import ConfigRegistry, default_registry

__all__ = [
    "API_KEY_NAMESPACE",
    "ApiKeyConfig",
    "ApiKeyConfigProvider",
    "ConfigRegistry",
    "ConfigurationError",
    "ConfigurationInitializationError",
    "NamespaceAlreadyRegisteredError",
    "UnknownNamespaceError",
    "build_api_key_config",
    "default_registry",
    "get_api_key_config",
    "initialize",
    "register_api_key_config",
]
