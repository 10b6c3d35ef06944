"""Namespaced configuration registry.

Components register a zero-argument factory under a namespace key once, at
start-up, and any other component can read the produced value by that key.
Values are built lazily on first read (or eagerly on request) and cached for
the lifetime of the registry.
"""

import threading
from collections.abc import Callable, Iterator
from typing import Any, Final, TypeVar

from .domain.exceptions import NamespaceAlreadyRegisteredError, UnknownNamespaceError
from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_MISSING: Final = object()


class _Entry:
    __slots__ = ("factory", "value")

    def __init__(self, factory: Callable[[], Any]):
        self.factory = factory
        self.value: Any = _MISSING

    @property
    def resolved(self) -> bool:
        return self.value is not _MISSING


class ConfigRegistry:
    """Registry binding configuration factories to namespace keys."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.RLock()

    def register(
        self, namespace: str, factory: Callable[[], T], *, eager: bool = False
    ) -> None:
        """Bind a configuration factory to a namespace.

        Args:
            namespace: Key the value will be retrievable under (e.g. 'apiKey')
            factory: Zero-argument callable producing the configuration value
            eager: Build the value immediately instead of on first read

        Raises:
            ValueError: If namespace is empty
            NamespaceAlreadyRegisteredError: If namespace is already bound
        """
        if not namespace or not namespace.strip():
            raise ValueError("Configuration namespace cannot be empty")

        with self._lock:
            if namespace in self._entries:
                raise NamespaceAlreadyRegisteredError(
                    f"Configuration namespace '{namespace}' is already registered"
                )
            self._entries[namespace] = _Entry(factory)

        logger.debug("Configuration namespace registered", namespace=namespace)

        if eager:
            self.get(namespace)

    def register_as(
        self, namespace: str, *, eager: bool = False
    ) -> Callable[[Callable[[], T]], Callable[[], T]]:
        """Decorator form of :meth:`register`."""

        def decorator(factory: Callable[[], T]) -> Callable[[], T]:
            self.register(namespace, factory, eager=eager)
            return factory

        return decorator

    def get(self, namespace: str) -> Any:
        """Get the value registered under a namespace, building it if needed.

        Raises:
            UnknownNamespaceError: If namespace was never registered
        """
        entry = self._entries.get(namespace)
        if entry is None:
            raise UnknownNamespaceError(
                f"Configuration namespace '{namespace}' is not registered"
            )

        if entry.resolved:
            return entry.value

        with self._lock:
            # Another thread may have built it while we waited
            if not entry.resolved:
                try:
                    entry.value = entry.factory()
                except Exception:
                    logger.error(
                        "Configuration namespace failed to build", namespace=namespace
                    )
                    raise
                logger.debug("Configuration namespace built", namespace=namespace)
            return entry.value

    def get_value(self, path: str, default: Any = _MISSING) -> Any:
        """Look up a value by dotted path, e.g. 'apiKey.expiryDays'.

        Path segments after the namespace are resolved against the keys of the
        value's ``to_dict()`` (when it has one) and then against attributes.

        Args:
            path: Namespace followed by optional dot-separated keys
            default: Returned when the path does not resolve

        Raises:
            UnknownNamespaceError: If the namespace is unknown and no default is given
        """
        namespace, *keys = path.split(".")
        try:
            value = self.get(namespace)
        except UnknownNamespaceError:
            if default is _MISSING:
                raise
            return default

        for key in keys:
            value = _lookup(value, key)
            if value is _MISSING:
                return None if default is _MISSING else default
        return value

    def build_all(self) -> None:
        """Build every registered namespace that has not been built yet."""
        for namespace in self.namespaces():
            self.get(namespace)

    def namespaces(self) -> list[str]:
        """Get registered namespace keys in registration order."""
        return list(self._entries)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.namespaces())

    def __len__(self) -> int:
        return len(self._entries)


def _lookup(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key, _MISSING)
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        data = to_dict()
        if key in data:
            return data[key]
    return getattr(value, key, _MISSING)


# Global registry instance
default_registry: Final = ConfigRegistry()
