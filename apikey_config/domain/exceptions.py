"""Configuration exceptions."""


class ConfigurationError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigurationInitializationError(ConfigurationError):
    """Raised when configuration constants are missing or malformed at start-up."""

    pass


class NamespaceAlreadyRegisteredError(ConfigurationError):
    """Raised when attempting to register a namespace twice."""

    pass


class UnknownNamespaceError(ConfigurationError, KeyError):
    """Raised when looking up a namespace that was never registered."""

    def __str__(self) -> str:
        # KeyError wraps its message in quotes
        return Exception.__str__(self)
