"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from .constants import MAX_PREFIX_LENGTH, MIN_EXPIRY_DAYS
from .exceptions import ConfigurationInitializationError


def validate_prefix(prefix: object) -> None:
    """Validate an API-key prefix according to domain business rules.

    Args:
        prefix: The prefix to validate

    Raises:
        ConfigurationInitializationError: If prefix is not a string, is empty,
            too long, or contains whitespace or control characters
    """
    if not isinstance(prefix, str):
        raise ConfigurationInitializationError(
            f"API key prefix must be a string, got {type(prefix).__name__}"
        )

    if not prefix:
        raise ConfigurationInitializationError("API key prefix cannot be empty")

    if len(prefix) > MAX_PREFIX_LENGTH:
        raise ConfigurationInitializationError(
            f"API key prefix cannot be longer than {MAX_PREFIX_LENGTH} characters"
        )

    for char in prefix:
        if char.isspace() or ord(char) < 32 or ord(char) == 127:
            raise ConfigurationInitializationError(
                "API key prefix cannot contain whitespace or control characters"
            )


def validate_expiry_days(expiry_days: object) -> None:
    """Validate the API-key expiry window in days."""
    # bool is an int subclass, but True is not a duration
    if isinstance(expiry_days, bool) or not isinstance(expiry_days, int):
        raise ConfigurationInitializationError(
            "API key expiry days must be an integer, "
            + f"got {type(expiry_days).__name__}"
        )

    if expiry_days < MIN_EXPIRY_DAYS:
        raise ConfigurationInitializationError(
            f"API key expiry days must be at least {MIN_EXPIRY_DAYS}, "
            + f"got {expiry_days}"
        )


@dataclass(frozen=True)
class ApiKeyConfig:
    """Immutable configuration of the API-key subsystem."""

    prefix: str
    expiry_days: int

    def __post_init__(self):
        """Validate configuration data after initialization."""
        validate_prefix(self.prefix)
        validate_expiry_days(self.expiry_days)

    @property
    def expiry_delta(self) -> timedelta:
        """Lifetime of a newly issued key."""
        return timedelta(days=self.expiry_days)

    def expires_at(self, issued_at: datetime) -> datetime:
        """Get the default expiry moment for a key issued at ``issued_at``."""
        return issued_at + self.expiry_delta

    def to_dict(self) -> dict[str, Any]:
        """Get the record in its exposed shape."""
        return {"prefix": self.prefix, "expiryDays": self.expiry_days}
