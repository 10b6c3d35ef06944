"""Process-wide constants for the API-key subsystem."""

from types import MappingProxyType
from typing import Final

# Namespace the API-key configuration is registered under
API_KEY_NAMESPACE: Final = "apiKey"

# Constants table read at start-up; environment variables may override it
API_KEY_CONFIG: Final = MappingProxyType(
    {
        "PREFIX": "il_",
        "EXPIRY_DAYS": 365,
    }
)
