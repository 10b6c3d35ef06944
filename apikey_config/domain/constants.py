"""Domain business rules and constants."""

from typing import Final

# Business Rules - API-key configuration constraints
MIN_EXPIRY_DAYS: Final = 1
MAX_PREFIX_LENGTH: Final = 10
