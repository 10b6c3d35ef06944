from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta

import pytest

from apikey_config.domain.constants import MAX_PREFIX_LENGTH
from apikey_config.domain.entities import ApiKeyConfig
from apikey_config.domain.exceptions import ConfigurationInitializationError


def test_api_key_config_keeps_values():
    config = ApiKeyConfig(prefix="ak_", expiry_days=30)
    assert config.prefix == "ak_"
    assert config.expiry_days == 30
    assert config.to_dict() == {"prefix": "ak_", "expiryDays": 30}


def test_api_key_config_is_immutable():
    """Test that a built record cannot be changed.

    Covers:
    - No mutation API exists after construction
    - Equal inputs give equal, hashable records
    """
    config = ApiKeyConfig(prefix="ak_", expiry_days=30)
    with pytest.raises(FrozenInstanceError):
        config.prefix = "other_"  # type: ignore[misc]

    assert config == ApiKeyConfig(prefix="ak_", expiry_days=30)
    assert hash(config) == hash(ApiKeyConfig(prefix="ak_", expiry_days=30))


@pytest.mark.parametrize("expiry_days", [0, -1, -365])
def test_non_positive_expiry_rejected(expiry_days):
    with pytest.raises(ConfigurationInitializationError, match="at least 1"):
        ApiKeyConfig(prefix="ak_", expiry_days=expiry_days)


@pytest.mark.parametrize("expiry_days", [True, 30.0, "30", None])
def test_non_integer_expiry_rejected(expiry_days):
    with pytest.raises(ConfigurationInitializationError, match="integer"):
        ApiKeyConfig(prefix="ak_", expiry_days=expiry_days)


def test_prefix_validation():
    """Test prefix business rules.

    Covers:
    - Empty prefixes are rejected
    - Prefixes longer than the stored key-prefix width are rejected
    - Whitespace and control characters are rejected
    - Non-string prefixes are rejected
    """
    with pytest.raises(ConfigurationInitializationError, match="empty"):
        ApiKeyConfig(prefix="", expiry_days=30)

    with pytest.raises(ConfigurationInitializationError, match="longer"):
        ApiKeyConfig(prefix="x" * (MAX_PREFIX_LENGTH + 1), expiry_days=30)

    for prefix in ["ak _", " ak_", "ak_\n", "ak\t"]:
        with pytest.raises(ConfigurationInitializationError, match="whitespace"):
            ApiKeyConfig(prefix=prefix, expiry_days=30)

    with pytest.raises(ConfigurationInitializationError, match="string"):
        ApiKeyConfig(prefix=None, expiry_days=30)  # type: ignore[arg-type]


def test_prefix_at_max_length_allowed():
    prefix = "X" * MAX_PREFIX_LENGTH
    assert ApiKeyConfig(prefix=prefix, expiry_days=1).prefix == prefix


def test_expiry_helpers():
    config = ApiKeyConfig(prefix="ak_", expiry_days=30)
    issued_at = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    assert config.expiry_delta == timedelta(days=30)
    assert config.expires_at(issued_at) == datetime(2025, 1, 31, 12, 0, tzinfo=UTC)
