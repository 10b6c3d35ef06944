from pydantic import ValidationError

from .config import get_settings
from .constants import API_KEY_NAMESPACE
from .domain.exceptions import ConfigurationInitializationError
from .logging_config import get_logger, setup_logging
from .provider import register_api_key_config
from .registry import ConfigRegistry, default_registry


def initialize(
    registry: ConfigRegistry | None = None, *, configure_logging: bool = True
) -> ConfigRegistry:
    """Load and register all configuration at process start-up.

    Every registered namespace is built eagerly so a bad constant stops the
    process here instead of surfacing on first use.

    Args:
        registry: Registry to populate (defaults to the global registry)
        configure_logging: Set up logging from the loaded settings first

    Returns:
        The populated registry

    Raises:
        ConfigurationInitializationError: If any configuration is missing or invalid
    """
    registry = default_registry if registry is None else registry

    try:
        settings = get_settings()
    except ValidationError as e:
        raise ConfigurationInitializationError(f"Invalid settings: {e}") from e

    if configure_logging:
        setup_logging(settings=settings)
    logger = get_logger(__name__)

    try:
        register_api_key_config(registry)
        registry.build_all()
    except ConfigurationInitializationError as e:
        logger.error("Configuration initialization failed", error=str(e))
        raise
    except Exception as e:
        logger.error(
            "Configuration initialization failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise ConfigurationInitializationError(
            f"Configuration initialization failed: {type(e).__name__}: {e}"
        ) from e

    api_key_config = registry.get(API_KEY_NAMESPACE)
    logger.info(
        "Configuration initialized",
        app_name=settings.app_name,
        version=settings.version,
        namespaces=registry.namespaces(),
        **{API_KEY_NAMESPACE: api_key_config.to_dict()},
    )
    return registry
