"""Application start-up: settings, logging, observability and DI."""

import logfire
from dishka import AsyncContainer
from pydantic import ValidationError

from hrcore.config import Settings
from hrcore.util.di.container import create_container
from hrcore.util.error import ConfigurationError
from hrcore.util.logging import setup_logging
from hrcore.util.observability import configure_logfire


def load_settings(**overrides) -> Settings:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If a setting is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and Logfire, then build the production container.

    Args:
        settings: Settings to use; loaded from the environment when omitted

    Returns:
        Production container serving ``settings``

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    settings = settings or load_settings()

    # Configure Logfire early so the rest of start-up is traced
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Starting hrcore", environment=settings.environment)
    return create_container(settings)
