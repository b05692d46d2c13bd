"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends when a token is present
    send_to_logfire: bool | None = None


class EventSettings(BaseModel):
    """Domain event bus configuration."""

    # Run the handlers of a batch of events concurrently
    # When False, events are published one after another in order
    publish_concurrently: bool = True


class Settings(BaseSettings):
    """Application settings.

    Values come from environment variables and an optional ``.env`` file.
    Nested settings use ``__`` as separator, e.g.
    ``EVENTS__PUBLISH_CONCURRENTLY=false``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    observability: ObservabilitySettings = ObservabilitySettings()
    events: EventSettings = EventSettings()
