"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hrcore.config import EventSettings, Settings
from hrcore.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Serves the settings it was given, or loads them from environment
    variables and the .env file.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self._settings or Settings()

    @provide(scope=Scope.APP)
    def provide_event_settings(self, settings: Settings) -> EventSettings:
        """Provide event bus settings."""
        return settings.events
