"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from hrcore.config import Settings
from hrcore.util.di import PROVIDERS, get_provider
from hrcore.util.di.core import ProdConfigProvider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Settings to serve; loaded from environment variables
            when omitted

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [
        ProdConfigProvider(settings)
        if base is ProdConfigProvider
        else get_provider(base, use_mock=False)()
        for base in PROVIDERS
    ]
    return make_async_container(*provider_instances)
