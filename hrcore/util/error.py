"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or invalid."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be resolved."""

    pass
