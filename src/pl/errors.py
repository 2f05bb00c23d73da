"""Startup errors that abort pl before the UI is drawn."""


class PlError(Exception):
    """Base class for fatal pl errors."""

    pass


class ConfigError(PlError, ValueError):
    """Raised when the config file exists but cannot be parsed."""

    pass


class HomeDirectoryError(PlError, RuntimeError):
    """Raised when '~' must be expanded but the home directory is unknown."""

    pass
