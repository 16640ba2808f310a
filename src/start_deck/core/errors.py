"""Exception types for StartDeck."""


class StartDeckError(Exception):
    """Base class for StartDeck errors."""


class ConfigError(StartDeckError):
    """Configuration file could not be loaded or validated."""


class GeolocationError(StartDeckError):
    """Device location was denied, unsupported or unavailable."""
