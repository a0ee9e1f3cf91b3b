"""Exceptions for scoped-config."""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Error reading or writing a configuration file."""

    pass


class ConfigValidationError(ConfigError):
    """Error validating a configuration request."""

    pass


class InvalidFlagCombinationError(ConfigValidationError):
    """A requested flag is not allowed for the requested scope."""

    pass


class MissingPluginContextError(ConfigValidationError):
    """Plugin-only flag requested with no active plugin."""

    pass


class MissingItemContextError(ConfigValidationError):
    """Item scope requested without an item file path."""

    pass


class MissingLibraryContextError(ConfigValidationError):
    """Library scope requested with no active library."""

    pass
