"""
Custom exception classes for the QoL plugin.

These provide a hierarchy of typed exceptions for config loading. None of them
is allowed to escape into the host process; the loader catches them and falls
back to defaults.
"""


class QolError(Exception):
    """Base exception for plugin-related errors."""

    pass


class ConfigError(QolError):
    """Exception raised for configuration-related errors."""

    pass


class ConfigMissing(ConfigError):
    """The config file does not exist; defaults get generated and written."""

    pass


class ConfigMalformed(ConfigError):
    """The config file exists but cannot be read, parsed or validated."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class WriteFailure(ConfigError):
    """The default config could not be persisted."""

    pass
