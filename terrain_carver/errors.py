# errors.py


class TerrainError(Exception):
    """Base class for errors raised around terrain generation."""


class ConfigError(TerrainError, ValueError):
    """A configuration value is missing, malformed or out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
