"""Application-level exceptions, outside the domain model."""


class ConfigError(Exception):
    """Invalid or missing application configuration."""
