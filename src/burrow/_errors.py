"""Burrow error hierarchy.

All burrow-specific errors inherit from BurrowError for easy catching.
The route compiler itself never raises: only its collaborators do.
"""


class BurrowError(Exception):
    """Base error for all burrow operations."""


class ConfigError(BurrowError):
    """Invalid or missing configuration."""


class DiscoveryError(BurrowError):
    """The pages root could not be enumerated."""


class WriteError(BurrowError):
    """The generated routes module could not be written."""
