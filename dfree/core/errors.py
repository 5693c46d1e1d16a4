"""dfree exceptions."""


class DfreeError(Exception):
    """Base class for dfree errors."""


class ConfigError(DfreeError):
    """Raised for invalid runtime configuration."""
