"""dfree runtime configuration and settings."""
import os
from dataclasses import dataclass, replace
from typing import Optional

from dfree.core.colors import BAND_PRESETS
from dfree.core.errors import ConfigError
from dfree.core.terminal import COLOR_MODES

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (got '{value}')")


@dataclass(frozen=True)
class DfreeConfig:
    """Runtime configuration for a dfree run.

    Attributes:
        exact: Show sizes as whole kilobytes instead of scaled units (default: False)
        color: Color mode - auto, always or never (default: auto)
        usage_bands: Usage color band preset - full or simple (default: full)
        log_file: Optional file receiving log records
        verbose: Debug-level logging (default: False)
    """

    exact: bool = False
    color: str = "auto"
    usage_bands: str = "full"
    log_file: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.color not in COLOR_MODES:
            raise ConfigError(
                f"Invalid color mode '{self.color}' (expected one of: {', '.join(COLOR_MODES)})"
            )
        if self.usage_bands not in BAND_PRESETS:
            raise ConfigError(
                f"Invalid usage band preset '{self.usage_bands}' "
                f"(expected one of: {', '.join(sorted(BAND_PRESETS))})"
            )

    @classmethod
    def from_env(cls) -> "DfreeConfig":
        """Create config from environment variables.

        Environment variables:
            DFREE_EXACT: Exact (kilobyte) sizes when true
            DFREE_COLOR: auto, always or never
            DFREE_USAGE_BANDS: full or simple
            DFREE_LOG_FILE: Log file path
            DFREE_DEBUG: Debug logging when true

        Returns:
            DfreeConfig instance with values from environment or defaults

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        return cls(
            exact=_env_flag("DFREE_EXACT", cls.exact),
            color=os.getenv("DFREE_COLOR", cls.color).strip().lower(),
            usage_bands=os.getenv("DFREE_USAGE_BANDS", cls.usage_bands).strip().lower(),
            log_file=os.getenv("DFREE_LOG_FILE") or None,
            verbose=_env_flag("DFREE_DEBUG", cls.verbose),
        )

    def with_exact(self, exact: bool) -> "DfreeConfig":
        return replace(self, exact=exact)


# Global config instance, created on first use
_config: Optional[DfreeConfig] = None


def get_config() -> DfreeConfig:
    """Get the global dfree configuration.

    Returns:
        DfreeConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = DfreeConfig.from_env()
    return _config

