"""Color selection by volume type and by usage level.

Colors are abstract ColorToken values; dfree.core.terminal turns them into
escape sequences (or nothing) when a line is rendered.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Tuple

from dfree.core.errors import ConfigError
from dfree.models.volume import VolumeType


class ColorToken(Enum):
    """Platform independent display color."""
    CYAN = "cyan"
    MAGENTA = "magenta"
    BLUE = "blue"
    WHITE = "white"
    DIM = "dim"
    BOLD_RED = "bold_red"
    RED = "red"
    BRIGHT_RED = "bright_red"
    ORANGE = "orange"
    YELLOW = "yellow"
    BRIGHT_YELLOW = "bright_yellow"
    CYAN_GREEN = "cyan_green"
    DIM_GREEN = "dim_green"
    GREEN = "green"
    BRIGHT_GREEN = "bright_green"


DRIVE_COLORS: Dict[VolumeType, ColorToken] = {
    VolumeType.REMOVABLE: ColorToken.CYAN,
    VolumeType.NETWORK: ColorToken.MAGENTA,
    VolumeType.OPTICAL: ColorToken.BLUE,
    VolumeType.FIXED: ColorToken.WHITE,
}


def drive_color(volume_type: VolumeType) -> ColorToken:
    """Color for a drive name; unknown types are dimmed."""
    return DRIVE_COLORS.get(volume_type, ColorToken.DIM)


@dataclass(frozen=True)
class UsageBands:
    """Usage percentage thresholds mapped to colors.

    Attributes:
        bands: (threshold, color) pairs; kept ordered highest threshold first
        below: color used when no threshold is met
    """
    bands: Tuple[Tuple[int, ColorToken], ...] = field(default_factory=tuple)
    below: ColorToken = ColorToken.GREEN

    def __post_init__(self):
        ordered = tuple(sorted(self.bands, key=lambda band: band[0], reverse=True))
        object.__setattr__(self, "bands", ordered)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, ColorToken]], below: ColorToken) -> "UsageBands":
        """Build a band table from (threshold, color) pairs in any order."""
        return cls(bands=tuple(pairs), below=below)

    def color_for(self, percent: float) -> ColorToken:
        """Return the color of the highest band the floored percent reaches."""
        level = math.floor(percent)
        for threshold, color in self.bands:
            if level >= threshold:
                return color
        return self.below


FULL_BANDS = UsageBands.from_pairs(
    [
        (90, ColorToken.BOLD_RED),
        (80, ColorToken.RED),
        (70, ColorToken.BRIGHT_RED),
        (60, ColorToken.ORANGE),
        (50, ColorToken.YELLOW),
        (40, ColorToken.BRIGHT_YELLOW),
        (30, ColorToken.CYAN_GREEN),
        (20, ColorToken.DIM_GREEN),
        (10, ColorToken.GREEN),
    ],
    below=ColorToken.BRIGHT_GREEN,
)

SIMPLE_BANDS = UsageBands.from_pairs(
    [
        (80, ColorToken.RED),
        (50, ColorToken.YELLOW),
    ],
    below=ColorToken.GREEN,
)

BAND_PRESETS: Dict[str, UsageBands] = {
    "full": FULL_BANDS,
    "simple": SIMPLE_BANDS,
}


def get_bands(name: str) -> UsageBands:
    """Look up a band preset by name ("full" or "simple").

    Raises:
        ConfigError: If no preset has that name
    """
    try:
        return BAND_PRESETS[name.lower()]
    except KeyError:
        valid = ", ".join(sorted(BAND_PRESETS))
        raise ConfigError(f"Unknown usage band preset '{name}' (expected one of: {valid})") from None


def usage_color(percent: float, bands: UsageBands = FULL_BANDS) -> ColorToken:
    """Color for a usage percentage under the given band table."""
    return bands.color_for(percent)
