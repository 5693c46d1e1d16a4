"""Tests for color selection."""
import pytest

from dfree.core.colors import (
    FULL_BANDS,
    SIMPLE_BANDS,
    ColorToken,
    UsageBands,
    drive_color,
    get_bands,
    usage_color,
)
from dfree.core.errors import ConfigError
from dfree.models.volume import VolumeType


class TestDriveColor:
    """Test color by volume type."""

    @pytest.mark.parametrize("volume_type, expected", [
        (VolumeType.REMOVABLE, ColorToken.CYAN),
        (VolumeType.NETWORK, ColorToken.MAGENTA),
        (VolumeType.OPTICAL, ColorToken.BLUE),
        (VolumeType.FIXED, ColorToken.WHITE),
        (VolumeType.OTHER, ColorToken.DIM),
    ])
    def test_mapping(self, volume_type, expected):
        assert drive_color(volume_type) is expected


class TestUsageColor:
    """Test color by usage percentage."""

    @pytest.mark.parametrize("percent, expected", [
        (100, ColorToken.BOLD_RED),
        (90, ColorToken.BOLD_RED),
        (89.99, ColorToken.RED),
        (80, ColorToken.RED),
        (75, ColorToken.BRIGHT_RED),
        (60, ColorToken.ORANGE),
        (55.5, ColorToken.YELLOW),
        (40, ColorToken.BRIGHT_YELLOW),
        (30, ColorToken.CYAN_GREEN),
        (29.9, ColorToken.DIM_GREEN),
        (10, ColorToken.GREEN),
        (9.99, ColorToken.BRIGHT_GREEN),
        (0, ColorToken.BRIGHT_GREEN),
    ])
    def test_full_bands(self, percent, expected):
        assert usage_color(percent) is expected

    @pytest.mark.parametrize("percent, expected", [
        (95, ColorToken.RED),
        (80, ColorToken.RED),
        (79, ColorToken.YELLOW),
        (50, ColorToken.YELLOW),
        (49.9, ColorToken.GREEN),
        (0, ColorToken.GREEN),
    ])
    def test_simple_bands(self, percent, expected):
        assert usage_color(percent, SIMPLE_BANDS) is expected

    @pytest.mark.parametrize("bands", [FULL_BANDS, SIMPLE_BANDS])
    def test_monotonic(self, bands):
        """A higher percentage never selects a cooler band."""
        urgency = [bands.below] + [color for _, color in reversed(bands.bands)]
        ranks = [urgency.index(bands.color_for(p / 4)) for p in range(0, 401)]
        assert ranks == sorted(ranks)

    def test_bands_sorted_highest_first(self):
        """Band order given at construction does not matter."""
        bands = UsageBands.from_pairs(
            [(50, ColorToken.YELLOW), (80, ColorToken.RED)],
            below=ColorToken.GREEN,
        )
        assert [threshold for threshold, _ in bands.bands] == [80, 50]
        assert bands.color_for(85) is ColorToken.RED


class TestBandPresets:
    """Test preset lookup."""

    def test_lookup(self):
        assert get_bands("full") is FULL_BANDS
        assert get_bands("SIMPLE") is SIMPLE_BANDS

    def test_unknown_preset(self):
        with pytest.raises(ConfigError) as exc_info:
            get_bands("rainbow")
        assert "rainbow" in str(exc_info.value)
