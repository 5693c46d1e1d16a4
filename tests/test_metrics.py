"""Tests for usage metrics."""
from dfree.core.metrics import usage_percent, used_bytes
from dfree.models.volume import Volume, VolumeType


class TestMetrics:
    """Test used bytes and usage percentage."""

    def test_used_and_percent(self):
        assert used_bytes(200, 50) == 150
        assert usage_percent(200, 50) == 75.0

    def test_zero_total_has_zero_percent(self):
        """Empty volumes do not divide by zero."""
        assert usage_percent(0, 0) == 0

    def test_full_and_empty(self):
        assert usage_percent(1000, 0) == 100.0
        assert usage_percent(1000, 1000) == 0.0

    def test_used_bytes(self):
        assert used_bytes(1024, 24) == 1000


class TestVolume:
    """Test Volume derived properties."""

    def test_properties(self):
        volume = Volume("sda1", "/", total_bytes=200, free_bytes=50, volume_type=VolumeType.FIXED)
        assert volume.used_bytes == 150
        assert volume.usage_percent == 75.0

    def test_default_type_is_other(self):
        volume = Volume("tmpfs", "/run", total_bytes=10, free_bytes=10)
        assert volume.volume_type is VolumeType.OTHER
        assert volume.usage_percent == 0.0
