"""Shared test fixtures for dfree tests."""
import pytest

from dfree.core import config as config_module
from dfree.models.volume import Volume, VolumeType

GB = 1024 ** 3

DFREE_ENV = (
    "DFREE_EXACT",
    "DFREE_COLOR",
    "DFREE_USAGE_BANDS",
    "DFREE_LOG_FILE",
    "DFREE_DEBUG",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Each test starts from default configuration."""
    for name in DFREE_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def system_volume():
    """100 GB fixed drive with 25 GB free."""
    return Volume(
        name="C:\\",
        mount_path="C:\\",
        total_bytes=100 * GB,
        free_bytes=25 * GB,
        volume_type=VolumeType.FIXED,
    )


@pytest.fixture
def mixed_volumes(system_volume):
    """A fixed, a removable and a network volume, in mount order."""
    return [
        system_volume,
        Volume(
            name="/dev/sdb1",
            mount_path="/media/usb/",
            total_bytes=32 * GB,
            free_bytes=30 * GB,
            volume_type=VolumeType.REMOVABLE,
        ),
        Volume(
            name="nas:/export",
            mount_path="/mnt/nas",
            total_bytes=4096 * GB,
            free_bytes=512 * GB,
            volume_type=VolumeType.NETWORK,
        ),
    ]
