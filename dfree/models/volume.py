"""Mounted volume models."""
from dataclasses import dataclass
from enum import Enum

from dfree.core.metrics import usage_percent, used_bytes


class VolumeType(Enum):
    """Kind of storage backing a mounted volume."""
    FIXED = "fixed"
    REMOVABLE = "removable"
    NETWORK = "network"
    OPTICAL = "optical"
    OTHER = "other"


@dataclass(frozen=True)
class Volume:
    """A ready, mounted filesystem root."""
    name: str             # /dev/sda1, C:\
    mount_path: str       # /home, C:\
    total_bytes: int
    free_bytes: int
    volume_type: VolumeType = VolumeType.OTHER

    @property
    def used_bytes(self) -> int:
        return used_bytes(self.total_bytes, self.free_bytes)

    @property
    def usage_percent(self) -> float:
        """Percentage of the volume in use (0 for an empty volume)."""
        return usage_percent(self.total_bytes, self.free_bytes)
