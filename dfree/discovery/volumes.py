"""Enumerate ready, mounted volumes via psutil."""
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

import psutil

from dfree.core.logger import get_logger
from dfree.models.volume import Volume, VolumeType

logger = get_logger(__name__)

NETWORK_FSTYPES = {
    "nfs", "nfs4", "cifs", "smbfs", "smb3", "sshfs", "fuse.sshfs",
    "9p", "afs", "ncpfs", "glusterfs", "fuse.glusterfs", "ceph", "davfs",
}
OPTICAL_FSTYPES = {"iso9660", "udf", "cdfs"}

# Drive type markers psutil reports in Windows mount options
WINDOWS_TYPE_OPTS = (
    ("cdrom", VolumeType.OPTICAL),
    ("remote", VolumeType.NETWORK),
    ("removable", VolumeType.REMOVABLE),
    ("fixed", VolumeType.FIXED),
)


def _read_text(path: Path) -> str:
    try:
        return path.read_text().strip()
    except OSError:
        return ""


def is_removable_device(device: str, sys_class_block: Path = Path("/sys/class/block")) -> bool:
    """Check the sysfs removable flag for a block device or its parent disk."""
    if not device.startswith("/dev/"):
        return False

    entry = sys_class_block / os.path.basename(device)
    if not entry.exists():
        return False
    if _read_text(entry / "removable") == "1":
        return True

    # partitions carry the flag on their parent disk
    try:
        parent = entry.resolve().parent
    except OSError:
        return False
    return _read_text(parent / "removable") == "1"


def is_network_fstype(fstype: str) -> bool:
    fstype = fstype.lower()
    return fstype in NETWORK_FSTYPES or fstype.startswith("nfs")


def classify_volume(
    device: str,
    fstype: str,
    opts: str,
    platform: Optional[str] = None,
    removable_check: Callable[[str], bool] = is_removable_device,
) -> VolumeType:
    """Infer a VolumeType from partition details."""
    platform = platform or sys.platform
    options = {opt.strip().lower() for opt in opts.split(",") if opt.strip()}

    if platform == "win32":
        for marker, volume_type in WINDOWS_TYPE_OPTS:
            if marker in options:
                return volume_type
        return VolumeType.OTHER

    if is_network_fstype(fstype):
        return VolumeType.NETWORK
    if fstype.lower() in OPTICAL_FSTYPES:
        return VolumeType.OPTICAL
    if device.startswith("/dev/"):
        if removable_check(device):
            return VolumeType.REMOVABLE
        return VolumeType.FIXED
    return VolumeType.OTHER


class VolumeEnumerator:
    """
    Lists the mounted volumes that are ready to report their usage.
    Partition listing and usage lookups are injectable for tests.
    """

    def __init__(self, partitions=None, disk_usage=None, platform: Optional[str] = None,
                 removable_check: Callable[[str], bool] = is_removable_device):
        self.partitions = partitions or psutil.disk_partitions
        self.disk_usage = disk_usage or psutil.disk_usage
        self.platform = platform or sys.platform
        self.removable_check = removable_check

    def enumerate(self) -> List[Volume]:
        """Return every ready volume, in the order the system lists them."""
        # psutil's physical filter drops nodev filesystems, network mounts included
        physical = {(part.device, part.mountpoint) for part in self.partitions(all=False)}

        volumes = []
        for part in self.partitions(all=True):
            if (part.device, part.mountpoint) not in physical and not is_network_fstype(part.fstype):
                logger.debug(f"Skipping {part.mountpoint}: virtual filesystem ({part.fstype})")
                continue
            volume = self._to_volume(part)
            if volume is not None:
                volumes.append(volume)
        logger.debug(f"Found {len(volumes)} ready volume(s)")
        return volumes

    def _to_volume(self, part) -> Optional[Volume]:
        # empty drives (no media in an optical or card reader) have no fstype
        if not part.fstype:
            logger.debug(f"Skipping {part.mountpoint}: no filesystem (not ready)")
            return None

        try:
            usage = self.disk_usage(part.mountpoint)
        except OSError as e:
            logger.debug(f"Skipping {part.mountpoint}: {e}")
            return None

        return Volume(
            name=part.device or part.mountpoint,
            mount_path=part.mountpoint,
            total_bytes=int(usage.total),
            free_bytes=int(usage.free),
            volume_type=classify_volume(
                part.device, part.fstype, part.opts,
                platform=self.platform, removable_check=self.removable_check,
            ),
        )
