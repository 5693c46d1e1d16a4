"""Fixed-width table rendering for volumes."""
import math
from typing import Iterable, Iterator, Optional

from dfree.core.colors import FULL_BANDS, UsageBands, drive_color, usage_color
from dfree.core.sizes import format_size
from dfree.core.terminal import Colorizer, PlainColorizer
from dfree.models.volume import Volume

NAME_WIDTH = 16
SIZE_WIDTH = 12
PERCENT_WIDTH = 5
GAP = "  "

PATH_SEPARATORS = "/\\"


def strip_mount_path(path: str) -> str:
    """Drop trailing path separators; a bare root keeps its separator."""
    stripped = path.rstrip(PATH_SEPARATORS)
    return stripped or path[:1]


class TableRenderer:
    """Formats the header and one line per volume.

    Args:
        exact: Sizes as whole kilobytes with "(KB)" column labels
        colorizer: Turns color tokens into output (plain text by default)
        bands: Usage color bands
    """

    def __init__(
        self,
        exact: bool = False,
        colorizer: Optional[Colorizer] = None,
        bands: UsageBands = FULL_BANDS,
    ):
        self.exact = exact
        self.colorizer = colorizer or PlainColorizer()
        self.bands = bands

    def header(self) -> str:
        suffix = "(KB)" if self.exact else ""
        return (
            f"{'Drive':<{NAME_WIDTH}}"
            f"{'Total' + suffix:>{SIZE_WIDTH}}"
            f"{'Used' + suffix:>{SIZE_WIDTH}}"
            f"{'Free' + suffix:>{SIZE_WIDTH}}"
            f"{GAP}{'Use%':>{PERCENT_WIDTH}}"
            f"{GAP}Mount"
        )

    def _size(self, num_bytes: int) -> str:
        return f"{format_size(num_bytes, self.exact):>{SIZE_WIDTH}}"

    def _percent(self, percent: float) -> str:
        text = f"{math.floor(percent):>3}%"
        colored = self.colorizer.colorize(usage_color(percent, self.bands), text)
        # pad on the visible width, outside the color
        return " " * max(PERCENT_WIDTH - len(text), 0) + colored

    def row(self, volume: Volume) -> str:
        name = self.colorizer.colorize(
            drive_color(volume.volume_type), f"{volume.name:<{NAME_WIDTH}}"
        )
        return (
            f"{name}"
            f"{self._size(volume.total_bytes)}"
            f"{self._size(volume.used_bytes)}"
            f"{self._size(volume.free_bytes)}"
            f"{GAP}{self._percent(volume.usage_percent)}"
            f"{GAP}{strip_mount_path(volume.mount_path)}"
        )

    def lines(self, volumes: Iterable[Volume]) -> Iterator[str]:
        """Yield the header followed by a row per volume, in the given order."""
        yield self.header()
        for volume in volumes:
            yield self.row(volume)
