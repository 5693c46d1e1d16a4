"""Byte count formatting for the Total/Used/Free columns."""

UNITS = ("B", "KB", "MB", "GB", "TB")


def to_kilobytes(num_bytes: int) -> int:
    """Whole kilobytes in num_bytes, truncated toward zero."""
    kilobytes = abs(num_bytes) // 1024
    return -kilobytes if num_bytes < 0 else kilobytes


def _trim(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def human_size(num_bytes: int) -> str:
    """Scale num_bytes to the largest unit up to TB.

    Scaling continues while the displayed (two decimal) value would still read
    1024 or more, so 1048575 bytes is "1 MB" and never "1024 KB".
    """
    size = float(num_bytes)
    unit = 0
    while round(size, 2) >= 1024 and unit < len(UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{_trim(size)} {UNITS[unit]}"


def format_size(num_bytes: int, exact: bool = False) -> str:
    """Format a byte count as plain kilobytes (exact) or a scaled string."""
    if exact:
        return str(to_kilobytes(num_bytes))
    return human_size(num_bytes)
