"""Usage metrics derived from a volume's total and free space."""


def used_bytes(total: int, free: int) -> int:
    return total - free


def usage_percent(total: int, free: int) -> float:
    """Return used/total as a percentage.

    A zero-sized volume reports 0 rather than dividing by zero.
    """
    if total == 0:
        return 0.0
    return used_bytes(total, free) / total * 100

