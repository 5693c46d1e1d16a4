"""dfree - colorized disk free report for mounted volumes."""

__version__ = "0.1.0"
