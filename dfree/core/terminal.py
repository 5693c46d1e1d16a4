"""Terminal output: color rendering and output stream preparation."""
import os
import sys
from typing import Dict, Optional, TextIO

from dfree.core.colors import ColorToken
from dfree.core.errors import ConfigError
from dfree.core.logger import get_logger

logger = get_logger(__name__)

RESET = "\x1b[0m"

# SGR parameters per token
SGR_CODES: Dict[ColorToken, str] = {
    ColorToken.CYAN: "36",
    ColorToken.MAGENTA: "35",
    ColorToken.BLUE: "34",
    ColorToken.WHITE: "37",
    ColorToken.DIM: "2",
    ColorToken.BOLD_RED: "31;1",
    ColorToken.RED: "31",
    ColorToken.BRIGHT_RED: "91",
    ColorToken.ORANGE: "38;5;208",
    ColorToken.YELLOW: "33",
    ColorToken.BRIGHT_YELLOW: "93",
    ColorToken.CYAN_GREEN: "36",
    ColorToken.DIM_GREEN: "2;32",
    ColorToken.GREEN: "32",
    ColorToken.BRIGHT_GREEN: "92",
}

COLOR_MODES = ("auto", "always", "never")

# Windows console constants
STD_OUTPUT_HANDLE = -11
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


class Colorizer:
    """Applies a ColorToken to a piece of text."""

    def colorize(self, token: ColorToken, text: str) -> str:
        raise NotImplementedError


class PlainColorizer(Colorizer):
    """Leaves text untouched (pipes, files, NO_COLOR)."""

    def colorize(self, token: ColorToken, text: str) -> str:
        return text


class AnsiColorizer(Colorizer):
    """Wraps text in an SGR sequence followed by a reset."""

    def colorize(self, token: ColorToken, text: str) -> str:
        return f"\x1b[{SGR_CODES[token]}m{text}{RESET}"


def _enable_windows_vt() -> bool:
    import ctypes

    kernel32 = ctypes.windll.kernel32
    handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
    mode = ctypes.c_uint32()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False
    return bool(kernel32.SetConsoleMode(handle, mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING))


def prepare_output_stream(platform: Optional[str] = None) -> bool:
    """Make the console accept ANSI escapes.

    Only Windows consoles need virtual terminal processing switched on;
    everywhere else this does nothing.

    Returns:
        True when ANSI sequences can be written
    """
    platform = platform or sys.platform
    if platform != "win32":
        return True

    try:
        enabled = _enable_windows_vt()
    except (AttributeError, OSError) as e:
        logger.debug(f"Could not enable virtual terminal processing: {e}")
        return False

    if not enabled:
        logger.debug("Console refused virtual terminal processing")
    return enabled


def select_colorizer(mode: str = "auto", stream: Optional[TextIO] = None, ansi_ready: bool = True) -> Colorizer:
    """Pick the colorizer for a color mode.

    Args:
        mode: "always", "never" or "auto"
        stream: Output stream checked for a TTY in auto mode (default stdout)
        ansi_ready: Result of prepare_output_stream()
    """
    if mode not in COLOR_MODES:
        raise ConfigError(f"Unknown color mode '{mode}' (expected one of: {', '.join(COLOR_MODES)})")

    if mode == "always":
        return AnsiColorizer()
    if mode == "never":
        return PlainColorizer()

    stream = stream if stream is not None else sys.stdout
    is_tty = hasattr(stream, "isatty") and stream.isatty()
    if is_tty and ansi_ready and not os.environ.get("NO_COLOR"):
        return AnsiColorizer()
    return PlainColorizer()
