"""Shared utilities for the dfree CLI."""
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

EXACT_FLAGS = ("-x", "--exact")
HELP_FLAGS = ("-?", "--help")


def print_error(console: Console, message: str, prefix: str = "Error:") -> None:
    """Print error message with consistent formatting.

    Args:
        console: Rich console for output (stderr)
        message: Error message, printed verbatim
        prefix: Prefix shown in red
    """
    console.print(f"[red]{prefix}[/red] {escape(message)}")


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Report an exception and stop the command.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    print_error(console, str(e))
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def first_unknown_arg(args: List[str]) -> Optional[str]:
    """Return the first argument that is not a known flag, scanning in order.

    Scanning stops at a help flag, so arguments after it are not checked.
    Tokens are compared whole: "-xz" and "--" are unknown.
    """
    for arg in args:
        if arg in HELP_FLAGS:
            return None
        if arg not in EXACT_FLAGS:
            return arg
    return None


def reject_unknown_args(args: List[str], console: Console) -> None:
    """Stop with "Unknown option" when an unrecognised argument comes before any help flag.

    Raises:
        typer.Exit: With code 1 if an unknown argument is found
    """
    unknown = first_unknown_arg(args)
    if unknown is None:
        return
    console.print(f"Unknown option: {escape(unknown)}", highlight=False)
    raise typer.Exit(1)
