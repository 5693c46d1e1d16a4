#!/usr/bin/env python3
"""dfree CLI - disk free report for mounted volumes."""
import sys

import psutil
import typer
from rich.console import Console
from typer.core import TyperCommand

from dfree.cli_support import HELP_FLAGS, handle_cli_error, reject_unknown_args
from dfree.core.colors import get_bands
from dfree.core.config import get_config
from dfree.core.errors import ConfigError
from dfree.core.logger import get_logger, set_verbose, setup_file_logging
from dfree.core.renderer import TableRenderer
from dfree.core.terminal import prepare_output_stream, select_colorizer
from dfree.discovery.volumes import VolumeEnumerator

app = typer.Typer(name="df", add_completion=False)

err_console = Console(stderr=True)
logger = get_logger(__name__)


class DfCommand(TyperCommand):
    """Checks raw arguments in the order given before Click parses them."""

    def parse_args(self, ctx, args):
        reject_unknown_args(args, err_console)
        return super().parse_args(ctx, args)


@app.command(
    cls=DfCommand,
    context_settings={
        "help_option_names": list(HELP_FLAGS),
        # anything after a help flag is left for help to ignore
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
def df(
    exact: bool = typer.Option(False, "-x", "--exact", help="Show sizes in KB (exact mode)"),
):
    """Show capacity, usage and mount point of every mounted volume.

    All mounted and ready volumes are shown, including CD-ROM, removable,
    and network drives. Drive name is colored by type; usage percent is
    colored by fill level.
    """
    try:
        config = get_config()
    except ConfigError as e:
        handle_cli_error(e, err_console, exit_code=2)
    if exact:
        config = config.with_exact(True)

    set_verbose(config.verbose)
    setup_file_logging(config.log_file, verbose=config.verbose)
    logger.debug(f"Display mode: {'exact' if config.exact else 'human'}, color: {config.color}")

    ansi_ready = config.color != "never" and prepare_output_stream()
    colorizer = select_colorizer(config.color, sys.stdout, ansi_ready=ansi_ready)
    renderer = TableRenderer(
        exact=config.exact,
        colorizer=colorizer,
        bands=get_bands(config.usage_bands),
    )

    try:
        volumes = VolumeEnumerator().enumerate()
    except (OSError, psutil.Error) as e:
        handle_cli_error(e, err_console, verbose=config.verbose)

    for line in renderer.lines(volumes):
        typer.echo(line, color=True)


if __name__ == "__main__":
    app()
