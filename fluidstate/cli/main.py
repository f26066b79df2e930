"""fluidstate command-line interface.

Entry point for the ``fluidstate`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from fluidstate import __app_name__, __version__
from fluidstate.core.config import get_settings, load_settings

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings file (JSON).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """fluidstate: thermodynamic states and processes of fluids and humid air.

    Evaluates fluid, mixture and humid-air states with CoolProp and analyzes
    refrigeration cycles.
    """
    if config_path:
        load_settings(config_path)
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-command groups
from fluidstate.cli.cycle_cmd import cycle  # noqa: E402
from fluidstate.cli.info_cmd import info  # noqa: E402
from fluidstate.cli.saturation_cmd import saturation  # noqa: E402
from fluidstate.cli.state_cmd import state  # noqa: E402

cli.add_command(info)
cli.add_command(state)
cli.add_command(saturation)
cli.add_command(cycle)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
