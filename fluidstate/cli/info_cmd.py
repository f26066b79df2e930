"""CLI command for listing the fluid registry."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from fluidstate.core.fluids_list import get_fluid_info, list_fluids


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect the fluids known to fluidstate."""
    pass


@info.command("fluids")
@click.option(
    "--pure/--mixtures",
    "pure",
    default=None,
    help="Show only pure fluids or only incompressible binary mixtures.",
)
@click.option("--backend", type=str, default=None, help="Filter by CoolProp backend.")
@click.pass_context
def info_fluids(ctx: click.Context, pure: bool | None, backend: str | None) -> None:
    """List available fluids."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Available Fluids")
    table.add_column("Name", style="cyan")
    table.add_column("CoolProp Name", style="green")
    table.add_column("Backend", style="yellow")
    table.add_column("Fraction", justify="right")

    fluids = list_fluids(pure=pure, backend=backend)
    for fluid in fluids:
        if fluid.pure:
            fraction = "-"
        else:
            fraction = (
                f"{fluid.mix_type.value} {fluid.fraction_min:g}..{fluid.fraction_max:g}"
            )
        table.add_row(fluid.name, fluid.coolprop_name, fluid.backend, fraction)
    console.print(table)
    console.print(f"[dim]{len(fluids)} fluids[/dim]")


@info.command("fluid")
@click.argument("name")
@click.pass_context
def info_fluid(ctx: click.Context, name: str) -> None:
    """Show the registry entry of one fluid."""
    console: Console = ctx.obj.get("console", Console())
    try:
        fluid = get_fluid_info(name)
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]), param_hint="NAME") from exc

    table = Table(title=fluid.name)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("CoolProp name", fluid.coolprop_name)
    table.add_row("Backend", fluid.backend)
    table.add_row("Pure", str(fluid.pure))
    if not fluid.pure:
        table.add_row("Mix type", fluid.mix_type.value)
        table.add_row("Fraction range", f"{fluid.fraction_min:g} .. {fluid.fraction_max:g}")
    console.print(table)
