"""CLI commands for refrigeration cycle analysis."""

from __future__ import annotations

from pathlib import Path

import click
import pint
from rich.console import Console
from rich.table import Table

from fluidstate.core.errors import FluidStateError
from fluidstate.core.fluids_list import get_fluid_info
from fluidstate.core.serialization import to_json
from fluidstate.cycle.refrigeration import CycleDefinition, ExpansionDevice, solve_refrigeration_cycle
from fluidstate.utils.units import from_si, parse_quantity


@click.group("cycle")
@click.pass_context
def cycle(ctx: click.Context) -> None:
    """Thermodynamic cycle analysis commands."""
    pass


@cycle.command("refrigeration")
@click.option("--fluid", "fluid_name", type=str, default="R134a", show_default=True, help="Refrigerant.")
@click.option("--evaporating", type=str, default="268.15", show_default=True, help="Evaporating temperature [K or e.g. '-5 degC'].")
@click.option("--condensing", type=str, default="313.15", show_default=True, help="Condensing temperature [K or e.g. '40 degC'].")
@click.option("--superheat", type=float, default=5.0, show_default=True, help="Superheat at the compressor inlet [K].")
@click.option("--subcooling", type=float, default=3.0, show_default=True, help="Subcooling at the condenser outlet [K].")
@click.option("--efficiency", type=float, default=0.8, show_default=True, help="Compressor isentropic efficiency (0-1).")
@click.option("--mass-flow", type=float, default=1.0, show_default=True, help="Refrigerant mass flow [kg/s].")
@click.option("--expander", "expander_efficiency", type=float, default=None, help="Replace the valve by an expander with this isentropic efficiency.")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Output file (JSON).")
@click.pass_context
def refrigeration_cmd(
    ctx: click.Context,
    fluid_name: str,
    evaporating: str,
    condensing: str,
    superheat: float,
    subcooling: float,
    efficiency: float,
    mass_flow: float,
    expander_efficiency: float | None,
    output: str | None,
) -> None:
    """Analyze a single-stage vapor-compression refrigeration cycle."""
    console: Console = ctx.obj.get("console", Console())
    try:
        fluid = get_fluid_info(fluid_name)
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]), param_hint="--fluid") from exc
    try:
        t_evap = parse_quantity(evaporating, "K")
        t_cond = parse_quantity(condensing, "K")
    except (ValueError, pint.errors.PintError) as exc:
        raise click.BadParameter(f"Cannot read temperature: {exc}") from exc

    defn = CycleDefinition(
        fluid=fluid,
        evaporating_temperature=t_evap,
        condensing_temperature=t_cond,
        superheat=superheat,
        subcooling=subcooling,
        isentropic_efficiency=efficiency,
        mass_flow=mass_flow,
    )
    if expander_efficiency is not None:
        defn.expansion_device = ExpansionDevice.EXPANDER
        defn.expander_efficiency = expander_efficiency

    try:
        result = solve_refrigeration_cycle(defn)
    except FluidStateError as exc:
        raise click.ClickException(str(exc)) from exc

    console.print(f"\n[bold]fluidstate: Refrigeration Cycle ({fluid.name})[/bold]\n")

    perf_table = Table(title="Cycle Performance")
    perf_table.add_column("Parameter", style="cyan")
    perf_table.add_column("Value", style="green", justify="right")
    perf_table.add_column("Unit", style="dim")

    perf_table.add_row("Evaporating Pressure", f"{from_si(result.evaporating_pressure, 'kPa', 'Pa'):.1f}", "kPa")
    perf_table.add_row("Condensing Pressure", f"{from_si(result.condensing_pressure, 'kPa', 'Pa'):.1f}", "kPa")
    perf_table.add_row("Pressure Ratio", f"{result.pressure_ratio:.2f}", "-")
    perf_table.add_row("Cooling Capacity", f"{result.cooling_capacity / 1e3:.2f}", "kW")
    perf_table.add_row("Heat Rejection", f"{result.heat_rejection / 1e3:.2f}", "kW")
    perf_table.add_row("Compressor Power", f"{result.compressor_power / 1e3:.2f}", "kW")
    if result.expander_power:
        perf_table.add_row("Expander Power", f"{result.expander_power / 1e3:.2f}", "kW")
    perf_table.add_row("COP (cooling)", f"{result.cop_cooling:.3f}", "-")
    perf_table.add_row("COP (heating)", f"{result.cop_heating:.3f}", "-")
    console.print(perf_table)

    points_table = Table(title="State Points")
    points_table.add_column("#", style="cyan")
    points_table.add_column("Location")
    points_table.add_column("P [kPa]", justify="right")
    points_table.add_column("T [K]", justify="right")
    points_table.add_column("h [kJ/kg]", justify="right")
    points_table.add_column("s [kJ/(kg·K)]", justify="right")
    points_table.add_column("Q [-]", justify="right")
    for point in result.state_points:
        quality = point["quality"]
        points_table.add_row(
            str(point["point"]),
            point["label"],
            f"{from_si(point['pressure'], 'kPa', 'Pa'):.1f}",
            f"{point['temperature']:.2f}",
            f"{point['enthalpy'] / 1e3:.2f}",
            f"{point['entropy'] / 1e3:.4f}",
            "-" if quality is None else f"{quality:.3f}",
        )
    console.print(points_table)

    if output:
        Path(output).write_text(to_json(result.to_dict()))
        console.print(f"\n[dim]Saved to {output}[/dim]")
