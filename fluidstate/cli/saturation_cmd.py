"""CLI command for tabulating saturation properties over a temperature range."""

from __future__ import annotations

import click
import numpy as np
import pint
from rich.console import Console
from rich.table import Table

from fluidstate.core.errors import FluidStateError
from fluidstate.core.fluid import Fluid
from fluidstate.core.fluids_list import get_fluid_info
from fluidstate.core.serialization import to_json
from fluidstate.utils.units import from_si, parse_quantity


def saturation_table(fluid: Fluid, temperatures: np.ndarray) -> list[dict[str, float]]:
    """Bubble and dew point properties at each temperature [K]."""
    rows = []
    for temperature in temperatures:
        liquid = fluid.bubble_point_at(temperature=float(temperature))
        vapor = fluid.dew_point_at(temperature=float(temperature))
        with liquid, vapor:
            rows.append(
                {
                    "temperature": float(temperature),
                    "pressure": liquid.pressure,
                    "liquid_density": liquid.density,
                    "vapor_density": vapor.density,
                    "liquid_enthalpy": liquid.enthalpy,
                    "vapor_enthalpy": vapor.enthalpy,
                    "latent_heat": vapor.enthalpy - liquid.enthalpy,
                }
            )
    return rows


@click.command("saturation")
@click.argument("name")
@click.option("--t-min", type=str, default="253.15", show_default=True, help="Lowest temperature [K or e.g. '-20 degC'].")
@click.option("--t-max", type=str, default="313.15", show_default=True, help="Highest temperature [K or e.g. '40 degC'].")
@click.option("--points", type=click.IntRange(min=2), default=5, show_default=True, help="Number of temperatures.")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_context
def saturation(
    ctx: click.Context, name: str, t_min: str, t_max: str, points: int, as_json: bool
) -> None:
    """Tabulate the saturation curve of fluid NAME."""
    console: Console = ctx.obj.get("console", Console())
    try:
        fluid_name = get_fluid_info(name)
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]), param_hint="NAME") from exc

    try:
        t_low = parse_quantity(t_min, "K")
        t_high = parse_quantity(t_max, "K")
    except (ValueError, pint.errors.PintError) as exc:
        raise click.BadParameter(f"Cannot read temperature: {exc}") from exc
    if t_high <= t_low:
        raise click.BadParameter("--t-max must be greater than --t-min")
    temperatures = np.linspace(t_low, t_high, points)

    try:
        with Fluid(fluid_name) as fluid:
            rows = saturation_table(fluid, temperatures)
    except FluidStateError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(to_json(rows))
        return

    table = Table(title=f"{fluid_name.name} saturation")
    table.add_column("T [K]", style="cyan", justify="right")
    table.add_column("P [kPa]", style="green", justify="right")
    table.add_column("ρ liq [kg/m³]", justify="right")
    table.add_column("ρ vap [kg/m³]", justify="right")
    table.add_column("h liq [kJ/kg]", justify="right")
    table.add_column("h vap [kJ/kg]", justify="right")
    table.add_column("r [kJ/kg]", justify="right")
    for row in rows:
        table.add_row(
            f"{row['temperature']:.2f}",
            f"{from_si(row['pressure'], 'kPa', 'Pa'):.2f}",
            f"{row['liquid_density']:.2f}",
            f"{row['vapor_density']:.3f}",
            f"{row['liquid_enthalpy'] / 1e3:.2f}",
            f"{row['vapor_enthalpy'] / 1e3:.2f}",
            f"{row['latent_heat'] / 1e3:.2f}",
        )
    console.print(table)
