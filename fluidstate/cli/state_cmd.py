"""CLI commands for evaluating single fluid and humid-air states."""

from __future__ import annotations

from typing import Any, Callable

import click
import pint
from rich.console import Console
from rich.table import Table

from fluidstate.core.errors import FluidStateError
from fluidstate.core.fluid import Fluid
from fluidstate.core.fluids_list import get_fluid_info
from fluidstate.core.humid_air import HumidAir
from fluidstate.core.inputs import Input, InputHumidAir
from fluidstate.utils.units import parse_quantity

# CLI key -> (input factory, SI unit of the value)
FLUID_INPUTS: dict[str, tuple[Callable[[float], Input], str]] = {
    "density": (Input.density, "kg/m**3"),
    "enthalpy": (Input.enthalpy, "J/kg"),
    "entropy": (Input.entropy, "J/kg/K"),
    "internal-energy": (Input.internal_energy, "J/kg"),
    "pressure": (Input.pressure, "Pa"),
    "quality": (Input.quality, "dimensionless"),
    "specific-volume": (Input.specific_volume, "m**3/kg"),
    "temperature": (Input.temperature, "K"),
}

HUMID_AIR_INPUTS: dict[str, tuple[Callable[[float], InputHumidAir], str]] = {
    "altitude": (InputHumidAir.altitude, "m"),
    "density": (InputHumidAir.density, "kg/m**3"),
    "dew-temperature": (InputHumidAir.dew_temperature, "K"),
    "enthalpy": (InputHumidAir.enthalpy, "J/kg"),
    "entropy": (InputHumidAir.entropy, "J/kg/K"),
    "humidity": (InputHumidAir.humidity, "dimensionless"),
    "partial-pressure": (InputHumidAir.partial_pressure, "Pa"),
    "pressure": (InputHumidAir.pressure, "Pa"),
    "relative-humidity": (InputHumidAir.relative_humidity, "dimensionless"),
    "specific-volume": (InputHumidAir.specific_volume, "m**3/kg"),
    "temperature": (InputHumidAir.temperature, "K"),
    "wet-bulb-temperature": (InputHumidAir.wet_bulb_temperature, "K"),
}

# Property -> display unit
PROPERTY_UNITS = {
    "pressure": "Pa",
    "temperature": "K",
    "density": "kg/m³",
    "specific_volume": "m³/kg",
    "enthalpy": "J/kg",
    "entropy": "J/(kg·K)",
    "internal_energy": "J/kg",
    "specific_heat": "J/(kg·K)",
    "conductivity": "W/(m·K)",
    "dynamic_viscosity": "Pa·s",
    "kinematic_viscosity": "m²/s",
    "sound_speed": "m/s",
    "surface_tension": "N/m",
    "molar_mass": "kg/mol",
    "critical_pressure": "Pa",
    "critical_temperature": "K",
    "triple_pressure": "Pa",
    "triple_temperature": "K",
    "freezing_temperature": "K",
    "max_pressure": "Pa",
    "max_temperature": "K",
    "min_pressure": "Pa",
    "min_temperature": "K",
    "dew_temperature": "K",
    "wet_bulb_temperature": "K",
    "partial_pressure": "Pa",
    "humidity": "kg/kg",
}


def build_inputs(
    pairs: tuple[tuple[str, str], ...],
    factories: dict[str, tuple[Callable[[float], Any], str]],
) -> list[Any]:
    """Turn ``(key, value)`` CLI pairs into input objects.

    Raises:
        click.BadParameter: On an unknown key or unparsable value.
    """
    inputs = []
    for key, text in pairs:
        normalized = key.strip().lower().replace("_", "-")
        if normalized not in factories:
            raise click.BadParameter(
                f"Unknown input '{key}'. Choose from: {', '.join(sorted(factories))}",
                param_hint="--input",
            )
        factory, unit = factories[normalized]
        try:
            value = parse_quantity(text, unit)
        except (ValueError, pint.errors.PintError) as exc:
            raise click.BadParameter(f"Cannot read '{text}' as {unit}: {exc}") from exc
        inputs.append(factory(value))
    return inputs


def _print_properties(console: Console, title: str, data: dict[str, Any]) -> None:
    table = Table(title=title)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    for name, value in data.items():
        if value is None:
            shown = "-"
        elif isinstance(value, float):
            shown = f"{value:.6g}"
        else:
            shown = str(value)
        table.add_row(name.replace("_", " "), shown, PROPERTY_UNITS.get(name, ""))
    console.print(table)


@click.group("state")
@click.pass_context
def state(ctx: click.Context) -> None:
    """Evaluate fluid and humid-air states."""
    pass


@state.command("fluid")
@click.argument("name")
@click.option("--fraction", type=float, default=None, help="Fraction of a binary mixture (0-1).")
@click.option(
    "--input",
    "-i",
    "pairs",
    type=(str, str),
    multiple=True,
    required=True,
    help="Defining input KEY VALUE, e.g. -i pressure '1 atm'. Give exactly two.",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_context
def state_fluid(
    ctx: click.Context,
    name: str,
    fraction: float | None,
    pairs: tuple[tuple[str, str], ...],
    as_json: bool,
) -> None:
    """Evaluate the state of fluid NAME from two inputs."""
    console: Console = ctx.obj.get("console", Console())
    try:
        fluid_name = get_fluid_info(name)
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]), param_hint="NAME") from exc
    if len(pairs) != 2:
        raise click.UsageError("Need to define 2 unique inputs!")
    inputs = build_inputs(pairs, FLUID_INPUTS)

    try:
        with Fluid(fluid_name, fraction) as fluid:
            fluid.update(*inputs)
            data = fluid.to_dict()
            text = fluid.as_json() if as_json else None
    except FluidStateError as exc:
        raise click.ClickException(str(exc)) from exc

    if text is not None:
        click.echo(text)
    else:
        _print_properties(console, f"{fluid_name.name} state", data)


@state.command("humid-air")
@click.option(
    "--input",
    "-i",
    "pairs",
    type=(str, str),
    multiple=True,
    required=True,
    help="Defining input KEY VALUE, e.g. -i relative-humidity 0.5. Give exactly three.",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_context
def state_humid_air(
    ctx: click.Context, pairs: tuple[tuple[str, str], ...], as_json: bool
) -> None:
    """Evaluate a humid-air state from three inputs."""
    console: Console = ctx.obj.get("console", Console())
    if len(pairs) != 3:
        raise click.UsageError("Need to define 3 unique inputs!")

    try:
        inputs = build_inputs(pairs, HUMID_AIR_INPUTS)
        with HumidAir().with_state(*inputs) as humid_air:
            data = humid_air.to_dict()
            text = humid_air.as_json() if as_json else None
    except FluidStateError as exc:
        raise click.ClickException(str(exc)) from exc

    if text is not None:
        click.echo(text)
    else:
        _print_properties(console, "Humid air state", data)
