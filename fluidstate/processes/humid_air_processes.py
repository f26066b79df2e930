"""Psychrometric processes of humid air.

Same conventions as :mod:`fluidstate.processes.fluid_processes`: the inlet is
the first argument, the outlet is a new state, checks come first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fluidstate.core.errors import ProcessDirectionError
from fluidstate.core.inputs import InputHumidAir
from fluidstate.processes.common import (
    check_same_pressure,
    pressure_drop_to_si,
    require_one,
    weighted_average,
)

if TYPE_CHECKING:
    from fluidstate.core.humid_air import HumidAir

logger = logging.getLogger(__name__)


# --- Heat transfer ---


def dry_cooling_to(
    state: HumidAir, *, temperature: Any = None, enthalpy: Any = None, pressure_drop: Any = 0.0
) -> HumidAir:
    """Sensible cooling at constant humidity ratio.

    Raises:
        TypeError: Unless exactly one of *temperature* and *enthalpy* is given.
        ProcessDirectionError: If the target does not decrease or falls below
            the dew point.
        InputRangeError: If *pressure_drop* is negative.
    """
    return _dry_heat_transfer_to(state, temperature, enthalpy, pressure_drop, cooling=True)


def heating_to(
    state: HumidAir, *, temperature: Any = None, enthalpy: Any = None, pressure_drop: Any = 0.0
) -> HumidAir:
    """Sensible heating at constant humidity ratio."""
    return _dry_heat_transfer_to(state, temperature, enthalpy, pressure_drop, cooling=False)


def wet_cooling_to(
    state: HumidAir,
    *,
    temperature: Any = None,
    enthalpy: Any = None,
    relative_humidity: float | None = None,
    humidity: float | None = None,
    pressure_drop: Any = 0.0,
) -> HumidAir:
    """Cooling with dehumidification.

    The outlet is given by a temperature [K] or enthalpy [J/kg] together with
    a relative humidity or humidity ratio.

    Raises:
        TypeError: Unless exactly one of each alternative is given.
        ProcessDirectionError: If the temperature/enthalpy does not decrease
            or the humidity ratio does not decrease.
        InputRangeError: If *pressure_drop* is negative.
    """
    kind, target = require_one(temperature=temperature, enthalpy=enthalpy)
    outlet_input = _check_direction(state, kind, target, cooling=True)
    moisture_input = _moisture_input(relative_humidity, humidity)
    drop = pressure_drop_to_si(pressure_drop)

    result = state.with_state(
        InputHumidAir.pressure(state.pressure - drop), outlet_input, moisture_input
    )
    if not result.humidity < state.humidity:
        raise ProcessDirectionError(
            "During the wet cooling process, the absolute humidity ratio should decrease!"
        )
    return result


def _dry_heat_transfer_to(
    state: HumidAir, temperature: Any, enthalpy: Any, pressure_drop: Any, cooling: bool
) -> HumidAir:
    kind, target = require_one(temperature=temperature, enthalpy=enthalpy)
    outlet_input = _check_direction(state, kind, target, cooling)

    if kind == "temperature":
        if outlet_input.value < state.dew_temperature:
            raise ProcessDirectionError(
                "The outlet temperature after dry heat transfer should be "
                "greater than the dew point temperature!"
            )
    else:
        with _dew_point(state) as dew_point:
            dew_enthalpy = dew_point.enthalpy
        if outlet_input.value < dew_enthalpy:
            raise ProcessDirectionError(
                "The outlet enthalpy after dry heat transfer should be "
                "greater than the dew point enthalpy!"
            )

    drop = pressure_drop_to_si(pressure_drop)
    return state.with_state(
        InputHumidAir.pressure(state.pressure - drop),
        outlet_input,
        InputHumidAir.humidity(state.humidity),
    )


def _check_direction(state: HumidAir, kind: str, target: Any, cooling: bool) -> InputHumidAir:
    if kind == "temperature":
        outlet_input = InputHumidAir.temperature(target)
        current = state.temperature
    else:
        outlet_input = InputHumidAir.enthalpy(target)
        current = state.enthalpy

    if cooling and outlet_input.value >= current:
        raise ProcessDirectionError(f"During the cooling process, the {kind} should decrease!")
    if not cooling and outlet_input.value <= current:
        raise ProcessDirectionError(f"During the heating process, the {kind} should increase!")
    return outlet_input


def _dew_point(state: HumidAir) -> HumidAir:
    """Saturated state at the inlet pressure and dew temperature."""
    return state.with_state(
        InputHumidAir.pressure(state.pressure),
        InputHumidAir.temperature(state.dew_temperature),
        InputHumidAir.relative_humidity(1.0),
    )


def _moisture_input(relative_humidity: float | None, humidity: float | None) -> InputHumidAir:
    kind, value = require_one(relative_humidity=relative_humidity, humidity=humidity)
    if kind == "relative_humidity":
        return InputHumidAir.relative_humidity(value)
    return InputHumidAir.humidity(value)


# --- Humidification ---


def humidification_by_water_to(
    state: HumidAir, *, relative_humidity: float | None = None, humidity: float | None = None
) -> HumidAir:
    """Adiabatic humidification by water injection (constant enthalpy).

    Raises:
        TypeError: Unless exactly one of the moisture targets is given.
        ProcessDirectionError: If the humidity ratio does not increase.
    """
    return _humidification_to(
        state,
        InputHumidAir.enthalpy(state.enthalpy),
        _moisture_input(relative_humidity, humidity),
    )


def humidification_by_steam_to(
    state: HumidAir, *, relative_humidity: float | None = None, humidity: float | None = None
) -> HumidAir:
    """Isothermal humidification by steam injection (constant temperature).

    Raises:
        TypeError: Unless exactly one of the moisture targets is given.
        ProcessDirectionError: If the humidity ratio does not increase.
    """
    return _humidification_to(
        state,
        InputHumidAir.temperature(state.temperature),
        _moisture_input(relative_humidity, humidity),
    )


def _humidification_to(
    state: HumidAir, first_input: InputHumidAir, second_input: InputHumidAir
) -> HumidAir:
    result = state.with_state(InputHumidAir.pressure(state.pressure), first_input, second_input)
    if not result.humidity > state.humidity:
        raise ProcessDirectionError(
            "During the humidification process, the absolute humidity ratio should increase!"
        )
    return result


# --- Mixing ---


def mixed_humidity(
    first_specific_mass_flow: float,
    first_humidity: float,
    second_specific_mass_flow: float,
    second_humidity: float,
) -> float:
    """Humidity ratio of two mixed streams, conserving water and dry air.

    Flows are per unit of humid air, so each stream carries
    ``m / (1 + W)`` of dry air.
    """
    m1, w1 = first_specific_mass_flow, first_humidity
    m2, w2 = second_specific_mass_flow, second_humidity
    return (m1 * w1 * (1 + w2) + m2 * w2 * (1 + w1)) / (m1 * (1 + w2) + m2 * (1 + w1))


def mixing(
    state: HumidAir,
    first_specific_mass_flow: float,
    first: HumidAir,
    second_specific_mass_flow: float,
    second: HumidAir,
) -> HumidAir:
    """Adiabatic mixing of two humid-air streams.

    Raises:
        MixingError: If the stream pressures differ.
    """
    check_same_pressure(first.pressure, second.pressure)
    enthalpy = weighted_average(
        first_specific_mass_flow, first.enthalpy, second_specific_mass_flow, second.enthalpy
    )
    humidity = mixed_humidity(
        first_specific_mass_flow, first.humidity, second_specific_mass_flow, second.humidity
    )
    logger.debug("Mixing humid air: h=%.1f J/kg, W=%.6f", enthalpy, humidity)
    return state.with_state(
        InputHumidAir.pressure(first.pressure),
        InputHumidAir.enthalpy(enthalpy),
        InputHumidAir.humidity(humidity),
    )
