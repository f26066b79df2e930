"""Thermodynamic processes of pure fluids and mixtures.

Each function takes the inlet state first and returns a new state built with
``with_state``; the inlet is never modified. Preconditions are checked
before any new state is evaluated. Efficiencies and qualities are decimal
fractions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fluidstate.core.errors import EfficiencyRangeError, MixingError, ProcessDirectionError
from fluidstate.core.inputs import Input
from fluidstate.processes.common import (
    check_same_pressure,
    pressure_drop_to_si,
    require_one,
    weighted_average,
)
from fluidstate.utils.units import to_si

if TYPE_CHECKING:
    from fluidstate.core.abstract_fluid import AbstractFluid

logger = logging.getLogger(__name__)


# --- Compression and expansion ---


def isentropic_compression_to(state: AbstractFluid, pressure: Any) -> AbstractFluid:
    """Ideal compressor outlet at *pressure* [Pa].

    Raises:
        ProcessDirectionError: If *pressure* is not above the inlet pressure.
    """
    pressure = to_si(pressure, "Pa")
    if not pressure > state.pressure:
        raise ProcessDirectionError(
            "Compressor outlet pressure should be higher than inlet pressure!"
        )
    return state.with_state(Input.pressure(pressure), Input.entropy(state.entropy))


def compression_to(
    state: AbstractFluid, pressure: Any, isentropic_efficiency: float
) -> AbstractFluid:
    """Real compressor outlet at *pressure* [Pa].

    The outlet enthalpy is ``h1 + (h2s - h1) / eta``.

    Raises:
        EfficiencyRangeError: If *isentropic_efficiency* is not in (0, 1).
        ProcessDirectionError: If *pressure* is not above the inlet pressure.
    """
    if not 0.0 < isentropic_efficiency < 1.0:
        raise EfficiencyRangeError("Invalid compressor isentropic efficiency!")
    with isentropic_compression_to(state, pressure) as ideal:
        outlet_enthalpy = state.enthalpy + (ideal.enthalpy - state.enthalpy) / isentropic_efficiency
        outlet_pressure = ideal.pressure
    return state.with_state(Input.pressure(outlet_pressure), Input.enthalpy(outlet_enthalpy))


def isenthalpic_expansion_to(state: AbstractFluid, pressure: Any) -> AbstractFluid:
    """Expansion valve (throttling) outlet at *pressure* [Pa].

    Raises:
        ProcessDirectionError: If *pressure* is not below the inlet pressure.
    """
    pressure = to_si(pressure, "Pa")
    if not pressure < state.pressure:
        raise ProcessDirectionError(
            "Expansion valve outlet pressure should be lower than inlet pressure!"
        )
    return state.with_state(Input.pressure(pressure), Input.enthalpy(state.enthalpy))


def isentropic_expansion_to(state: AbstractFluid, pressure: Any) -> AbstractFluid:
    """Ideal expander outlet at *pressure* [Pa].

    Raises:
        ProcessDirectionError: If *pressure* is not below the inlet pressure.
    """
    pressure = to_si(pressure, "Pa")
    if not pressure < state.pressure:
        raise ProcessDirectionError("Expander outlet pressure should be lower than inlet pressure!")
    return state.with_state(Input.pressure(pressure), Input.entropy(state.entropy))


def expansion_to(
    state: AbstractFluid, pressure: Any, isentropic_efficiency: float
) -> AbstractFluid:
    """Real expander outlet at *pressure* [Pa].

    The outlet enthalpy is ``h1 - (h1 - h2s) * eta``.

    Raises:
        EfficiencyRangeError: If *isentropic_efficiency* is not in (0, 1).
        ProcessDirectionError: If *pressure* is not below the inlet pressure.
    """
    if not 0.0 < isentropic_efficiency < 1.0:
        raise EfficiencyRangeError("Invalid expander isentropic efficiency!")
    with isentropic_expansion_to(state, pressure) as ideal:
        outlet_enthalpy = state.enthalpy - (state.enthalpy - ideal.enthalpy) * isentropic_efficiency
        outlet_pressure = ideal.pressure
    return state.with_state(Input.pressure(outlet_pressure), Input.enthalpy(outlet_enthalpy))


# --- Heat transfer ---


def cooling_to(
    state: AbstractFluid,
    *,
    temperature: Any = None,
    enthalpy: Any = None,
    pressure_drop: Any = 0.0,
) -> AbstractFluid:
    """Heat exchanger outlet after cooling to a temperature [K] or enthalpy [J/kg].

    Raises:
        TypeError: Unless exactly one of *temperature* and *enthalpy* is given.
        ProcessDirectionError: If the target does not decrease.
        InputRangeError: If *pressure_drop* is negative.
    """
    return _heat_transfer_to(state, temperature, enthalpy, pressure_drop, cooling=True)


def heating_to(
    state: AbstractFluid,
    *,
    temperature: Any = None,
    enthalpy: Any = None,
    pressure_drop: Any = 0.0,
) -> AbstractFluid:
    """Heat exchanger outlet after heating to a temperature [K] or enthalpy [J/kg].

    Raises:
        TypeError: Unless exactly one of *temperature* and *enthalpy* is given.
        ProcessDirectionError: If the target does not increase.
        InputRangeError: If *pressure_drop* is negative.
    """
    return _heat_transfer_to(state, temperature, enthalpy, pressure_drop, cooling=False)


def _heat_transfer_to(
    state: AbstractFluid,
    temperature: Any,
    enthalpy: Any,
    pressure_drop: Any,
    cooling: bool,
) -> AbstractFluid:
    kind, target = require_one(temperature=temperature, enthalpy=enthalpy)
    if kind == "temperature":
        target = to_si(target, "K")
        current = state.temperature
        outlet_input = Input.temperature(target)
    else:
        target = to_si(target, "J/kg")
        current = state.enthalpy
        outlet_input = Input.enthalpy(target)

    if cooling and not target < current:
        raise ProcessDirectionError(f"During the cooling process, the {kind} should decrease!")
    if not cooling and not target > current:
        raise ProcessDirectionError(f"During the heating process, the {kind} should increase!")

    drop = pressure_drop_to_si(pressure_drop)
    return state.with_state(Input.pressure(state.pressure - drop), outlet_input)


# --- Phase boundaries ---


def bubble_point_at(
    state: AbstractFluid, *, pressure: Any = None, temperature: Any = None
) -> AbstractFluid:
    """Saturated liquid (quality 0) at a pressure [Pa] or temperature [K]."""
    return _saturation_point_at(state, pressure, temperature, 0.0)


def dew_point_at(
    state: AbstractFluid, *, pressure: Any = None, temperature: Any = None
) -> AbstractFluid:
    """Saturated vapor (quality 1) at a pressure [Pa] or temperature [K]."""
    return _saturation_point_at(state, pressure, temperature, 1.0)


def two_phase_point_at(state: AbstractFluid, pressure: Any, quality: float) -> AbstractFluid:
    """Two-phase state at *pressure* [Pa] with vapor *quality* (0 to 1)."""
    return state.with_state(Input.pressure(pressure), Input.quality(quality))


def _saturation_point_at(
    state: AbstractFluid, pressure: Any, temperature: Any, quality: float
) -> AbstractFluid:
    kind, value = require_one(pressure=pressure, temperature=temperature)
    boundary = Input.pressure(value) if kind == "pressure" else Input.temperature(value)
    return state.with_state(boundary, Input.quality(quality))


# --- Mixing ---


def mixing(
    state: AbstractFluid,
    first_specific_mass_flow: float,
    first: AbstractFluid,
    second_specific_mass_flow: float,
    second: AbstractFluid,
) -> AbstractFluid:
    """Adiabatic mixing of two streams of the receiver's fluid.

    The outlet has the common pressure and the flow-weighted enthalpy.

    Args:
        state: Receiver; the outlet has its composition.
        first_specific_mass_flow: Relative mass flow of *first*.
        first: First stream.
        second_specific_mass_flow: Relative mass flow of *second*.
        second: Second stream.

    Raises:
        MixingError: If the streams are not of the receiver's fluid or their
            pressures differ.
    """
    if not state._is_valid_for_mixing(first, second):
        raise MixingError("The mixing process is possible only for the same fluids!")
    check_same_pressure(first.pressure, second.pressure)
    enthalpy = weighted_average(
        first_specific_mass_flow, first.enthalpy, second_specific_mass_flow, second.enthalpy
    )
    logger.debug("Mixing %s and %s, outlet enthalpy %.1f J/kg", first, second, enthalpy)
    return state.with_state(Input.pressure(first.pressure), Input.enthalpy(enthalpy))
