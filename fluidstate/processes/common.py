"""Argument checks shared by fluid and humid-air processes."""

from __future__ import annotations

from typing import Any

from fluidstate.core.errors import InputRangeError, MixingError
from fluidstate.core.config import get_settings
from fluidstate.utils.units import to_si


def require_one(**candidates: Any) -> tuple[str, Any]:
    """Return the single keyword argument that is not None.

    Raises:
        TypeError: If none or more than one is given.
    """
    given = [(name, value) for name, value in candidates.items() if value is not None]
    if len(given) != 1:
        raise TypeError(f"Exactly one of {', '.join(candidates)} must be given")
    return given[0]


def pressure_drop_to_si(pressure_drop: Any) -> float:
    """Convert and check a heat-exchanger pressure drop.

    Raises:
        InputRangeError: If the drop is negative.
    """
    value = to_si(pressure_drop, "Pa") if pressure_drop is not None else 0.0
    if value < 0:
        raise InputRangeError("Invalid pressure drop in the heat exchanger!")
    return value


def check_same_pressure(first_pressure: float, second_pressure: float) -> None:
    """Mixing requires both streams at the same pressure (within tolerance).

    Raises:
        MixingError: If the pressures differ.
    """
    if abs(first_pressure - second_pressure) > get_settings().pressure_tolerance:
        raise MixingError("The mixing process is possible only for flows with the same pressure!")


def weighted_average(
    first_flow: float, first_value: float, second_flow: float, second_value: float
) -> float:
    """Flow-weighted average of a specific quantity."""
    return (first_flow * first_value + second_flow * second_value) / (first_flow + second_flow)
