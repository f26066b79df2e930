"""Unit conversion utilities for fluidstate.

Provides a lightweight unit conversion system built on top of pint. States
store and return SI values only; these helpers turn user quantities
(``Q_(1, "atm")``, ``"20 degC"``) into SI floats and back.
"""

from __future__ import annotations

from typing import Any

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.default_format = "~P"  # short pretty format


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


def to_si(value: Any, unit: str) -> float:
    """Return *value* as a float in the SI *unit*.

    Plain numbers are assumed to already be in SI units and are returned
    unchanged; pint quantities are converted.

    Args:
        value: Number or pint quantity.
        unit: Target SI unit string (e.g. "Pa", "K", "J/kg").

    Raises:
        pint.DimensionalityError: If the quantity is not convertible.
    """
    if isinstance(value, pint.Quantity):
        return float(value.to(unit).magnitude)
    return float(value)


def parse_quantity(text: str, unit: str) -> float:
    """Parse a string such as ``"1 atm"`` or ``"20 degC"`` to SI.

    A bare number is taken as already being in *unit*. Magnitude and unit are
    split on the first space so offset units (degC, degF) work.
    """
    magnitude, _, source_unit = text.strip().partition(" ")
    if not source_unit.strip():
        return float(magnitude)
    return float(Q_(float(magnitude), source_unit.strip()).to(unit).magnitude)


def from_si(value: float, unit: str, si_unit: str) -> float:
    """Express an SI float *value* (in *si_unit*) in *unit* for display.

    Example:
        >>> from_si(101325.0, "kPa", "Pa")
        101.325
    """
    return float(Q_(value, si_unit).to(unit).magnitude)
