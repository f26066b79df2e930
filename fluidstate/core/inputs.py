"""Keyed inputs that define a fluid or humid-air state.

An input pairs a CoolProp key with a value in SI units. ``Input`` uses the
integer parameter keys of the low-level interface (fluids and mixtures);
``InputHumidAir`` uses the string keys of ``HAPropsSI``. Factory methods
accept plain floats (already SI) or pint quantities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import CoolProp.CoolProp as CP

from fluidstate.core.backend import HIGHLEVEL_KEYS
from fluidstate.core.errors import InputRangeError
from fluidstate.utils.constants import (
    ALTITUDE_MAX,
    ALTITUDE_MIN,
    ALTITUDE_PRESSURE_COEFF,
    ALTITUDE_PRESSURE_EXPONENT,
    P_ATM,
)
from fluidstate.utils.units import to_si


@dataclass(frozen=True)
class KeyedInput:
    """Base of all inputs: a CoolProp key and an SI value."""

    coolprop_key: Any
    value: float

    @property
    def coolprop_highlevel_key(self) -> str:
        return str(self.coolprop_key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coolprop_highlevel_key}={self.value!r})"


@dataclass(frozen=True, repr=False)
class Input(KeyedInput):
    """Input of a pure fluid or a mixture state."""

    coolprop_key: int

    @property
    def coolprop_highlevel_key(self) -> str:
        return HIGHLEVEL_KEYS.get(self.coolprop_key, str(self.coolprop_key))

    @classmethod
    def density(cls, value: Any) -> Input:
        """Mass density [kg/m³]."""
        return cls(CP.iDmass, to_si(value, "kg/m**3"))

    @classmethod
    def enthalpy(cls, value: Any) -> Input:
        """Mass specific enthalpy [J/kg]."""
        return cls(CP.iHmass, to_si(value, "J/kg"))

    @classmethod
    def entropy(cls, value: Any) -> Input:
        """Mass specific entropy [J/(kg·K)]."""
        return cls(CP.iSmass, to_si(value, "J/kg/K"))

    @classmethod
    def internal_energy(cls, value: Any) -> Input:
        """Mass specific internal energy [J/kg]."""
        return cls(CP.iUmass, to_si(value, "J/kg"))

    @classmethod
    def pressure(cls, value: Any) -> Input:
        """Absolute pressure [Pa]."""
        return cls(CP.iP, to_si(value, "Pa"))

    @classmethod
    def quality(cls, value: Any) -> Input:
        """Mass vapor quality as a decimal fraction (0 to 1)."""
        return cls(CP.iQ, to_si(value, "dimensionless"))

    @classmethod
    def specific_volume(cls, value: Any) -> Input:
        """Mass specific volume [m³/kg], stored as density."""
        return cls(CP.iDmass, 1.0 / to_si(value, "m**3/kg"))

    @classmethod
    def temperature(cls, value: Any) -> Input:
        """Temperature [K]."""
        return cls(CP.iT, to_si(value, "K"))


@dataclass(frozen=True, repr=False)
class InputHumidAir(KeyedInput):
    """Input of a humid-air state (``HAPropsSI`` keys)."""

    coolprop_key: str

    @classmethod
    def altitude(cls, value: Any) -> InputHumidAir:
        """Altitude above sea level [m], converted to the standard-atmosphere pressure.

        Raises:
            InputRangeError: If the altitude is outside [-5000, 11000] m.
        """
        altitude = to_si(value, "m")
        if altitude < ALTITUDE_MIN or altitude > ALTITUDE_MAX:
            raise InputRangeError(
                "Altitude above sea level should be between -5 000 and 11 000 meters!"
            )
        pressure = P_ATM * (1 - ALTITUDE_PRESSURE_COEFF * altitude) ** ALTITUDE_PRESSURE_EXPONENT
        return cls("P", pressure)

    @classmethod
    def density(cls, value: Any) -> InputHumidAir:
        """Mass density per humid air unit [kg/m³], stored as specific volume."""
        return cls("Vha", 1.0 / to_si(value, "kg/m**3"))

    @classmethod
    def dew_temperature(cls, value: Any) -> InputHumidAir:
        return cls("D", to_si(value, "K"))

    @classmethod
    def enthalpy(cls, value: Any) -> InputHumidAir:
        """Mass specific enthalpy per humid air [J/kg]."""
        return cls("Hha", to_si(value, "J/kg"))

    @classmethod
    def entropy(cls, value: Any) -> InputHumidAir:
        """Mass specific entropy per humid air [J/(kg·K)]."""
        return cls("Sha", to_si(value, "J/kg/K"))

    @classmethod
    def humidity(cls, value: Any) -> InputHumidAir:
        """Absolute humidity ratio [kg water / kg dry air]."""
        return cls("W", to_si(value, "dimensionless"))

    @classmethod
    def partial_pressure(cls, value: Any) -> InputHumidAir:
        """Partial pressure of water vapor [Pa]."""
        return cls("P_w", to_si(value, "Pa"))

    @classmethod
    def pressure(cls, value: Any) -> InputHumidAir:
        return cls("P", to_si(value, "Pa"))

    @classmethod
    def relative_humidity(cls, value: Any) -> InputHumidAir:
        """Relative humidity as a decimal fraction (0 to 1)."""
        return cls("R", to_si(value, "dimensionless"))

    @classmethod
    def specific_volume(cls, value: Any) -> InputHumidAir:
        """Mass specific volume per humid air [m³/kg]."""
        return cls("Vha", to_si(value, "m**3/kg"))

    @classmethod
    def temperature(cls, value: Any) -> InputHumidAir:
        return cls("T", to_si(value, "K"))

    @classmethod
    def wet_bulb_temperature(cls, value: Any) -> InputHumidAir:
        return cls("B", to_si(value, "K"))
