"""Psychrometric state of humid air.

A humid-air state is defined by three inputs with distinct keys and
evaluated with CoolProp's ``HAPropsSI``. Unlike fluid states there is no
native handle: inputs are only checked on update and the first property read
calls the oracle.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from fluidstate.core.backend import ha_props
from fluidstate.core.cache import PropertyCache
from fluidstate.core.inputs import InputHumidAir
from fluidstate.core.resolver import check_unique_inputs
from fluidstate.core.serialization import to_json
from fluidstate.processes import humid_air_processes

logger = logging.getLogger(__name__)

_REQUIRED_INPUTS = 3


def _evaluator(inputs: tuple[InputHumidAir, ...]) -> Callable[[str], float]:
    arguments = [part for item in inputs for part in (item.coolprop_key, item.value)]

    def evaluate(key: str) -> float:
        return ha_props(key, *arguments)

    return evaluate


class HumidAir:
    """Humid air at a state given by three inputs.

    Example:
        >>> air = HumidAir().with_state(
        ...     InputHumidAir.pressure(101325),
        ...     InputHumidAir.temperature(293.15),
        ...     InputHumidAir.relative_humidity(0.5),
        ... )
        >>> air.humidity
        0.0072...
    """

    def __init__(self):
        self._cache = self._new_cache(())
        self._disposed = False

    def _new_cache(self, inputs: tuple[InputHumidAir, ...]) -> PropertyCache:
        return PropertyCache(inputs, _evaluator(inputs), _REQUIRED_INPUTS, quality_key=None)

    # --- State definition ---

    @property
    def inputs(self) -> tuple[InputHumidAir, ...]:
        return self._cache.inputs

    def update(
        self,
        first_input: InputHumidAir,
        second_input: InputHumidAir,
        third_input: InputHumidAir,
    ) -> None:
        """Define the state by three inputs.

        Raises:
            InputDefinitionError: Unless the three keys are distinct.
        """
        self.reset()
        inputs = (first_input, second_input, third_input)
        self._cache = self._new_cache(inputs)
        check_unique_inputs(inputs, _REQUIRED_INPUTS)
        logger.debug("Updated humid air with %s, %s, %s", *inputs)

    def reset(self) -> None:
        self._cache = self._new_cache(())

    def with_state(
        self,
        first_input: InputHumidAir,
        second_input: InputHumidAir,
        third_input: InputHumidAir,
    ) -> HumidAir:
        humid_air = self.factory()
        humid_air.update(first_input, second_input, third_input)
        return humid_air

    def clone(self) -> HumidAir:
        check_unique_inputs(self.inputs, _REQUIRED_INPUTS)
        return self.with_state(*self.inputs)

    def factory(self) -> HumidAir:
        return type(self)()

    def dispose(self) -> None:
        """Nothing native to release; kept so all states share one lifecycle."""
        self._disposed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _input_set(self) -> frozenset:
        return frozenset((item.coolprop_key, item.value) for item in self.inputs)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return self._input_set() == other._input_set()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._input_set()))

    def __repr__(self) -> str:
        inputs = ", ".join(f"{i.coolprop_key}={i.value:g}" for i in self.inputs)
        return f"{type(self).__name__}({inputs})"

    # --- Output access ---

    def _keyed_output(self, key: str) -> float:
        check_unique_inputs(self.inputs, _REQUIRED_INPUTS)
        return self._cache.value_of(key)

    # --- Properties (SI units) ---

    @property
    def compressibility(self) -> float:
        return self._keyed_output("Z")

    @property
    def conductivity(self) -> float:
        """Thermal conductivity [W/(m·K)]."""
        return self._keyed_output("K")

    @property
    def density(self) -> float:
        """Mass density per humid air unit [kg/m³]."""
        return 1.0 / self.specific_volume

    @property
    def dew_temperature(self) -> float:
        """Dew-point temperature [K]."""
        return self._keyed_output("D")

    @property
    def dynamic_viscosity(self) -> float:
        """Dynamic viscosity [Pa·s]."""
        return self._keyed_output("M")

    @property
    def enthalpy(self) -> float:
        """Mass specific enthalpy per humid air [J/kg]."""
        return self._keyed_output("Hha")

    @property
    def entropy(self) -> float:
        """Mass specific entropy per humid air [J/(kg·K)]."""
        return self._keyed_output("Sha")

    @property
    def humidity(self) -> float:
        """Absolute humidity ratio [kg/kg dry air]."""
        return self._keyed_output("W")

    @property
    def kinematic_viscosity(self) -> float:
        """Kinematic viscosity [m²/s]."""
        return self.dynamic_viscosity / self.density

    @property
    def partial_pressure(self) -> float:
        """Partial pressure of water vapor [Pa]."""
        return self._keyed_output("P_w")

    @property
    def prandtl(self) -> float:
        return self.dynamic_viscosity * self.specific_heat / self.conductivity

    @property
    def pressure(self) -> float:
        """Absolute pressure [Pa]."""
        return self._keyed_output("P")

    @property
    def relative_humidity(self) -> float:
        """Relative humidity as a decimal fraction."""
        return self._keyed_output("R")

    @property
    def specific_heat(self) -> float:
        """Mass specific isobaric heat capacity per humid air [J/(kg·K)]."""
        return self._keyed_output("Cha")

    @property
    def specific_volume(self) -> float:
        """Mass specific volume per humid air [m³/kg]."""
        return self._keyed_output("Vha")

    @property
    def temperature(self) -> float:
        """Dry-bulb temperature [K]."""
        return self._keyed_output("T")

    @property
    def wet_bulb_temperature(self) -> float:
        """Wet-bulb temperature [K]."""
        return self._keyed_output("B")

    # --- Processes ---

    def dry_cooling_to(
        self, *, temperature: Any = None, enthalpy: Any = None, pressure_drop: Any = 0.0
    ) -> HumidAir:
        return humid_air_processes.dry_cooling_to(
            self, temperature=temperature, enthalpy=enthalpy, pressure_drop=pressure_drop
        )

    def wet_cooling_to(
        self,
        *,
        temperature: Any = None,
        enthalpy: Any = None,
        relative_humidity: float | None = None,
        humidity: float | None = None,
        pressure_drop: Any = 0.0,
    ) -> HumidAir:
        return humid_air_processes.wet_cooling_to(
            self,
            temperature=temperature,
            enthalpy=enthalpy,
            relative_humidity=relative_humidity,
            humidity=humidity,
            pressure_drop=pressure_drop,
        )

    def heating_to(
        self, *, temperature: Any = None, enthalpy: Any = None, pressure_drop: Any = 0.0
    ) -> HumidAir:
        return humid_air_processes.heating_to(
            self, temperature=temperature, enthalpy=enthalpy, pressure_drop=pressure_drop
        )

    def humidification_by_water_to(
        self, *, relative_humidity: float | None = None, humidity: float | None = None
    ) -> HumidAir:
        return humid_air_processes.humidification_by_water_to(
            self, relative_humidity=relative_humidity, humidity=humidity
        )

    def humidification_by_steam_to(
        self, *, relative_humidity: float | None = None, humidity: float | None = None
    ) -> HumidAir:
        return humid_air_processes.humidification_by_steam_to(
            self, relative_humidity=relative_humidity, humidity=humidity
        )

    def mixing(
        self,
        first_specific_mass_flow: float,
        first: HumidAir,
        second_specific_mass_flow: float,
        second: HumidAir,
    ) -> HumidAir:
        return humid_air_processes.mixing(
            self, first_specific_mass_flow, first, second_specific_mass_flow, second
        )

    # --- Export ---

    def to_dict(self) -> dict[str, Any]:
        return {
            "compressibility": self.compressibility,
            "conductivity": self.conductivity,
            "density": self.density,
            "dew_temperature": self.dew_temperature,
            "dynamic_viscosity": self.dynamic_viscosity,
            "enthalpy": self.enthalpy,
            "entropy": self.entropy,
            "humidity": self.humidity,
            "kinematic_viscosity": self.kinematic_viscosity,
            "partial_pressure": self.partial_pressure,
            "prandtl": self.prandtl,
            "pressure": self.pressure,
            "relative_humidity": self.relative_humidity,
            "specific_heat": self.specific_heat,
            "specific_volume": self.specific_volume,
            "temperature": self.temperature,
            "wet_bulb_temperature": self.wet_bulb_temperature,
        }

    def as_json(self, indented: bool = True) -> str:
        return to_json(self.to_dict(), indented)
