"""Compressor component model for refrigeration cycle analysis."""

from __future__ import annotations

from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.cycle.components.base import CycleComponent


class Compressor(CycleComponent):
    """Adiabatic compressor with an isentropic efficiency.

    Args:
        name: Component name.
        efficiency: Isentropic efficiency (decimal, 0 to 1 exclusive).
        mass_flow: Mass flow [kg/s].
    """

    component_type = "compressor"

    def __init__(self, name: str = "compressor", efficiency: float = 0.8, mass_flow: float = 1.0):
        super().__init__(name, mass_flow)
        self.efficiency = efficiency

    def compute(
        self, inlet: AbstractFluid, outlet_pressure: float = 0.0, **kwargs: Any
    ) -> AbstractFluid:
        """Compressor outlet state at *outlet_pressure* [Pa].

        Raises:
            EfficiencyRangeError: If the efficiency is not in (0, 1).
            ProcessDirectionError: If the pressure does not rise.
        """
        return self._store(inlet, inlet.compression_to(outlet_pressure, self.efficiency))

    def specific_work(self) -> float:
        """Work input per unit mass [J/kg]."""
        return self._result.specific_enthalpy_change if self._result else 0.0

    def power(self) -> float:
        """Shaft power consumed [W] (positive = consumed)."""
        return self.specific_work() * self.mass_flow

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["efficiency"] = self.efficiency
        if self._result:
            d["pressure_ratio"] = self._result.outlet.pressure / self._result.inlet.pressure
        return d
