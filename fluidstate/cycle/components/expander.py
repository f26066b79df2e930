"""Expander component model for cycle analysis."""

from __future__ import annotations

from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.cycle.components.base import CycleComponent


class Expander(CycleComponent):
    """Adiabatic work-producing expander with an isentropic efficiency.

    Args:
        name: Component name.
        efficiency: Isentropic efficiency (decimal, 0 to 1 exclusive).
        mass_flow: Mass flow [kg/s].
    """

    component_type = "expander"

    def __init__(self, name: str = "expander", efficiency: float = 0.7, mass_flow: float = 1.0):
        super().__init__(name, mass_flow)
        self.efficiency = efficiency

    def compute(
        self, inlet: AbstractFluid, outlet_pressure: float = 0.0, **kwargs: Any
    ) -> AbstractFluid:
        """Expander outlet state at *outlet_pressure* [Pa]."""
        return self._store(inlet, inlet.expansion_to(outlet_pressure, self.efficiency))

    def specific_work(self) -> float:
        """Work output per unit mass [J/kg] (positive = produced)."""
        return -self._result.specific_enthalpy_change if self._result else 0.0

    def power(self) -> float:
        """Shaft power [W] (negative = produced)."""
        return -self.specific_work() * self.mass_flow

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["efficiency"] = self.efficiency
        return d
