"""Expansion valve component model for cycle analysis.

Models an isenthalpic pressure drop (throttling) to a given outlet pressure
or by a fixed pressure drop.
"""

from __future__ import annotations

from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.cycle.components.base import CycleComponent


class Valve(CycleComponent):
    """Throttling valve.

    Args:
        name: Component name.
        dp: Fixed pressure drop [Pa], used when no outlet pressure is given.
        mass_flow: Mass flow [kg/s].
    """

    component_type = "valve"

    def __init__(self, name: str = "valve", dp: float = 50000.0, mass_flow: float = 1.0):
        super().__init__(name, mass_flow)
        self._dp_fixed = dp

    def compute(
        self, inlet: AbstractFluid, outlet_pressure: float | None = None, **kwargs: Any
    ) -> AbstractFluid:
        """Compute valve outlet state (isenthalpic throttling).

        Args:
            inlet: Inlet fluid state.
            outlet_pressure: Outlet pressure [Pa]; defaults to the inlet
                pressure minus the fixed drop.

        Returns:
            Outlet fluid state with reduced pressure.
        """
        if outlet_pressure is None:
            outlet_pressure = inlet.pressure - self._dp_fixed
        return self._store(inlet, inlet.isenthalpic_expansion_to(outlet_pressure))

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        if self._result:
            d["pressure_drop_Pa"] = -self._result.pressure_change
            d["outlet_quality"] = self._result.outlet.quality
        return d
