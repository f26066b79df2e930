"""Heat exchanger component model for cycle analysis.

Models one side of an evaporator or condenser: the fluid is heated or
cooled to a target temperature or enthalpy with an optional pressure drop.
"""

from __future__ import annotations

import logging
from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.cycle.components.base import CycleComponent
from fluidstate.processes.common import require_one
from fluidstate.utils.units import to_si

logger = logging.getLogger(__name__)


class HeatExchanger(CycleComponent):
    """Single-stream heat exchanger.

    Whether the stream is heated or cooled follows from the target: a
    target above the inlet value heats, one below cools.

    Args:
        name: Component name.
        pressure_drop: Pressure drop on the refrigerant side [Pa].
        mass_flow: Mass flow [kg/s].
    """

    component_type = "heat_exchanger"

    def __init__(
        self, name: str = "heat_exchanger", pressure_drop: float = 0.0, mass_flow: float = 1.0
    ):
        super().__init__(name, mass_flow)
        self.pressure_drop = pressure_drop

    def compute(
        self,
        inlet: AbstractFluid,
        temperature: float | None = None,
        enthalpy: float | None = None,
        **kwargs: Any,
    ) -> AbstractFluid:
        """Compute the outlet state.

        Args:
            inlet: Inlet fluid state.
            temperature: Outlet temperature [K].
            enthalpy: Outlet enthalpy [J/kg].

        Returns:
            Outlet fluid state.
        """
        kind, target = require_one(temperature=temperature, enthalpy=enthalpy)
        if kind == "temperature":
            heating = to_si(target, "K") > inlet.temperature
        else:
            heating = to_si(target, "J/kg") > inlet.enthalpy

        process = inlet.heating_to if heating else inlet.cooling_to
        outlet = process(**{kind: target}, pressure_drop=self.pressure_drop)
        action = "heats" if heating else "cools"
        logger.debug("%s %s stream to %s=%g", self.name, action, kind, target)
        return self._store(inlet, outlet)

    def specific_heat_transfer(self) -> float:
        """Heat absorbed per unit mass [J/kg] (negative = rejected)."""
        return self._result.specific_enthalpy_change if self._result else 0.0

    def heat_flow(self) -> float:
        return self.specific_heat_transfer() * self.mass_flow

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["pressure_drop_Pa"] = self.pressure_drop
        return d
