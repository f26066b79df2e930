"""Base classes for cycle components.

Defines the common interface of refrigeration cycle components
(compressor, expander, valve, heat exchanger). Components wrap the process
functions of :mod:`fluidstate.processes` and report energy flows for a
given mass flow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid


@dataclass
class ComponentResult:
    """Inlet/outlet pair of one component evaluation."""

    inlet: AbstractFluid
    outlet: AbstractFluid
    mass_flow: float = 1.0  # kg/s

    @property
    def specific_enthalpy_change(self) -> float:
        """Outlet minus inlet enthalpy [J/kg]."""
        return self.outlet.enthalpy - self.inlet.enthalpy

    @property
    def pressure_change(self) -> float:
        """Outlet minus inlet pressure [Pa]."""
        return self.outlet.pressure - self.inlet.pressure


class CycleComponent(ABC):
    """Abstract base class for a cycle component.

    Every component takes an inlet state and produces an outlet state,
    along with power and heat flow metrics.

    Args:
        name: Component name.
        mass_flow: Refrigerant mass flow through the component [kg/s].
    """

    name: str = ""
    component_type: str = ""

    def __init__(self, name: str, mass_flow: float = 1.0):
        self.name = name
        self.mass_flow = mass_flow
        self._result: ComponentResult | None = None

    @abstractmethod
    def compute(self, inlet: AbstractFluid, **kwargs: Any) -> AbstractFluid:
        """Run the component model.

        Args:
            inlet: Inlet fluid state.
            **kwargs: Component-specific parameters.

        Returns:
            Outlet fluid state.
        """
        ...

    @property
    def result(self) -> ComponentResult | None:
        return self._result

    def _store(self, inlet: AbstractFluid, outlet: AbstractFluid) -> AbstractFluid:
        self._result = ComponentResult(inlet=inlet, outlet=outlet, mass_flow=self.mass_flow)
        return outlet

    def power(self) -> float:
        """Net shaft power [W] consumed (positive) or produced (negative)."""
        return 0.0

    def heat_flow(self) -> float:
        """Heat flow [W] absorbed by the fluid (positive) or rejected (negative)."""
        return 0.0

    def summary(self) -> dict[str, Any]:
        """Return a summary dictionary of the component state."""
        d: dict[str, Any] = {
            "name": self.name,
            "type": self.component_type,
            "power_W": self.power(),
            "heat_flow_W": self.heat_flow(),
        }
        if self._result:
            d["inlet_pressure_Pa"] = self._result.inlet.pressure
            d["outlet_pressure_Pa"] = self._result.outlet.pressure
        return d
