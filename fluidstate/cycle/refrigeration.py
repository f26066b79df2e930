"""Vapor-compression refrigeration cycle.

Builds the four state points of a single-stage cycle from the process
functions of the state classes:

1. Compressor inlet: dew point at the evaporating temperature, optionally
   superheated.
2. Compressor outlet at the condensing pressure.
3. Condenser outlet: bubble point at the condensing pressure, optionally
   subcooled.
4. Expansion device outlet at the evaporating pressure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.core.errors import InputRangeError
from fluidstate.core.fluid import Fluid
from fluidstate.core.fluids_list import FluidsList
from fluidstate.cycle.components import Compressor, Expander, HeatExchanger, Valve
from fluidstate.utils.validation import validate_refrigeration_cycle

logger = logging.getLogger(__name__)


class ExpansionDevice(Enum):
    """How the condensed liquid is brought to the evaporating pressure."""

    VALVE = "valve"
    EXPANDER = "expander"


@dataclass
class CycleDefinition:
    """Operating point of a single-stage vapor-compression cycle.

    Temperatures in K, temperature differences in K, efficiencies as
    decimal fractions.
    """

    fluid: FluidsList = FluidsList.R134a
    evaporating_temperature: float = 268.15  # K
    condensing_temperature: float = 313.15  # K
    superheat: float = 5.0  # K
    subcooling: float = 3.0  # K
    isentropic_efficiency: float = 0.8  # compressor
    mass_flow: float = 1.0  # kg/s
    expansion_device: ExpansionDevice = ExpansionDevice.VALVE
    expander_efficiency: float = 0.7


@dataclass
class CyclePerformance:
    """System-level cycle performance summary."""

    fluid: str = ""
    evaporating_pressure: float = 0.0  # Pa
    condensing_pressure: float = 0.0  # Pa
    cooling_capacity: float = 0.0  # W
    heat_rejection: float = 0.0  # W
    compressor_power: float = 0.0  # W
    expander_power: float = 0.0  # W, recovered
    cop_cooling: float = 0.0
    cop_heating: float = 0.0
    state_points: list[dict[str, Any]] = field(default_factory=list)
    component_summaries: list[dict[str, Any]] = field(default_factory=list)

    @property
    def pressure_ratio(self) -> float:
        return self.condensing_pressure / self.evaporating_pressure

    def to_dict(self) -> dict[str, Any]:
        return {
            "fluid": self.fluid,
            "evaporating_pressure": self.evaporating_pressure,
            "condensing_pressure": self.condensing_pressure,
            "pressure_ratio": self.pressure_ratio,
            "cooling_capacity": self.cooling_capacity,
            "heat_rejection": self.heat_rejection,
            "compressor_power": self.compressor_power,
            "expander_power": self.expander_power,
            "cop_cooling": self.cop_cooling,
            "cop_heating": self.cop_heating,
            "state_points": self.state_points,
            "components": self.component_summaries,
        }


def _state_point(number: int, label: str, state: AbstractFluid) -> dict[str, Any]:
    return {
        "point": number,
        "label": label,
        "pressure": state.pressure,
        "temperature": state.temperature,
        "enthalpy": state.enthalpy,
        "entropy": state.entropy,
        "quality": state.quality,
        "phase": state.phase.name,
    }


def solve_refrigeration_cycle(definition: CycleDefinition) -> CyclePerformance:
    """Solve the cycle and compute its performance.

    Args:
        definition: Cycle operating point.

    Returns:
        CyclePerformance with energy flows, COPs and state points.

    Raises:
        InputRangeError: If the definition fails validation.
        FluidStateError: If a state point cannot be evaluated.
    """
    validation = validate_refrigeration_cycle(definition)
    if not validation.is_valid:
        raise InputRangeError(f"Invalid cycle definition:\n{validation.summary()}")
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.parameter, warning.message)

    mdot = definition.mass_flow
    fluid = Fluid(definition.fluid)
    compressor = Compressor(efficiency=definition.isentropic_efficiency, mass_flow=mdot)
    condenser = HeatExchanger(name="condenser", mass_flow=mdot)
    evaporator = HeatExchanger(name="evaporator", mass_flow=mdot)
    if definition.expansion_device is ExpansionDevice.EXPANDER:
        expansion = Expander(efficiency=definition.expander_efficiency, mass_flow=mdot)
    else:
        expansion = Valve(name="expansion_valve", mass_flow=mdot)

    # 1: compressor inlet
    point_1 = fluid.dew_point_at(temperature=definition.evaporating_temperature)
    if definition.superheat > 0:
        point_1 = point_1.heating_to(
            temperature=definition.evaporating_temperature + definition.superheat
        )

    # 3: condenser outlet
    point_3 = fluid.bubble_point_at(temperature=definition.condensing_temperature)
    condensing_pressure = point_3.pressure
    if definition.subcooling > 0:
        point_3 = point_3.cooling_to(temperature=point_3.temperature - definition.subcooling)

    # 2: compressor outlet, then through the condenser to 3
    point_2 = compressor.compute(point_1, outlet_pressure=condensing_pressure)
    condenser.compute(point_2, enthalpy=point_3.enthalpy)

    # 4: expansion device outlet, then through the evaporator back to 1
    point_4 = expansion.compute(point_3, outlet_pressure=point_1.pressure)
    evaporator.compute(point_4, enthalpy=point_1.enthalpy)

    cooling_capacity = evaporator.heat_flow()
    heat_rejection = -condenser.heat_flow()
    compressor_power = compressor.power()
    expander_power = -expansion.power()
    net_power = compressor_power - expander_power

    performance = CyclePerformance(
        fluid=definition.fluid.name,
        evaporating_pressure=point_1.pressure,
        condensing_pressure=condensing_pressure,
        cooling_capacity=cooling_capacity,
        heat_rejection=heat_rejection,
        compressor_power=compressor_power,
        expander_power=expander_power,
        cop_cooling=cooling_capacity / net_power,
        cop_heating=heat_rejection / net_power,
        state_points=[
            _state_point(1, "compressor inlet", point_1),
            _state_point(2, "compressor outlet", point_2),
            _state_point(3, "condenser outlet", point_3),
            _state_point(4, "evaporator inlet", point_4),
        ],
        component_summaries=[
            c.summary() for c in (compressor, condenser, expansion, evaporator)
        ],
    )
    logger.info(
        "%s cycle: Q_evap=%.1f W, W_comp=%.1f W, COP=%.3f",
        performance.fluid,
        cooling_capacity,
        compressor_power,
        performance.cop_cooling,
    )
    return performance
