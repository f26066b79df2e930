"""Refrigeration cycle components."""

from fluidstate.cycle.components.base import ComponentResult, CycleComponent
from fluidstate.cycle.components.compressor import Compressor
from fluidstate.cycle.components.expander import Expander
from fluidstate.cycle.components.heat_exchanger import HeatExchanger
from fluidstate.cycle.components.valve import Valve

__all__ = [
    "ComponentResult",
    "Compressor",
    "CycleComponent",
    "Expander",
    "HeatExchanger",
    "Valve",
]
