"""fluidstate: thermodynamic and psychrometric states on top of CoolProp.

Define a state from two (fluids, mixtures) or three (humid air) inputs in any
order, read properties lazily, and derive new states through compression,
expansion, heat transfer, phase-boundary and mixing processes.

Example:
    >>> from fluidstate import Fluid, FluidsList, Input
    >>> water = Fluid(FluidsList.Water).with_state(
    ...     Input.pressure(101325), Input.temperature(423.15)
    ... )
    >>> water.isentropic_compression_to(2 * water.pressure).entropy == water.entropy
    True
"""

__app_name__ = "fluidstate"
__version__ = "0.1.0"

from fluidstate.core.abstract_fluid import AbstractFluid  # noqa: E402
from fluidstate.core.config import Settings, configure, get_settings  # noqa: E402
from fluidstate.core.errors import (  # noqa: E402
    CompositionError,
    EfficiencyRangeError,
    FluidStateError,
    InputDefinitionError,
    InputRangeError,
    InvalidStateError,
    MixingError,
    OracleError,
    ProcessDirectionError,
    StateDisposedError,
)
from fluidstate.core.fluid import Fluid  # noqa: E402
from fluidstate.core.fluids_list import FluidsList, Mix, get_fluid_info, list_fluids  # noqa: E402
from fluidstate.core.humid_air import HumidAir  # noqa: E402
from fluidstate.core.inputs import Input, InputHumidAir  # noqa: E402
from fluidstate.core.mixture import Mixture  # noqa: E402
from fluidstate.core.phases import Phases  # noqa: E402

__all__ = [
    "AbstractFluid",
    "CompositionError",
    "EfficiencyRangeError",
    "Fluid",
    "FluidStateError",
    "FluidsList",
    "HumidAir",
    "Input",
    "InputDefinitionError",
    "InputHumidAir",
    "InputRangeError",
    "InvalidStateError",
    "Mix",
    "MixingError",
    "Mixture",
    "OracleError",
    "Phases",
    "ProcessDirectionError",
    "Settings",
    "StateDisposedError",
    "configure",
    "get_settings",
    "get_fluid_info",
    "list_fluids",
]
