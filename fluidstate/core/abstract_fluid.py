"""Common base of pure fluid and mixture states.

A state is defined by two inputs with distinct keys. Derived properties are
read lazily from the CoolProp handle the state owns and memoized in a
``PropertyCache`` until the next ``update`` or ``reset``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import CoolProp.CoolProp as CP

from fluidstate.core.backend import StateHandle
from fluidstate.core.cache import PropertyCache
from fluidstate.core.inputs import Input
from fluidstate.core.phases import Phases
from fluidstate.core.resolver import generate_update_pair
from fluidstate.core.serialization import to_json
from fluidstate.processes import fluid_processes

logger = logging.getLogger(__name__)

_REQUIRED_INPUTS = 2


class AbstractFluid(ABC):
    """Base class of :class:`~fluidstate.Fluid` and :class:`~fluidstate.Mixture`.

    Subclasses create the CoolProp handle for their composition and provide
    ``factory`` (an empty state of the same composition) and ``_identity``
    (the composition part of equality).

    Args:
        handle: CoolProp handle exclusively owned by this state.
    """

    def __init__(self, handle: StateHandle):
        self._handle = handle
        self._specified_phase: Phases | None = None
        self._cache = self._new_cache(())

    # --- State definition ---

    def _new_cache(self, inputs: tuple[Input, ...]) -> PropertyCache:
        return PropertyCache(inputs, self._handle.keyed_output, _REQUIRED_INPUTS)

    @property
    def inputs(self) -> tuple[Input, ...]:
        """Defining inputs in the order they were given."""
        return self._cache.inputs

    @property
    def is_defined(self) -> bool:
        return self._cache.is_defined

    def update(self, first_input: Input, second_input: Input) -> None:
        """Define the state by two inputs given in any order.

        Raises:
            InputDefinitionError: If the keys repeat or cannot define a state.
            OracleError: If CoolProp cannot solve the state.
        """
        self.reset()
        input_pair, first_value, second_value = generate_update_pair(first_input, second_input)
        self._handle.update(input_pair, first_value, second_value)
        self._cache = self._new_cache((first_input, second_input))
        logger.debug("Updated %s with %s, %s", self._describe(), first_input, second_input)

    def reset(self) -> None:
        """Forget the inputs and every memoized property."""
        self._cache = self._new_cache(())

    def with_state(self, first_input: Input, second_input: Input) -> AbstractFluid:
        """Return a new state of the same composition (and imposed phase)."""
        fluid = self.factory()
        if self._specified_phase is not None:
            fluid.specify_phase(self._specified_phase)
        fluid.update(first_input, second_input)
        return fluid

    def specify_phase(self, phase: Phases) -> AbstractFluid:
        """Impose the phase for all further calculations."""
        self._handle.specify_phase(phase)
        self._specified_phase = Phases(phase)
        return self

    def unspecify_phase(self) -> AbstractFluid:
        """Let CoolProp determine the phase again."""
        self._handle.unspecify_phase()
        self._specified_phase = None
        return self

    @property
    def specified_phase(self) -> Phases | None:
        return self._specified_phase

    def clone(self) -> AbstractFluid:
        """New state from the same inputs; memoized properties are not copied."""
        self._cache.require_defined()
        return self.with_state(*self.inputs)

    @abstractmethod
    def factory(self) -> AbstractFluid:
        """New empty state with the same composition."""

    @abstractmethod
    def _identity(self) -> tuple:
        """Composition part of equality and hashing."""

    @abstractmethod
    def _describe(self) -> str:
        """Short composition label for logs and repr."""

    def _is_valid_for_mixing(self, first: Any, second: Any) -> bool:
        return True

    # --- Resource lifecycle ---

    def dispose(self) -> None:
        """Release the CoolProp handle. Idempotent."""
        self._handle.release()

    @property
    def disposed(self) -> bool:
        return self._handle.released

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # --- Equality ---

    def _input_set(self) -> frozenset:
        return frozenset((item.coolprop_key, item.value) for item in self.inputs)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return self._identity() == other._identity() and self._input_set() == other._input_set()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity(), self._input_set()))

    def __repr__(self) -> str:
        inputs = ", ".join(f"{i.coolprop_highlevel_key}={i.value:g}" for i in self.inputs)
        return f"{type(self).__name__}({self._describe()}{', ' if inputs else ''}{inputs})"

    # --- Output access ---

    def _keyed_output(self, key: int) -> float:
        return self._cache.value_of(key)

    def _nullable_keyed_output(self, key: int) -> float | None:
        return self._cache.nullable_value_of(key)

    # --- Properties (SI units) ---

    @property
    def compressibility(self) -> float | None:
        """Compressibility factor [-]."""
        return self._nullable_keyed_output(CP.iZ)

    @property
    def conductivity(self) -> float | None:
        """Thermal conductivity [W/(m·K)]."""
        return self._nullable_keyed_output(CP.iconductivity)

    @property
    def critical_pressure(self) -> float | None:
        """Absolute pressure at the critical point [Pa]."""
        return self._nullable_keyed_output(CP.iP_critical)

    @property
    def critical_temperature(self) -> float | None:
        """Temperature at the critical point [K]."""
        return self._nullable_keyed_output(CP.iT_critical)

    @property
    def density(self) -> float:
        """Mass density [kg/m³]."""
        return self._keyed_output(CP.iDmass)

    @property
    def dynamic_viscosity(self) -> float | None:
        """Dynamic viscosity [Pa·s]."""
        return self._nullable_keyed_output(CP.iviscosity)

    @property
    def enthalpy(self) -> float:
        """Mass specific enthalpy [J/kg]."""
        return self._keyed_output(CP.iHmass)

    @property
    def entropy(self) -> float:
        """Mass specific entropy [J/(kg·K)]."""
        return self._keyed_output(CP.iSmass)

    @property
    def freezing_temperature(self) -> float | None:
        """Freezing temperature of incompressible fluids [K]."""
        return self._nullable_keyed_output(CP.iT_freeze)

    @property
    def internal_energy(self) -> float:
        """Mass specific internal energy [J/kg]."""
        return self._keyed_output(CP.iUmass)

    @property
    def kinematic_viscosity(self) -> float | None:
        """Kinematic viscosity [m²/s]."""
        viscosity = self.dynamic_viscosity
        return None if viscosity is None else viscosity / self.density

    @property
    def max_pressure(self) -> float | None:
        return self._nullable_keyed_output(CP.iP_max)

    @property
    def max_temperature(self) -> float:
        return self._keyed_output(CP.iT_max)

    @property
    def min_pressure(self) -> float | None:
        return self._nullable_keyed_output(CP.iP_min)

    @property
    def min_temperature(self) -> float:
        return self._keyed_output(CP.iT_min)

    @property
    def molar_mass(self) -> float | None:
        """Molar mass [kg/mol]."""
        return self._nullable_keyed_output(CP.imolar_mass)

    @property
    def phase(self) -> Phases:
        """Phase state.

        ``Phases.UNKNOWN`` while the state is not defined or when the backend
        cannot report a phase (incompressibles).
        """
        if not self.is_defined:
            return Phases.UNKNOWN
        value = self._nullable_keyed_output(CP.iPhase)
        return Phases.UNKNOWN if value is None else Phases.from_coolprop(value)

    @property
    def prandtl(self) -> float | None:
        """Prandtl number [-]."""
        return self._nullable_keyed_output(CP.iPrandtl)

    @property
    def pressure(self) -> float:
        """Absolute pressure [Pa]."""
        return self._keyed_output(CP.iP)

    @property
    def quality(self) -> float | None:
        """Mass vapor quality [-]; None outside the two-phase region."""
        return self._nullable_keyed_output(CP.iQ)

    @property
    def sound_speed(self) -> float | None:
        """Speed of sound [m/s]."""
        return self._nullable_keyed_output(CP.ispeed_sound)

    @property
    def specific_heat(self) -> float:
        """Mass specific isobaric heat capacity [J/(kg·K)]."""
        return self._keyed_output(CP.iCpmass)

    @property
    def specific_volume(self) -> float:
        """Mass specific volume [m³/kg]."""
        return 1.0 / self.density

    @property
    def surface_tension(self) -> float | None:
        """Surface tension [N/m]."""
        return self._nullable_keyed_output(CP.isurface_tension)

    @property
    def temperature(self) -> float:
        """Temperature [K]."""
        return self._keyed_output(CP.iT)

    @property
    def triple_pressure(self) -> float | None:
        return self._nullable_keyed_output(CP.iP_triple)

    @property
    def triple_temperature(self) -> float | None:
        return self._nullable_keyed_output(CP.iT_triple)

    # --- Processes ---

    def isentropic_compression_to(self, pressure: Any) -> AbstractFluid:
        return fluid_processes.isentropic_compression_to(self, pressure)

    def compression_to(self, pressure: Any, isentropic_efficiency: float) -> AbstractFluid:
        return fluid_processes.compression_to(self, pressure, isentropic_efficiency)

    def isenthalpic_expansion_to(self, pressure: Any) -> AbstractFluid:
        return fluid_processes.isenthalpic_expansion_to(self, pressure)

    def isentropic_expansion_to(self, pressure: Any) -> AbstractFluid:
        return fluid_processes.isentropic_expansion_to(self, pressure)

    def expansion_to(self, pressure: Any, isentropic_efficiency: float) -> AbstractFluid:
        return fluid_processes.expansion_to(self, pressure, isentropic_efficiency)

    def cooling_to(
        self, *, temperature: Any = None, enthalpy: Any = None, pressure_drop: Any = 0.0
    ) -> AbstractFluid:
        return fluid_processes.cooling_to(
            self, temperature=temperature, enthalpy=enthalpy, pressure_drop=pressure_drop
        )

    def heating_to(
        self, *, temperature: Any = None, enthalpy: Any = None, pressure_drop: Any = 0.0
    ) -> AbstractFluid:
        return fluid_processes.heating_to(
            self, temperature=temperature, enthalpy=enthalpy, pressure_drop=pressure_drop
        )

    def bubble_point_at(self, *, pressure: Any = None, temperature: Any = None) -> AbstractFluid:
        return fluid_processes.bubble_point_at(self, pressure=pressure, temperature=temperature)

    def dew_point_at(self, *, pressure: Any = None, temperature: Any = None) -> AbstractFluid:
        return fluid_processes.dew_point_at(self, pressure=pressure, temperature=temperature)

    def two_phase_point_at(self, pressure: Any, quality: float) -> AbstractFluid:
        return fluid_processes.two_phase_point_at(self, pressure, quality)

    def mixing(
        self,
        first_specific_mass_flow: float,
        first: AbstractFluid,
        second_specific_mass_flow: float,
        second: AbstractFluid,
    ) -> AbstractFluid:
        return fluid_processes.mixing(
            self, first_specific_mass_flow, first, second_specific_mass_flow, second
        )

    # --- Export ---

    def to_dict(self) -> dict[str, Any]:
        """All properties of the defined state, keyed by property name."""
        return {
            "compressibility": self.compressibility,
            "conductivity": self.conductivity,
            "critical_pressure": self.critical_pressure,
            "critical_temperature": self.critical_temperature,
            "density": self.density,
            "dynamic_viscosity": self.dynamic_viscosity,
            "enthalpy": self.enthalpy,
            "entropy": self.entropy,
            "freezing_temperature": self.freezing_temperature,
            "internal_energy": self.internal_energy,
            "kinematic_viscosity": self.kinematic_viscosity,
            "max_pressure": self.max_pressure,
            "max_temperature": self.max_temperature,
            "min_pressure": self.min_pressure,
            "min_temperature": self.min_temperature,
            "molar_mass": self.molar_mass,
            "phase": self.phase.name,
            "prandtl": self.prandtl,
            "pressure": self.pressure,
            "quality": self.quality,
            "sound_speed": self.sound_speed,
            "specific_heat": self.specific_heat,
            "specific_volume": self.specific_volume,
            "surface_tension": self.surface_tension,
            "temperature": self.temperature,
            "triple_pressure": self.triple_pressure,
            "triple_temperature": self.triple_temperature,
        }

    def as_json(self, indented: bool = True) -> str:
        return to_json(self.to_dict(), indented)
