"""Thin wrapper around the CoolProp property oracle.

Everything in fluidstate that talks to CoolProp goes through this module:
input-pair lookup, per-state ``AbstractState`` handles and the humid-air
``HAPropsSI`` entry point. CoolProp failures are re-raised as
:class:`~fluidstate.core.errors.OracleError`.
"""

from __future__ import annotations

import logging
import threading
from typing import Sequence

import CoolProp.CoolProp as CP
from CoolProp.CoolProp import HAPropsSI

from fluidstate.core.errors import OracleError, StateDisposedError

logger = logging.getLogger(__name__)

# Serializes calls into process-wide CoolProp entry points.
_LIBRARY_LOCK = threading.RLock()

# High-level keys of the integer parameters that may define a state.
HIGHLEVEL_KEYS: dict[int, str] = {
    CP.iP: "P",
    CP.iT: "T",
    CP.iHmass: "Hmass",
    CP.iSmass: "Smass",
    CP.iQ: "Q",
    CP.iDmass: "Dmass",
    CP.iUmass: "Umass",
}


def resolve_input_pair(name: str) -> int | None:
    """Return the CoolProp input-pair index for *name* or None.

    Args:
        name: Pair name such as ``"PT_INPUTS"`` or ``"HmassP_INPUTS"``.
    """
    if not name.endswith("_INPUTS"):
        return None
    value = getattr(CP, name, None)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class StateHandle:
    """Exclusive owner of one CoolProp ``AbstractState``.

    Args:
        backend: CoolProp backend string ("HEOS", "INCOMP", ...).
        fluid_names: CoolProp fluid names; several names form a mixture.
    """

    def __init__(self, backend: str, fluid_names: Sequence[str]):
        self.backend = backend
        self.fluid_name = "&".join(fluid_names)
        with _LIBRARY_LOCK:
            try:
                self._state = CP.AbstractState(backend, self.fluid_name)
            except (ValueError, RuntimeError) as exc:
                raise OracleError(
                    f"Cannot create fluid '{self.fluid_name}' with backend '{backend}': {exc}"
                ) from exc
        logger.debug("Created %s handle for %s", backend, self.fluid_name)

    @property
    def released(self) -> bool:
        return self._state is None

    def _abstract_state(self):
        if self._state is None:
            raise StateDisposedError(f"Handle for {self.fluid_name} has been released")
        return self._state

    def update(self, input_pair: int, first: float, second: float) -> None:
        """Commit a new state; raise OracleError if CoolProp rejects it."""
        state = self._abstract_state()
        try:
            state.update(input_pair, first, second)
        except (ValueError, RuntimeError) as exc:
            raise OracleError(f"State update failed for {self.fluid_name}: {exc}") from exc

    def keyed_output(self, key: int) -> float:
        state = self._abstract_state()
        try:
            return state.keyed_output(key)
        except (ValueError, RuntimeError) as exc:
            raise OracleError(
                f"Output {key} is not available for {self.fluid_name}: {exc}"
            ) from exc

    def specify_phase(self, phase: int) -> None:
        self._abstract_state().specify_phase(int(phase))

    def unspecify_phase(self) -> None:
        self._abstract_state().unspecify_phase()

    def set_mass_fractions(self, fractions: Sequence[float]) -> None:
        try:
            self._abstract_state().set_mass_fractions(list(fractions))
        except (ValueError, RuntimeError) as exc:
            raise OracleError(f"Cannot set mass fractions for {self.fluid_name}: {exc}") from exc

    def set_volume_fractions(self, fractions: Sequence[float]) -> None:
        try:
            self._abstract_state().set_volu_fractions(list(fractions))
        except (ValueError, RuntimeError) as exc:
            raise OracleError(
                f"Cannot set volume fractions for {self.fluid_name}: {exc}"
            ) from exc

    def release(self) -> None:
        """Drop the underlying AbstractState. Safe to call repeatedly."""
        if self._state is not None:
            self._state = None
            logger.debug("Released %s handle for %s", self.backend, self.fluid_name)

    def __repr__(self) -> str:
        status = "released" if self.released else "active"
        return f"StateHandle('{self.backend}', '{self.fluid_name}', {status})"


def create_handle(backend: str, fluid_names: Sequence[str]) -> StateHandle:
    """Create a fresh handle owned by a single state."""
    return StateHandle(backend, fluid_names)


def ha_props(
    output: str,
    first_key: str,
    first_value: float,
    second_key: str,
    second_value: float,
    third_key: str,
    third_value: float,
) -> float:
    """Evaluate one humid-air property with ``HAPropsSI``."""
    with _LIBRARY_LOCK:
        try:
            return HAPropsSI(
                output,
                first_key,
                first_value,
                second_key,
                second_value,
                third_key,
                third_value,
            )
        except (ValueError, RuntimeError) as exc:
            raise OracleError(f"Humid air property {output} failed: {exc}") from exc
