"""Custom mixtures of pure HEOS fluids."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.core.backend import create_handle
from fluidstate.core.config import get_settings
from fluidstate.core.errors import CompositionError
from fluidstate.core.fluids_list import FluidsList
from fluidstate.utils.constants import FRACTION_SUM_TOLERANCE

logger = logging.getLogger(__name__)


class Mixture(AbstractFluid):
    """State of a mixture of pure fluids given by mass fractions.

    Args:
        fluids: Components, all pure fluids evaluated by the mixture backend
            (HEOS by default).
        fractions: Mass fractions of the components (decimal, summing to 1).

    Raises:
        CompositionError: On mismatched lengths, unsuitable components or
            invalid fractions.
    """

    def __init__(self, fluids: Sequence[FluidsList], fractions: Sequence[float]):
        fluids = tuple(fluids)
        fractions = tuple(float(f) for f in fractions)
        backend = get_settings().mixture_backend

        if len(fluids) != len(fractions):
            raise CompositionError(
                "Invalid input! Fluids and Fractions should be of the same length."
            )
        if not all(fluid.pure and fluid.backend == backend for fluid in fluids):
            raise CompositionError(
                f"Invalid components! All of them should be a pure fluid with {backend} backend."
            )
        if not all(0.0 < fraction < 1.0 for fraction in fractions):
            raise CompositionError(
                "Invalid component mass fractions! All of them should be in (0;100) %."
            )
        if abs(sum(fractions) - 1.0) > FRACTION_SUM_TOLERANCE:
            raise CompositionError(
                "Invalid component mass fractions! Their sum should be equal to 100 %."
            )

        self.fluids = fluids
        self.fractions = fractions
        self.backend = backend
        super().__init__(create_handle(backend, [fluid.coolprop_name for fluid in fluids]))
        self._handle.set_mass_fractions(fractions)

    def factory(self) -> Mixture:
        return type(self)(self.fluids, self.fractions)

    def _identity(self) -> tuple:
        return (tuple(fluid.coolprop_name for fluid in self.fluids), self.fractions)

    def _describe(self) -> str:
        return " & ".join(
            f"{fluid.name} {fraction:g}" for fluid, fraction in zip(self.fluids, self.fractions)
        )

    def _is_valid_for_mixing(self, first: Any, second: Any) -> bool:
        if not (isinstance(first, Mixture) and isinstance(second, Mixture)):
            return False
        tolerance = get_settings().fraction_tolerance
        if not self.fluids == first.fluids == second.fluids:
            return False
        return all(
            abs(a - b) <= tolerance and abs(b - c) <= tolerance
            for a, b, c in zip(self.fractions, first.fractions, second.fractions)
        )

    def to_dict(self) -> dict[str, Any]:
        data = {
            "fluids": [fluid.name for fluid in self.fluids],
            "fractions": list(self.fractions),
        }
        data.update(super().to_dict())
        return data
