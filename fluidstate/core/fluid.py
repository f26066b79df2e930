"""Pure fluids, pseudo-pure fluids, incompressibles and predefined mixtures."""

from __future__ import annotations

import logging
from typing import Any

from fluidstate.core.abstract_fluid import AbstractFluid
from fluidstate.core.backend import create_handle
from fluidstate.core.config import get_settings
from fluidstate.core.errors import CompositionError
from fluidstate.core.fluids_list import FluidsList, Mix

logger = logging.getLogger(__name__)


class Fluid(AbstractFluid):
    """State of a single registry fluid.

    Args:
        name: Registry entry.
        fraction: Mass or volume fraction (decimal, per the registry entry) of
            an incompressible binary mixture. Ignored for pure fluids, which
            always have a fraction of 1.
        backend: CoolProp backend overriding the registry default.

    Raises:
        CompositionError: If a binary mixture has no fraction or the fraction
            is outside the registry range.

    Example:
        >>> water = Fluid(FluidsList.Water)
        >>> water.update(Input.pressure(101325), Input.temperature(293.15))
        >>> water.density
        998.2...
    """

    def __init__(
        self,
        name: FluidsList,
        fraction: float | None = None,
        backend: str | None = None,
    ):
        if fraction is not None and not name.fraction_min <= fraction <= name.fraction_max:
            raise CompositionError(
                "Invalid fraction value! It should be in "
                f"[{_percent(name.fraction_min)};{_percent(name.fraction_max)}] %. "
                f"Entered value = {_percent(fraction)} %."
            )
        if name.pure:
            fraction = 1.0
        elif fraction is None:
            raise CompositionError("Need to define the fraction!")

        self.name = name
        self.fraction = float(fraction)
        self.backend = backend or name.backend
        super().__init__(create_handle(self.backend, [name.coolprop_name]))
        if not name.pure:
            self._set_fraction()

    def _set_fraction(self) -> None:
        if self.name.mix_type is Mix.MASS:
            self._handle.set_mass_fractions([self.fraction])
        else:
            self._handle.set_volume_fractions([self.fraction])

    def factory(self) -> Fluid:
        return type(self)(self.name, self.fraction, self.backend)

    def _identity(self) -> tuple:
        return (self.name.coolprop_name, self.fraction, self.backend)

    def _describe(self) -> str:
        if self.name.pure:
            return self.name.name
        return f"{self.name.name}, fraction={self.fraction:g}"

    def _is_valid_for_mixing(self, first: Any, second: Any) -> bool:
        if not (isinstance(first, Fluid) and isinstance(second, Fluid)):
            return False
        tolerance = get_settings().fraction_tolerance
        return (
            self.name is first.name is second.name
            and abs(self.fraction - first.fraction) <= tolerance
            and abs(first.fraction - second.fraction) <= tolerance
        )

    def to_dict(self) -> dict[str, Any]:
        data = {"name": self.name.name, "fraction": self.fraction, "backend": self.backend}
        data.update(super().to_dict())
        return data


def _percent(fraction: float) -> str:
    return f"{fraction * 100:g}"
