"""Exception hierarchy for fluidstate.

Every failure raised by the state and process layers derives from
``FluidStateError``, itself a ``ValueError``, so callers can catch either the
precise kind or the whole family.
"""

from __future__ import annotations


class FluidStateError(ValueError):
    """Base class for all fluidstate errors."""


class InputDefinitionError(FluidStateError):
    """Wrong number of inputs, duplicate keys or an unresolvable combination."""


class InvalidStateError(FluidStateError):
    """CoolProp returned an infinite or NaN value for the requested property."""


class OracleError(FluidStateError):
    """CoolProp rejected the request (unknown fluid, unavailable output, ...)."""


class ProcessDirectionError(FluidStateError):
    """A process precondition on the sign of a change is violated."""


class EfficiencyRangeError(FluidStateError):
    """An isentropic efficiency outside the open interval (0, 1)."""


class MixingError(FluidStateError):
    """Streams that cannot be mixed (pressure or composition mismatch)."""


class InputRangeError(FluidStateError):
    """An input value outside its physically valid domain."""


class CompositionError(FluidStateError):
    """Invalid fluid fraction or mixture composition."""


class StateDisposedError(FluidStateError):
    """The CoolProp handle of the state has already been released."""
