"""Per-state memo of derived properties.

A ``PropertyCache`` is bound to one immutable set of inputs. Updating or
resetting a state never edits a cache in place: the state builds a new cache
and swaps it in, so readers never observe a mix of old and new values.
"""

from __future__ import annotations

import math
from typing import Callable, Hashable, Sequence

import CoolProp.CoolProp as CP

from fluidstate.core.errors import InputDefinitionError, InvalidStateError, OracleError
from fluidstate.core.inputs import KeyedInput


def validate_output(value: float) -> float:
    """Reject infinite and NaN oracle outputs.

    Raises:
        InvalidStateError: "Invalid or not defined state!".
    """
    if math.isnan(value) or math.isinf(value):
        raise InvalidStateError("Invalid or not defined state!")
    return value


class PropertyCache:
    """Memoized property values of one state definition.

    Args:
        inputs: The inputs defining the state. Their values are echoed back
            for matching keys without calling the oracle.
        evaluate: Computes the raw value of a key not among the inputs.
        required: Number of inputs a defined state has (2 or 3); reading
            from a cache with fewer inputs is a definition error.
        quality_key: Key whose nullable value is limited to [0, 1].
    """

    def __init__(
        self,
        inputs: Sequence[KeyedInput],
        evaluate: Callable[[Hashable], float],
        required: int,
        quality_key: Hashable = CP.iQ,
    ):
        self.inputs = tuple(inputs)
        self._evaluate = evaluate
        self._required = required
        self._quality_key = quality_key
        self._values: dict[Hashable, float] = {}
        self._nullable: dict[Hashable, float | None] = {}

    @property
    def is_defined(self) -> bool:
        return len(self.inputs) == self._required

    def require_defined(self) -> None:
        if not self.is_defined:
            raise InputDefinitionError(f"Need to define {self._required} unique inputs!")

    def value_of(self, key: Hashable) -> float:
        """Return the property *key*, computing it at most once.

        Raises:
            InputDefinitionError: If the state is not defined.
            InvalidStateError: If the oracle returns inf or NaN.
            OracleError: If the oracle cannot compute the property.
        """
        if key in self._values:
            return self._values[key]
        self.require_defined()
        for item in self.inputs:
            if item.coolprop_key == key:
                value = validate_output(item.value)
                break
        else:
            value = validate_output(self._evaluate(key))
        self._values[key] = value
        return value

    def nullable_value_of(self, key: Hashable) -> float | None:
        """Like :meth:`value_of` but maps unavailable properties to None.

        Invalid-state and oracle errors become None, as does a quality
        outside [0, 1]. The None is memoized too. Definition errors are
        propagated.
        """
        if key in self._nullable:
            return self._nullable[key]
        self.require_defined()
        try:
            value: float | None = self.value_of(key)
        except (InvalidStateError, OracleError):
            value = None
        if value is not None and key == self._quality_key and not 0.0 <= value <= 1.0:
            value = None
        self._nullable[key] = value
        return value

    def cached_keys(self) -> frozenset:
        """Keys memoized so far (including those memoized as None)."""
        return frozenset(self._values) | frozenset(self._nullable)

    def __len__(self) -> int:
        return len(self.cached_keys())
