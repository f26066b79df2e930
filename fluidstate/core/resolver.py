"""Resolution of state inputs into CoolProp update calls.

The low-level interface only accepts specific input-pair orders
(``PT_INPUTS`` but not ``TP_INPUTS``). Callers may supply the two inputs in
any order; the resolver tries the given order first, then the swapped one.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Sequence

from fluidstate.core.backend import resolve_input_pair
from fluidstate.core.errors import InputDefinitionError
from fluidstate.core.inputs import KeyedInput

logger = logging.getLogger(__name__)


class UpdatePair(NamedTuple):
    """Arguments of a CoolProp ``update`` call, in the oracle's order."""

    input_pair: int
    first_value: float
    second_value: float


def check_unique_inputs(inputs: Sequence[KeyedInput], count: int) -> None:
    """Require exactly *count* inputs with pairwise-distinct keys.

    Raises:
        InputDefinitionError: "Need to define {count} unique inputs!".
    """
    keys = {item.coolprop_key for item in inputs}
    if len(inputs) != count or len(keys) != count:
        raise InputDefinitionError(f"Need to define {count} unique inputs!")


def generate_update_pair(
    first: KeyedInput,
    second: KeyedInput,
    resolve: Callable[[str], int | None] = resolve_input_pair,
) -> UpdatePair:
    """Find the CoolProp input pair for two inputs given in any order.

    Args:
        first: First input as given by the caller.
        second: Second input as given by the caller.
        resolve: Maps a pair name like ``"PT_INPUTS"`` to its index or None.

    Returns:
        UpdatePair with the values ordered to match the pair.

    Raises:
        InputDefinitionError: If the keys repeat or no pair exists in
            either order.
    """
    check_unique_inputs((first, second), 2)

    pair = resolve(f"{first.coolprop_highlevel_key}{second.coolprop_highlevel_key}_INPUTS")
    if pair is not None:
        return UpdatePair(pair, first.value, second.value)

    pair = resolve(f"{second.coolprop_highlevel_key}{first.coolprop_highlevel_key}_INPUTS")
    if pair is not None:
        logger.debug(
            "Swapped inputs %s and %s to match the CoolProp pair order",
            first.coolprop_highlevel_key,
            second.coolprop_highlevel_key,
        )
        return UpdatePair(pair, second.value, first.value)

    raise InputDefinitionError("Need to define 2 unique inputs!")
