"""Utility modules for fluidstate."""

from fluidstate.utils.constants import P_ATM
from fluidstate.utils.units import Q_, from_si, get_unit_registry, parse_quantity, to_si

__all__ = ["P_ATM", "Q_", "from_si", "get_unit_registry", "parse_quantity", "to_si"]
