"""Phase states reported and accepted by CoolProp."""

from __future__ import annotations

from enum import IntEnum

import CoolProp.CoolProp as CP


class Phases(IntEnum):
    """Phase of a fluid state.

    Values match CoolProp's ``iphase_*`` constants so members can be handed
    to ``AbstractState.specify_phase`` directly.
    """

    LIQUID = CP.iphase_liquid
    SUPERCRITICAL = CP.iphase_supercritical
    SUPERCRITICAL_GAS = CP.iphase_supercritical_gas
    SUPERCRITICAL_LIQUID = CP.iphase_supercritical_liquid
    CRITICAL_POINT = CP.iphase_critical_point
    GAS = CP.iphase_gas
    TWO_PHASE = CP.iphase_twophase
    UNKNOWN = CP.iphase_unknown
    NOT_IMPOSED = CP.iphase_not_imposed

    @classmethod
    def from_coolprop(cls, value: float) -> Phases:
        """Convert a raw backend output to a member, ``UNKNOWN`` if unmapped."""
        try:
            return cls(int(value))
        except ValueError:
            return cls.UNKNOWN
