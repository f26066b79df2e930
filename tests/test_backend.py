"""Tests for the CoolProp handle wrapper, phases, serialization and extension."""

import json

import CoolProp.CoolProp as CP
import numpy as np
import pytest

from fluidstate import Fluid, FluidsList, Input, Phases
from fluidstate.core.backend import create_handle, ha_props
from fluidstate.core.errors import OracleError, StateDisposedError
from fluidstate.core.serialization import to_json


class TestStateHandle:
    def test_update_and_output(self):
        handle = create_handle("HEOS", ["Water"])
        handle.update(CP.PT_INPUTS, 101325.0, 293.15)
        assert handle.keyed_output(CP.iDmass) == pytest.approx(998.2, abs=0.1)

    def test_unknown_fluid(self):
        with pytest.raises(OracleError, match="Cannot create fluid"):
            create_handle("HEOS", ["Unobtainium"])

    def test_release_is_idempotent(self):
        handle = create_handle("HEOS", ["Water"])
        handle.release()
        handle.release()
        assert handle.released
        assert "released" in repr(handle)

    def test_released_handle(self):
        handle = create_handle("HEOS", ["Water"])
        handle.release()
        with pytest.raises(StateDisposedError):
            handle.update(CP.PT_INPUTS, 101325.0, 293.15)


class TestHaProps:
    def test_humidity_ratio(self):
        humidity = ha_props("W", "P", 101325.0, "T", 293.15, "R", 0.5)
        assert humidity == pytest.approx(0.00726, rel=1e-2)

    def test_oracle_failure(self):
        with pytest.raises(OracleError, match="Humid air property"):
            ha_props("W", "P", 101325.0, "T", 293.15, "NotAKey", 0.5)


class TestPhases:
    def test_values_match_coolprop(self):
        assert Phases.TWO_PHASE == CP.iphase_twophase
        assert Phases.from_coolprop(float(CP.iphase_gas)) is Phases.GAS

    def test_unmapped_value(self):
        assert Phases.from_coolprop(99.0) is Phases.UNKNOWN


class TestSerialization:
    def test_enums_and_numpy(self):
        data = json.loads(
            to_json({"phase": Phases.LIQUID, "grid": np.array([1.0, 2.0]), "n": np.int64(3)})
        )
        assert data == {"phase": "LIQUID", "grid": [1.0, 2.0], "n": 3}

    def test_nested_int_enums_by_name(self):
        data = json.loads(to_json({"states": [{"phase": Phases.TWO_PHASE}], "pair": (Phases.GAS,)}))
        assert data == {"states": [{"phase": "TWO_PHASE"}], "pair": ["GAS"]}

    def test_objects_with_to_dict(self):
        water = Fluid(FluidsList.Water).with_state(
            Input.pressure(101325.0), Input.temperature(293.15)
        )
        data = json.loads(to_json({"state": water}))
        assert data["state"]["phase"] == "LIQUID"

    def test_unsupported_object(self):
        with pytest.raises(TypeError):
            to_json({"value": object()})


class FluidExtended(Fluid):
    """Fluid with an extra property read through the keyed cache."""

    @property
    def specific_heat_const_volume(self) -> float:
        return self._keyed_output(CP.iCvmass)

    @property
    def molar_density(self) -> float | None:
        return self._nullable_keyed_output(CP.iDmolar)


class TestExtension:
    @pytest.fixture
    def fluid(self):
        return FluidExtended(FluidsList.Water).with_state(
            Input.pressure(101325.0), Input.temperature(293.15)
        )

    def test_factory_keeps_subclass(self, fluid):
        assert isinstance(fluid.factory(), FluidExtended)
        assert isinstance(fluid.clone(), FluidExtended)

    def test_extra_properties(self, fluid):
        assert fluid.specific_heat_const_volume < fluid.specific_heat
        assert fluid.molar_density == pytest.approx(fluid.density / fluid.molar_mass)

    def test_extra_properties_are_cached(self, fluid):
        fluid.specific_heat_const_volume
        assert CP.iCvmass in fluid._cache.cached_keys()

    def test_reset_clears_extra_properties(self, fluid):
        fluid.specific_heat_const_volume
        fluid.reset()
        assert CP.iCvmass not in fluid._cache.cached_keys()

    def test_not_equal_to_base_class(self, fluid):
        base = Fluid(FluidsList.Water).with_state(Input.pressure(101325.0), Input.temperature(293.15))
        assert fluid != base
