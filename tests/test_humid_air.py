"""Tests for humid-air states."""

import json

import pytest

from fluidstate import HumidAir, InputHumidAir
from fluidstate.core.errors import InputDefinitionError


class TestHumidAirState:
    def test_inputs_are_echoed(self, humid_air):
        assert humid_air.pressure == 101325.0
        assert humid_air.temperature == 293.15
        assert humid_air.relative_humidity == 0.5

    def test_psychrometric_properties(self, humid_air):
        assert humid_air.humidity == pytest.approx(0.00726, rel=1e-2)
        assert humid_air.dew_temperature == pytest.approx(282.4, abs=0.2)
        assert humid_air.dew_temperature < humid_air.wet_bulb_temperature < humid_air.temperature
        assert humid_air.enthalpy == pytest.approx(38.5e3, rel=2e-2)

    def test_derived_properties(self, humid_air):
        assert humid_air.density == pytest.approx(1 / humid_air.specific_volume)
        assert humid_air.kinematic_viscosity == pytest.approx(
            humid_air.dynamic_viscosity / humid_air.density
        )
        assert humid_air.prandtl == pytest.approx(
            humid_air.dynamic_viscosity * humid_air.specific_heat / humid_air.conductivity
        )
        assert 0.6 < humid_air.prandtl < 0.8

    def test_altitude_input(self):
        humid_air = HumidAir().with_state(
            InputHumidAir.altitude(0.0),
            InputHumidAir.temperature(293.15),
            InputHumidAir.relative_humidity(0.5),
        )
        assert humid_air.pressure == pytest.approx(101325.0)

    def test_input_order_does_not_matter(self, humid_air):
        other = HumidAir().with_state(
            InputHumidAir.relative_humidity(0.5),
            InputHumidAir.pressure(101325.0),
            InputHumidAir.temperature(293.15),
        )
        assert other == humid_air
        assert hash(other) == hash(humid_air)
        assert other.humidity == pytest.approx(humid_air.humidity)


class TestUndefinedHumidAir:
    def test_read_raises(self):
        with pytest.raises(InputDefinitionError, match="Need to define 3 unique inputs!"):
            HumidAir().temperature

    def test_repeated_keys(self):
        with pytest.raises(InputDefinitionError, match="Need to define 3 unique inputs!"):
            HumidAir().update(
                InputHumidAir.pressure(101325.0),
                InputHumidAir.temperature(293.15),
                InputHumidAir.temperature(303.15),
            )

    def test_reset(self, humid_air):
        humid_air.reset()
        assert humid_air.inputs == ()
        with pytest.raises(InputDefinitionError):
            humid_air.humidity


class TestFactoryAndClone:
    def test_factory_is_empty(self, humid_air):
        assert humid_air.factory().inputs == ()

    def test_clone(self, humid_air):
        clone = humid_air.clone()
        assert clone == humid_air
        assert clone is not humid_air

    def test_clone_of_undefined(self):
        with pytest.raises(InputDefinitionError):
            HumidAir().clone()

    def test_context_manager(self):
        with HumidAir() as humid_air:
            humid_air.update(
                InputHumidAir.pressure(101325.0),
                InputHumidAir.temperature(293.15),
                InputHumidAir.relative_humidity(0.5),
            )
            assert humid_air.humidity > 0

    def test_not_equal(self, humid_air):
        other = humid_air.with_state(
            InputHumidAir.pressure(101325.0),
            InputHumidAir.temperature(293.15),
            InputHumidAir.relative_humidity(0.6),
        )
        assert other != humid_air


class TestExport:
    def test_as_json(self, humid_air):
        data = json.loads(humid_air.as_json())
        assert data["relative_humidity"] == 0.5
        assert data["humidity"] == pytest.approx(humid_air.humidity)

    def test_repr(self, humid_air):
        assert repr(humid_air) == "HumidAir(P=101325, T=293.15, R=0.5)"
