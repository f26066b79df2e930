"""Tests for keyed state inputs."""

import CoolProp.CoolProp as CP
import pytest

from fluidstate.core.errors import InputRangeError
from fluidstate.core.inputs import Input, InputHumidAir
from fluidstate.utils.units import Q_


class TestInput:
    def test_pressure_from_float(self):
        item = Input.pressure(101325.0)
        assert item.coolprop_key == CP.iP
        assert item.value == 101325.0
        assert item.coolprop_highlevel_key == "P"

    def test_pressure_from_quantity(self):
        assert Input.pressure(Q_(1.0, "atm")).value == pytest.approx(101325.0)

    def test_temperature_from_celsius(self):
        assert Input.temperature(Q_(20.0, "degC")).value == pytest.approx(293.15)

    def test_enthalpy_from_kilojoules(self):
        item = Input.enthalpy(Q_(50.0, "kJ/kg"))
        assert item.coolprop_highlevel_key == "Hmass"
        assert item.value == pytest.approx(50e3)

    def test_specific_volume_is_stored_as_density(self):
        item = Input.specific_volume(0.002)
        assert item.coolprop_key == CP.iDmass
        assert item.value == pytest.approx(500.0)

    @pytest.mark.parametrize(
        "factory, key",
        [
            (Input.density, "Dmass"),
            (Input.entropy, "Smass"),
            (Input.internal_energy, "Umass"),
            (Input.quality, "Q"),
            (Input.temperature, "T"),
        ],
    )
    def test_highlevel_keys(self, factory, key):
        assert factory(1.0).coolprop_highlevel_key == key

    def test_equality_and_hash(self):
        assert Input.pressure(1e5) == Input.pressure(1e5)
        assert hash(Input.pressure(1e5)) == hash(Input.pressure(1e5))
        assert Input.pressure(1e5) != Input.temperature(1e5)

    def test_frozen(self):
        item = Input.pressure(1e5)
        with pytest.raises(AttributeError):
            item.value = 2e5


class TestInputHumidAir:
    def test_keys(self):
        assert InputHumidAir.relative_humidity(0.5).coolprop_key == "R"
        assert InputHumidAir.humidity(0.005).coolprop_key == "W"
        assert InputHumidAir.dew_temperature(280.0).coolprop_key == "D"
        assert InputHumidAir.wet_bulb_temperature(280.0).coolprop_key == "B"
        assert InputHumidAir.partial_pressure(1000.0).coolprop_key == "P_w"
        assert InputHumidAir.enthalpy(4e4).coolprop_key == "Hha"
        assert InputHumidAir.entropy(100.0).coolprop_key == "Sha"

    def test_highlevel_key_is_the_key(self):
        assert InputHumidAir.temperature(293.15).coolprop_highlevel_key == "T"

    def test_density_is_stored_as_specific_volume(self):
        item = InputHumidAir.density(1.2)
        assert item.coolprop_key == "Vha"
        assert item.value == pytest.approx(1 / 1.2)

    def test_specific_volume(self):
        assert InputHumidAir.specific_volume(0.8).value == pytest.approx(0.8)

    def test_altitude_sea_level(self):
        item = InputHumidAir.altitude(0.0)
        assert item.coolprop_key == "P"
        assert item.value == pytest.approx(101325.0)

    def test_altitude_formula(self):
        expected = 101325 * (1 - 2.25577e-5 * 300) ** 5.2559
        assert InputHumidAir.altitude(300.0).value == pytest.approx(expected)

    def test_altitude_from_quantity(self):
        assert InputHumidAir.altitude(Q_(1.0, "km")).value == pytest.approx(
            InputHumidAir.altitude(1000.0).value
        )

    @pytest.mark.parametrize("altitude", [-5000.0, 11000.0])
    def test_altitude_bounds_inclusive(self, altitude):
        assert InputHumidAir.altitude(altitude).value > 0

    @pytest.mark.parametrize("altitude", [-5001.0, 11001.0])
    def test_altitude_out_of_range(self, altitude):
        with pytest.raises(InputRangeError, match="between -5 000 and 11 000 meters"):
            InputHumidAir.altitude(altitude)

    def test_repr(self):
        assert "R=0.5" in repr(InputHumidAir.relative_humidity(0.5))
