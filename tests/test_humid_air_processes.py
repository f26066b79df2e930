"""Tests for psychrometric processes."""

import pytest

from fluidstate import InputHumidAir
from fluidstate.core.errors import InputRangeError, MixingError, ProcessDirectionError
from fluidstate.processes.humid_air_processes import mixed_humidity

TEMPERATURE_DELTA = 5.0  # K
ENTHALPY_DELTA = 5e3  # J/kg
PRESSURE_DROP = 200.0  # Pa


class TestDryCooling:
    def test_to_temperature(self, humid_air):
        result = humid_air.dry_cooling_to(
            temperature=humid_air.temperature - TEMPERATURE_DELTA, pressure_drop=PRESSURE_DROP
        )
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure - PRESSURE_DROP),
            InputHumidAir.temperature(humid_air.temperature - TEMPERATURE_DELTA),
            InputHumidAir.humidity(humid_air.humidity),
        )
        assert result.relative_humidity > humid_air.relative_humidity

    def test_to_enthalpy(self, humid_air):
        result = humid_air.dry_cooling_to(
            enthalpy=humid_air.enthalpy - ENTHALPY_DELTA, pressure_drop=PRESSURE_DROP
        )
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure - PRESSURE_DROP),
            InputHumidAir.enthalpy(humid_air.enthalpy - ENTHALPY_DELTA),
            InputHumidAir.humidity(humid_air.humidity),
        )

    def test_wrong_direction(self, humid_air):
        with pytest.raises(
            ProcessDirectionError, match="During the cooling process, the temperature should decrease!"
        ):
            humid_air.dry_cooling_to(temperature=323.15)
        with pytest.raises(
            ProcessDirectionError, match="During the cooling process, the enthalpy should decrease!"
        ):
            humid_air.dry_cooling_to(enthalpy=50e3)

    def test_below_dew_temperature(self, humid_air):
        with pytest.raises(
            ProcessDirectionError,
            match="The outlet temperature after dry heat transfer should be greater than the dew point temperature!",
        ):
            humid_air.dry_cooling_to(temperature=273.15)

    def test_below_dew_enthalpy(self, humid_air):
        with pytest.raises(
            ProcessDirectionError,
            match="The outlet enthalpy after dry heat transfer should be greater than the dew point enthalpy!",
        ):
            humid_air.dry_cooling_to(enthalpy=0.0)

    def test_negative_pressure_drop(self, humid_air):
        with pytest.raises(InputRangeError, match="Invalid pressure drop in the heat exchanger!"):
            humid_air.dry_cooling_to(temperature=288.15, pressure_drop=-100.0)
        with pytest.raises(InputRangeError):
            humid_air.dry_cooling_to(enthalpy=30e3, pressure_drop=-100.0)


class TestHeating:
    def test_to_temperature(self, humid_air):
        result = humid_air.heating_to(
            temperature=humid_air.temperature + TEMPERATURE_DELTA, pressure_drop=PRESSURE_DROP
        )
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure - PRESSURE_DROP),
            InputHumidAir.temperature(humid_air.temperature + TEMPERATURE_DELTA),
            InputHumidAir.humidity(humid_air.humidity),
        )
        assert result.relative_humidity < humid_air.relative_humidity

    def test_to_enthalpy(self, humid_air):
        result = humid_air.heating_to(enthalpy=humid_air.enthalpy + ENTHALPY_DELTA)
        assert result.enthalpy == humid_air.enthalpy + ENTHALPY_DELTA
        assert result.humidity == humid_air.humidity

    def test_wrong_direction(self, humid_air):
        with pytest.raises(
            ProcessDirectionError, match="During the heating process, the temperature should increase!"
        ):
            humid_air.heating_to(temperature=humid_air.temperature)
        with pytest.raises(
            ProcessDirectionError, match="During the heating process, the enthalpy should increase!"
        ):
            humid_air.heating_to(enthalpy=0.0)

    def test_negative_pressure_drop(self, humid_air):
        with pytest.raises(InputRangeError):
            humid_air.heating_to(temperature=313.15, pressure_drop=-100.0)

    def test_exactly_one_target(self, humid_air):
        with pytest.raises(TypeError):
            humid_air.heating_to()


class TestWetCooling:
    def test_to_temperature_and_relative_humidity(self, humid_air):
        result = humid_air.wet_cooling_to(
            temperature=humid_air.temperature - TEMPERATURE_DELTA,
            relative_humidity=0.45,
            pressure_drop=PRESSURE_DROP,
        )
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure - PRESSURE_DROP),
            InputHumidAir.temperature(humid_air.temperature - TEMPERATURE_DELTA),
            InputHumidAir.relative_humidity(0.45),
        )
        assert result.humidity < humid_air.humidity

    def test_to_enthalpy_and_humidity(self, humid_air):
        result = humid_air.wet_cooling_to(
            enthalpy=humid_air.enthalpy - ENTHALPY_DELTA, humidity=0.006
        )
        assert result.humidity == 0.006
        assert result.enthalpy == humid_air.enthalpy - ENTHALPY_DELTA

    def test_humidity_must_decrease(self, humid_air):
        message = "During the wet cooling process, the absolute humidity ratio should decrease!"
        with pytest.raises(ProcessDirectionError, match=message):
            humid_air.wet_cooling_to(temperature=288.15, relative_humidity=1.0)
        with pytest.raises(ProcessDirectionError, match=message):
            humid_air.wet_cooling_to(temperature=288.15, humidity=0.009)

    def test_wrong_direction(self, humid_air):
        with pytest.raises(ProcessDirectionError, match="temperature should decrease"):
            humid_air.wet_cooling_to(temperature=323.15, relative_humidity=0.5)

    def test_negative_pressure_drop(self, humid_air):
        with pytest.raises(InputRangeError):
            humid_air.wet_cooling_to(
                temperature=288.15, relative_humidity=0.6, pressure_drop=-100.0
            )

    def test_exactly_one_moisture_target(self, humid_air):
        with pytest.raises(TypeError):
            humid_air.wet_cooling_to(temperature=288.15)
        with pytest.raises(TypeError):
            humid_air.wet_cooling_to(temperature=288.15, relative_humidity=0.6, humidity=0.005)


class TestHumidification:
    def test_by_water(self, humid_air):
        result = humid_air.humidification_by_water_to(relative_humidity=0.6)
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure),
            InputHumidAir.enthalpy(humid_air.enthalpy),
            InputHumidAir.relative_humidity(0.6),
        )
        assert result.temperature < humid_air.temperature

    def test_by_water_to_humidity(self, humid_air):
        result = humid_air.humidification_by_water_to(humidity=0.009)
        assert result.humidity == 0.009

    def test_by_steam(self, humid_air):
        result = humid_air.humidification_by_steam_to(relative_humidity=0.6)
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure),
            InputHumidAir.temperature(humid_air.temperature),
            InputHumidAir.relative_humidity(0.6),
        )

    def test_by_steam_to_humidity(self, humid_air):
        result = humid_air.humidification_by_steam_to(humidity=0.009)
        assert result.temperature == humid_air.temperature

    def test_humidity_must_increase(self, humid_air):
        message = "During the humidification process, the absolute humidity ratio should increase!"
        with pytest.raises(ProcessDirectionError, match=message):
            humid_air.humidification_by_water_to(relative_humidity=0.45)
        with pytest.raises(ProcessDirectionError, match=message):
            humid_air.humidification_by_steam_to(humidity=0.005)


class TestMixing:
    def test_mixed_humidity_formula(self):
        expected = (1 * 0.01 * 1.02 + 2 * 0.02 * 1.01) / (1 * 1.02 + 2 * 1.01)
        assert mixed_humidity(1.0, 0.01, 2.0, 0.02) == pytest.approx(expected)

    def test_mixed_humidity_of_equal_streams(self):
        assert mixed_humidity(1.0, 0.007, 3.0, 0.007) == pytest.approx(0.007)

    def test_mixing(self, humid_air):
        first = humid_air.dry_cooling_to(temperature=humid_air.temperature - TEMPERATURE_DELTA)
        second = humid_air.humidification_by_steam_to(relative_humidity=0.6)
        result = humid_air.mixing(1.0, first, 2.0, second)
        assert result == humid_air.with_state(
            InputHumidAir.pressure(humid_air.pressure),
            InputHumidAir.enthalpy((1.0 * first.enthalpy + 2.0 * second.enthalpy) / 3.0),
            InputHumidAir.humidity(
                mixed_humidity(1.0, first.humidity, 2.0, second.humidity)
            ),
        )
        assert first.humidity < result.humidity < second.humidity

    def test_different_pressures(self, humid_air):
        second = humid_air.heating_to(
            temperature=humid_air.temperature + TEMPERATURE_DELTA, pressure_drop=PRESSURE_DROP
        )
        with pytest.raises(
            MixingError,
            match="The mixing process is possible only for flows with the same pressure!",
        ):
            humid_air.mixing(1.0, humid_air, 2.0, second)
