"""Tests for compression, expansion, heat transfer and mixing of fluids."""

import pytest

from fluidstate import Fluid, FluidsList, Input, configure
from fluidstate.core.errors import (
    EfficiencyRangeError,
    InputRangeError,
    MixingError,
    ProcessDirectionError,
)
from fluidstate.processes.fluid_processes import compression_to, mixing
from fluidstate.utils.units import Q_

TEMPERATURE_DELTA = 10.0  # K
ENTHALPY_DELTA = 50e3  # J/kg
PRESSURE_DROP = 50e3  # Pa


class TestCompression:
    def test_isentropic(self, water):
        result = water.isentropic_compression_to(2 * water.pressure)
        assert result == water.with_state(
            Input.pressure(2 * water.pressure), Input.entropy(water.entropy)
        )
        assert result.entropy == pytest.approx(water.entropy)
        assert result.temperature > water.temperature

    def test_isentropic_wrong_direction(self, water):
        with pytest.raises(
            ProcessDirectionError,
            match="Compressor outlet pressure should be higher than inlet pressure!",
        ):
            water.isentropic_compression_to(0.5 * water.pressure)

    def test_real(self, water):
        ideal = water.isentropic_compression_to(2 * water.pressure)
        result = water.compression_to(2 * water.pressure, 0.8)
        expected_enthalpy = water.enthalpy + (ideal.enthalpy - water.enthalpy) / 0.8
        assert result == water.with_state(
            Input.pressure(2 * water.pressure), Input.enthalpy(expected_enthalpy)
        )
        assert result.entropy > water.entropy

    def test_real_accepts_quantity(self, water):
        result = water.compression_to(Q_(2 * 101325.0, "Pa"), 0.8)
        assert result.pressure == pytest.approx(2 * 101325.0)

    def test_module_function_matches_method(self, water):
        assert compression_to(water, 2 * water.pressure, 0.8) == water.compression_to(
            2 * water.pressure, 0.8
        )

    @pytest.mark.parametrize("efficiency", [0.0, 1.0, 1.2, -0.5])
    def test_invalid_efficiency(self, water, efficiency):
        with pytest.raises(EfficiencyRangeError, match="Invalid compressor isentropic efficiency!"):
            water.compression_to(2 * water.pressure, efficiency)

    def test_efficiency_checked_before_direction(self, water):
        with pytest.raises(EfficiencyRangeError):
            water.compression_to(0.5 * water.pressure, 1.5)

    def test_inlet_unchanged(self, water):
        water.compression_to(2 * water.pressure, 0.8)
        assert water.pressure == 101325.0
        assert water.temperature == 423.15


class TestExpansion:
    def test_isenthalpic(self, water):
        result = water.isenthalpic_expansion_to(0.5 * water.pressure)
        assert result == water.with_state(
            Input.pressure(0.5 * water.pressure), Input.enthalpy(water.enthalpy)
        )

    def test_isenthalpic_wrong_direction(self, water):
        with pytest.raises(
            ProcessDirectionError,
            match="Expansion valve outlet pressure should be lower than inlet pressure!",
        ):
            water.isenthalpic_expansion_to(2 * water.pressure)

    def test_isentropic(self, water):
        result = water.isentropic_expansion_to(0.5 * water.pressure)
        assert result == water.with_state(
            Input.pressure(0.5 * water.pressure), Input.entropy(water.entropy)
        )
        assert result.temperature < water.temperature

    def test_isentropic_wrong_direction(self, water):
        with pytest.raises(
            ProcessDirectionError,
            match="Expander outlet pressure should be lower than inlet pressure!",
        ):
            water.isentropic_expansion_to(2 * water.pressure)

    def test_real(self, water):
        ideal = water.isentropic_expansion_to(0.5 * water.pressure)
        result = water.expansion_to(0.5 * water.pressure, 0.8)
        expected_enthalpy = water.enthalpy - (water.enthalpy - ideal.enthalpy) * 0.8
        assert result == water.with_state(
            Input.pressure(0.5 * water.pressure), Input.enthalpy(expected_enthalpy)
        )

    @pytest.mark.parametrize("efficiency", [0.0, 1.0])
    def test_invalid_efficiency(self, water, efficiency):
        with pytest.raises(EfficiencyRangeError, match="Invalid expander isentropic efficiency!"):
            water.expansion_to(0.5 * water.pressure, efficiency)


class TestHeatTransfer:
    def test_cooling_to_temperature(self, water):
        result = water.cooling_to(
            temperature=water.temperature - TEMPERATURE_DELTA, pressure_drop=PRESSURE_DROP
        )
        assert result == water.with_state(
            Input.pressure(water.pressure - PRESSURE_DROP),
            Input.temperature(water.temperature - TEMPERATURE_DELTA),
        )

    def test_cooling_to_enthalpy(self, water):
        result = water.cooling_to(enthalpy=water.enthalpy - ENTHALPY_DELTA)
        assert result == water.with_state(
            Input.pressure(water.pressure), Input.enthalpy(water.enthalpy - ENTHALPY_DELTA)
        )

    def test_heating_to_temperature(self, water):
        result = water.heating_to(
            temperature=water.temperature + TEMPERATURE_DELTA, pressure_drop=PRESSURE_DROP
        )
        assert result == water.with_state(
            Input.pressure(water.pressure - PRESSURE_DROP),
            Input.temperature(water.temperature + TEMPERATURE_DELTA),
        )

    def test_heating_to_enthalpy(self, water):
        result = water.heating_to(enthalpy=water.enthalpy + ENTHALPY_DELTA)
        assert result.enthalpy == water.enthalpy + ENTHALPY_DELTA

    def test_cooling_wrong_direction(self, water):
        with pytest.raises(
            ProcessDirectionError, match="During the cooling process, the temperature should decrease!"
        ):
            water.cooling_to(temperature=water.temperature + TEMPERATURE_DELTA)
        with pytest.raises(
            ProcessDirectionError, match="During the cooling process, the enthalpy should decrease!"
        ):
            water.cooling_to(enthalpy=water.enthalpy)

    def test_heating_wrong_direction(self, water):
        with pytest.raises(
            ProcessDirectionError, match="During the heating process, the temperature should increase!"
        ):
            water.heating_to(temperature=water.temperature - TEMPERATURE_DELTA)

    def test_negative_pressure_drop(self, water):
        with pytest.raises(InputRangeError, match="Invalid pressure drop in the heat exchanger!"):
            water.cooling_to(temperature=water.temperature - TEMPERATURE_DELTA, pressure_drop=-100)

    def test_direction_checked_before_pressure_drop(self, water):
        with pytest.raises(ProcessDirectionError):
            water.heating_to(temperature=water.temperature - TEMPERATURE_DELTA, pressure_drop=-100)

    def test_exactly_one_target(self, water):
        with pytest.raises(TypeError):
            water.cooling_to()
        with pytest.raises(TypeError):
            water.cooling_to(temperature=400.0, enthalpy=2.7e6)

    def test_targets_are_keyword_only(self, water):
        with pytest.raises(TypeError):
            water.cooling_to(400.0)


class TestPhaseBoundaries:
    def test_bubble_point_at_pressure(self, water):
        result = water.bubble_point_at(pressure=101325.0)
        assert result == water.with_state(Input.pressure(101325.0), Input.quality(0.0))
        assert result.quality == 0.0

    def test_bubble_point_at_temperature(self, water):
        result = water.bubble_point_at(temperature=373.15)
        assert result == water.with_state(Input.temperature(373.15), Input.quality(0.0))
        assert result.pressure == pytest.approx(101418.0, rel=1e-3)

    def test_dew_point(self, water):
        result = water.dew_point_at(pressure=101325.0)
        assert result == water.with_state(Input.pressure(101325.0), Input.quality(1.0))
        assert result.enthalpy > water.bubble_point_at(pressure=101325.0).enthalpy

    def test_two_phase_point(self, water):
        result = water.two_phase_point_at(101325.0, 0.5)
        assert result == water.with_state(Input.pressure(101325.0), Input.quality(0.5))

    def test_exactly_one_boundary(self, water):
        with pytest.raises(TypeError):
            water.dew_point_at()
        with pytest.raises(TypeError):
            water.dew_point_at(pressure=101325.0, temperature=373.15)


class TestMixing:
    def test_mixing(self, water):
        first = water.cooling_to(temperature=water.temperature - TEMPERATURE_DELTA)
        second = water.heating_to(temperature=water.temperature + TEMPERATURE_DELTA)
        result = water.mixing(1.0, first, 2.0, second)
        expected_enthalpy = (1.0 * first.enthalpy + 2.0 * second.enthalpy) / 3.0
        assert result == water.with_state(
            Input.pressure(water.pressure), Input.enthalpy(expected_enthalpy)
        )

    def test_module_function(self, water):
        assert mixing(water, 1.0, water, 1.0, water.clone()).enthalpy == pytest.approx(
            water.enthalpy
        )

    def test_different_pressures(self, water):
        second = water.heating_to(
            temperature=water.temperature + TEMPERATURE_DELTA, pressure_drop=PRESSURE_DROP
        )
        with pytest.raises(
            MixingError,
            match="The mixing process is possible only for flows with the same pressure!",
        ):
            water.mixing(1.0, water, 2.0, second)

    def test_different_fluids(self, water):
        ethanol = Fluid(FluidsList.Ethanol).with_state(
            Input.pressure(101325.0), Input.temperature(293.15)
        )
        with pytest.raises(
            MixingError, match="The mixing process is possible only for the same fluids!"
        ):
            water.mixing(1.0, water, 2.0, ethanol)

    def test_fluid_checked_before_pressure(self, water):
        ethanol = Fluid(FluidsList.Ethanol).with_state(Input.pressure(2e5), Input.temperature(293.15))
        with pytest.raises(MixingError, match="same fluids"):
            water.mixing(1.0, water, 2.0, ethanol)

    def test_pressure_tolerance_setting(self, water):
        second = water.with_state(Input.pressure(101325.5), Input.temperature(433.15))
        with pytest.raises(MixingError):
            water.mixing(1.0, water, 1.0, second)
        configure(pressure_tolerance=1.0)
        assert water.mixing(1.0, water, 1.0, second).pressure == 101325.0
