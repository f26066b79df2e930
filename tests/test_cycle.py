"""Tests for cycle components and the refrigeration cycle solver."""

import pytest

from fluidstate import Fluid, FluidsList
from fluidstate.core.errors import InputRangeError, ProcessDirectionError
from fluidstate.cycle.components import Compressor, Expander, HeatExchanger, Valve
from fluidstate.cycle.refrigeration import (
    CycleDefinition,
    ExpansionDevice,
    solve_refrigeration_cycle,
)


@pytest.fixture
def r134a():
    return Fluid(FluidsList.R134a)


@pytest.fixture
def suction_vapor(r134a):
    """Saturated R134a vapor at -5 °C."""
    return r134a.dew_point_at(temperature=268.15)


@pytest.fixture
def condensate(r134a):
    """Saturated R134a liquid at 40 °C."""
    return r134a.bubble_point_at(temperature=313.15)


class TestCompressor:
    def test_compute(self, suction_vapor, condensate):
        compressor = Compressor(efficiency=0.8, mass_flow=0.5)
        outlet = compressor.compute(suction_vapor, outlet_pressure=condensate.pressure)
        assert outlet.pressure == pytest.approx(condensate.pressure)
        assert outlet.temperature > 313.15
        assert compressor.specific_work() == pytest.approx(outlet.enthalpy - suction_vapor.enthalpy)
        assert compressor.power() == pytest.approx(0.5 * compressor.specific_work())

    def test_summary(self, suction_vapor, condensate):
        compressor = Compressor()
        compressor.compute(suction_vapor, outlet_pressure=condensate.pressure)
        summary = compressor.summary()
        assert summary["type"] == "compressor"
        assert summary["pressure_ratio"] == pytest.approx(
            condensate.pressure / suction_vapor.pressure
        )

    def test_not_computed(self):
        compressor = Compressor()
        assert compressor.result is None
        assert compressor.power() == 0.0

    def test_wrong_direction(self, suction_vapor):
        with pytest.raises(ProcessDirectionError):
            Compressor().compute(suction_vapor, outlet_pressure=0.5 * suction_vapor.pressure)


class TestExpansionDevices:
    def test_valve_is_isenthalpic(self, condensate, suction_vapor):
        valve = Valve()
        outlet = valve.compute(condensate, outlet_pressure=suction_vapor.pressure)
        assert outlet.enthalpy == condensate.enthalpy
        assert 0.0 < outlet.quality < 1.0
        assert valve.power() == 0.0
        assert valve.summary()["outlet_quality"] == pytest.approx(outlet.quality)

    def test_valve_fixed_drop(self, condensate):
        outlet = Valve(dp=2e5).compute(condensate)
        assert outlet.pressure == pytest.approx(condensate.pressure - 2e5)

    def test_expander_produces_work(self, condensate, suction_vapor):
        expander = Expander(efficiency=0.7)
        outlet = expander.compute(condensate, outlet_pressure=suction_vapor.pressure)
        assert outlet.enthalpy < condensate.enthalpy
        assert expander.specific_work() > 0
        assert expander.power() < 0


class TestHeatExchanger:
    def test_heating(self, suction_vapor):
        evaporator = HeatExchanger(name="evaporator", mass_flow=2.0)
        outlet = evaporator.compute(suction_vapor, temperature=273.15)
        assert outlet.temperature == 273.15
        assert evaporator.heat_flow() == pytest.approx(
            2.0 * (outlet.enthalpy - suction_vapor.enthalpy)
        )
        assert evaporator.heat_flow() > 0

    def test_cooling_with_pressure_drop(self, condensate):
        subcooler = HeatExchanger(name="subcooler", pressure_drop=1e4)
        outlet = subcooler.compute(condensate, temperature=308.15)
        assert outlet.pressure == pytest.approx(condensate.pressure - 1e4)
        assert subcooler.specific_heat_transfer() < 0
        assert subcooler.summary()["pressure_drop_Pa"] == 1e4

    def test_exactly_one_target(self, condensate):
        with pytest.raises(TypeError):
            HeatExchanger().compute(condensate)


class TestRefrigerationCycle:
    @pytest.fixture
    def performance(self):
        return solve_refrigeration_cycle(CycleDefinition())

    def test_cop(self, performance):
        assert 2.0 < performance.cop_cooling < 6.0
        assert performance.cop_heating == pytest.approx(performance.cop_cooling + 1.0, rel=1e-6)

    def test_energy_balance(self, performance):
        assert performance.heat_rejection == pytest.approx(
            performance.cooling_capacity + performance.compressor_power, rel=1e-6
        )
        assert performance.expander_power == 0.0

    def test_pressures(self, performance):
        assert performance.condensing_pressure > performance.evaporating_pressure
        assert performance.pressure_ratio > 1.0

    def test_state_points(self, performance):
        points = performance.state_points
        assert [p["point"] for p in points] == [1, 2, 3, 4]
        assert points[0]["temperature"] == pytest.approx(273.15)
        assert points[2]["temperature"] == pytest.approx(310.15)
        assert points[3]["enthalpy"] == pytest.approx(points[2]["enthalpy"])

    def test_to_dict(self, performance):
        data = performance.to_dict()
        assert data["fluid"] == "R134a"
        assert len(data["components"]) == 4

    def test_mass_flow_scales_capacity(self, performance):
        doubled = solve_refrigeration_cycle(CycleDefinition(mass_flow=2.0))
        assert doubled.cooling_capacity == pytest.approx(2.0 * performance.cooling_capacity)
        assert doubled.cop_cooling == pytest.approx(performance.cop_cooling)

    def test_expander_improves_cop(self, performance):
        with_expander = solve_refrigeration_cycle(
            CycleDefinition(expansion_device=ExpansionDevice.EXPANDER)
        )
        assert with_expander.expander_power > 0
        assert with_expander.cop_cooling > performance.cop_cooling

    def test_saturated_cycle(self):
        performance = solve_refrigeration_cycle(CycleDefinition(superheat=0.0, subcooling=0.0))
        assert performance.state_points[0]["quality"] == pytest.approx(1.0)
        assert performance.state_points[2]["quality"] == pytest.approx(0.0)

    def test_invalid_definition(self):
        with pytest.raises(InputRangeError, match="Invalid cycle definition"):
            solve_refrigeration_cycle(
                CycleDefinition(evaporating_temperature=320.0, condensing_temperature=300.0)
            )
