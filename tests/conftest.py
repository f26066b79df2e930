"""Shared fixtures."""

import pytest

from fluidstate import Fluid, FluidsList, HumidAir, Input, InputHumidAir
from fluidstate.core.config import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def water():
    """Superheated water vapor at 1 atm and 150 °C."""
    return Fluid(FluidsList.Water).with_state(Input.pressure(101325.0), Input.temperature(423.15))


@pytest.fixture
def humid_air():
    """Humid air at 1 atm, 20 °C and 50 % relative humidity."""
    return HumidAir().with_state(
        InputHumidAir.pressure(101325.0),
        InputHumidAir.temperature(293.15),
        InputHumidAir.relative_humidity(0.5),
    )
