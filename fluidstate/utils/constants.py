"""Physical constants and default tolerances used throughout fluidstate.

All values in SI units unless otherwise noted.
"""

# Atmospheric
P_ATM = 101325.0  # Pa, standard atmospheric pressure

# ASHRAE Fundamentals standard atmosphere (altitude -> pressure)
ALTITUDE_PRESSURE_COEFF = 2.25577e-5  # 1/m
ALTITUDE_PRESSURE_EXPONENT = 5.2559
ALTITUDE_MIN = -5000.0  # m
ALTITUDE_MAX = 11000.0  # m

# Comparison tolerances
PRESSURE_TOLERANCE = 1e-6  # Pa
FRACTION_TOLERANCE = 1e-6  # decimal fraction
FRACTION_SUM_TOLERANCE = 1e-6  # decimal fraction
