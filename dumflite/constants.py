"""Physical constants used by the flight model.

All values are SI floats.
"""

import math

# Surface gravity of the Moon; the default for Body
LUNAR_GRAVITY: float = 1.625  # [m/s^2]

# Standard gravity at Earth sea level
STANDARD_GRAVITY: float = 9.80665  # [m/s^2]

DEG_TO_RAD: float = math.pi / 180.0
RAD_TO_DEG: float = 180.0 / math.pi
