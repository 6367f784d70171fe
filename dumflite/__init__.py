"""dumflite - a small powered-flight simulator.

Integrates the thrust of a body's components and a uniform gravity into
position, velocity and acceleration over fixed time steps.

Example:
    >>> from dumflite import Body, ThrustComponent, units
    >>> from dumflite.constants import DEG_TO_RAD
    >>>
    >>> rocket = Body()
    >>> rocket.add_component(ThrustComponent(
    ...     dry_mass=20.0 * units.kg,
    ...     propellant_mass=80.0 * units.kg,
    ...     thrust=250.0 * units.N,
    ...     usage_rate=0.1 * units.kg / units.s,
    ...     direction=[45 * DEG_TO_RAD, 45 * DEG_TO_RAD, 0.0],
    ...     enabled=True,
    ... ))
    >>> while rocket.position[2] >= 0:
    ...     rocket.advance(1.0 * units.ms)
"""

__version__ = "0.1.0"

from dumflite import units
from dumflite.integrate import rk4, rk4_step
from dumflite.simulation import (
    FlightConfig,
    FlightResult,
    FlightSample,
    run_flight,
)
from dumflite.vec import Vec
from dumflite.vehicle import (
    Body,
    BodyConfig,
    ThrustComponent,
    ZeroMassError,
    ZeroMassPolicy,
)

__all__ = [
    "__version__",
    "units",
    # Vectors
    "Vec",
    # Integration
    "rk4",
    "rk4_step",
    # Vehicle
    "Body",
    "BodyConfig",
    "ThrustComponent",
    "ZeroMassError",
    "ZeroMassPolicy",
    # Simulation
    "FlightConfig",
    "FlightResult",
    "FlightSample",
    "run_flight",
]
