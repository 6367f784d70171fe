"""Flight simulation loop.

Example:
    >>> from dumflite.simulation import FlightConfig, run_flight
    >>> from dumflite.vehicle import Body, ThrustComponent
    >>>
    >>> rocket = Body()
    >>> rocket.add_component(ThrustComponent(
    ...     dry_mass=20.0, propellant_mass=80.0, thrust=250.0,
    ...     usage_rate=0.1, direction=[0.785398, 0.785398], enabled=True,
    ... ))
    >>> result = run_flight(rocket, FlightConfig(time_step=0.1))
    >>> result.landed
    True
"""

from dumflite.simulation.flight import (
    FlightConfig,
    FlightResult,
    FlightSample,
    run_flight,
)

__all__ = [
    "FlightConfig",
    "FlightResult",
    "FlightSample",
    "run_flight",
]
