"""Thrust-producing components.

A component is one part of a body: a dry structure with an optional
propellant load and a thruster pointing along two direction angles.

Example:
    >>> from dumflite import units
    >>> from dumflite.constants import DEG_TO_RAD
    >>> from dumflite.vehicle import Body, ThrustComponent
    >>>
    >>> engine = ThrustComponent(
    ...     dry_mass=20.0 * units.kg,
    ...     propellant_mass=80.0 * units.kg,
    ...     thrust=250.0 * units.N,
    ...     usage_rate=0.1 * units.kg / units.s,
    ...     direction=[90 * DEG_TO_RAD, 0.0],
    ... )
    >>> rocket = Body()
    >>> rocket.add_component(engine)
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from beartype import beartype
from numba import njit

from dumflite.vec import Vec

if TYPE_CHECKING:
    from dumflite.vehicle.body import Body


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True)
def _thrust_axes(thrust: float, pitch: float, yaw: float) -> tuple[float, float, float]:
    """Decompose a thrust magnitude into (x, y, z) force components.

    Pitch lifts the thrust out of the horizontal plane toward +z; yaw splits
    the horizontal part between x (sine) and y (cosine).
    """
    vertical = thrust * math.sin(pitch)
    horizontal = thrust * math.cos(pitch)
    return (horizontal * math.sin(yaw), horizontal * math.cos(yaw), vertical)


# =============================================================================
# Component
# =============================================================================


@beartype
@dataclass(eq=False)
class ThrustComponent:
    """One mass-carrying, optionally thrusting part of a body.

    Components compare by identity, so two components with identical
    parameters are still distinct parts.

    Attributes:
        dry_mass: Mass without propellant [kg]
        propellant_mass: Remaining propellant [kg], never negative
        thrust: Thrust force magnitude while burning [N]
        usage_rate: Propellant consumed per second while burning [kg/s]
        direction: Thrust direction angles (pitch, yaw, roll) [rad]; roll is
            carried but unused
        enabled: Whether the thruster is firing
        parent: Body this component is registered with, managed by Body
    """
    dry_mass: float | int
    propellant_mass: float | int = 0.0
    thrust: float | int = 0.0
    usage_rate: float | int = 0.0
    direction: Vec | list | tuple = field(default_factory=lambda: Vec.zeros(3))
    enabled: bool = False
    parent: "Body | None" = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate inputs; store masses and rates as floats, direction as a 3-Vec."""
        if self.dry_mass < 0:
            raise ValueError(f"Dry mass must be non-negative, got {self.dry_mass}")
        if self.propellant_mass < 0:
            raise ValueError(f"Propellant mass must be non-negative, got {self.propellant_mass}")
        if self.thrust < 0:
            raise ValueError(f"Thrust must be non-negative, got {self.thrust}")
        if self.usage_rate < 0:
            raise ValueError(f"Usage rate must be non-negative, got {self.usage_rate}")

        self.dry_mass = float(self.dry_mass)
        self.propellant_mass = float(self.propellant_mass)
        self.thrust = float(self.thrust)
        self.usage_rate = float(self.usage_rate)

        angles = list(self.direction)
        if len(angles) == 2:
            angles.append(0.0)
        self.direction = Vec(angles, dtype=np.float64, dim=3)

    @property
    def pitch(self) -> float:
        """Elevation of the thrust above the horizontal plane [rad]."""
        return self.direction[0]

    @property
    def yaw(self) -> float:
        """Heading of the horizontal thrust part, measured from +y toward +x [rad]."""
        return self.direction[1]

    @property
    def is_depleted(self) -> bool:
        """True once the propellant is used up."""
        return self.propellant_mass <= 0.0

    def get_mass(self) -> float:
        """Total mass: dry plus remaining propellant [kg]."""
        return self.dry_mass + self.propellant_mass

    def burn_time(self) -> float:
        """Seconds of burn left at the current usage rate."""
        if self.usage_rate <= 0:
            return float("inf")
        return self.propellant_mass / self.usage_rate

    def thrust_vector(self) -> Vec:
        """Thrust force along (x, y, z) for the current direction [N].

        The force is computed from the direction alone; whether the component
        is actually burning is decided by Body.advance.
        """
        return Vec(_thrust_axes(self.thrust, self.pitch, self.yaw))
