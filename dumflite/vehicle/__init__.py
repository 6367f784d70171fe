"""Vehicle modeling: thrust components and the bodies they make up.

Example:
    >>> from dumflite.vehicle import Body, BodyConfig, ThrustComponent
    >>>
    >>> body = Body(BodyConfig(gravity=9.80665))
    >>> body.add_component(ThrustComponent(dry_mass=10.0))
    >>> body.advance(0.01)
"""

from dumflite.vehicle.body import (
    VERTICAL_AXIS,
    Body,
    BodyConfig,
    ZeroMassError,
    ZeroMassPolicy,
)
from dumflite.vehicle.component import ThrustComponent

__all__ = [
    # Components
    "ThrustComponent",
    # Bodies
    "Body",
    "BodyConfig",
    "ZeroMassError",
    "ZeroMassPolicy",
    "VERTICAL_AXIS",
]
