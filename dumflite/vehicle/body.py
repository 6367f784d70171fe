"""Bodies: collections of components flying under thrust and gravity.

A Body sums the thrust of its burning components, divides by the total mass,
subtracts a uniform gravity along the vertical (z, index 2) axis, and steps
its motion state forward with semi-implicit Euler:

    v <- v + a * dt
    x <- x + v * dt        (uses the *updated* velocity)

Position is advanced with the new velocity, not the one from the previous
step, so this is not classic forward Euler.

Example:
    >>> from dumflite.vehicle import Body, ThrustComponent
    >>>
    >>> rocket = Body()
    >>> rocket.add_component(ThrustComponent(
    ...     dry_mass=20.0, propellant_mass=80.0, thrust=250.0,
    ...     usage_rate=0.1, direction=[1.5707963, 0.0], enabled=True,
    ... ))
    >>> rocket.advance(0.001)
    >>> rocket.position[2] > 0
    True
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np
from beartype import beartype

from dumflite.constants import LUNAR_GRAVITY
from dumflite.vec import Vec
from dumflite.vehicle.component import ThrustComponent

logger = logging.getLogger(__name__)

# Index of the vertical axis in position/velocity/acceleration
VERTICAL_AXIS: int = 2


# =============================================================================
# Configuration
# =============================================================================


class ZeroMassPolicy(Enum):
    """What Body.advance does when thrust acts on zero total mass."""

    RAISE = auto()      # Raise ZeroMassError, motion state untouched
    PROPAGATE = auto()  # Let IEEE-754 inf/nan flow into the motion state


class ZeroMassError(ZeroDivisionError):
    """Nonzero thrust on a body whose total mass is zero."""


@beartype
@dataclass
class BodyConfig:
    """Body configuration.

    Attributes:
        gravity: Gravitational acceleration magnitude, applied along -z [m/s^2]
        zero_mass_policy: Handling of thrust on a massless body
    """
    gravity: float | int = LUNAR_GRAVITY
    zero_mass_policy: ZeroMassPolicy = ZeroMassPolicy.RAISE

    def __post_init__(self) -> None:
        if not math.isfinite(self.gravity):
            raise ValueError(f"Gravity must be finite, got {self.gravity}")
        self.gravity = float(self.gravity)


# =============================================================================
# Body
# =============================================================================


@beartype
class Body:
    """A flying aggregate of thrust components.

    The body keeps references to its components but never copies or destroys
    them; callers create components, register them, and may keep mutating
    them (e.g. toggling ``enabled``) between steps.

    A body starts at rest at the origin with zero elapsed time.
    """

    def __init__(self, config: BodyConfig | None = None) -> None:
        """Initialize an empty body.

        Args:
            config: Body configuration (default: lunar gravity, raise on
                zero mass)
        """
        self.config = config or BodyConfig()

        self._components: list[ThrustComponent] = []
        self._position = Vec.zeros(3)
        self._velocity = Vec.zeros(3)
        self._acceleration = Vec.zeros(3)
        self._elapsed_time = 0.0

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def add_component(self, component: ThrustComponent) -> None:
        """Register a component with this body.

        Raises:
            ValueError: If the component is already registered with a body
        """
        if component.parent is not None:
            raise ValueError("Component is already registered with a body")

        self._components.append(component)
        component.parent = self
        logger.debug(f"Added component {len(self._components) - 1}: {component}")

    def remove_component(self, target: ThrustComponent | int) -> ThrustComponent:
        """Unregister a component, by identity or by position.

        Args:
            target: The component itself, or its index in insertion order

        Returns:
            The removed component

        Raises:
            ValueError: If the component is not registered with this body
            IndexError: If the index is out of range
        """
        if isinstance(target, ThrustComponent):
            index = self.index_of(target)
            if index is None:
                raise ValueError("Component is not registered with this body")
        else:
            index = target
            if not 0 <= index < len(self._components):
                raise IndexError(
                    f"Component index {index} out of range for {len(self._components)} components"
                )

        component = self._components.pop(index)
        component.parent = None
        logger.debug(f"Removed component {index}: {component}")
        return component

    def index_of(self, component: ThrustComponent) -> int | None:
        """Position of a component (by identity), or None if absent."""
        for i, registered in enumerate(self._components):
            if registered is component:
                return i
        return None

    @property
    def components(self) -> tuple[ThrustComponent, ...]:
        """Registered components in insertion order."""
        return tuple(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, component: object) -> bool:
        return any(registered is component for registered in self._components)

    # -------------------------------------------------------------------------
    # Motion state
    # -------------------------------------------------------------------------

    @property
    def position(self) -> Vec:
        """Live read-only view of the position [m]."""
        return self._position.view()

    @property
    def velocity(self) -> Vec:
        """Live read-only view of the velocity [m/s]."""
        return self._velocity.view()

    @property
    def acceleration(self) -> Vec:
        """Live read-only view of the acceleration of the last step [m/s^2]."""
        return self._acceleration.view()

    @property
    def elapsed_time(self) -> float:
        """Total simulated time [s]."""
        return self._elapsed_time

    @property
    def altitude(self) -> float:
        """Vertical position [m]."""
        return self._position[VERTICAL_AXIS]

    @property
    def total_mass(self) -> float:
        """Current mass of all components [kg]."""
        return sum((c.get_mass() for c in self._components), 0.0)

    # -------------------------------------------------------------------------
    # Propagation
    # -------------------------------------------------------------------------

    def advance(self, time_step: float | int) -> None:
        """Advance the body by one time step.

        Burning components (enabled, propellant > 0) consume propellant first,
        clamped at zero, and then contribute their full thrust for this step.
        Every component contributes its current mass whether or not it burns.

        Args:
            time_step: Step size [s]

        Raises:
            ValueError: If time_step is not positive
            ZeroMassError: If thrust acts on zero total mass and the policy
                is RAISE. The body and its components are left unchanged.
        """
        if not time_step > 0:
            raise ValueError(f"Time step must be positive, got {time_step}")
        time_step = float(time_step)

        force = Vec.zeros(3)
        total_mass = 0.0
        burning: list[tuple[int, ThrustComponent, float]] = []

        for index, component in enumerate(self._components):
            if component.enabled and component.propellant_mass > 0:
                remaining = component.propellant_mass - component.usage_rate * time_step
                if remaining <= 0:
                    remaining = 0.0
                burning.append((index, component, remaining))

                force += component.thrust_vector()
                total_mass += component.dry_mass + remaining
            else:
                total_mass += component.get_mass()

        thrust_acceleration = self._thrust_acceleration(force, total_mass)

        # Propellant is only committed once the step cannot fail
        for index, component, remaining in burning:
            component.propellant_mass = remaining
            if remaining == 0.0:
                logger.info(
                    f"Component {index} burned out at t={self._elapsed_time + time_step:.3f} s"
                )

        self._acceleration.assign(thrust_acceleration)
        self._acceleration[VERTICAL_AXIS] -= self.config.gravity

        self._velocity += self._acceleration * time_step
        self._position += self._velocity * time_step

        self._elapsed_time += time_step

    def _thrust_acceleration(self, force: Vec, total_mass: float) -> Vec:
        """Acceleration due to thrust alone, applying the zero-mass policy."""
        if total_mass > 0:
            return force / total_mass

        if force == Vec.zeros(3):
            # Nothing pushes a massless body; it simply falls
            return Vec.zeros(3)

        if self.config.zero_mass_policy is ZeroMassPolicy.RAISE:
            raise ZeroMassError(
                f"Thrust {force} acts on zero total mass at t={self._elapsed_time:.3f} s"
            )

        with np.errstate(divide="ignore", invalid="ignore"):
            return force / total_mass

    def __repr__(self) -> str:
        return (
            f"Body(components={len(self._components)}, t={self._elapsed_time:.3f} s, "
            f"position={self._position}, velocity={self._velocity})"
        )
