"""Fixed-step flight loop.

Steps a Body until it comes back down through ground level, sampling its
state at a fixed reporting interval.

Example:
    >>> from dumflite.simulation import FlightConfig, run_flight
    >>>
    >>> result = run_flight(rocket, FlightConfig(time_step=0.01))
    >>> print(f"Landed after {result.flight_time:.0f} s, apogee {result.apogee:.0f} m")
    >>> df = result.to_dataframe()
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
import polars as pl
from beartype import beartype
from numpy.typing import NDArray

from dumflite import units
from dumflite.vehicle.body import Body

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class FlightConfig:
    """Flight loop configuration.

    Attributes:
        time_step: Integration step [s]
        report_interval: Time between samples [s]; rounded to whole steps
        ground_level: Flight ends once the body drops below this height [m]
        max_time: Stop after this much simulated time even if airborne [s]
        record: Keep samples in the result (the callback is called either way)
    """
    time_step: float | int = 1.0 * units.ms
    report_interval: float | int = 1.0 * units.s
    ground_level: float | int = 0.0
    max_time: float | int | None = None
    record: bool = True

    def __post_init__(self) -> None:
        if self.time_step <= 0:
            raise ValueError(f"Time step must be positive, got {self.time_step}")
        if self.report_interval <= 0:
            raise ValueError(f"Report interval must be positive, got {self.report_interval}")
        if self.max_time is not None and self.max_time <= 0:
            raise ValueError(f"Max time must be positive, got {self.max_time}")

        self.time_step = float(self.time_step)
        self.report_interval = float(self.report_interval)
        self.ground_level = float(self.ground_level)
        if self.max_time is not None:
            self.max_time = float(self.max_time)

    @property
    def steps_per_report(self) -> int:
        """Number of steps between samples (at least 1)."""
        return max(1, round(self.report_interval / self.time_step))


# =============================================================================
# Samples and Results
# =============================================================================


class FlightSample(NamedTuple):
    """Snapshot of a body's state."""
    time: float                         # Elapsed time [s]
    position: NDArray[np.float64]       # [m]
    velocity: NDArray[np.float64]       # [m/s]
    acceleration: NDArray[np.float64]   # [m/s^2]
    mass: float                         # Total mass [kg]

    @classmethod
    def from_body(cls, body: Body) -> "FlightSample":
        """Copy the current state of body."""
        return cls(
            time=body.elapsed_time,
            position=body.position.to_array(),
            velocity=body.velocity.to_array(),
            acceleration=body.acceleration.to_array(),
            mass=body.total_mass,
        )


@beartype
@dataclass
class FlightResult:
    """Outcome of run_flight.

    Attributes:
        samples: Recorded samples, first and last state included
        landed: True if the body came back below ground level
        steps: Number of integration steps taken
        apogee: Highest vertical position reached at any step [m]
        flight_time: Elapsed body time when the loop stopped [s]
    """
    samples: list[FlightSample]
    landed: bool
    steps: int
    apogee: float
    flight_time: float

    @property
    def time(self) -> NDArray[np.float64]:
        """Sample times [s]."""
        return np.array([s.time for s in self.samples])

    @property
    def position(self) -> NDArray[np.float64]:
        """Position history [m], shape (N, 3)."""
        return np.array([s.position for s in self.samples]).reshape(-1, 3)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history [m/s], shape (N, 3)."""
        return np.array([s.velocity for s in self.samples]).reshape(-1, 3)

    @property
    def acceleration(self) -> NDArray[np.float64]:
        """Acceleration history [m/s^2], shape (N, 3)."""
        return np.array([s.acceleration for s in self.samples]).reshape(-1, 3)

    @property
    def mass(self) -> NDArray[np.float64]:
        """Mass history [kg]."""
        return np.array([s.mass for s in self.samples])

    def to_dataframe(self) -> pl.DataFrame:
        """Convert the samples to a Polars DataFrame."""
        position = self.position
        velocity = self.velocity
        acceleration = self.acceleration
        return pl.DataFrame({
            "time": self.time,
            "x": position[:, 0],
            "y": position[:, 1],
            "z": position[:, 2],
            "vx": velocity[:, 0],
            "vy": velocity[:, 1],
            "vz": velocity[:, 2],
            "ax": acceleration[:, 0],
            "ay": acceleration[:, 1],
            "az": acceleration[:, 2],
            "mass": self.mass,
        })


# =============================================================================
# Flight Loop
# =============================================================================


@beartype
def run_flight(
    body: Body,
    config: FlightConfig | None = None,
    on_report: Callable[[FlightSample], None] | None = None,
) -> FlightResult:
    """Advance body until it drops below ground level.

    The body is sampled every ``config.steps_per_report`` steps before the
    step is taken, and once more after the final step. The loop always takes
    at least one step, so a body starting on the ground can lift off.

    Args:
        body: Body to fly; it is advanced in place
        config: Flight configuration
        on_report: Called with every sample as it is taken

    Returns:
        FlightResult with the recorded samples
    """
    config = config or FlightConfig()
    steps_per_report = config.steps_per_report

    samples: list[FlightSample] = []
    steps = 0
    apogee = body.altitude
    landed = False

    def report() -> None:
        sample = FlightSample.from_body(body)
        if config.record:
            samples.append(sample)
        if on_report is not None:
            on_report(sample)

    logger.info(
        f"Starting flight: {len(body)} components, mass {body.total_mass:.3f} kg, "
        f"dt={config.time_step} s"
    )

    while True:
        if steps % steps_per_report == 0:
            report()

        body.advance(config.time_step)
        steps += 1
        apogee = max(apogee, body.altitude)

        if body.altitude < config.ground_level:
            landed = True
            break
        if config.max_time is not None and body.elapsed_time >= config.max_time:
            logger.warning(
                f"Flight stopped at max time {config.max_time} s while still airborne "
                f"(altitude {body.altitude:.3f} m)"
            )
            break

    report()

    logger.info(
        f"Flight ended after {steps} steps at t={body.elapsed_time:.3f} s, "
        f"apogee {apogee:.3f} m"
    )

    return FlightResult(
        samples=samples,
        landed=landed,
        steps=steps,
        apogee=apogee,
        flight_time=body.elapsed_time,
    )
