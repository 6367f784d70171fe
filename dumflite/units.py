"""SI unit scale factors.

The flight model works in SI base units throughout. Values are scaled on the
way in by multiplying with one of the factors below:

    >>> from dumflite import units
    >>> 250.0 * units.N
    250.0
    >>> 1.0 * units.ms
    0.001

parse_quantity() turns strings like "1 ms" or "2.5 kN" into SI floats for the
command line.
"""

import re

from beartype import beartype

# Time
ms: float = 0.001
s: float = 1.0
minute: float = 60.0
hour: float = 3600.0

# Length
mm: float = 0.001
cm: float = 0.01
m: float = 1.0
km: float = 1000.0

# Mass
g: float = 0.001
kg: float = 1.0

# Force
N: float = 1.0
kN: float = 1000.0

# Conversion factors TO base SI unit, with the dimension of each unit
CONVERSIONS: dict[str, tuple[float, str]] = {
    "ms": (ms, "time"),
    "s": (s, "time"),
    "min": (minute, "time"),
    "hr": (hour, "time"),
    "mm": (mm, "length"),
    "cm": (cm, "length"),
    "m": (m, "length"),
    "km": (km, "length"),
    "g": (g, "mass"),
    "kg": (kg, "mass"),
    "N": (N, "force"),
    "kN": (kN, "force"),
    "kg/s": (kg / s, "mass_flow"),
    "g/s": (g / s, "mass_flow"),
    "m/s^2": (m / s**2, "acceleration"),
}

# Base unit assumed when a quantity string has no unit
BASE_UNITS: dict[str, str] = {
    "time": "s",
    "length": "m",
    "mass": "kg",
    "force": "N",
    "mass_flow": "kg/s",
    "acceleration": "m/s^2",
}

_QUANTITY_RE = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(\S*)\s*")


@beartype
def to_si(value: float | int, unit: str) -> float:
    """Convert a value in the given unit to SI base units.

    Raises:
        ValueError: If the unit is unknown
    """
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return float(value) * CONVERSIONS[unit][0]


@beartype
def parse_quantity(text: str, dimension: str | None = None) -> float:
    """Parse "<number> [unit]" into an SI float.

    Args:
        text: Quantity string, e.g. "1 ms", "250N", "0.1 kg/s"
        dimension: Required dimension; a bare number is taken in the
            dimension's base unit

    Returns:
        Value in SI base units

    Raises:
        ValueError: If the text is malformed, the unit is unknown, or the unit
            has the wrong dimension
    """
    match = _QUANTITY_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Cannot parse quantity {text!r}")
    value = float(match.group(1))
    unit = match.group(2)

    if dimension is not None and dimension not in BASE_UNITS:
        raise ValueError(f"Unknown dimension: {dimension!r}")

    if not unit:
        if dimension is None:
            return value
        unit = BASE_UNITS[dimension]

    si_value = to_si(value, unit)
    unit_dimension = CONVERSIONS[unit][1]
    if dimension is not None and unit_dimension != dimension:
        raise ValueError(
            f"Unit {unit!r} has dimension {unit_dimension!r}, but {dimension!r} was expected"
        )
    return si_value
