"""Fixed-step fourth-order Runge-Kutta integration.

Solves first-order ODEs dy/dx = f(x, y) with the classical RK4 scheme. The
state y can be a float, a numpy array, or a Vec; anything that supports
addition and multiplication by a float works.

This is a standalone numerical utility. Body.advance uses its own
semi-implicit Euler step and does not call into this module.

Example:
    >>> import math
    >>> y = rk4(0.0, 1.0, 1.0, 0.01, lambda x, y: -y)
    >>> abs(y - math.exp(-1.0)) < 1e-8
    True
"""

from collections.abc import Callable
from typing import TypeVar

from beartype import beartype

Y = TypeVar("Y")


@beartype
def rk4_step(
    x: float | int,
    y: Y,
    h: float | int,
    dydx: Callable[[float, Y], Y],
) -> Y:
    """Perform one RK4 step.

    Args:
        x: Current independent variable
        y: Current state
        h: Step size
        dydx: Derivative function f(x, y)

    Returns:
        State at x + h
    """
    k1 = h * dydx(x, y)
    k2 = h * dydx(x + 0.5 * h, y + 0.5 * k1)
    k3 = h * dydx(x + 0.5 * h, y + 0.5 * k2)
    k4 = h * dydx(x + h, y + k3)

    return y + (1.0 / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


@beartype
def rk4(
    x0: float | int,
    y0: Y,
    x: float | int,
    h: float | int,
    dydx: Callable[[float, Y], Y],
) -> Y:
    """Integrate dy/dx = f(x, y) from x0 to x with fixed step h.

    The number of steps is int((x - x0) / h). When the span is not a whole
    multiple of h the trailing partial interval is dropped, so the result is
    the value at the last whole step, never past x. A negative step count
    performs no steps and returns y0.

    Args:
        x0: Start of the interval
        y0: Initial state y(x0)
        x: End of the interval
        h: Step size
        dydx: Derivative function f(x, y)

    Returns:
        Final state after all whole steps

    Raises:
        ValueError: If h is zero
    """
    if h == 0:
        raise ValueError("Step size h must be non-zero")

    n_steps = max(int((x - x0) / h), 0)

    y = y0
    for _ in range(n_steps):
        y = rk4_step(x0, y, h, dydx)
        x0 = x0 + h

    return y
