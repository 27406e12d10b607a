# rk4_helpers.py
from __future__ import annotations

import numpy as np
import numpy.typing as npt
import numba as nb

# ---- JIT’d classical RK4 kernels for the Airy equation y'' = x·y ----
#
# The second-order ODE is integrated as the first-order system
#     y'  = dy
#     dy' = x·y

@nb.njit(cache=True, fastmath=True)
def airy_step_forward(x: float, h: float, y: float, dy: float) -> tuple[float, float]:
    """One RK4 step from x to x + h. Returns (y, dy) at x + h."""
    k1y = dy
    k1dy = x * y

    k2y = dy + 0.5 * h * k1dy
    k2dy = (x + 0.5 * h) * (y + 0.5 * h * k1y)

    k3y = dy + 0.5 * h * k2dy
    k3dy = (x + 0.5 * h) * (y + 0.5 * h * k2y)

    k4y = dy + h * k3dy
    k4dy = (x + h) * (y + h * k3y)

    y_next = y + h * (k1y + 2.0 * k2y + 2.0 * k3y + k4y) / 6.0
    dy_next = dy + h * (k1dy + 2.0 * k2dy + 2.0 * k3dy + k4dy) / 6.0
    return y_next, dy_next

@nb.njit(cache=True, fastmath=True)
def airy_step_backward(x: float, h: float, y: float, dy: float) -> tuple[float, float]:
    """
    One RK4 step from x to x - h.

    Same stencil as the forward step with every stage derivative negated and
    the x offsets taken against increasing x.
    """
    k1y = -dy
    k1dy = -x * y

    k2y = -(dy + 0.5 * h * k1dy)
    k2dy = -(x - 0.5 * h) * (y + 0.5 * h * k1y)

    k3y = -(dy + 0.5 * h * k2dy)
    k3dy = -(x - 0.5 * h) * (y + 0.5 * h * k2y)

    k4y = -(dy + h * k3dy)
    k4dy = -(x - h) * (y + h * k3y)

    y_prev = y + h * (k1y + 2.0 * k2y + 2.0 * k3y + k4y) / 6.0
    dy_prev = dy + h * (k1dy + 2.0 * k2dy + 2.0 * k3dy + k4dy) / 6.0
    return y_prev, dy_prev

@nb.njit(cache=True)
def integrate_airy(
    x_min: float,
    h: float,
    i0: int,
    y: npt.NDArray[np.float64],
    dy: npt.NDArray[np.float64],
) -> None:
    """
    Fill y and dy in place outward from the seed at index i0.

    Args:
        x_min: Coordinate of index 0.
        h: Grid step.
        i0: Seed index; y[i0] and dy[i0] must already hold the initial values.
        y: Function values (modified in place).
        dy: Derivative values (modified in place).
    """
    n = y.shape[0]

    # Forward pass: i0 -> n-1
    for i in range(i0, n - 1):
        x = x_min + i * h
        y_next, dy_next = airy_step_forward(x, h, y[i], dy[i])
        y[i + 1] = y_next
        dy[i + 1] = dy_next

    # Backward pass: i0 -> 0
    for i in range(i0, 0, -1):
        x = x_min + i * h
        y_prev, dy_prev = airy_step_backward(x, h, y[i], dy[i])
        y[i - 1] = y_prev
        dy[i - 1] = dy_prev
