from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
import scipy as sp

from quantumscenarios.config import AI_ZERO, AI_PRIME_ZERO, AIRY_X_MIN, AIRY_X_MAX
from quantumscenarios.model.buffer import SampleBuffer
from quantumscenarios.solvers.rk4_helpers import integrate_airy
from quantumscenarios.solvers.wave_functions import WaveFunction
from quantumscenarios.utils import nearest_index, uniform_grid

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def airy_reference(x_min: float, x_max: float, count: int) -> npt.NDArray[np.float64]:
    """
    Ai(x) from scipy on the same uniform grid the integrator uses.

    Used to report the accuracy of the RK4 integration, never to produce the
    displayed samples.
    """
    x, _ = uniform_grid(x_min, x_max, count)
    ai, _, _, _ = sp.special.airy(x)
    return ai


class AiryIntegrator(WaveFunction):
    """
    Particle between two plates under a linear potential: the Schrödinger
    equation reduces to the Airy equation y'' = x·y.

    The equation is integrated numerically with classical RK4, starting from
    the exact values Ai(0) and Ai'(0) at the grid point closest to x = 0 and
    marching outward in both directions. Both passes share the seed, so the
    result has no jump at the seam.
    """
    NAME = "Airy Solution"

    def seam_index(self, x_min: float = AIRY_X_MIN, x_max: float = AIRY_X_MAX) -> int:
        """Index of the grid point closest to x = 0 (clamped to the grid)."""
        self._validate_interval(x_min, x_max)
        _, step = uniform_grid(x_min, x_max, self.sample_count)
        return nearest_index(x_min, step, 0.0, self.sample_count)

    def integrate(self, x_min: float = AIRY_X_MIN, x_max: float = AIRY_X_MAX) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Unscaled RK4 solution.

        Returns:
            (y, dy): Ai(x) and Ai'(x) approximations on the uniform grid.
        """
        self._validate_interval(x_min, x_max)
        n = self.sample_count
        _, h = uniform_grid(x_min, x_max, n)
        i0 = nearest_index(x_min, h, 0.0, n)

        y = np.zeros(n, dtype=np.float64)
        dy = np.zeros(n, dtype=np.float64)
        y[i0] = AI_ZERO
        dy[i0] = AI_PRIME_ZERO

        integrate_airy(float(x_min), float(h), i0, y, dy)
        logger.debug(f"Airy RK4: {n} points, h={h:.6g}, seed index {i0} (x={x_min + i0 * h:.6g})")
        return y, dy

    def generate(self, x_min: float = AIRY_X_MIN, x_max: float = AIRY_X_MAX) -> SampleBuffer:
        """
        Args:
            x_min: Left edge of the sampled interval.
            x_max: Right edge of the sampled interval (x_min < x_max).

        Returns:
            A · Ai(x) sampled on N uniform points over [x_min, x_max].
        """
        y, _ = self.integrate(x_min, x_max)
        return SampleBuffer(y * self.config.amplitude)

    def max_error(self, x_min: float = AIRY_X_MIN, x_max: float = AIRY_X_MAX) -> float:
        """Largest absolute deviation of the unscaled solution from scipy's Ai(x)."""
        y, _ = self.integrate(x_min, x_max)
        return float(np.max(np.abs(y - airy_reference(x_min, x_max, self.sample_count))))

    @staticmethod
    def _validate_interval(x_min: float, x_max: float) -> None:
        if not (math.isfinite(x_min) and math.isfinite(x_max)):
            raise ValueError(f"Airy interval bounds must be finite, got [{x_min}, {x_max}].")
        if x_min >= x_max:
            raise ValueError(f"x_min must be smaller than x_max, got [{x_min}, {x_max}].")
