from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def normalized_positions(count: int) -> npt.NDArray[np.float64]:
    """Normalized positions u = i/N for i in [0, N)."""
    return np.arange(count, dtype=np.float64) / count

def uniform_grid(x_min: float, x_max: float, count: int) -> tuple[npt.NDArray[np.float64], float]:
    """Uniform grid of `count` points over [x_min, x_max] and its step."""
    step = (x_max - x_min) / (count - 1)
    return x_min + np.arange(count, dtype=np.float64) * step, step

def nearest_index(x_min: float, step: float, x: float, count: int) -> int:
    """Grid index closest to x, clamped to [0, count - 1]."""
    index = int(round((x - x_min) / step))
    return min(max(index, 0), count - 1)

def has_displayable_data(values: npt.NDArray[np.float64]) -> bool:
    """True if any sample is non-zero."""
    return bool(np.any(values != 0.0))
