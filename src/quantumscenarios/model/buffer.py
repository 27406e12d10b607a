"""
Sample Buffer (Data Model)
==========================
This module defines the container that every generator returns.

Why is this file needed?
------------------------
1. Immutability: A buffer is never partially mutated. Each calculation builds
   a new array and the engine swaps the reference, so readers always see a
   complete wave function.
2. Uniformity: Views and the density calculator consume one type regardless
   of which scenario produced the samples.

Classes:
    SampleBuffer: Read-only, fixed-length sequence of float64 samples.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

from quantumscenarios.utils import has_displayable_data

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class SampleBuffer:
    """
    Ordered sequence of real samples representing ψ(x) or |ψ(x)|².

    The wrapped array is copied on construction and flagged read-only.
    """
    values: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        array = np.array(self.values, dtype=np.float64, copy=True)
        if array.ndim != 1:
            raise ValueError(f"SampleBuffer expects a 1D array, got shape {array.shape}.")
        array.setflags(write=False)
        object.__setattr__(self, "values", array)

    @classmethod
    def zeros(cls, length: int) -> SampleBuffer:
        """Zero-filled buffer, used at start-up and by clear()."""
        return cls(np.zeros(length, dtype=np.float64))

    def __len__(self) -> int:
        return self.values.shape[0]

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleBuffer):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values, equal_nan=True))

    def __hash__(self) -> int:
        return hash(self.values.tobytes())

    def has_data(self) -> bool:
        """True if any sample is non-zero (a cleared buffer has none)."""
        return has_displayable_data(self.values)

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.values)))

    def max_abs(self) -> float:
        """Largest finite magnitude, 0.0 for an empty or all-NaN buffer."""
        finite = self.values[np.isfinite(self.values)]
        if finite.size == 0:
            return 0.0
        return float(np.max(np.abs(finite)))

    def to_list(self) -> list[float]:
        return self.values.tolist()
