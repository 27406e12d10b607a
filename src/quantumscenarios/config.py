"""
Configuration & Constants
=========================
This module serves as the central registry for the numeric constants shared
by every wave-function generator.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sample counts, amplitudes, plate
   distances) from being scattered throughout the solvers.
2. Ownership: The engine receives an explicit EngineConfig instead of reading
   process-wide globals, so two engines can run side by side with different
   resolutions.

Exports:
    SAMPLE_COUNT (int): Default number of samples per wave function.
    WELL_LENGTH (int): Width of the infinite well in samples.
    WAVE_MULTIPLIER (float): Display amplitude A applied to the generators.
    PLATES_DISTANCE (int): Length of the barrier domain in samples.
    EngineConfig: Frozen container for the values above.
"""
from __future__ import annotations

from dataclasses import dataclass

# Global Constants
SAMPLE_COUNT: int = 1261
WELL_LENGTH: int = 1260
WAVE_MULTIPLIER: float = 20.0
PLATES_DISTANCE: int = 400

VISIBLE_WAVES: float = 6.0
BESSEL_AMPLITUDE: float = 200.0

DEFAULT_PHASE_STEP: float = 0.05
ANIMATION_INTERVAL: float = 0.016  # seconds, ~60 FPS

AIRY_X_MIN: float = -5.0
AIRY_X_MAX: float = 5.0

# Ai(0) and Ai'(0)
AI_ZERO: float = 0.3550280539
AI_PRIME_ZERO: float = -0.2588194038


@dataclass(frozen=True)
class EngineConfig:
    """
    Resolution and scale settings for one engine instance.

    Args:
        sample_count: Length N of every non-barrier buffer.
        well_length: Well width L_well used by the infinite well.
        amplitude: Display amplitude A.
        plates_distance: Length of the barrier domain (and its buffer).
    """
    sample_count: int = SAMPLE_COUNT
    well_length: float = WELL_LENGTH
    amplitude: float = WAVE_MULTIPLIER
    plates_distance: int = PLATES_DISTANCE

    def __post_init__(self) -> None:
        if self.sample_count < 2:
            raise ValueError(f"sample_count must be at least 2, got {self.sample_count}.")
        if self.well_length <= 0:
            raise ValueError(f"well_length must be positive, got {self.well_length}.")
        if self.plates_distance < 2:
            raise ValueError(f"plates_distance must be at least 2, got {self.plates_distance}.")
