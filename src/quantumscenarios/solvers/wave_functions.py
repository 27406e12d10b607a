from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from quantumscenarios.config import EngineConfig, BESSEL_AMPLITUDE
from quantumscenarios.model.buffer import SampleBuffer
from quantumscenarios.utils import normalized_positions

if TYPE_CHECKING:
    from quantumscenarios.model.scenarios import BarrierGeometry

# ==========================================
# ABSTRACT CLASS FOR WAVE FUNCTIONS
# ==========================================
class WaveFunction(ABC):
    """
    Abstract base class for the wave-function generators.

    Generators are stateless: every call to `generate` builds a brand-new
    SampleBuffer from its arguments and the fixed configuration.
    """
    NAME: str = "Wave Function"

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    @property
    def sample_count(self) -> int:
        """Length of the buffers this generator produces."""
        return self.config.sample_count

    @abstractmethod
    def generate(self, *args: Any, **kwargs: Any) -> SampleBuffer:
        """
        Compute the sampled wave function.

        Returns:
            A new SampleBuffer of length `sample_count`.
        """
        pass

    def plot(self, *args: Any, geometry: Optional[BarrierGeometry] = None, **kwargs: Any) -> None:
        """
        Plot the wave function for the given generator arguments.
        """
        from quantumscenarios.view.plot import plot_wave

        plot_wave(self.generate(*args, **kwargs), title=f"ψ(x) – {self.NAME}", geometry=geometry)

# ==========================================
# CLOSED-FORM GENERATORS
# ==========================================

class InfiniteWellGenerator(WaveFunction):
    """
    Standing wave of a particle confined in an infinite potential well.

    U(x) = 0 inside the well and infinite outside, so ψ vanishes at the walls.
    Orbitals with n·π/L_well near the Nyquist limit alias visually; this is
    not corrected.
    """
    NAME = "Infinite Well"

    def generate(self, n: int) -> SampleBuffer:
        """
        Args:
            n: Orbital number (positive integer).

        Returns:
            sin(n·π·i / L_well) · A for every sample index i.
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise ValueError(f"Orbital number must be an integer, got {type(n).__name__}.")
        if n < 1:
            raise ValueError(f"Orbital number must be positive, got {n}.")

        # sin(n·π·i / L) has period 2L in n when L is integral
        n = int(n)
        well_length = self.config.well_length
        if float(well_length).is_integer():
            n %= 2 * int(well_length)

        i = np.arange(self.sample_count, dtype=np.float64)
        return SampleBuffer(np.sin(n * np.pi * i / well_length) * self.config.amplitude)


class LinearPotentialGenerator(WaveFunction):
    """
    Particle between two parallel plates under a potential gradient (U(x) = C·x).

    Illustrative decaying oscillation, not a closed-form eigenfunction.
    """
    NAME = "Linear Potential"

    SPATIAL_FREQUENCY = 6.0
    DECAY_RATE = 2.5

    def generate(self, energy_shift: float = 0.0) -> SampleBuffer:
        """
        Args:
            energy_shift: Phase shift standing in for the energy level
                          (see EnergyPreset).

        Returns:
            sin(6·u + shift) · exp(-2.5·u) · A with u = i/N.
        """
        u = normalized_positions(self.sample_count)
        spatial_phase = self.SPATIAL_FREQUENCY * u
        decay = np.exp(-self.DECAY_RATE * u)
        return SampleBuffer(np.sin(spatial_phase + float(energy_shift)) * decay * self.config.amplitude)


class BesselLikeOscillator(WaveFunction):
    """
    Animated "Bessel like" wave: a sine under an exponential envelope.

    This is NOT a solution of Bessel's equation; it only mimics its shape
    (oscillation confined near the origin). The animation phase is owned by
    the caller.
    """
    NAME = "Bessel Like Simulation"

    WAVE_NUMBER = 9.0     # number of half oscillations
    DECAY_FACTOR = 6.0    # confinement strength

    def __init__(self, config: Optional[EngineConfig] = None, amplitude: float = BESSEL_AMPLITUDE):
        super().__init__(config)
        self.amplitude = amplitude

    def generate(self, phase: float = 0.0) -> SampleBuffer:
        """
        Args:
            phase: Animation phase (radians).

        Returns:
            sin(9·π·u + phase) · exp(-6·u) · 200 with u = i/N.
        """
        u = normalized_positions(self.sample_count)
        oscillation = np.sin(self.WAVE_NUMBER * np.pi * u + float(phase))
        decay = np.exp(-self.DECAY_FACTOR * u)
        return SampleBuffer(oscillation * decay * self.amplitude)
