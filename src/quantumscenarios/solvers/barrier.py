"""
Potential Barrier Wave Functions
================================
Particle of energy E moving along the x axis where the potential energy is

    U(x) = 0,  x < x0 and x > x0 + L
    U(x) = U,  x0 <= x <= x0 + L   (potential barrier)

Two regimes are generated piecewise over three regions:

* E > U: oscillating in all regions, wavelength longer inside the barrier.
  The phase offsets of regions 2 and 3 are solved from the entry and exit
  values so that ψ is continuous at both boundaries.
* E < U: quantum tunneling. The wave does not oscillate inside the barrier
  but decays exponentially, and re-emerges with the attenuated amplitude.

Amplitudes are fixed for visual uniformity; no transmission or reflection
coefficients are computed.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from quantumscenarios.config import EngineConfig, VISIBLE_WAVES
from quantumscenarios.model.buffer import SampleBuffer
from quantumscenarios.model.scenarios import BarrierGeometry, BarrierScenario
from quantumscenarios.solvers.wave_functions import WaveFunction

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class BarrierWaveGenerator(WaveFunction):
    """
    Piecewise, continuity-matched wave function across a potential barrier.
    """
    NAME = "Potential Barrier"

    BARRIER_WAVENUMBER_RATIO = 0.6
    REFLECTED_AMPLITUDE = 0.5

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        geometry: Optional[BarrierGeometry] = None,
        free_amplitude: float = 1.0,
        barrier_amplitude: float = 1.0,
        visible_waves: float = VISIBLE_WAVES,
    ):
        """
        Args:
            config: Engine configuration (supplies the plate distance).
            geometry: Barrier position; defaults to the standard 35 % / 30 % layout.
            free_amplitude: Amplitude outside the barrier (E > U regime).
            barrier_amplitude: Amplitude inside the barrier (E > U regime).
            visible_waves: Number of free-space wavelengths across the domain.
        """
        super().__init__(config)
        self.geometry = geometry or BarrierGeometry.from_distance(self.config.plates_distance)
        if self.geometry.distance != self.config.plates_distance:
            raise ValueError(
                f"Geometry domain {self.geometry.distance} does not match plate distance {self.config.plates_distance}."
            )
        self.free_amplitude = free_amplitude
        self.barrier_amplitude = barrier_amplitude
        self.k_free = 2.0 * np.pi * visible_waves / self.config.plates_distance

    @property
    def sample_count(self) -> int:
        return int(self.config.plates_distance)

    @property
    def k_barrier(self) -> float:
        return self.BARRIER_WAVENUMBER_RATIO * self.k_free

    @property
    def alpha(self) -> float:
        """Decay constant inside the barrier for the tunneling regime."""
        return 1.0 / self.geometry.length

    def generate(self, scenario: BarrierScenario) -> SampleBuffer:
        """
        Args:
            scenario: Energy regime relative to the barrier.

        Returns:
            Buffer of length equal to the plate distance.
        """
        match BarrierScenario(scenario):
            case BarrierScenario.E_GREATER_THAN_U:
                values = self._oscillating()
            case BarrierScenario.E_LESS_THAN_U:
                values = self._tunneling()
        return SampleBuffer(values)

    def plot(self, scenario: BarrierScenario, geometry: Optional[BarrierGeometry] = None) -> None:
        """Plot the regime with this generator's barrier limits unless another geometry is given."""
        super().plot(scenario, geometry=geometry or self.geometry)

    # ------------------------------------------------------------------
    # E > U: oscillating in all three regions
    # ------------------------------------------------------------------
    def _oscillating(self) -> npt.NDArray[np.float64]:
        x0 = self.geometry.x0
        length = self.geometry.length
        x0i = self.geometry.onset_index
        xLi = self.geometry.end_index
        a_free, a_barrier = self.free_amplitude, self.barrier_amplitude

        x = np.arange(self.sample_count, dtype=np.float64)
        data = np.empty(self.sample_count, dtype=np.float64)

        # Region 1
        data[:x0i] = a_free * np.sin(self.k_free * x[:x0i])

        # Value and phase at entry
        psi_entry = a_free * np.sin(self.k_free * x0)
        phi_barrier = self._match_phase(psi_entry, a_barrier, "barrier entry")

        # Region 2 (barrier)
        data[x0i:xLi] = a_barrier * np.sin(self.k_barrier * (x[x0i:xLi] - x0) + phi_barrier)

        # Value and phase at exit
        psi_exit = a_barrier * np.sin(self.k_barrier * length + phi_barrier)
        phi_out = self._match_phase(psi_exit, a_free, "barrier exit")

        # Region 3
        data[xLi:] = a_free * np.sin(self.k_free * (x[xLi:] - x0 - length) + phi_out)
        return data

    @staticmethod
    def _match_phase(value: float, amplitude: float, where: str) -> float:
        """
        Phase offset φ with amplitude·sin(φ) == value.

        The ratio is not clamped: outside [-1, 1] the phase is NaN and every
        sample that depends on it is NaN ("no displayable value").
        """
        ratio = value / amplitude
        with np.errstate(invalid="ignore"):
            phase = float(np.arcsin(ratio))
        if np.isnan(phase):
            logger.warning(f"Phase match at {where} is undefined (|ψ/A| = {abs(ratio):.4f} > 1); samples set to NaN.")
        return phase

    # ------------------------------------------------------------------
    # E < U: tunneling
    # ------------------------------------------------------------------
    def _tunneling(self) -> npt.NDArray[np.float64]:
        x0 = self.geometry.x0
        length = self.geometry.length
        k = self.k_free
        r = self.REFLECTED_AMPLITUDE

        # Incident + reflected wave at x0
        psi_x0 = np.sin(k * x0) + r * np.sin(-k * x0)
        # Evanescent value at x0 + L
        psi_xL = psi_x0 * np.exp(-self.alpha * length)

        x = np.arange(self.sample_count, dtype=np.float64)
        return np.select(
            [x < x0, x < x0 + length],
            [
                np.sin(k * x) + r * np.sin(-k * x),
                psi_x0 * np.exp(-self.alpha * (x - x0)),
            ],
            default=psi_xL * np.sin(k * (x - x0 - length) + np.pi / 2),
        )
