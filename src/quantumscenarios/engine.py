"""
Quantum Engine (State Holder)
=============================
This module defines the object that the display layer talks to.

Why is this file needed?
------------------------
1. State Management: It holds the current wave function, the current
   probability density and the animation phase in one place. Each session
   owns its own instance and passes it by reference.
2. Atomic Updates: Every calculation builds a new SampleBuffer and then swaps
   the reference, so a reader never observes a half-written wave.
3. Decoupling: Views read from this object; button handlers and timers call
   its calculate* methods.

Classes:
    QuantumEngine: Owns the generators and the current buffers.
"""
from __future__ import annotations

import logging
from typing import Optional

from quantumscenarios.config import EngineConfig, DEFAULT_PHASE_STEP, AIRY_X_MIN, AIRY_X_MAX
from quantumscenarios.model.buffer import SampleBuffer
from quantumscenarios.model.scenarios import BarrierGeometry, BarrierScenario, EnergyPreset
from quantumscenarios.solvers import (
    AiryIntegrator,
    BarrierWaveGenerator,
    BesselLikeOscillator,
    InfiniteWellGenerator,
    LinearPotentialGenerator,
    ProbabilityDensityCalculator,
)

logger = logging.getLogger(__name__)

SCENARIO_DESCRIPTIONS: dict[str, tuple[str, ...]] = {
    "infinite_well": (
        "Particle confined inside a well of length L",
        "U(x) = 0 inside the well: x in <0-L>",
        "U(x) = infinite outside the well",
    ),
    "parallel_plates": (
        "Particle moving between 2 parallel plates of length x in <0-L>",
        "with a potential gradient V between the plates",
    ),
    "potential_barrier": (
        "Particle with energy E moving along the x axis",
        "U(x) = 0 for x < x0 and x > x0 + L",
        "U(x) = U for x in <x0, x0 + L>: potential barrier",
    ),
    "analysis": (
        "Probability density of the last wave function selected",
    ),
}


class QuantumEngine:
    """
    Wave-function engine for the four quantum-particle scenarios.

    Holds exactly one current wave and one current density buffer (no
    history) plus the animation phase of the Bessel-like oscillator.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

        self._well = InfiniteWellGenerator(self.config)
        self._linear = LinearPotentialGenerator(self.config)
        self._airy = AiryIntegrator(self.config)
        self._bessel = BesselLikeOscillator(self.config)
        self._barrier = BarrierWaveGenerator(self.config)
        self._density = ProbabilityDensityCalculator()

        self._wave: SampleBuffer = SampleBuffer.zeros(self.config.sample_count)
        self._probability_density: SampleBuffer = SampleBuffer.zeros(self.config.sample_count)
        self._phase: float = 0.0

    # ==========================================
    # READ-ONLY ACCESSORS
    # ==========================================
    @property
    def wave(self) -> SampleBuffer:
        """Current wave function ψ(x)."""
        return self._wave

    @property
    def probability_density(self) -> SampleBuffer:
        """Current probability density |ψ(x)|²."""
        return self._probability_density

    @property
    def phase(self) -> float:
        """Current animation phase of the Bessel-like oscillator."""
        return self._phase

    @property
    def barrier_geometry(self) -> BarrierGeometry:
        return self._barrier.geometry

    @property
    def x0(self) -> float:
        return self._barrier.geometry.x0

    @property
    def L(self) -> float:
        return self._barrier.geometry.length

    def has_wave_data(self) -> bool:
        """True once a scenario has filled the wave buffer."""
        return self._wave.has_data()

    # ==========================================
    # STATE CONTROL
    # ==========================================
    def clear(self) -> None:
        """Reset the wave buffer to zeros (called when a scenario is (re)entered)."""
        self._wave = SampleBuffer.zeros(self.config.sample_count)
        logger.debug("Wave function cleared.")

    def enter_scenario(self, scenario: str) -> None:
        """Clear the wave and log the scenario description."""
        if scenario not in SCENARIO_DESCRIPTIONS:
            raise ValueError(f"Unknown scenario '{scenario}'. Expected one of {sorted(SCENARIO_DESCRIPTIONS)}.")
        if scenario != "analysis":
            self.clear()
        for line in SCENARIO_DESCRIPTIONS[scenario]:
            logger.info(line)

    def advance_phase(self, delta: float = DEFAULT_PHASE_STEP) -> float:
        """Advance the animation phase and return the new value."""
        self._phase += delta
        return self._phase

    def reset_phase(self) -> None:
        self._phase = 0.0

    # ==========================================
    # SCENARIO 1: INFINITE WELL
    # ==========================================
    def calculate_single_wave(self, n: int) -> SampleBuffer:
        self._wave = self._well.generate(n)
        logger.info(f"ψ(x) wave function for orbital n = {n}")
        return self._wave

    # ==========================================
    # SCENARIO 2: PARTICLE BETWEEN PLATES
    # ==========================================
    def calculate_linear_potential_wave(self, energy_shift: float | EnergyPreset = EnergyPreset.LOW) -> SampleBuffer:
        self._wave = self._linear.generate(float(energy_shift))
        if isinstance(energy_shift, EnergyPreset):
            logger.info(energy_shift.description)
        else:
            logger.info(f"Linear potential ψ(x) with energy shift {energy_shift:g}")
        return self._wave

    def calculate_airy_wave(self, x_min: float = AIRY_X_MIN, x_max: float = AIRY_X_MAX) -> SampleBuffer:
        self._wave = self._airy.generate(x_min, x_max)
        logger.info(f"ψ(x) = Ai(x): Airy wave physical solution on [{x_min:g}, {x_max:g}]")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Airy RK4 max deviation from scipy Ai(x): {self._airy.max_error(x_min, x_max):.3e}")
        return self._wave

    def calculate_bessel_like_wave(self) -> SampleBuffer:
        """Regenerate the Bessel-like wave at the current phase."""
        self._wave = self._bessel.generate(self._phase)
        return self._wave

    # ==========================================
    # SCENARIO 3: POTENTIAL BARRIER
    # ==========================================
    def generate_barrier_wave_function(self, scenario: BarrierScenario) -> SampleBuffer:
        self._wave = self._barrier.generate(scenario)
        match BarrierScenario(scenario):
            case BarrierScenario.E_GREATER_THAN_U:
                logger.info("ψ(x): E > U : oscillating in all regions")
            case BarrierScenario.E_LESS_THAN_U:
                logger.info("ψ(x): E < U : quantum tunneling")
        return self._wave

    # ==========================================
    # ANALYSIS
    # ==========================================
    def calculate_probability_density(self, source: Optional[SampleBuffer] = None) -> SampleBuffer:
        """
        Derive |ψ(x)|² from `source` (defaults to the current wave).
        """
        if source is None:
            source = self._wave
        if not source.has_data():
            logger.info("Select a scenario first to calculate its wave function ψ(x)")
        self._probability_density = self._density.density(source)
        logger.info("ρ(x) = |ψ(x)|²: measurable probability density")
        return self._probability_density
