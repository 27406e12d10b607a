"""
The SOLVERS layer turns scenario parameters into sampled wave functions.
Every generator is a pure function of its arguments and configuration.
"""
from quantumscenarios.solvers.wave_functions import (
    WaveFunction,
    InfiniteWellGenerator,
    LinearPotentialGenerator,
    BesselLikeOscillator,
)
from quantumscenarios.solvers.airy import AiryIntegrator, airy_reference
from quantumscenarios.solvers.barrier import BarrierWaveGenerator
from quantumscenarios.solvers.density import ProbabilityDensityCalculator
