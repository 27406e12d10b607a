from __future__ import annotations

from quantumscenarios.model.buffer import SampleBuffer


class ProbabilityDensityCalculator:
    """
    Probability density ρ(x) = |ψ(x)|².

    The result is not normalized: it shows the relative likelihood of finding
    the particle at each position. Squaring is not idempotent, so applying the
    calculator to its own output gives |ψ|⁴, not |ψ|².
    """
    NAME = "Probability Density"

    def density(self, buffer: SampleBuffer) -> SampleBuffer:
        """Elementwise square of `buffer`. NaN samples stay NaN."""
        return SampleBuffer(buffer.values * buffer.values)

    __call__ = density
