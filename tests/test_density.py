import numpy as np

from quantumscenarios.model.buffer import SampleBuffer
from quantumscenarios.solvers import InfiniteWellGenerator, ProbabilityDensityCalculator


def test_elementwise_square():
    wave = InfiniteWellGenerator().generate(2)
    density = ProbabilityDensityCalculator().density(wave)
    assert len(density) == len(wave)
    np.testing.assert_array_equal(density.values, wave.values ** 2)
    assert np.all(density.values >= 0.0)


def test_not_normalized():
    density = ProbabilityDensityCalculator()(SampleBuffer([3.0, -4.0]))
    assert density.to_list() == [9.0, 16.0]


def test_squaring_twice_is_not_squaring_once():
    calculator = ProbabilityDensityCalculator()
    wave = SampleBuffer([0.5, 2.0, -3.0])
    once = calculator.density(wave)
    twice = calculator.density(once)
    assert once != twice
    assert twice.to_list() == [0.0625, 16.0, 81.0]


def test_zero_wave_gives_zero_density():
    density = ProbabilityDensityCalculator().density(SampleBuffer.zeros(5))
    assert not density.has_data()
