from itertools import combinations

import numpy as np
import pytest

from quantumscenarios.model.scenarios import EnergyPreset
from quantumscenarios.solvers import (
    BesselLikeOscillator,
    InfiniteWellGenerator,
    LinearPotentialGenerator,
    WaveFunction,
)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        WaveFunction()


class TestInfiniteWell:
    def setup_method(self):
        self.generator = InfiniteWellGenerator()

    def test_length_and_wall(self):
        wave = self.generator.generate(3)
        assert len(wave) == 1261
        assert wave[0] == 0.0
        assert abs(wave[1260]) < 1e-9

    def test_fundamental_peaks_at_midpoint(self):
        wave = self.generator.generate(1)
        assert wave[1261 // 2] == pytest.approx(20.0)
        assert np.all(wave.values[1:-1] > 0.0)

    def test_orbitals_are_distinct(self):
        waves = {n: self.generator.generate(n) for n in range(1, 9)}
        for n1, n2 in combinations(waves, 2):
            assert waves[n1] != waves[n2]

    def test_node_count_grows_with_n(self):
        wave = self.generator.generate(4)
        interior = wave.values[1:-1]
        interior = interior[np.abs(interior) > 1e-9]
        sign_changes = np.count_nonzero(np.diff(np.sign(interior)) != 0)
        assert sign_changes == 3

    @pytest.mark.parametrize("n", [0, -2, 1.5, True])
    def test_rejects_invalid_orbital_number(self, n):
        with pytest.raises(ValueError):
            self.generator.generate(n)


class TestLinearPotential:
    def setup_method(self):
        self.generator = LinearPotentialGenerator()

    def test_starting_values(self):
        assert self.generator.generate(EnergyPreset.LOW)[0] == 0.0
        assert self.generator.generate(EnergyPreset.HIGH)[0] == pytest.approx(20.0 * np.sin(1.5))

    def test_decaying_envelope(self):
        wave = self.generator.generate(0.3)
        u = np.arange(1261) / 1261
        assert np.all(np.abs(wave.values) <= 20.0 * np.exp(-2.5 * u) + 1e-12)

    def test_energy_shift_changes_the_shape(self):
        assert self.generator.generate(0.0) != self.generator.generate(1.5)


class TestBesselLikeOscillator:
    def setup_method(self):
        self.oscillator = BesselLikeOscillator()

    def test_origin_value_follows_phase(self):
        for phase in (0.0, 0.05, 1.0, 2.5):
            assert self.oscillator.generate(phase)[0] == pytest.approx(200.0 * np.sin(phase), abs=1e-12)

    def test_pure_function_of_phase(self):
        assert self.oscillator.generate(0.7) == self.oscillator.generate(0.7)
        np.testing.assert_allclose(
            self.oscillator.generate(2 * np.pi).values,
            self.oscillator.generate(0.0).values,
            atol=1e-9,
        )

    def test_oscillation_is_confined_near_origin(self):
        wave = self.oscillator.generate(0.0)
        first_half = np.max(np.abs(wave.values[:630]))
        second_half = np.max(np.abs(wave.values[630:]))
        assert second_half < 0.1 * first_half


U = np.arange(1261) / 1261


@pytest.mark.parametrize("preset", list(EnergyPreset))
def test_linear_potential_formula(preset):
    wave = LinearPotentialGenerator().generate(preset)
    expected = np.sin(6.0 * U + float(preset)) * np.exp(-2.5 * U) * 20.0
    np.testing.assert_allclose(wave.values, expected, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("phase", [0.0, 0.05, 1.3])
def test_bessel_like_formula(phase):
    wave = BesselLikeOscillator().generate(phase)
    expected = np.sin(9.0 * np.pi * U + phase) * np.exp(-6.0 * U) * 200.0
    np.testing.assert_allclose(wave.values, expected, rtol=1e-12, atol=1e-12)


def test_infinite_well_formula():
    wave = InfiniteWellGenerator().generate(5)
    i = np.arange(1261)
    np.testing.assert_allclose(wave.values, np.sin(5 * np.pi * i / 1260) * 20.0, atol=1e-12)


def test_infinite_well_huge_orbital_number():
    generator = InfiniteWellGenerator()
    n = 10 ** 400
    wave = generator.generate(n)
    assert len(wave) == 1261
    assert wave.is_finite()
    assert wave == generator.generate(n % 2520)


def test_infinite_well_is_periodic_in_n():
    generator = InfiniteWellGenerator()
    assert generator.generate(3 + 2520) == generator.generate(3)
    assert generator.generate(np.int64(7)) == generator.generate(7)
