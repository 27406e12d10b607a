import numpy as np
import pytest

from quantumscenarios.model.buffer import SampleBuffer


def test_zeros_has_no_data():
    buffer = SampleBuffer.zeros(1261)
    assert len(buffer) == 1261
    assert not buffer.has_data()
    assert all(value == 0.0 for value in buffer)


def test_values_are_read_only():
    buffer = SampleBuffer([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        buffer.values[0] = 5.0


def test_construction_copies_the_source():
    source = np.array([1.0, -2.0, 3.0])
    buffer = SampleBuffer(source)
    source[0] = 100.0
    assert buffer[0] == 1.0


def test_rejects_multidimensional_input():
    with pytest.raises(ValueError):
        SampleBuffer(np.zeros((2, 3)))


def test_equality_treats_nan_as_equal():
    assert SampleBuffer([1.0, np.nan]) == SampleBuffer([1.0, np.nan])
    assert SampleBuffer([1.0, 2.0]) != SampleBuffer([1.0, 2.5])


def test_max_abs_ignores_non_finite_samples():
    buffer = SampleBuffer([0.5, -3.0, np.nan])
    assert buffer.max_abs() == 3.0
    assert not buffer.is_finite()
    assert SampleBuffer([np.nan]).max_abs() == 0.0


def test_to_list():
    assert SampleBuffer([1.0, 2.0]).to_list() == [1.0, 2.0]
