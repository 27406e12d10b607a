import pytest

from quantumscenarios.model.scenarios import BarrierGeometry, BarrierScenario, EnergyPreset


def test_standard_geometry():
    geometry = BarrierGeometry.from_distance(400)
    assert geometry.x0 == pytest.approx(140.0)
    assert geometry.length == pytest.approx(120.0)
    assert geometry.onset_index == 140
    assert geometry.end_index == 260
    assert geometry.x_end <= geometry.distance


@pytest.mark.parametrize(
    "x0, length",
    [(-1.0, 10.0), (10.0, 0.0), (10.0, -5.0), (300.0, 150.0)],
)
def test_invalid_geometry(x0, length):
    with pytest.raises(ValueError):
        BarrierGeometry(x0=x0, length=length, distance=400)


def test_barrier_scenario_from_value():
    assert BarrierScenario("E < U") is BarrierScenario.E_LESS_THAN_U
    with pytest.raises(ValueError):
        BarrierScenario("E = U")


def test_energy_presets():
    assert float(EnergyPreset.LOW) == 0.0
    assert float(EnergyPreset.HIGH) == 1.5
    assert "lower plate" in EnergyPreset.LOW.description
    assert "extended" in EnergyPreset.HIGH.description
