import numpy as np
import pytest

from quantumscenarios.animation import BesselAnimation


def test_runs_requested_frames(engine):
    sleeps = []
    frames = []
    animation = BesselAnimation(engine, sleep=sleeps.append)

    produced = animation.run(max_frames=3, on_frame=frames.append)

    assert produced == 3
    assert animation.frames == 3
    assert not animation.is_running
    assert engine.phase == pytest.approx(0.15)
    assert sleeps == [pytest.approx(0.016)] * 2
    # Initial frame plus one per tick
    assert len(frames) == 4
    assert frames[-1] is engine.wave
    assert engine.wave[0] == pytest.approx(200.0 * np.sin(0.15))


def test_stop_from_callback(engine):
    animation = BesselAnimation(engine, sleep=lambda _: None)
    seen = []

    def on_frame(wave):
        seen.append(wave)
        if len(seen) == 3:
            animation.stop()

    produced = animation.run(on_frame=on_frame)

    assert produced == 2
    assert engine.phase == pytest.approx(0.1)


def test_tick_uses_custom_step(engine):
    animation = BesselAnimation(engine, phase_step=0.5)
    animation.tick()
    animation.tick()
    assert engine.phase == pytest.approx(1.0)


def test_zero_frames_draws_current_phase(engine):
    engine.advance_phase(0.4)
    produced = BesselAnimation(engine, sleep=lambda _: None).run(max_frames=0)
    assert produced == 0
    assert engine.phase == pytest.approx(0.4)
    assert engine.wave[0] == pytest.approx(200.0 * np.sin(0.4))
