"""
Bessel-like Animation Loop
==========================
This module contains the caller-side loop that animates the Bessel-like wave.

Why is this file needed?
------------------------
1. Ownership: The oscillator is a pure function of the phase and the engine
   only stores the phase. Somebody has to advance it at a fixed cadence; that
   is this loop, owned by the caller and not by the engine.
2. Cancellation: Stopping is cooperative. `stop()` clears a flag and the loop
   exits before scheduling the next frame; nothing needs to be cleaned up.

Classes:
    BesselAnimation: Advances the phase and regenerates the wave every tick.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from quantumscenarios.config import ANIMATION_INTERVAL, DEFAULT_PHASE_STEP
from quantumscenarios.engine import QuantumEngine
from quantumscenarios.model.buffer import SampleBuffer

logger = logging.getLogger(__name__)


class BesselAnimation:
    def __init__(
        self,
        engine: QuantumEngine,
        interval: float = ANIMATION_INTERVAL,
        phase_step: float = DEFAULT_PHASE_STEP,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.engine = engine
        self.interval = interval
        self.phase_step = phase_step
        self._sleep = sleep
        self.is_running = False
        self.frames = 0

    def tick(self) -> SampleBuffer:
        """Advance the phase once and regenerate the wave."""
        self.engine.advance_phase(self.phase_step)
        self.frames += 1
        return self.engine.calculate_bessel_like_wave()

    def stop(self) -> None:
        self.is_running = False

    def run(
        self,
        max_frames: Optional[int] = None,
        on_frame: Optional[Callable[[SampleBuffer], None]] = None,
    ) -> int:
        """
        Animate until `stop()` is called or `max_frames` frames were drawn.

        Args:
            max_frames: Frame limit; None runs until stopped.
            on_frame: Called with the new wave after every tick (e.g. to redraw).

        Returns:
            Number of frames produced by this run.
        """
        self.is_running = True
        produced = 0
        logger.info("ψ(x): \"Bessel like\" simulation wave")
        logger.debug(f"Animation started (interval={self.interval}s, phase step={self.phase_step}).")

        # First frame at the current phase, as shown when the scenario is selected
        wave = self.engine.calculate_bessel_like_wave()
        if on_frame:
            on_frame(wave)

        while self.is_running and (max_frames is None or produced < max_frames):
            wave = self.tick()
            produced += 1
            if on_frame:
                on_frame(wave)
            if self.is_running and (max_frames is None or produced < max_frames):
                self._sleep(self.interval)

        self.is_running = False
        logger.debug(f"Animation stopped after {produced} frames (phase={self.engine.phase:.3f}).")
        return produced
