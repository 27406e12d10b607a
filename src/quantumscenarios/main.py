"""
Application Entry Point
=======================
This module builds the engine, runs one scenario and reports the result.

Why is this file needed?
------------------------
It acts as the composition root for command-line use. It:
1. Configures logging (console + optional file).
2. Instantiates a QuantumEngine for this session.
3. Dispatches the selected scenario and optionally the probability density.
4. Prints a short summary and, on request, plots the buffers.

Usage:
    $ python -m quantumscenarios well 3 --density --plot
    $ python -m quantumscenarios barrier below
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from quantumscenarios.animation import BesselAnimation
from quantumscenarios.config import AIRY_X_MIN, AIRY_X_MAX
from quantumscenarios.engine import QuantumEngine
from quantumscenarios.logging_config import setup_logging
from quantumscenarios.model.buffer import SampleBuffer
from quantumscenarios.model.scenarios import BarrierScenario, EnergyPreset

logger = logging.getLogger(__name__)

ENERGY_CHOICES = {"low": EnergyPreset.LOW, "high": EnergyPreset.HIGH}
BARRIER_CHOICES = {"above": BarrierScenario.E_GREATER_THAN_U, "below": BarrierScenario.E_LESS_THAN_U}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantumscenarios",
        description="Sample textbook one-dimensional quantum wave functions.",
    )
    parser.add_argument("--density", action="store_true", help="also compute |ψ(x)|²")
    parser.add_argument("--plot", action="store_true", help="plot the result with matplotlib")
    parser.add_argument("--log-level", default="INFO", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write the log to this file")

    sub = parser.add_subparsers(dest="scenario", required=True)

    well = sub.add_parser("well", help="particle in an infinite well")
    well.add_argument("n", type=int, help="orbital number (positive integer)")

    linear = sub.add_parser("linear", help="particle between plates, illustrative solution")
    linear.add_argument("energy", choices=sorted(ENERGY_CHOICES))

    airy = sub.add_parser("airy", help="particle between plates, Airy solution")
    airy.add_argument("--x-min", type=float, default=AIRY_X_MIN)
    airy.add_argument("--x-max", type=float, default=AIRY_X_MAX)

    bessel = sub.add_parser("bessel", help="particle between plates, animated Bessel-like wave")
    bessel.add_argument("--frames", type=int, default=0, help="animation frames to run")

    barrier = sub.add_parser("barrier", help="particle hitting a potential barrier")
    barrier.add_argument("regime", choices=sorted(BARRIER_CHOICES), help="above: E > U, below: E < U")

    return parser


def run_scenario(engine: QuantumEngine, args: argparse.Namespace) -> SampleBuffer:
    """Dispatch the parsed scenario onto the engine."""
    match args.scenario:
        case "well":
            engine.enter_scenario("infinite_well")
            return engine.calculate_single_wave(args.n)
        case "linear":
            engine.enter_scenario("parallel_plates")
            return engine.calculate_linear_potential_wave(ENERGY_CHOICES[args.energy])
        case "airy":
            engine.enter_scenario("parallel_plates")
            return engine.calculate_airy_wave(args.x_min, args.x_max)
        case "bessel":
            engine.enter_scenario("parallel_plates")
            BesselAnimation(engine).run(max_frames=args.frames)
            return engine.wave
        case "barrier":
            engine.enter_scenario("potential_barrier")
            return engine.generate_barrier_wave_function(BARRIER_CHOICES[args.regime])
    raise ValueError(f"Unknown scenario '{args.scenario}'.")


def summarize(name: str, buffer: SampleBuffer) -> str:
    values = buffer.values
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return f"{name}: {len(buffer)} samples, no displayable values"
    return (
        f"{name}: {len(buffer)} samples, min={finite.min():.4f}, max={finite.max():.4f}, "
        f"non-finite={values.size - finite.size}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    engine = QuantumEngine()
    try:
        wave = run_scenario(engine, args)
    except ValueError as e:
        logger.error(str(e))
        return 2

    print(summarize("ψ(x)", wave))

    density = None
    if args.density:
        engine.enter_scenario("analysis")
        density = engine.calculate_probability_density()
        print(summarize("|ψ(x)|²", density))

    if args.plot:
        from quantumscenarios.view.plot import plot_wave

        geometry = engine.barrier_geometry if args.scenario == "barrier" else None
        plot_wave(wave, geometry=geometry, show=density is None)
        if density is not None:
            plot_wave(density, title="|ψ(x)|² : Probability Density", geometry=geometry)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
