from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from quantumscenarios.model.buffer import SampleBuffer
    from quantumscenarios.model.scenarios import BarrierGeometry


def plot_wave(
    buffer: SampleBuffer,
    title: str = "ψ(x) : Wave Function",
    geometry: Optional[BarrierGeometry] = None,
    ax: Optional[Axes] = None,
    show: bool = True,
) -> Axes:
    """
    Plot a wave function (or probability density) against the sample index.

    Args:
        buffer: Samples to draw. NaN samples leave gaps.
        title: Axes title.
        geometry: Barrier position; when given, its limits are drawn as dashed lines.
        ax: Existing axes to draw into. A new figure is created otherwise.
        show: Call plt.show() after drawing.

    Returns:
        The axes that were drawn into.
    """
    if ax is None:
        plt.rcParams["figure.constrained_layout.use"] = True
        _, ax = plt.subplots(figsize=(7, 3))

    x = np.arange(len(buffer))

    # X axis
    ax.axhline(0.0, color='lightgray', lw=1)

    # Barrier limits
    if geometry is not None:
        for position in (geometry.x0, geometry.x_end):
            ax.axvline(position, color='gray', lw=2, linestyle='--')

    ax.plot(x, buffer.values, 'b', lw=2)

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.set_title(title)
    ax.set_xlabel("x (samples)")
    ax.set_ylabel("ψ(x)")
    if len(buffer) > 1:
        ax.set_xlim(0, len(buffer) - 1)

    if show:
        plt.show()
    return ax
