"""
Sampling and plotting helpers for inspecting control curves.

Useful when tuning dead zone, minimum power and exponent values: plot the
candidates on one set of axes and compare their feel near center and at
full scale.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .curves import ControlCurve


def sample_curve(curve: ControlCurve,
                 n_points: int = 401,
                 span: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate a curve on an evenly spaced input grid.

    Parameters
    ----------
    curve : ControlCurve
        Curve to sample.
    n_points : int
        Number of grid points (default: 401, which includes 0 and the
        endpoints).
    span : float
        Grid covers [-span, span].

    Returns
    -------
    x : ndarray
        Input values.
    y : ndarray
        Shaped outputs.
    """
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")
    if span <= 0:
        raise ValueError(f"span must be > 0, got {span}")

    x = np.linspace(-span, span, n_points)
    return x, curve.evaluate(x)


def plot_curves(curves: Sequence[ControlCurve],
                labels: Optional[Sequence[str]] = None,
                ax=None,
                n_points: int = 401,
                span: float = 1.0):
    """
    Plot one or more curves on a shared set of axes.

    Parameters
    ----------
    curves : sequence of ControlCurve
        Curves to draw.
    labels : sequence of str, optional
        Legend entries; defaults to each curve's repr.
    ax : matplotlib Axes, optional
        Axes to draw into. A new figure is created when omitted.
    n_points, span :
        Passed to ``sample_curve``.

    Returns
    -------
    fig : matplotlib Figure
    ax : matplotlib Axes
    """
    if labels is None:
        labels = [repr(curve) for curve in curves]
    elif len(labels) != len(curves):
        raise ValueError(f"Got {len(labels)} labels for {len(curves)} curves")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    for curve, label in zip(curves, labels):
        x, y = sample_curve(curve, n_points=n_points, span=span)
        ax.plot(x, y, linewidth=2, label=label)

    ax.axhline(0, color='gray', linewidth=0.5)
    ax.axvline(0, color='gray', linewidth=0.5)
    ax.set_xlabel('Input')
    ax.set_ylabel('Output')
    ax.set_title('Control Curves')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper left', fontsize=9)

    return fig, ax
