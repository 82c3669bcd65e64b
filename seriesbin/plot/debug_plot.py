# plot/debug_plot.py
from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from seriesbin.core.binning import BinSummary

logger = logging.getLogger(__name__)

# Relative heights (fraction of the y-span) for the per-bin count labels.
# Neighbouring labels alternate so they do not overlap on narrow bins.
_LABEL_HEIGHTS = (0.85, 0.81)


def plot_binning(
    x: np.ndarray,
    y: np.ndarray,
    summary: BinSummary,
    *,
    ax: Axes | None = None,
    title: str = "Binning Debug",
) -> Axes:
    """Draw raw samples, the resampled series, bin edges and per-bin counts.

    Args:
        x: Raw sample positions.
        y: Raw values, 1D or one column per channel.
        summary: Result of the binning pass over ``x``/``y``.
        ax: Axes to draw on. A new figure is created when omitted.
        title: Axes title.

    Returns:
        The Axes that was drawn on.
    """
    if ax is None:
        _, ax = plt.subplots()

    y2 = np.asarray(y).reshape(len(x), -1)
    for c in range(y2.shape[1]):
        ax.scatter(x, y2[:, c], s=12)
    ax.plot(summary.centers, summary.means, "r.-")

    ymin, ymax = ax.get_ylim()
    ax.vlines(summary.edges, ymin, ymax, alpha=0.5, color="k")

    for j, (xc, count) in enumerate(zip(summary.centers, summary.counts)):
        frac = _LABEL_HEIGHTS[j % 2]
        ax.text(
            xc,
            ymin + frac * (ymax - ymin),
            str(int(count)),
            horizontalalignment="center",
            color="k",
        )

    ax.set_ylim(ymin, ymax)
    ax.set_title(title)
    logger.debug("Plotted %d bins (%d empty)", summary.n_bins, summary.n_empty)
    return ax


class DebugPlotHook:
    """BinningHook that renders each binning pass with :func:`plot_binning`.

    Pass an instance as ``hook=`` to :func:`seriesbin.binning`. With
    ``show=True`` the figure is displayed immediately via ``plt.show()``.
    Draws into ``ax`` when given, otherwise on a new figure per call; the
    Axes of the last call is kept on ``self.axes``.
    """

    def __init__(self, *, show: bool = False, ax: Axes | None = None) -> None:
        self.show = show
        self.ax = ax
        self.axes: Axes | None = None

    def __call__(self, x: np.ndarray, y: np.ndarray, summary: BinSummary) -> None:
        self.axes = plot_binning(x, y, summary, ax=self.ax)
        if self.show:
            plt.show()
