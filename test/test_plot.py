import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from seriesbin.core import binning, summarize  # noqa: E402
from seriesbin.plot import DebugPlotHook, plot_binning  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_plot_binning_draws_edges_and_counts():
    x = np.array([1.0, 2.0, 3.0, 4.0, 10.0])
    y = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    summary = summarize(x, y, 3, mode="out")

    ax = plot_binning(x, y, summary)

    labels = [t.get_text() for t in ax.texts]
    assert labels == [str(int(c)) for c in summary.counts]
    assert ax.get_title() == "Binning Debug"
    # alternating label heights
    heights = [t.get_position()[1] for t in ax.texts]
    assert heights[0] != heights[1]


def test_plot_binning_vector_y():
    x = np.array([0.0, 1.0, 2.0])
    y = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    summary = summarize(x, y, 2)

    ax = plot_binning(x, y, summary)

    assert len(ax.collections) >= 2


def test_debug_hook_does_not_change_result():
    x = np.array([1.0, 2.0, 3.0, 4.0])
    y = np.array([10.0, 20.0, 30.0, 40.0])
    hook = DebugPlotHook()

    xr_plain, yr_plain = binning(x, y, 2)
    xr, yr = binning(x, y, 2, hook=hook)

    assert hook.axes is not None
    assert np.array_equal(xr, xr_plain)
    assert np.array_equal(yr, yr_plain)


def test_debug_hook_draws_on_given_axes():
    _, ax = plt.subplots()
    hook = DebugPlotHook(ax=ax)

    binning(np.array([1.0, 2.0]), np.array([1.0, 2.0]), 1, hook=hook)

    assert hook.axes is ax
