"""
Optional matplotlib rendering of binning results.

Requires the ``plot`` extra (``pip install seriesbin[plot]``). Importing
this subpackage imports matplotlib; ``seriesbin.core`` never does.
"""

from .debug_plot import DebugPlotHook, plot_binning

__all__ = ["DebugPlotHook", "plot_binning"]
