"""
seriesbin: merge and bin-average one-dimensional (x, y) measurement series.

Typical flow::

    from seriesbin import combine, binning

    x, y = combine([x1, x2, x3], [y1, y2, y3])
    xr, yr = binning(x, y, 100, mode="out")

The library logs through the ``seriesbin`` logger and stays silent unless
the application configures logging.
"""

import logging

from seriesbin.core import (
    DEFAULT_MODE,
    BinMode,
    BinSummary,
    BinningHook,
    CoreError,
    InvalidArgument,
    InvalidSeries,
    Series,
    ShapeMismatch,
    UnsupportedMode,
    bin_edges,
    bin_series,
    binning,
    combine,
    merge_series,
    summarize,
)

# No output unless the host application attaches a handler.
_logger = logging.getLogger("seriesbin")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_MODE",
    "BinMode",
    "BinSummary",
    "BinningHook",
    "CoreError",
    "InvalidArgument",
    "InvalidSeries",
    "Series",
    "ShapeMismatch",
    "UnsupportedMode",
    "bin_edges",
    "bin_series",
    "binning",
    "combine",
    "merge_series",
    "summarize",
]

__version__ = "0.1.0"
