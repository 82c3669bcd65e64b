"""
Core computations for seriesbin.

This module defines the numeric model and the two transformations:
- Series: validated x vector paired with scalar or multi-channel y values
- combine / merge_series: join several series into one x-ordered series
- binning / bin_series: average a sorted series over n uniform x-bins

The core layer never imports a plotting library; visual inspection of a
binning pass goes through a BinningHook (see seriesbin.plot).
"""

from .series import Series, channel_width
from .merge import combine, merge_series
from .binning import (
    DEFAULT_MODE,
    BinMode,
    BinSummary,
    BinningHook,
    bin_edges,
    bin_series,
    binning,
    summarize,
)
from .exceptions import (
    CoreError,
    InvalidSeries,
    ShapeMismatch,
    InvalidArgument,
    UnsupportedMode,
)


__all__ = [
    # series
    "Series",
    "channel_width",

    # merging
    "combine",
    "merge_series",

    # binning
    "DEFAULT_MODE",
    "BinMode",
    "BinSummary",
    "BinningHook",
    "bin_edges",
    "bin_series",
    "binning",
    "summarize",

    # exceptions
    "CoreError",
    "InvalidSeries",
    "ShapeMismatch",
    "InvalidArgument",
    "UnsupportedMode",
]
