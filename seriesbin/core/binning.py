# core/binning.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

import numpy as np

from .exceptions import InvalidArgument, UnsupportedMode
from .series import Series

logger = logging.getLogger(__name__)


class BinMode(str, Enum):
    """Placement of the outermost bin edges relative to the data."""

    # first bin's left edge on the first sample, last bin's right edge on the last
    IN = "in"
    # first and last samples at the centers of the first and last bins
    OUT = "out"


DEFAULT_MODE = BinMode.IN


@dataclass(frozen=True, slots=True)
class BinSummary:
    """
    Result of one binning pass.

    Bins are right-closed: bin j covers ``(edges[j], edges[j + 1]]``.
    ``means`` holds NaN for bins that received no sample.
    """

    edges: np.ndarray = field(repr=False)
    centers: np.ndarray = field(repr=False)
    means: np.ndarray = field(repr=False)
    counts: np.ndarray = field(repr=False)
    mode: BinMode = DEFAULT_MODE

    @property
    def n_bins(self) -> int:
        return int(self.counts.size)

    @property
    def n_empty(self) -> int:
        return int(np.count_nonzero(self.counts == 0))

    @property
    def total(self) -> int:
        return int(self.counts.sum())


@runtime_checkable
class BinningHook(Protocol):
    """Consumer of a finished binning pass (e.g. a debug plot).

    Receives read-only views; the numeric result is already final.
    """

    def __call__(self, x: np.ndarray, y: np.ndarray, summary: BinSummary) -> None: ...


def _parse_mode(mode: BinMode | str) -> BinMode:
    try:
        return BinMode(mode)
    except ValueError:
        raise UnsupportedMode(
            f"Mode {mode!r} not defined. Choose 'in' or 'out'."
        ) from None


def _check_n(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgument(f"Bin count must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgument(f"Bin count must be >= 1, got {n}")
    return int(n)


def _readonly(a: np.ndarray) -> np.ndarray:
    v = a.view()
    v.flags.writeable = False
    return v


def bin_edges(
    x_first: float,
    x_last: float,
    n: int,
    mode: BinMode | str = DEFAULT_MODE,
) -> np.ndarray:
    """
    Compute the ``n + 1`` strictly increasing edges of ``n`` right-closed bins.

    mode="out":
        Spread ``n`` reference points evenly over ``[x_first, x_last]``, pad
        the range by half their spacing on both sides and split the padded
        range evenly. With ``n == 1`` the spacing is the full range.
    mode="in":
        Split ``(x_first - eps, x_last]`` evenly, ``eps`` being the distance
        to the next float below ``x_first``, so the first sample still falls
        into the first (right-closed) bin.

    A zero-width range (``x_first == x_last``) only admits a single bin.
    """
    n = _check_n(n)
    mode = _parse_mode(mode)
    x_first = float(x_first)
    x_last = float(x_last)

    if not (np.isfinite(x_first) and np.isfinite(x_last)):
        raise InvalidArgument("Edge range must be finite.")
    if x_last < x_first:
        raise InvalidArgument(f"x_last ({x_last}) must be >= x_first ({x_first}).")

    below_first = np.nextafter(x_first, -np.inf)

    if x_last == x_first:
        if n != 1:
            raise InvalidArgument(
                f"Cannot split a zero-width x range into {n} bins."
            )
        return np.array([below_first, x_first])

    if mode is BinMode.OUT:
        step = (x_last - x_first) / (n - 1) if n > 1 else x_last - x_first
        edges = np.linspace(x_first - step / 2, x_last + step / 2, n + 1)
        # half a step below a tightly spaced x_first can round back onto it
        edges[0] = min(edges[0], below_first)
    else:
        edges = np.linspace(below_first, x_last, n + 1)

    if np.any(np.diff(edges) <= 0):
        raise InvalidArgument(
            f"x range [{x_first}, {x_last}] is too narrow for {n} distinct bins."
        )
    return edges


def _validate_xy(x: np.ndarray, y: np.ndarray) -> None:
    if x.ndim != 1:
        raise InvalidArgument(f"`x` must be 1D, got shape {x.shape}")
    if y.ndim not in (1, 2):
        raise InvalidArgument(f"`y` must be 1D or 2D, got shape {y.shape}")
    if x.shape[0] != y.shape[0]:
        raise InvalidArgument(
            f"`x` and `y` must have same length, got {x.shape[0]} vs {y.shape[0]}"
        )
    if x.size == 0:
        raise InvalidArgument("Cannot bin an empty series.")
    if not (np.issubdtype(x.dtype, np.number) and np.issubdtype(y.dtype, np.number)):
        raise InvalidArgument("`x` and `y` must be numeric.")
    if not np.isfinite(x).all():
        raise InvalidArgument("`x` contains non-finite values (NaN/Inf).")
    if np.any(np.diff(x) < 0):
        raise InvalidArgument("`x` must be sorted ascending.")


def summarize(
    x: np.ndarray,
    y: np.ndarray,
    n: int,
    *,
    mode: BinMode | str = DEFAULT_MODE,
) -> BinSummary:
    """Bin a sorted series and return edges, centers, means and counts."""
    x = np.asarray(x)
    y = np.asarray(y)
    _validate_xy(x, y)
    n = _check_n(n)
    mode = _parse_mode(mode)

    edges = bin_edges(x[0], x[-1], n, mode)

    # Right-closed histogram: sample i lands in bin j iff edges[j] < x[i] <= edges[j + 1].
    # x is sorted, so each bin owns a contiguous run of samples.
    counts = np.diff(np.searchsorted(x, edges, side="right"))

    centers = (edges[:-1] + edges[1:]) / 2
    means = np.full((n,) + y.shape[1:], np.nan)

    i = 0
    for j in range(n):
        c = int(counts[j])
        if c:
            means[j] = y[i:i + c].mean(axis=0)
        # empty bin: cursor stays put
        i += c

    summary = BinSummary(edges=edges, centers=centers, means=means, counts=counts, mode=mode)
    logger.debug(
        "Binned %d samples into %d bins (mode=%s, empty=%d)",
        x.shape[0], n, mode.value, summary.n_empty,
    )
    return summary


def binning(
    x: np.ndarray,
    y: np.ndarray,
    n: int,
    *,
    mode: BinMode | str = DEFAULT_MODE,
    hook: BinningHook | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Average ``y`` over ``n`` uniform x-bins of a sorted series.

    Parameters
    ----------
    x:
        Sample positions, sorted ascending.
    y:
        Values aligned with ``x``; 1D, or 2D with one column per channel.
    n:
        Number of bins, ``>= 1``.
    mode:
        ``"in"`` or ``"out"``, see :func:`bin_edges`.
    hook:
        Optional callable invoked with ``(x, y, summary)`` once the result is
        computed, e.g. :class:`seriesbin.plot.DebugPlotHook`.

    Returns
    -------
    x_resampled, y_resampled
        The ``n`` bin centers and the mean of y in each bin (NaN when a bin
        is empty).

    Raises
    ------
    InvalidArgument
        On length mismatch, empty or unsorted input, or ``n < 1``.
    UnsupportedMode
        If ``mode`` is neither ``"in"`` nor ``"out"``.
    """
    summary = summarize(x, y, n, mode=mode)

    if hook is not None:
        ro = BinSummary(
            edges=_readonly(summary.edges),
            centers=_readonly(summary.centers),
            means=_readonly(summary.means),
            counts=_readonly(summary.counts),
            mode=summary.mode,
        )
        hook(_readonly(np.asarray(x)), _readonly(np.asarray(y)), ro)

    return summary.centers, summary.means


def bin_series(
    series: Series,
    n: int,
    *,
    mode: BinMode | str = DEFAULT_MODE,
    hook: BinningHook | None = None,
) -> Series:
    """
    Resample a Series into ``n`` bins.

    Name and unit carry over; ``attrs`` gains ``mode`` and ``n_bins``.
    """
    if not isinstance(series, Series):
        raise InvalidArgument("bin_series() expects a Series instance.")
    if not series.is_sorted:
        raise InvalidArgument(
            f"Series {series.name!r} is not sorted by x; merge or sort it before binning."
        )

    mode = _parse_mode(mode)
    xr, yr = binning(series.x, series.y, n, mode=mode, hook=hook)

    attrs = series.attrs.copy()
    attrs["mode"] = mode.value
    attrs["n_bins"] = int(n)
    return Series(x=xr, y=yr, unit=series.unit, name=series.name, attrs=attrs)
