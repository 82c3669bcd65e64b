# core/merge.py
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .exceptions import ShapeMismatch
from .series import Series, channel_width

logger = logging.getLogger(__name__)


def _y_shape(y: np.ndarray) -> tuple[int, int]:
    # (ndim, width): a 1D y and a (k, 1) y are not interchangeable
    return y.ndim, channel_width(y)


def combine(
    xs: Sequence[np.ndarray],
    ys: Sequence[np.ndarray],
) -> tuple[np.ndarray, np.ndarray]:
    """Concatenate several (x, y) streams and sort the result by x.

    Parameters
    ----------
    xs:
        One 1D x vector per stream. The streams need not be sorted.
    ys:
        The matching y vectors, index-aligned with ``xs``. Either all 1D
        (scalar y) or all 2D with the same number of columns.

    Returns
    -------
    x_merged, y_merged
        Pairs ordered lexicographically on (x, y): x is the primary key and
        ties are broken by y, column by column for a 2D y. Repeated x values
        are kept as separate entries.

    Raises
    ------
    ShapeMismatch
        If the inputs differ in count, length or y-shape, or are not numeric.
    """
    if len(xs) != len(ys):
        raise ShapeMismatch(
            f"Got {len(xs)} x-series but {len(ys)} y-series."
        )
    if len(xs) == 0:
        raise ShapeMismatch("combine() needs at least one (x, y) pair.")

    x_arrays: list[np.ndarray] = []
    y_arrays: list[np.ndarray] = []
    shape: tuple[int, int] | None = None
    first_shape: tuple[int, ...] = ()

    for i, (x, y) in enumerate(zip(xs, ys)):
        x = np.asarray(x)
        y = np.asarray(y)

        if x.ndim != 1:
            raise ShapeMismatch(f"x-series {i} must be 1D, got shape {x.shape}")
        if y.ndim not in (1, 2):
            raise ShapeMismatch(f"y-series {i} must be 1D or 2D, got shape {y.shape}")
        if x.shape[0] != y.shape[0]:
            raise ShapeMismatch(
                f"Series {i}: x and y must have same length, got {x.shape[0]} vs {y.shape[0]}"
            )
        if not (np.issubdtype(x.dtype, np.number) and np.issubdtype(y.dtype, np.number)):
            raise ShapeMismatch(
                f"Series {i}: x and y must be numeric, got {x.dtype} and {y.dtype}"
            )

        if shape is None:
            shape = _y_shape(y)
            first_shape = y.shape
        elif _y_shape(y) != shape:
            raise ShapeMismatch(
                f"y-series {i} has shape {y.shape}, incompatible with "
                f"y-series 0 of shape {first_shape}"
            )

        x_arrays.append(x)
        y_arrays.append(y)

    x_all = np.concatenate(x_arrays)
    y_all = np.concatenate(y_arrays)

    # np.lexsort sorts by the last key first
    if y_all.ndim == 1:
        keys = (y_all, x_all)
    else:
        keys = tuple(y_all[:, c] for c in reversed(range(y_all.shape[1]))) + (x_all,)
    order = np.lexsort(keys)

    logger.debug("Merged %d series into %d samples", len(x_arrays), x_all.shape[0])
    return x_all[order], y_all[order]


def merge_series(series: Sequence[Series], *, name: str | None = None) -> Series:
    """
    Merge several Series into one Series sorted by x.

    The unit is kept when every input agrees on it. Input names are recorded
    in ``attrs["sources"]``.
    """
    for s in series:
        if not isinstance(s, Series):
            raise ShapeMismatch("merge_series() expects Series instances.")

    x, y = combine([s.x for s in series], [s.y for s in series])

    units = {s.unit for s in series}
    unit = units.pop() if len(units) == 1 else None

    return Series(
        x=x,
        y=y,
        unit=unit,
        name=name,
        attrs={"sources": [s.name for s in series]},
    )
