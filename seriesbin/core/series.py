# core/series.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .exceptions import InvalidSeries


def channel_width(y: np.ndarray) -> int:
    """Number of y-channels per sample: 1 for a 1D y, the column count for a 2D y."""
    return 1 if y.ndim == 1 else int(y.shape[1])


@dataclass(frozen=True, slots=True)
class Series:
    """
    Immutable sample series: 1D x vector + y vector of scalars or fixed-width rows.

    x does not have to be sorted (merge inputs rarely are); use `is_sorted`
    before handing a series to the binner.
    """

    x: np.ndarray = field(repr=False)
    y: np.ndarray = field(repr=False)
    unit: str | None = None
    name: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        x = np.asarray(self.x)
        y = np.asarray(self.y)

        if x.ndim != 1:
            raise InvalidSeries(f"`x` must be 1D, got shape {x.shape}")
        if y.ndim not in (1, 2):
            raise InvalidSeries(f"`y` must be 1D or 2D, got shape {y.shape}")
        if x.shape[0] != y.shape[0]:
            raise InvalidSeries(
                f"`x` and `y` must have same length, got {x.shape[0]} vs {y.shape[0]}"
            )
        if x.size > 0 and not np.isfinite(x).all():
            raise InvalidSeries("`x` contains non-finite values (NaN/Inf).")

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidSeries("`attrs` must be a dict.")

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def n(self) -> int:
        return int(self.x.shape[0])

    @property
    def width(self) -> int:
        return channel_width(self.y)

    @property
    def x_start(self) -> float | None:
        return None if self.n == 0 else float(self.x[0])

    @property
    def x_end(self) -> float | None:
        return None if self.n == 0 else float(self.x[-1])

    @property
    def is_sorted(self) -> bool:
        return bool(np.all(np.diff(self.x) >= 0))
