"""Orchestration of the scipy interpolation kernels.

The kernels only interpolate inside the grid; values outside it are
produced here according to the configured extrapolation.
"""

from __future__ import annotations

import numpy as np
from scipy.interpolate import interp1d

from .errors import ExtrapolationError
from .settings import Extrapolation, ExtrapolationSpec, Method

_KINDS = {
    Method.LINEAR: "linear",
    Method.CONSTANT: "nearest",
}


class Interpolant:
    """Interpolation over a sorted grid wrapped with an extrapolation rule."""

    __slots__ = ("x", "y", "method", "extrapolation", "logx", "_kernel")

    def __init__(
        self,
        x: np.ndarray,
        y: np.ndarray,
        method: Method,
        extrapolation: ExtrapolationSpec,
        logx: bool = False,
    ) -> None:
        if x.size < 2:
            raise ValueError("Need at least two points for interpolation")
        self.x = x
        self.y = y
        self.method = method
        self.extrapolation = extrapolation
        self.logx = logx
        self._kernel = interp1d(
            x,
            y,
            kind=_KINDS[method],
            bounds_error=False,
            fill_value=np.nan,
            assume_sorted=True,
        )

    def __call__(self, xq) -> np.ndarray:
        xq = np.asarray(xq, dtype=float)
        values = np.array(self._kernel(xq), dtype=float)
        below = xq < self.x[0]
        above = xq > self.x[-1]
        if below.any() or above.any():
            self._extrapolate(xq, values, below, above)
        return values

    def _extrapolate(self, xq: np.ndarray, values: np.ndarray, below: np.ndarray, above: np.ndarray) -> None:
        mode = self.extrapolation
        x, y = self.x, self.y
        if mode is Extrapolation.THROW:
            # report day counts, not log-days
            lo, hi, outside = x[0], x[-1], xq[below | above].ravel()[0]
            if self.logx:
                lo, hi, outside = np.exp(lo), np.exp(hi), np.exp(outside)
            raise ExtrapolationError(
                f"{float(outside):g} is outside the curve grid [{float(lo):g}, {float(hi):g}]"
            )
        if mode is Extrapolation.FLAT or (mode is Extrapolation.LINE and self.method is Method.CONSTANT):
            values[below] = y[0]
            values[above] = y[-1]
        elif mode is Extrapolation.LINE:
            slope_lo = (y[1] - y[0]) / (x[1] - x[0])
            slope_hi = (y[-1] - y[-2]) / (x[-1] - x[-2])
            values[below] = y[0] + slope_lo * (xq[below] - x[0])
            values[above] = y[-1] + slope_hi * (xq[above] - x[-1])
        else:
            values[below | above] = mode
