"""Point evaluation and resampling of curves.

Curves produced here use ``DEFAULT_SETTINGS`` unless settings are passed
explicitly: interpolation, extrapolation and log-axis settings are never
copied from the input curve, since log axes may not be valid for the
resampled values.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .curve import Curve
from .settings import DEFAULT_SETTINGS, CurveSettings
from .tenors import XValue, to_day_count, to_day_counts


def _evaluate_days(days: np.ndarray, curve: Curve) -> np.ndarray:
    if curve.interpolant is None:
        return np.full(days.shape, curve.y[0], dtype=float)
    with np.errstate(invalid="raise"):
        grid = np.log(days) if curve.logx else days
    values = curve.interpolant(grid)
    return np.exp(values) if curve.logy else values


def evaluate(xval: XValue, curve: Curve) -> float:
    """Interpolated or extrapolated y value of ``curve`` at ``xval``.

    ``xval`` may be a number, a :class:`~rate_curves.tenors.Tenor` or a
    tenor string such as ``"3M"``.
    """

    days = np.asarray(to_day_count(xval), dtype=float)
    return float(_evaluate_days(days, curve))


def evaluate_many(xs: Iterable[XValue], curve: Curve) -> np.ndarray:
    return _evaluate_days(to_day_counts(xs), curve)


def resample(xs: Iterable[XValue], curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    """Evaluate ``curve`` on ``xs`` and build a new curve on those points."""

    days = to_day_counts(xs)
    return Curve.build(days, _evaluate_days(days, curve), settings)


def resample_to(target: Curve, curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    """Evaluate ``curve`` on the grid of ``target``."""

    return resample(target.x, curve, settings)
