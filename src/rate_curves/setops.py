"""Grid manipulation: merging, deduplication, filtering and windowing."""

from __future__ import annotations

from functools import reduce
from typing import Callable

import numpy as np

from .curve import Curve, merge_xy, sort_xy, unique_xy
from .errors import EmptyResultError, InvalidArgumentError, InvalidAxisError, InvalidDimensionError
from .settings import DEFAULT_SETTINGS, CurveSettings


def drop_duplicates(
    curve: Curve,
    presorted: bool = True,
    settings: CurveSettings = DEFAULT_SETTINGS,
) -> Curve:
    """Keep the first y for every repeated x value."""

    x, y = curve.x, curve.y
    if not presorted:
        x, y = sort_xy(x, y)
    x, y = unique_xy(x, y)
    return Curve.build(x, y, settings.with_sort(False))


def _merge(x1, y1, x2, y2, drop_dup: bool):
    x, y = merge_xy(x1, y1, x2, y2)
    if drop_dup:
        x, y = unique_xy(x, y)
    return sort_xy(x, y)


def concat(
    curve: Curve,
    *others: Curve,
    drop_dup: bool = True,
    settings: CurveSettings = DEFAULT_SETTINGS,
) -> Curve:
    """Merge the points of several curves into one.

    ``concat(c1, c2, c3)`` groups as ``concat(c1, concat(c2, c3))``; for a
    repeated x value the point of the leftmost curve is kept. With
    ``drop_dup=False`` repeated x values are all kept.
    """

    curves = (curve, *others)
    last = curves[-1]
    x, y = reduce(
        lambda acc, c: _merge(c.x, c.y, acc[0], acc[1], drop_dup),
        reversed(curves[:-1]),
        (last.x, last.y),
    )
    return Curve.build(x, y, settings.with_sort(False))


def filter_curve(
    predicate: Callable[[float], bool],
    curve: Curve,
    axis: str = "x",
    settings: CurveSettings = DEFAULT_SETTINGS,
) -> Curve:
    """Keep the points whose x (or y) value satisfies ``predicate``."""

    if axis == "x":
        values = curve.x
    elif axis == "y":
        values = curve.y
    else:
        raise InvalidAxisError(f"axis must be 'x' or 'y', the value {axis!r} is not allowed")
    mask = np.array([bool(predicate(v)) for v in values], dtype=bool)
    if mask.sum() < 1:
        raise EmptyResultError("less than 1 point remaining")
    return Curve.build(curve.x[mask], curve.y[mask], settings.with_sort(False))


def _window_size(curve: Curve, n: int) -> int:
    if n < 1:
        raise InvalidArgumentError("`n` must be at least 1 for definition of a curve")
    return min(n, len(curve))


def first(curve: Curve, n: int, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    """Curve made of the first ``n`` points (clamped to the curve length)."""

    n = _window_size(curve, n)
    return Curve.build(curve.x[:n], curve.y[:n], settings.with_sort(False))


def last(curve: Curve, n: int, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    """Curve made of the last ``n`` points (clamped to the curve length)."""

    n = _window_size(curve, n)
    return Curve.build(curve.x[-n:], curve.y[-n:], settings.with_sort(False))


def _boundary(curve: Curve, dims: int, index: int) -> float:
    if dims == 1:
        return float(curve.x[index])
    if dims == 2:
        return float(curve.y[index])
    raise InvalidDimensionError("invalid dimension for Curve objects, only 1 and 2 supported")


def firstpoint(curve: Curve, dims: int = 1) -> float:
    """First x value (``dims=1``) or first y value (``dims=2``)."""

    return _boundary(curve, dims, 0)


def lastpoint(curve: Curve, dims: int = 1) -> float:
    """Last x value (``dims=1``) or last y value (``dims=2``)."""

    return _boundary(curve, dims, -1)
