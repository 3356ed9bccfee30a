"""Arithmetic on curves.

Binary operations accept two curves, or a curve and a real number. When two
curves live on different grids, each curve is evaluated on the other's grid
and the two partial results are merged: the first operand's grid wins where
the grids share a point. ``None`` stands for a missing operand and is
propagated instead of raising.

Results are built with ``DEFAULT_SETTINGS`` unless ``settings`` is given.
"""

from __future__ import annotations

import numbers
from typing import Callable, Optional, Union

import numpy as np

from .curve import Curve, merge_xy
from .errors import InvalidAxisError
from .interpolation import evaluate_many
from .settings import DEFAULT_SETTINGS, CurveSettings

Operand = Union[Curve, numbers.Real, None]
BinaryFunc = Callable[[np.ndarray, np.ndarray], np.ndarray]

BINARY_OPERATIONS: dict[str, BinaryFunc] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.true_divide,
    "^": np.power,
}

UNARY_OPERATIONS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "exp": np.exp,
    "log": np.log,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
}


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def combine(
    func: BinaryFunc,
    left: Operand,
    right: Operand,
    settings: CurveSettings = DEFAULT_SETTINGS,
) -> Optional[Curve]:
    """Apply ``func`` element-wise to two operands, aligning curve grids."""

    if left is None or right is None:
        return None
    if isinstance(left, Curve) and isinstance(right, Curve):
        return _combine_curves(func, left, right, settings)
    if isinstance(left, Curve) and _is_scalar(right):
        return Curve.build(left.x, func(left.y, float(right)), settings.with_sort(False))
    if _is_scalar(left) and isinstance(right, Curve):
        return Curve.build(right.x, func(float(left), right.y), settings.with_sort(False))
    raise TypeError(
        f"unsupported operands: {type(left).__name__!r} and {type(right).__name__!r}"
    )


def _combine_curves(func: BinaryFunc, c1: Curve, c2: Curve, settings: CurveSettings) -> Curve:
    if np.array_equal(c1.x, c2.x):
        return Curve.build(c1.x, func(c1.y, c2.y), settings.with_sort(False))
    y_on_c1 = func(c1.y, evaluate_many(c1.x, c2))
    y_on_c2 = func(evaluate_many(c2.x, c1), c2.y)
    x, y = merge_xy(c1.x, y_on_c1, c2.x, y_on_c2)
    return Curve.build(x, y, settings.with_sort(True))


def add(left: Operand, right: Operand, settings: CurveSettings = DEFAULT_SETTINGS) -> Optional[Curve]:
    return combine(np.add, left, right, settings)


def subtract(left: Operand, right: Operand, settings: CurveSettings = DEFAULT_SETTINGS) -> Optional[Curve]:
    return combine(np.subtract, left, right, settings)


def multiply(left: Operand, right: Operand, settings: CurveSettings = DEFAULT_SETTINGS) -> Optional[Curve]:
    return combine(np.multiply, left, right, settings)


def divide(left: Operand, right: Operand, settings: CurveSettings = DEFAULT_SETTINGS) -> Optional[Curve]:
    return combine(np.true_divide, left, right, settings)


def power(left: Operand, right: Operand, settings: CurveSettings = DEFAULT_SETTINGS) -> Optional[Curve]:
    return combine(np.power, left, right, settings)


def binary(symbol: str, left: Operand, right: Operand, settings: CurveSettings = DEFAULT_SETTINGS):
    """Look up ``symbol`` (one of ``+ - * / ^``) and apply it."""

    try:
        func = BINARY_OPERATIONS[symbol]
    except KeyError:
        raise ValueError(f"Unknown operation {symbol!r}") from None
    return combine(func, left, right, settings)


def transform(func: Callable[[np.ndarray], np.ndarray], curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    """Apply a numpy function to the y values; x is kept."""

    with np.errstate(invalid="raise"):
        values = func(curve.y)
    return Curve.build(curve.x, values, settings.with_sort(False))


def exp(curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    return transform(np.exp, curve, settings)


def log(curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    return transform(np.log, curve, settings)


def sin(curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    return transform(np.sin, curve, settings)


def cos(curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    return transform(np.cos, curve, settings)


def tan(curve: Curve, settings: CurveSettings = DEFAULT_SETTINGS) -> Curve:
    return transform(np.tan, curve, settings)


def apply(
    func: Callable,
    curve: Curve,
    axis: str = "xy",
    settings: CurveSettings = DEFAULT_SETTINGS,
) -> Curve:
    """Map a user function over the points of ``curve``.

    ``axis="xy"`` calls ``func(x, y)`` and replaces y; ``axis="x"`` and
    ``axis="y"`` call ``func`` on a single axis. Mapping x may reorder or
    collapse points, so that result is sorted and deduplicated again.
    """

    if axis == "xy":
        y = [func(xi, yi) for xi, yi in zip(curve.x, curve.y)]
        return Curve.build(curve.x, y, settings.with_sort(False))
    if axis == "x":
        x = [func(xi) for xi in curve.x]
        return Curve.build(x, curve.y, settings.with_sort(True))
    if axis == "y":
        y = [func(yi) for yi in curve.y]
        return Curve.build(curve.x, y, settings.with_sort(False))
    raise InvalidAxisError(f"axis must be 'xy', 'x' or 'y', the value {axis!r} is not allowed")
