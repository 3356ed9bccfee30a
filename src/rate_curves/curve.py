"""Immutable curve value object and its construction protocol."""

from __future__ import annotations

import logging
import numbers
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .errors import LengthMismatchError
from .kernels import Interpolant
from .settings import DEFAULT_SETTINGS, CurveSettings, ExtrapolationSpec, Method
from .tenors import Tenor, XValue, to_day_counts

_log = logging.getLogger(__name__)

_UNSET = object()


def unique_xy(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Drop repeated x values, keeping the first y seen for each; order is kept.

    The y values of dropped duplicates are not compared.
    """

    _, first = np.unique(x, return_index=True)
    keep = np.sort(first)
    return x[keep], y[keep]


def sort_xy(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    order = np.argsort(x, kind="stable")
    return x[order], y[order]


def merge_xy(
    x1: np.ndarray, y1: np.ndarray, x2: np.ndarray, y2: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    return np.concatenate((x1, x2)), np.concatenate((y1, y2))


def _as_points(values) -> np.ndarray:
    if isinstance(values, (numbers.Real, Tenor, str)):
        values = [values]
    return to_day_counts(values)


def _frozen(values: np.ndarray) -> np.ndarray:
    values = np.array(values, dtype=float)
    values.flags.writeable = False
    return values


class Curve:
    """Sorted (x, y) samples with interpolation, extrapolation and log axes.

    ``x`` accepts numbers, :class:`Tenor` objects or tenor strings (converted
    to day counts). Points are sorted by x and duplicate abscissae are
    dropped, keeping the first y seen. A single-point curve evaluates to its
    y value everywhere and carries no interpolant.

    Every operation returns a new curve; ``x`` and ``y`` are read-only.
    """

    __slots__ = ("x", "y", "interpolant", "method", "extrapolation", "logx", "logy")
    __array_ufunc__ = None

    def __init__(
        self,
        x,
        y,
        method: Method = DEFAULT_SETTINGS.method,
        extrapolation: ExtrapolationSpec = DEFAULT_SETTINGS.extrapolation,
        logx: bool = DEFAULT_SETTINGS.logx,
        logy: bool = DEFAULT_SETTINGS.logy,
        sort: bool = DEFAULT_SETTINGS.sort,
    ) -> None:
        settings = CurveSettings(method, extrapolation, logx, logy, sort)
        xs = _as_points(x)
        ys = np.atleast_1d(np.asarray(y, dtype=float))
        if xs.shape != ys.shape or xs.ndim != 1:
            raise LengthMismatchError(
                f"length of x and y arrays must match, got {xs.size} and {ys.size}"
            )
        if xs.size == 0:
            raise LengthMismatchError("a curve needs at least one point")
        if settings.sort:
            size = xs.size
            xs, ys = sort_xy(*unique_xy(xs, ys))
            if xs.size < size:
                _log.debug("dropped %d duplicate abscissae", size - xs.size)

        self.x = _frozen(xs)
        self.y = _frozen(ys)
        self.method = settings.method
        self.extrapolation = settings.extrapolation
        self.logx = settings.logx
        self.logy = settings.logy
        self.interpolant: Optional[Interpolant] = None
        # repeated abscissae (concat without drop_dup) resolve to the first y
        knots_x, knots_y = unique_xy(self.x, self.y)
        if knots_x.size > 1:
            with np.errstate(invalid="raise"):
                grid = np.log(knots_x) if self.logx else knots_x
                values = np.log(knots_y) if self.logy else knots_y
            self.interpolant = Interpolant(
                grid, values, self.method, self.extrapolation, logx=self.logx
            )

    @classmethod
    def build(cls, x, y, settings: CurveSettings = DEFAULT_SETTINGS) -> "Curve":
        return cls(
            x,
            y,
            method=settings.method,
            extrapolation=settings.extrapolation,
            logx=settings.logx,
            logy=settings.logy,
            sort=settings.sort,
        )

    @classmethod
    def from_tenors(
        cls,
        tenors: Iterable[XValue],
        y,
        offset: float = 0.0,
        settings: CurveSettings = DEFAULT_SETTINGS,
    ) -> "Curve":
        """Curve on tenor pillars, shifted by ``offset`` calendar days."""

        days = _as_points(list(tenors)) + float(offset)
        return cls.build(days, y, settings)

    @property
    def settings(self) -> CurveSettings:
        return CurveSettings(self.method, self.extrapolation, self.logx, self.logy)

    def copy(
        self,
        method=_UNSET,
        extrapolation=_UNSET,
        logx=_UNSET,
        logy=_UNSET,
        sort: bool = True,
    ) -> "Curve":
        """Rebuild this curve, keeping every setting that is not overridden."""

        return Curve(
            self.x,
            self.y,
            method=self.method if method is _UNSET else method,
            extrapolation=self.extrapolation if extrapolation is _UNSET else extrapolation,
            logx=self.logx if logx is _UNSET else logx,
            logy=self.logy if logy is _UNSET else logy,
            sort=sort,
        )

    @classmethod
    def from_curve(cls, curve: "Curve", **overrides) -> "Curve":
        return curve.copy(**overrides)

    def __len__(self) -> int:
        return int(self.y.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return (
            np.array_equal(self.x, other.x)
            and np.array_equal(self.y, other.y)
            and self.settings == other.settings
        )

    __hash__ = None  # type: ignore[assignment]

    def isclose(self, other: "Curve", rtol: float = 1e-9, atol: float = 0.0) -> bool:
        return (
            self.x.shape == other.x.shape
            and bool(np.allclose(self.x, other.x, rtol=rtol, atol=atol))
            and bool(np.allclose(self.y, other.y, rtol=rtol, atol=atol))
            and self.settings == other.settings
        )

    def __str__(self) -> str:
        return (
            f"x = {_format_axis(self.x)}, y = {_format_axis(self.y)}, "
            f"logx = {self.logx}, logy = {self.logy}"
        )

    def __repr__(self) -> str:
        return f"Curve({self})"

    def __call__(self, xval: XValue) -> float:
        return _interpolation().evaluate(xval, self)

    # Operators forward to the named functions in ``rate_curves.algebra``.

    def __add__(self, other):
        return _algebra().add(self, other)

    def __radd__(self, other):
        return _algebra().add(other, self)

    def __sub__(self, other):
        return _algebra().subtract(self, other)

    def __rsub__(self, other):
        return _algebra().subtract(other, self)

    def __mul__(self, other):
        return _algebra().multiply(self, other)

    def __rmul__(self, other):
        return _algebra().multiply(other, self)

    def __truediv__(self, other):
        return _algebra().divide(self, other)

    def __rtruediv__(self, other):
        return _algebra().divide(other, self)

    def __pow__(self, other):
        return _algebra().power(self, other)

    def __rpow__(self, other):
        return _algebra().power(other, self)


def _format_axis(values: Sequence[float]) -> str:
    return "[" + ", ".join(f"{v:g}" for v in values) + "]"


def _algebra():
    from . import algebra

    return algebra


def _interpolation():
    from . import interpolation

    return interpolation
