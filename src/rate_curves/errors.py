"""Exception hierarchy for curve and tenor operations."""

from __future__ import annotations


class CurveError(ValueError):
    """Base class for all errors raised by ``rate_curves``."""


class ParseError(CurveError):
    """Malformed tenor string."""


class ConversionError(CurveError):
    """Day count that cannot be expressed as a tenor."""


class LengthMismatchError(CurveError):
    """x and y arrays of different lengths."""


class InvalidAxisError(CurveError):
    """Unknown axis selector."""


class InvalidDimensionError(CurveError):
    """Unknown dimension selector for boundary points."""


class EmptyResultError(CurveError):
    """Operation would leave a curve without points."""


class InvalidArgumentError(CurveError):
    """Argument outside its admissible range."""


class ExtrapolationError(CurveError):
    """Evaluation outside the grid of a curve that forbids extrapolation."""
