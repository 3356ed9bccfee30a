"""One-dimensional curves on tenor grids with scalar-like algebra."""

from .algebra import (
    add,
    apply,
    cos,
    divide,
    exp,
    log,
    multiply,
    power,
    sin,
    subtract,
    tan,
)
from .curve import Curve
from .errors import (
    ConversionError,
    CurveError,
    EmptyResultError,
    ExtrapolationError,
    InvalidArgumentError,
    InvalidAxisError,
    InvalidDimensionError,
    LengthMismatchError,
    ParseError,
)
from .interpolation import evaluate, evaluate_many, resample, resample_to
from .settings import DEFAULT_SETTINGS, CurveSettings, Extrapolation, Method
from .setops import concat, drop_duplicates, filter_curve, first, firstpoint, last, lastpoint
from .tenors import Tenor, TenorUnit, from_days, parse, tenor, to_days

__all__ = [
    "Curve",
    "CurveSettings",
    "DEFAULT_SETTINGS",
    "Extrapolation",
    "Method",
    "Tenor",
    "TenorUnit",
    "add",
    "apply",
    "concat",
    "cos",
    "divide",
    "drop_duplicates",
    "evaluate",
    "evaluate_many",
    "exp",
    "filter_curve",
    "first",
    "firstpoint",
    "from_days",
    "last",
    "lastpoint",
    "log",
    "multiply",
    "parse",
    "power",
    "resample",
    "resample_to",
    "sin",
    "subtract",
    "tan",
    "tenor",
    "to_days",
    "ConversionError",
    "CurveError",
    "EmptyResultError",
    "ExtrapolationError",
    "InvalidArgumentError",
    "InvalidAxisError",
    "InvalidDimensionError",
    "LengthMismatchError",
    "ParseError",
]
