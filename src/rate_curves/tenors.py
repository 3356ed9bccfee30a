"""Calendar periods (tenors) and their simplified day counts."""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Union

import numpy as np

from .errors import ConversionError, InvalidArgumentError, ParseError


class TenorUnit(Enum):
    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


# 30 days per month and 365 days per year, not calendar exact.
UNIT_DAYS: Mapping[TenorUnit, int] = MappingProxyType(
    {
        TenorUnit.DAYS: 1,
        TenorUnit.WEEKS: 7,
        TenorUnit.MONTHS: 30,
        TenorUnit.YEARS: 365,
    }
)

# Coarsest unit first; from_days picks the first exact match.
UNITS_BY_SIZE = (TenorUnit.YEARS, TenorUnit.MONTHS, TenorUnit.WEEKS, TenorUnit.DAYS)


def _canonical(unit: TenorUnit, multiplier: int) -> tuple[TenorUnit, int]:
    if unit is TenorUnit.DAYS and multiplier % 7 == 0:
        return TenorUnit.WEEKS, multiplier // 7
    if unit is TenorUnit.MONTHS and multiplier % 12 == 0:
        return TenorUnit.YEARS, multiplier // 12
    return unit, multiplier


@dataclass(frozen=True, slots=True, eq=False)
class Tenor:
    """A period such as ``3M`` made of a unit and a positive multiplier.

    Values are always stored in canonical form: ``7D`` becomes ``1W`` and
    ``24M`` becomes ``2Y``. Tenors compare with other tenors, tenor strings
    and plain day counts through :func:`to_days`.
    """

    unit: TenorUnit
    multiplier: int

    def __post_init__(self) -> None:
        unit = TenorUnit(self.unit)
        multiplier = self.multiplier
        if isinstance(multiplier, bool) or not isinstance(multiplier, numbers.Integral):
            raise InvalidArgumentError(f"tenor multiplier must be an integer, got {multiplier!r}")
        if multiplier < 1:
            raise InvalidArgumentError(f"tenor multiplier must be positive, got {multiplier}")
        unit, multiplier = _canonical(unit, int(multiplier))
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "multiplier", multiplier)

    @property
    def days(self) -> int:
        return to_days(self)

    def __str__(self) -> str:
        return f"{self.multiplier}{self.unit.value}"

    def __hash__(self) -> int:
        return hash(to_days(self))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tenor):
            return (self.unit, self.multiplier) == (other.unit, other.multiplier)
        days = _comparable_days(other)
        if days is NotImplemented:
            return NotImplemented
        return to_days(self) == days

    def _compare(self, other: object, op):
        days = _comparable_days(other)
        if days is NotImplemented:
            return NotImplemented
        return op(to_days(self), days)

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge)


def _comparable_days(value: object):
    if isinstance(value, Tenor):
        return to_days(value)
    if isinstance(value, str):
        return to_days(parse(value))
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return value
    return NotImplemented


def parse(text: str) -> Tenor:
    """Parse ``"<digits><D|W|M|Y>"`` (unit letter case-insensitive)."""

    if not isinstance(text, str) or len(text) < 2:
        raise ParseError(f"invalid tenor {text!r}")
    prefix, letter = text[:-1], text[-1].upper()
    try:
        unit = TenorUnit(letter)
    except ValueError:
        raise ParseError(f"{text[-1]} is not a valid tenor unit (occurred in tenor {text})") from None
    if not (prefix.isascii() and prefix.isdigit()):
        raise ParseError(f"{prefix!r} is not a valid tenor multiplier (occurred in tenor {text})")
    multiplier = int(prefix)
    if multiplier < 1:
        raise ParseError(f"tenor multiplier must be positive (occurred in tenor {text})")
    return Tenor(unit, multiplier)


tenor = parse


def to_days(value: Tenor) -> int:
    return value.multiplier * UNIT_DAYS[value.unit]


def from_days(days: int) -> Tenor:
    """Express a positive day count in the coarsest unit dividing it evenly.

    A month count that is a multiple of 12 would canonicalize to years and
    change the day count (12M is 360 days, 1Y is 365), so months are skipped
    in that case: ``from_days(360)`` is ``360D``.
    """

    if isinstance(days, bool) or not isinstance(days, numbers.Integral) or days < 1:
        raise ConversionError(f"day count must be a positive integer, got {days!r}")
    days = int(days)
    for unit in UNITS_BY_SIZE:
        size = UNIT_DAYS[unit]
        if days % size:
            continue
        multiplier = days // size
        if unit is TenorUnit.MONTHS and multiplier % 12 == 0:
            continue
        return Tenor(unit, multiplier)
    raise ConversionError(f"cannot convert {days} days to a tenor")  # pragma: no cover


XValue = Union[numbers.Real, Tenor, str]


def to_day_count(value: XValue) -> float:
    """Coerce a number, Tenor or tenor string to a day count."""

    if isinstance(value, Tenor):
        return float(to_days(value))
    if isinstance(value, str):
        return float(to_days(parse(value)))
    return float(value)


def to_day_counts(values: Iterable[XValue]) -> np.ndarray:
    if isinstance(values, np.ndarray) and values.dtype.kind in "iuf":
        return values.astype(float)
    return np.array([to_day_count(v) for v in values], dtype=float)
