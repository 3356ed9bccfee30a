"""Construction settings shared by every curve-producing operation."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Union


class Method(str, Enum):
    """Interpolation inside the grid."""

    LINEAR = "linear"
    CONSTANT = "constant"


class Extrapolation(str, Enum):
    """Evaluation outside the grid; a plain number means a constant fill value."""

    FLAT = "flat"
    LINE = "line"
    THROW = "throw"


ExtrapolationSpec = Union[Extrapolation, float]


def coerce_extrapolation(value: Any) -> ExtrapolationSpec:
    if isinstance(value, Extrapolation):
        return value
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return float(value)
    return Extrapolation(value)


@dataclass(frozen=True, slots=True)
class CurveSettings:
    """Interpolation, extrapolation and log-axis configuration of a curve.

    ``sort`` is an escape hatch for operations that already hold sorted,
    duplicate-free grids; callers should leave it at ``True``.
    """

    method: Method = Method.LINEAR
    extrapolation: ExtrapolationSpec = Extrapolation.FLAT
    logx: bool = False
    logy: bool = False
    sort: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", Method(self.method))
        object.__setattr__(self, "extrapolation", coerce_extrapolation(self.extrapolation))
        object.__setattr__(self, "logx", bool(self.logx))
        object.__setattr__(self, "logy", bool(self.logy))
        object.__setattr__(self, "sort", bool(self.sort))

    def with_sort(self, sort: bool) -> "CurveSettings":
        return replace(self, sort=sort)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "CurveSettings":
        """Build settings from a plain mapping such as a YAML section."""

        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown curve settings: {unknown}")
        return cls(**data)


DEFAULT_SETTINGS = CurveSettings()
