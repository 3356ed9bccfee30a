"""Tabular views of curves for the CLI and scripts."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Mapping, Optional

import pandas as pd

from .curve import Curve
from .interpolation import evaluate_many
from .tenors import Tenor, XValue, from_days, to_day_counts


@dataclass(slots=True)
class CurveRow:
    """One pillar of a curve."""

    x: float
    y: float
    tenor: Optional[str]

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def _tenor_label(days: float) -> Optional[str]:
    if days >= 1 and float(days).is_integer():
        return str(from_days(int(days)))
    return None


def curve_rows(curve: Curve) -> List[CurveRow]:
    return [
        CurveRow(x=float(x), y=float(y), tenor=_tenor_label(x))
        for x, y in zip(curve.x, curve.y)
    ]


def curve_frame(curve: Curve) -> pd.DataFrame:
    return pd.DataFrame([row.as_dict() for row in curve_rows(curve)], columns=["x", "y", "tenor"])


def curves_frame(curves: Mapping[str, Curve], grid: Iterable[XValue]) -> pd.DataFrame:
    """Evaluate several curves on a common grid, one column per curve."""

    points = list(grid)
    labels = [str(p) if isinstance(p, (Tenor, str)) else _tenor_label(float(p)) for p in points]
    frame = pd.DataFrame({"tenor": labels, "days": to_day_counts(points)})
    for name, curve in curves.items():
        frame[name] = evaluate_many(points, curve)
    return frame
