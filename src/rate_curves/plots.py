"""Matplotlib helpers for curve diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .curve import Curve
from .interpolation import evaluate_many


def _sample_grid(curve: Curve, samples: int) -> np.ndarray:
    lo, hi = curve.x[0], curve.x[-1]
    if lo == hi:
        return np.array([lo], dtype=float)
    if curve.logx and lo > 0:
        return np.geomspace(lo, hi, samples)
    return np.linspace(lo, hi, samples)


def _draw(curve: Curve, label: str, samples: int) -> None:
    grid = _sample_grid(curve, samples)
    line, = plt.plot(grid, evaluate_many(grid, curve), label=label)
    plt.scatter(curve.x, curve.y, color=line.get_color(), s=12)


def plot_curve(curve: Curve, destination: Path, label: str = "curve", samples: int = 200) -> None:
    plot_curves({label: curve}, destination, samples=samples)


def plot_curves(curves: Mapping[str, Curve], destination: Path, samples: int = 200) -> None:
    if not curves:
        return
    plt.figure(figsize=(6, 4))
    for label, curve in curves.items():
        _draw(curve, label, samples)
    if all(c.logx for c in curves.values()):
        plt.xscale("log")
    if all(c.logy for c in curves.values()):
        plt.yscale("log")
    plt.xlabel("Days")
    plt.ylabel("Value")
    plt.title("Curves")
    plt.grid(True, alpha=0.3)
    plt.legend()
    plt.tight_layout()
    plt.savefig(destination)
    plt.close()
