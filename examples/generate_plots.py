"""Build the sample curves and save comparison plots."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from rate_curves.algebra import apply
from rate_curves.cli import _build_curves, _load_config
from rate_curves.interpolation import resample
from rate_curves.plots import plot_curve, plot_curves
from rate_curves.settings import CurveSettings

DEFAULT_CONFIG = Path(__file__).with_name("sample_curves.yaml")
DEFAULT_PLOT_DIR = Path("plots/extended")


def _implied_zero(discount):
    """Continuously compounded zero rate implied by a discount curve."""

    return apply(lambda days, df: -math.log(df) / (days / 365.0), discount)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG)
    parser.add_argument("--plot-dir", type=Path, default=DEFAULT_PLOT_DIR)
    args = parser.parse_args()

    curves = _build_curves(_load_config(args.config))
    args.plot_dir.mkdir(parents=True, exist_ok=True)

    plot_curves(curves, args.plot_dir / "all_curves.png")
    discount = curves["discount"]
    plot_curve(
        resample(range(30, 3651, 30), discount, CurveSettings(logy=True)),
        args.plot_dir / "discount_resampled.png",
        label="discount (30D grid)",
    )
    plot_curve(_implied_zero(discount), args.plot_dir / "implied_zero.png", label="implied zero")
    print(f"Saved plots under {args.plot_dir.resolve()}")


if __name__ == "__main__":
    main()
