"""Command line entrypoints."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from .algebra import binary
from .curve import Curve
from .errors import CurveError
from .plots import plot_curves
from .reporting import curve_frame, curves_frame
from .settings import CurveSettings

app = typer.Typer(help="Tenor curve utilities")

_log = logging.getLogger(__name__)


def _load_config(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        if path.suffix in {".yml", ".yaml"}:
            return yaml.safe_load(fh)
        return json.load(fh)


def _build_settings(cfg: Dict[str, Any]) -> CurveSettings:
    try:
        return CurveSettings.from_mapping(cfg.get("settings"))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_curve(name: str, cfg: Dict[str, Any]) -> Curve:
    settings = _build_settings(cfg)
    values = cfg.get("values", cfg.get("y"))
    if values is None:
        raise typer.BadParameter(f"curve {name!r} has no values")
    try:
        if "tenors" in cfg:
            return Curve.from_tenors(
                [str(t) for t in cfg["tenors"]],
                values,
                offset=float(cfg.get("offset", 0.0)),
                settings=settings,
            )
        if "x" in cfg:
            return Curve.build(cfg["x"], values, settings)
    except CurveError as exc:
        raise typer.BadParameter(f"curve {name!r}: {exc}") from exc
    raise typer.BadParameter(f"curve {name!r} needs either 'tenors' or 'x'")


def _build_curves(config: Dict[str, Any]) -> Dict[str, Curve]:
    curves_cfg = config.get("curves")
    if not curves_cfg:
        raise typer.BadParameter("curves missing from configuration")
    curves = {name: _build_curve(name, cfg) for name, cfg in curves_cfg.items()}

    for item in config.get("combinations", []):
        name = item["name"]
        try:
            left, right = curves[item["left"]], curves[item["right"]]
        except KeyError as exc:
            raise typer.BadParameter(f"combination {name!r} refers to unknown curve {exc}") from exc
        try:
            curves[name] = binary(item["op"], left, right, _build_settings(item))
        except ValueError as exc:
            raise typer.BadParameter(f"combination {name!r}: {exc}") from exc
        _log.info("built %s = %s %s %s", name, item["left"], item["op"], item["right"])
    return curves


def _evaluation_grid(config: Dict[str, Any]) -> List[Any]:
    grid = config.get("evaluate", [])
    return [g if isinstance(g, (int, float)) else str(g) for g in grid]


@app.command()
def main(
    config_path: Path,
    plot_dir: Optional[Path] = typer.Option(None, "--plot-dir", "-p", help="Directory for PNG plots"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Build curves from a configuration file, evaluate them and plot them."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    config = _load_config(config_path)
    curves = _build_curves(config)

    typer.echo(f"Curves loaded: {len(curves)}")
    for name, curve in curves.items():
        flags = f"logx={curve.logx}, logy={curve.logy}"
        typer.echo(f"\n{name} ({len(curve)} points, {curve.method.value}, {flags}):")
        typer.echo(curve_frame(curve).to_string(index=False, float_format=lambda v: f"{v:,.6f}"))

    grid = _evaluation_grid(config)
    if grid:
        typer.echo("\nInterpolated values:")
        try:
            table = curves_frame(curves, grid)
        except CurveError as exc:
            raise typer.BadParameter(f"evaluation grid: {exc}") from exc
        typer.echo(table.to_string(index=False, float_format=lambda v: f"{v:,.6f}"))

    if plot_dir is not None:
        plot_dir = plot_dir.expanduser()
        plot_dir.mkdir(parents=True, exist_ok=True)
        plot_curves(curves, plot_dir / "curves.png")
        typer.echo(f"\nSaved plots under {plot_dir.resolve()}")


if __name__ == "__main__":
    app()
