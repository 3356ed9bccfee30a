import math

import numpy as np
import pytest

from rate_curves.curve import Curve
from rate_curves.errors import ExtrapolationError
from rate_curves.interpolation import evaluate, evaluate_many, resample, resample_to
from rate_curves.settings import CurveSettings, Extrapolation, Method
from rate_curves.tenors import tenor

X1 = [3, 9, 18, 30, 91]
Y1 = [1.01, 1.204, 1.54, 1.81, 2.12]
X2 = [5, 12, 18, 30, 125, 291]
Y2 = [1.01, 1.204, 1.54, 1.81, 2.12, 7.436]


def _fixtures():
    c1 = Curve(X1, Y1)
    clog = Curve(X2, Y2, logx=True, logy=True)
    clogy = Curve(X1, Y1, logy=True)
    return c1, clog, clogy


def test_linear_interpolation():
    c1, _, _ = _fixtures()
    expected = (1.204 - 1.01) / (9 - 3) * (5.5 - 3) + 1.01
    assert math.isclose(evaluate(5.5, c1), expected, rel_tol=1e-12)
    assert math.isclose(c1(5.5), expected, rel_tol=1e-12)
    assert math.isclose(evaluate(18, c1), 1.54, rel_tol=1e-12)


def test_log_axes_interpolation():
    _, clog, clogy = _fixtures()
    expected = math.exp(
        (math.log(1.81) - math.log(1.54)) / (math.log(30) - math.log(18)) * (math.log(25) - math.log(18))
        + math.log(1.54)
    )
    assert math.isclose(evaluate(25, clog), expected, rel_tol=1e-12)

    expected_logy = math.exp((math.log(1.204) - math.log(1.01)) / (9 - 3) * (5.5 - 3) + math.log(1.01))
    assert math.isclose(evaluate(5.5, clogy), expected_logy, rel_tol=1e-12)


def test_single_point_curve_is_constant():
    c0 = Curve([3], [5.5], logx=True, logy=True)
    assert evaluate(10, c0) == 5.5
    assert evaluate(-4, c0) == 5.5
    np.testing.assert_array_equal(evaluate_many([1, 2, 3], c0), [5.5, 5.5, 5.5])


def test_flat_extrapolation_is_default():
    c1, _, _ = _fixtures()
    assert evaluate(1, c1) == 1.01
    assert evaluate(1000, c1) == 2.12


def test_constant_method_uses_nearest_pillar():
    c_const = Curve(X1, Y1, method=Method.CONSTANT)
    assert evaluate(28, c_const) == 1.81
    assert evaluate(10, c_const) == 1.204


def test_fill_value_extrapolation():
    c_42 = Curve(X1, Y1, extrapolation=42)
    assert evaluate(1042, c_42) == 42
    assert evaluate(0, c_42) == 42
    assert math.isclose(evaluate(30, c_42), 1.81, rel_tol=1e-12)


def test_line_extrapolation_extends_boundary_segments():
    c_line = Curve(X1, Y1, extrapolation=Extrapolation.LINE)
    above = 2.12 + (2.12 - 1.81) / (91 - 30) * (102 - 91)
    below = 1.01 - (1.204 - 1.01) / (9 - 3) * 3
    assert math.isclose(evaluate(102, c_line), above, rel_tol=1e-12)
    assert math.isclose(evaluate(0, c_line), below, rel_tol=1e-12)

    c_const_line = Curve(X1, Y1, method=Method.CONSTANT, extrapolation=Extrapolation.LINE)
    assert evaluate(200, c_const_line) == 2.12


def test_throw_extrapolation():
    c_throw = Curve(X1, Y1, extrapolation=Extrapolation.THROW)
    assert math.isclose(evaluate(50, c_throw), 1.81 + (2.12 - 1.81) / 61 * 20, rel_tol=1e-12)
    with pytest.raises(ExtrapolationError):
        evaluate(100, c_throw)
    with pytest.raises(ExtrapolationError):
        evaluate_many([5, 2], c_throw)


def test_evaluation_accepts_tenors():
    ct = Curve(["1D", "3W", "1M", "10y"], [0.5, 0.7, 0.75, 0.83])
    assert math.isclose(evaluate("1W", ct), (0.7 - 0.5) / (21 - 1) * (7 - 1) + 0.5, rel_tol=1e-12)
    assert evaluate(tenor("12m"), ct) == evaluate("1Y", ct)


def test_resample_builds_default_curve():
    c1, clog, _ = _fixtures()
    grid = [3, 9, 14, 31, 33]
    c_int = resample(grid, c1)
    assert isinstance(c_int, Curve) and len(c_int) == 5
    np.testing.assert_array_equal(c_int.x, grid)

    c_log_int = resample(grid, clog)
    assert len(c_log_int) == 5
    assert not c_log_int.logx and not c_log_int.logy
    np.testing.assert_allclose(c_log_int.y, evaluate_many(grid, clog))

    kept = resample(grid, clog, CurveSettings(logx=True, logy=True))
    assert kept.logx and kept.logy


def test_resample_to_uses_target_grid():
    c1, clog, _ = _fixtures()
    result = resample_to(c1, clog)
    np.testing.assert_array_equal(result.x, c1.x)
    assert math.isclose(result.y[2], evaluate(18, clog), rel_tol=1e-12)


def test_throw_extrapolation_reports_day_counts_on_log_grid():
    c_throw = Curve(X2, Y2, logx=True, extrapolation=Extrapolation.THROW)
    with pytest.raises(ExtrapolationError, match=r"^400 is outside the curve grid \[5, 291\]$"):
        evaluate(400, c_throw)
