import pytest

from trisolver import (
    FIELD_KEYS,
    Inputs,
    Status,
    Tolerances,
    get_tolerances,
    set_tolerances,
    solve,
)
from trisolver.types import Bad, NotAvailable, Point


def test_scenario_equilateral_angles_without_sides():
    result = solve("angles", Inputs(A=60, B=60))
    assert result.status is Status.OK
    for key in ("A", "B", "C"):
        assert result.value(key) == 60
    for key in ("Aext", "Bext", "Cext"):
        assert result.value(key) == 120
    for key in ("a", "b", "c"):
        assert result[key] == NotAvailable("Provide one side length to compute sides.")


def test_scenario_interior_exterior_mismatch():
    result = solve("angles", {"A": 100, "Aext": 70})
    assert result.status is Status.BAD_VALUE
    assert all(isinstance(result[key], Bad) for key in FIELD_KEYS)
    assert "A" in result.status_reason


def test_scenario_right_triangle_with_side():
    result = solve("angles", Inputs(A=90, B=45, a=5))
    assert result.status is Status.OK
    assert result.value("C") == 45
    assert result.value("a") == 5
    assert result.value("b") == pytest.approx(3.54, abs=5e-3)
    assert result.value("c") == pytest.approx(3.54, abs=5e-3)


def test_scenario_points_triangle():
    result = solve("draw", [(0, 0), (10, 0), (5, 5)])
    assert result.status is Status.OK
    angles = [result.value(key) for key in ("A", "B", "C")]
    assert abs(sum(angles) - 180) <= 1.5
    assert all(0 < angle < 180 for angle in angles)
    assert result.value("Cext") == pytest.approx(90.0)
    assert result.value("c") == pytest.approx(10.0)
    assert result.preview_angles is not None


def test_scenario_collinear_points():
    result = solve("draw", [Point(0, 0), Point(5, 0), Point(10, 0)])
    assert result.status is Status.BAD_VALUE
    assert "collinear" in result.status_reason.lower()
    assert all(isinstance(result[key], Bad) for key in FIELD_KEYS)


def test_points_accept_mappings():
    result = solve("draw", [{"x": 0, "y": 0}, {"x": 3, "y": 0}, {"x": 0, "y": 4}])
    assert result.value("a") == pytest.approx(5.0)


def test_waiting_for_points():
    result = solve("draw", [(1, 1)])
    assert result.status is Status.NA
    assert "waiting for 3 points" in result.status_reason.lower()


def test_solve_is_deterministic():
    inputs = Inputs(Aext=110.3, C=33.1, b=7.25)
    first = solve("angles", inputs)
    second = solve("angles", inputs)
    assert first == second
    assert first.values == second.values


def test_non_finite_inputs_are_absent():
    result = solve("angles", {"A": float("nan"), "B": 60, "C": float("inf")})
    assert result.status is Status.OK
    assert result["A"] == NotAvailable("Need at least two angles to solve.")


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        solve("sketch", [])


def test_unknown_input_key_is_rejected():
    with pytest.raises(ValueError):
        solve("angles", {"D": 10})


def test_configured_tolerances_apply_by_default():
    original = get_tolerances()
    try:
        set_tolerances(Tolerances(collinear_area2=100.0))
        assert solve("draw", [(0, 0), (10, 0), (5, 5)]).status is Status.BAD_VALUE
    finally:
        set_tolerances(original)
    assert solve("draw", [(0, 0), (10, 0), (5, 5)]).status is Status.OK


def test_get_tolerances_returns_copy():
    tolerances = get_tolerances()
    tolerances.angle_eps = 10.0
    assert get_tolerances().angle_eps == 0.5
