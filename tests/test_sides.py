import math

import numpy as np
import pytest

from trisolver.sides import (
    NON_POSITIVE_SIDE,
    PROVIDE_ONE_SIDE,
    pick_given_side,
    resolve_sides,
)
from trisolver.types import AngleSet, Inputs

RIGHT = AngleSet(90.0, 45.0, 45.0)


def test_no_side_is_not_available():
    resolved = resolve_sides(Inputs(), RIGHT)
    assert resolved.status == "na"
    assert resolved.reason == PROVIDE_ONE_SIDE


def test_law_of_sines_scaling():
    resolved = resolve_sides(Inputs(a=5), RIGHT)
    assert resolved.status == "ok"
    assert resolved.scale == pytest.approx(5.0)
    assert resolved.sides["a"] == 5
    assert resolved.sides["b"] == pytest.approx(5 * math.sin(math.radians(45)))
    assert resolved.sides["c"] == pytest.approx(3.5355, abs=1e-4)


@pytest.mark.parametrize("length", [0, -2])
def test_non_positive_side_is_bad(length):
    resolved = resolve_sides(Inputs(b=length), RIGHT)
    assert resolved.status == "bad"
    assert resolved.reason == NON_POSITIVE_SIDE


def test_first_side_in_priority_order_wins():
    # b and c are ignored and not cross-checked, even when inconsistent
    inputs = Inputs(b=100, c=1, a=5)
    assert pick_given_side(inputs) == "a"
    resolved = resolve_sides(inputs, RIGHT)
    assert resolved.given == "a"
    assert resolved.sides["b"] == pytest.approx(3.5355, abs=1e-4)


def test_second_side_used_when_first_absent():
    resolved = resolve_sides(Inputs(b=2, c=9), AngleSet(30.0, 60.0, 90.0))
    assert resolved.given == "b"
    assert resolved.sides["b"] == 2
    assert resolved.sides["c"] == pytest.approx(2 / math.sin(math.radians(60)))


def test_bad_first_side_is_not_rescued_by_later_side():
    resolved = resolve_sides(Inputs(a=0, b=3), RIGHT)
    assert resolved.status == "bad"


def test_incomplete_angles_are_rejected():
    with pytest.raises(ValueError):
        resolve_sides(Inputs(a=1), AngleSet(60.0, 60.0, None))


def test_ratios_are_constant_for_random_triangles():
    rng = np.random.default_rng(11)
    for _ in range(100):
        a_deg, b_deg = rng.uniform(1, 89, size=2)
        angles = AngleSet(float(a_deg), float(b_deg), 180.0 - float(a_deg) - float(b_deg))
        key = ["a", "b", "c"][int(rng.integers(0, 3))]
        length = float(rng.uniform(0.1, 1000))
        resolved = resolve_sides(Inputs(**{key: length}), angles)
        assert resolved.status == "ok"
        assert resolved.sides[key] == length
        ratios = [
            resolved.sides[side] / math.sin(math.radians(angles.get(label)))
            for side, label in zip("abc", "ABC")
        ]
        assert ratios[0] == pytest.approx(ratios[1], rel=1e-9)
        assert ratios[1] == pytest.approx(ratios[2], rel=1e-9)
