import math

import pytest

from trisolver.geometry import measure_points
from trisolver.preview import (
    DEFAULT_MARGIN,
    LABEL_OFFSET,
    placeholder_triangle,
    triangle_points_from_angles,
    vertex_labels,
)
from trisolver.types import AngleSet, Point


@pytest.mark.parametrize(
    "angles",
    [
        AngleSet(60.0, 60.0, 60.0),
        AngleSet(90.0, 45.0, 45.0),
        AngleSet(20.0, 30.0, 130.0),
        AngleSet(100.0, 40.0, 40.0),
    ],
)
def test_layout_reproduces_angles_inside_viewport(angles):
    width, height = 400.0, 300.0
    points = triangle_points_from_angles(angles, width, height)
    measured = measure_points(points)
    assert measured.angles.A == pytest.approx(angles.A, abs=1e-6)
    assert measured.angles.B == pytest.approx(angles.B, abs=1e-6)
    assert measured.angles.C == pytest.approx(angles.C, abs=1e-6)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    assert min(xs) == pytest.approx(DEFAULT_MARGIN)
    assert min(ys) == pytest.approx(DEFAULT_MARGIN)
    assert max(xs) <= width - DEFAULT_MARGIN + 1e-9
    assert max(ys) <= height - DEFAULT_MARGIN + 1e-9


def test_layout_requires_complete_angles():
    with pytest.raises(ValueError):
        triangle_points_from_angles(AngleSet(60.0, None, None), 100, 100)


def test_placeholder_triangle_proportions():
    assert placeholder_triangle(100, 200) == (Point(20, 150), Point(80, 150), Point(50, 50))


def test_vertex_labels_are_pushed_away_from_centroid():
    points = [Point(0, 0), Point(30, 0), Point(0, 30)]
    labels = vertex_labels(points, AngleSet(90.0, 45.0, 45.0))
    assert [label.text for label in labels] == ["A 90 deg", "B 45 deg", "C 45 deg"]
    centroid = (10.0, 10.0)
    for label, point in zip(labels, points):
        before = math.hypot(point.x - centroid[0], point.y - centroid[1])
        after = math.hypot(label.anchor.x - centroid[0], label.anchor.y - centroid[1])
        assert after == pytest.approx(before + LABEL_OFFSET)
