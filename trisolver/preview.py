"""Viewport geometry for drawing triangles.

Coordinates follow the canvas convention: ``x`` grows to the right and ``y``
grows downwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .forms import format_value
from .types import ANGLE_LABELS, AngleSet, Point

DEFAULT_MARGIN = 20.0
LABEL_OFFSET = 16.0


@dataclass(frozen=True)
class VertexLabel:
    anchor: Point
    text: str


def triangle_points_from_angles(
    angles: AngleSet, width: float, height: float, margin: float = DEFAULT_MARGIN
) -> Tuple[Point, Point, Point]:
    """Lay out a triangle with the given angles inside a ``width`` x ``height`` box.

    ``A`` and ``B`` start on a unit base ``c = 1`` and ``C`` is placed with the
    law of cosines; the shape is then scaled uniformly to fit inside the margin.
    """

    if not angles.is_complete:
        raise ValueError("a complete angle triple is required to lay out a triangle")
    rad = np.radians([angles.A, angles.B, angles.C])
    sin_a, sin_b, sin_c = np.sin(rad)

    c = 1.0
    a = sin_a * c / sin_c
    b = sin_b * c / sin_c
    x = (b * b + c * c - a * a) / (2 * c)
    y = math.sqrt(max(0.0, b * b - x * x))

    pts = np.array([[0.0, 0.0], [c, 0.0], [x, y]])
    lo = pts.min(axis=0)
    extent = pts.max(axis=0) - lo
    extent[extent == 0] = 1.0

    scale = min((width - margin * 2) / extent[0], (height - margin * 2) / extent[1])
    placed = (pts - lo) * scale + margin
    return tuple(Point(px, py) for px, py in placed)  # type: ignore[return-value]


def placeholder_triangle(width: float, height: float) -> Tuple[Point, Point, Point]:
    return (
        Point(width * 0.2, height * 0.75),
        Point(width * 0.8, height * 0.75),
        Point(width * 0.5, height * 0.25),
    )


def vertex_labels(
    points: Sequence[Point], angles: AngleSet, offset: float = LABEL_OFFSET
) -> List[VertexLabel]:
    """Place ``"<label> <value> deg"`` next to each vertex, pushed away from the centroid."""

    coords = np.array([[p.x, p.y] for p in points[:3]], dtype=float)
    centroid = coords.mean(axis=0)
    labels: List[VertexLabel] = []
    for label, vertex in zip(ANGLE_LABELS, coords):
        direction = vertex - centroid
        length = float(np.hypot(*direction)) or 1.0
        shifted = vertex + direction / length * offset
        text = f"{label} {format_value(angles.get(label))} deg"
        labels.append(VertexLabel(Point(shifted[0], shifted[1]), text))
    return labels


__all__ = [
    "DEFAULT_MARGIN",
    "LABEL_OFFSET",
    "VertexLabel",
    "placeholder_triangle",
    "triangle_points_from_angles",
    "vertex_labels",
]
