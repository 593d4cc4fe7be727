"""Measurements of a triangle defined by three clicked points.

The helpers only rely on basic Python math so that the whole computation is
deterministic and cheap enough to run on every click.  Angles are reported in
degrees, side lengths in the units of the input coordinates, with the usual
convention that side ``a`` is opposite vertex ``A``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .config import Tolerances, resolve_tolerances
from .types import AngleSet, Point, StageStatus

logger = logging.getLogger(__name__)

Vector = Tuple[float, float]

WAITING_FOR_POINTS = "Waiting for 3 points on the canvas."
COLLINEAR = "Points are collinear (not a valid triangle)."
INVALID_ANGLES = "Triangle angles are invalid."
BAD_ANGLE_SUM = "Angles do not sum to 180 degrees."


def _sub(a: Point, b: Point) -> Vector:
    return (a.x - b.x, a.y - b.y)


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _cross(a: Vector, b: Vector) -> float:
    return a[0] * b[1] - a[1] * b[0]


def distance(p: Point, q: Point) -> float:
    return math.hypot(p.x - q.x, p.y - q.y)


def twice_area(A: Point, B: Point, C: Point) -> float:
    """Return ``2 * area`` of triangle ``ABC`` (always non-negative)."""

    return abs(_cross(_sub(B, A), _sub(C, A)))


def angle_at(vertex: Point, p1: Point, p2: Point) -> Optional[float]:
    """Return the angle ``p1-vertex-p2`` in degrees, or ``None`` for a zero-length arm."""

    v1 = _sub(p1, vertex)
    v2 = _sub(p2, vertex)
    denom = math.hypot(*v1) * math.hypot(*v2)
    if denom == 0:
        return None
    # rounding can push the ratio just outside acos' domain
    cos = min(1.0, max(-1.0, _dot(v1, v2) / denom))
    return math.degrees(math.acos(cos))


def is_angle_valid(angle: Optional[float]) -> bool:
    return angle is not None and 0 < angle < 180


@dataclass(frozen=True)
class PointMeasurement:
    status: StageStatus
    reason: str = ""
    angles: Optional[AngleSet] = None
    sides: Optional[Dict[str, float]] = None


def measure_points(
    points: Sequence[Point],
    *,
    tolerances: Optional[Tolerances] = None,
) -> PointMeasurement:
    """Derive interior angles and side lengths from the first three ``points``."""

    tol = resolve_tolerances(tolerances)
    if len(points) < 3:
        return PointMeasurement("na", WAITING_FOR_POINTS)

    A, B, C = (Point.of(p) for p in points[:3])
    area2 = twice_area(A, B, C)
    if area2 < tol.collinear_area2:
        logger.debug("Rejecting point triple: twice-area %.6g below %.6g", area2, tol.collinear_area2)
        return PointMeasurement("bad", COLLINEAR)

    sides = {
        "a": distance(B, C),
        "b": distance(A, C),
        "c": distance(A, B),
    }
    angle_A = angle_at(A, B, C)
    angle_B = angle_at(B, A, C)
    angle_C = angle_at(C, A, B)

    if not all(is_angle_valid(angle) for angle in (angle_A, angle_B, angle_C)):
        return PointMeasurement("bad", INVALID_ANGLES)

    total = angle_A + angle_B + angle_C  # type: ignore[operator]
    if abs(total - 180.0) > tol.point_angle_sum:
        logger.debug("Rejecting point triple: angle sum %.6f", total)
        return PointMeasurement("bad", BAD_ANGLE_SUM)

    return PointMeasurement("ok", "", AngleSet(angle_A, angle_B, angle_C), sides)


__all__ = [
    "BAD_ANGLE_SUM",
    "COLLINEAR",
    "INVALID_ANGLES",
    "PointMeasurement",
    "WAITING_FOR_POINTS",
    "angle_at",
    "distance",
    "is_angle_valid",
    "measure_points",
    "twice_area",
]
