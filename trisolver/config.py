"""Configuration helpers for solver tolerances."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class Tolerances:
    """Absolute tolerances shared by every solve path.

    ``angle_eps`` is the interior/exterior and angle-sum consistency window in
    degrees, ``point_angle_sum`` bounds the angle sum of a clicked triangle and
    ``collinear_area2`` is the minimum twice-area of a valid point triple, in
    input coordinate units.
    """

    angle_eps: float = 0.5
    point_angle_sum: float = 1.5
    collinear_area2: float = 1e-2


EPS = Tolerances.angle_eps

_TOLERANCES = Tolerances()


def get_tolerances() -> Tolerances:
    return copy.deepcopy(_TOLERANCES)


def set_tolerances(tolerances: Tolerances) -> None:
    global _TOLERANCES
    _TOLERANCES = copy.deepcopy(tolerances)


def resolve_tolerances(tolerances: Tolerances | None) -> Tolerances:
    if tolerances is None:
        return _TOLERANCES
    return tolerances
