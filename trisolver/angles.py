"""Reconcile interior/exterior angle inputs into one interior triple."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .config import Tolerances, resolve_tolerances
from .types import ANGLE_LABELS, EXTERIOR_KEYS, AngleSet, Inputs, StageStatus

logger = logging.getLogger(__name__)

NEED_TWO_ANGLES = "Need at least two angles to solve."
NOT_A_TRIANGLE = "Angles do not form a valid triangle."
BAD_ANGLE_SUM = "Angles do not sum to 180 degrees."


def interior_exterior_mismatch(label: str) -> str:
    return f"Interior and exterior for {label} do not sum to 180."


def invalid_angle(label: str) -> str:
    return f"Angle {label} is not valid."


@dataclass(frozen=True)
class NormalizedAngles:
    """Outcome of angle normalization.

    ``angles`` holds every label that could be resolved; it is complete only
    when ``status`` is ``"ok"``. A ``"bad"`` outcome carries no angles.
    """

    status: StageStatus
    angles: AngleSet = AngleSet()
    reason: str = ""


def _approx_equal(a: float, b: float, tol: float) -> bool:
    return abs(a - b) <= tol


def _resolve_label(
    label: str, interior: Optional[float], exterior: Optional[float], eps: float
) -> Tuple[Optional[float], Optional[str]]:
    if interior is not None and exterior is not None:
        if not _approx_equal(interior + exterior, 180.0, eps):
            return None, interior_exterior_mismatch(label)

    value = interior
    if value is None and exterior is not None:
        value = 180.0 - exterior

    if value is not None and (not math.isfinite(value) or value <= 0 or value >= 180):
        return None, invalid_angle(label)
    return value, None


def normalize_angles(inputs: Inputs, *, tolerances: Optional[Tolerances] = None) -> NormalizedAngles:
    """Resolve each label, then complete or check the triple.

    Every label is checked for interior/exterior consistency before any
    completion happens, so a contradictory pair is reported as such instead of
    feeding a derived third angle.
    """

    eps = resolve_tolerances(tolerances).angle_eps
    resolved: Dict[str, Optional[float]] = {}
    for label in ANGLE_LABELS:
        value, error = _resolve_label(
            label, inputs.get(label), inputs.get(EXTERIOR_KEYS[label]), eps
        )
        if error is not None:
            logger.debug("Angle normalization failed on %s: %s", label, error)
            return NormalizedAngles("bad", reason=error)
        resolved[label] = value

    angles = AngleSet(**resolved)
    known = angles.known
    if len(known) < 2:
        return NormalizedAngles("na", angles, NEED_TWO_ANGLES)

    if len(known) == 2:
        # subtract in label order so the result is exactly 180 - X - Y
        missing = 180.0
        for label in known:
            missing -= angles.get(label)  # type: ignore[operator]
        if missing <= 0 or missing >= 180:
            return NormalizedAngles("bad", reason=NOT_A_TRIANGLE)
        (label,) = [lbl for lbl in ANGLE_LABELS if lbl not in known]
        resolved[label] = missing
        logger.debug("Derived angle %s=%.6f from %s", label, missing, ", ".join(known))
        return NormalizedAngles("ok", AngleSet(**resolved))

    sum_known = sum(angles.get(label) for label in known)  # type: ignore[misc]
    if not _approx_equal(sum_known, 180.0, eps):
        return NormalizedAngles("bad", reason=BAD_ANGLE_SUM)
    return NormalizedAngles("ok", angles)


__all__ = [
    "BAD_ANGLE_SUM",
    "NEED_TWO_ANGLES",
    "NOT_A_TRIANGLE",
    "NormalizedAngles",
    "interior_exterior_mismatch",
    "invalid_angle",
    "normalize_angles",
]
