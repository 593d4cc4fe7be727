"""Scale one known side into all three with the law of sines."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

from .types import ANGLE_LABELS, SIDE_KEYS, AngleSet, Inputs, StageStatus

logger = logging.getLogger(__name__)

PROVIDE_ONE_SIDE = "Provide one side length to compute sides."
NON_POSITIVE_SIDE = "Side length must be greater than zero."
CANNOT_SCALE = "Cannot compute side lengths with given values."

_OPPOSITE_ANGLE = dict(zip(SIDE_KEYS, ANGLE_LABELS))


@dataclass(frozen=True)
class ResolvedSides:
    status: StageStatus
    sides: Optional[Dict[str, float]] = None
    reason: str = ""
    given: Optional[str] = None
    scale: Optional[float] = None


def pick_given_side(inputs: Inputs) -> Optional[str]:
    """Return the first side key in ``a, b, c`` order that has a value.

    Further sides are ignored and never cross-checked.
    """

    for key in SIDE_KEYS:
        if inputs.get(key) is not None:
            return key
    return None


def resolve_sides(inputs: Inputs, angles: AngleSet) -> ResolvedSides:
    if not angles.is_complete:
        raise ValueError("resolve_sides requires a complete angle triple")

    given = pick_given_side(inputs)
    if given is None:
        return ResolvedSides("na", reason=PROVIDE_ONE_SIDE)

    length = inputs.get(given)
    assert length is not None
    if length <= 0:
        return ResolvedSides("bad", reason=NON_POSITIVE_SIDE, given=given)

    sines = {key: math.sin(math.radians(angles.get(label))) for key, label in _OPPOSITE_ANGLE.items()}  # type: ignore[arg-type]
    try:
        k = length / sines[given]
    except ZeroDivisionError:
        k = math.inf
    if not math.isfinite(k):
        return ResolvedSides("bad", reason=CANNOT_SCALE, given=given)

    sides = {key: k * sine for key, sine in sines.items()}
    sides[given] = length
    logger.debug("Scaled side %s=%.6g with k=%.6g", given, length, k)
    return ResolvedSides("ok", sides, given=given, scale=k)


__all__ = [
    "CANNOT_SCALE",
    "NON_POSITIVE_SIDE",
    "PROVIDE_ONE_SIDE",
    "ResolvedSides",
    "pick_given_side",
    "resolve_sides",
]
