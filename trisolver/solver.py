"""Solver façade dispatching between the point and angle pipelines."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Union

from .angles import normalize_angles
from .classify import classify_angles, classify_points
from .config import Tolerances
from .geometry import measure_points
from .logging_utils import debug_log_call
from .sides import resolve_sides
from .types import MODES, Inputs, Point, SolveResult

logger = logging.getLogger(__name__)

if not logging.getLogger().handlers:  # pragma: no cover - depends on host application
    logging.basicConfig(level=logging.INFO)

PointLike = Union[Point, Sequence[float], Mapping[str, float]]
SolveData = Union[Sequence[PointLike], Inputs, Mapping[str, object]]


@debug_log_call(logger)
def solve_from_points(
    points: Sequence[PointLike], *, tolerances: Optional[Tolerances] = None
) -> SolveResult:
    """Measure the triangle spanned by three canvas points."""

    snapshot = [Point.of(p) for p in points]
    return classify_points(measure_points(snapshot, tolerances=tolerances))


@debug_log_call(logger)
def solve_from_angles(
    inputs: Union[Inputs, Mapping[str, object]], *, tolerances: Optional[Tolerances] = None
) -> SolveResult:
    """Complete the angle triple from field values and scale a given side."""

    if not isinstance(inputs, Inputs):
        inputs = Inputs.from_mapping(inputs)
    normalized = normalize_angles(inputs, tolerances=tolerances)
    sides = None
    if normalized.status == "ok":
        sides = resolve_sides(inputs, normalized.angles)
    return classify_angles(normalized, sides)


def solve(mode: str, data: SolveData, *, tolerances: Optional[Tolerances] = None) -> SolveResult:
    """Solve ``data`` according to ``mode`` (``"draw"`` or ``"angles"``).

    The result depends only on ``data``; nothing is recorded.
    """

    if mode not in MODES:
        raise ValueError(f"unknown solve mode {mode!r}; expected one of {', '.join(MODES)}")
    if mode == "draw":
        result = solve_from_points(data, tolerances=tolerances)  # type: ignore[arg-type]
    else:
        result = solve_from_angles(data, tolerances=tolerances)  # type: ignore[arg-type]
    logger.info("Solved %s input: status=%s %s", mode, result.status, result.status_reason)
    return result


__all__ = ["solve", "solve_from_angles", "solve_from_points"]
