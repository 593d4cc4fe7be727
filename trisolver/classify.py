"""Assemble stage outcomes into a single :class:`SolveResult`."""

from __future__ import annotations

from typing import Dict, Optional

from .angles import NormalizedAngles
from .geometry import PointMeasurement
from .sides import ResolvedSides
from .types import (
    ANGLE_LABELS,
    EXTERIOR_KEYS,
    FIELD_KEYS,
    SIDE_KEYS,
    AngleSet,
    Bad,
    FieldResult,
    NotAvailable,
    SolveResult,
    Status,
    Value,
)


def make_all_na(reason: str) -> SolveResult:
    fields: Dict[str, FieldResult] = {key: NotAvailable(reason) for key in FIELD_KEYS}
    return SolveResult(fields, Status.NA, reason)


def make_all_bad(reason: str) -> SolveResult:
    fields: Dict[str, FieldResult] = {key: Bad(reason) for key in FIELD_KEYS}
    return SolveResult(fields, Status.BAD_VALUE, reason)


def _angle_fields(fields: Dict[str, FieldResult], angles: AngleSet) -> None:
    for label in ANGLE_LABELS:
        value = angles.get(label)
        if value is None:
            continue
        fields[label] = Value(value)
        fields[EXTERIOR_KEYS[label]] = Value(180.0 - value)


def _overall_status(fields: Dict[str, FieldResult]) -> Status:
    if any(isinstance(item, Value) for item in fields.values()):
        return Status.OK
    return Status.NA


def classify_points(measurement: PointMeasurement) -> SolveResult:
    if measurement.status == "bad":
        return make_all_bad(measurement.reason)
    if measurement.status == "na" or measurement.angles is None or measurement.sides is None:
        return make_all_na(measurement.reason)

    fields: Dict[str, FieldResult] = {}
    _angle_fields(fields, measurement.angles)
    for key in SIDE_KEYS:
        fields[key] = Value(measurement.sides[key])
    ordered = {key: fields[key] for key in FIELD_KEYS}
    return SolveResult(ordered, Status.OK, "", measurement.angles)


def classify_angles(normalized: NormalizedAngles, sides: Optional[ResolvedSides]) -> SolveResult:
    """Merge angle and side outcomes.

    Any ``"bad"`` stage collapses the whole result. Otherwise every field
    defaults to not-available with the normalizer's reason and is replaced by
    a value wherever one was produced.
    """

    if normalized.status == "bad":
        return make_all_bad(normalized.reason)
    if sides is not None and sides.status == "bad":
        return make_all_bad(sides.reason)

    fields: Dict[str, FieldResult] = {key: NotAvailable(normalized.reason) for key in FIELD_KEYS}
    _angle_fields(fields, normalized.angles)

    preview: Optional[AngleSet] = None
    if normalized.status == "ok":
        preview = normalized.angles
        if sides is not None and sides.status == "ok" and sides.sides is not None:
            for key in SIDE_KEYS:
                fields[key] = Value(sides.sides[key])
        elif sides is not None:
            for key in SIDE_KEYS:
                fields[key] = NotAvailable(sides.reason)

    return SolveResult(fields, _overall_status(fields), normalized.reason, preview)


__all__ = [
    "classify_angles",
    "classify_points",
    "make_all_bad",
    "make_all_na",
]
