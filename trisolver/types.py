"""Value types shared by the triangle solver."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Literal, Mapping, Optional, Tuple, Union

Mode = Literal["draw", "angles"]
MODES: Tuple[str, ...] = ("draw", "angles")
StageStatus = Literal["ok", "bad", "na"]

ANGLE_LABELS: Tuple[str, str, str] = ("A", "B", "C")
EXTERIOR_KEYS: Dict[str, str] = {"A": "Aext", "B": "Bext", "C": "Cext"}
SIDE_KEYS: Tuple[str, str, str] = ("a", "b", "c")
FIELD_KEYS: Tuple[str, ...] = ("A", "B", "C", "Aext", "Bext", "Cext", "a", "b", "c")


def coerce_number(value: object) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it is absent or not finite."""

    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @classmethod
    def of(cls, value: Union["Point", Tuple[float, float], Mapping[str, float]]) -> "Point":
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            return cls(value["x"], value["y"])
        x, y = value
        return cls(x, y)


@dataclass(frozen=True)
class AngleSet:
    """Interior angle triple in degrees; any member may be unknown."""

    A: Optional[float] = None
    B: Optional[float] = None
    C: Optional[float] = None

    def get(self, label: str) -> Optional[float]:
        if label not in ANGLE_LABELS:
            raise ValueError(f"unknown angle label {label!r}")
        return getattr(self, label)

    @property
    def known(self) -> Tuple[str, ...]:
        return tuple(label for label in ANGLE_LABELS if self.get(label) is not None)

    @property
    def is_complete(self) -> bool:
        return len(self.known) == 3

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {label: self.get(label) for label in ANGLE_LABELS}


@dataclass(frozen=True)
class Inputs:
    """The nine optional field values of the angle form.

    Absence (``None``) is distinct from zero. Non-finite values are stored as
    ``None`` so that NaN never reaches the solver.
    """

    A: Optional[float] = None
    B: Optional[float] = None
    C: Optional[float] = None
    Aext: Optional[float] = None
    Bext: Optional[float] = None
    Cext: Optional[float] = None
    a: Optional[float] = None
    b: Optional[float] = None
    c: Optional[float] = None

    def __post_init__(self) -> None:
        for item in fields(self):
            object.__setattr__(self, item.name, coerce_number(getattr(self, item.name)))

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "Inputs":
        unknown = sorted(set(values) - set(FIELD_KEYS))
        if unknown:
            raise ValueError(f"unknown input field(s): {', '.join(unknown)}")
        return cls(**{key: values.get(key) for key in FIELD_KEYS})  # type: ignore[arg-type]

    def get(self, key: str) -> Optional[float]:
        if key not in FIELD_KEYS:
            raise ValueError(f"unknown input field {key!r}")
        return getattr(self, key)

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {key: self.get(key) for key in FIELD_KEYS}


@dataclass(frozen=True)
class Value:
    value: float
    tag: Literal["value"] = field(default="value", init=False)


@dataclass(frozen=True)
class Bad:
    reason: str
    tag: Literal["bad"] = field(default="bad", init=False)


@dataclass(frozen=True)
class NotAvailable:
    reason: str
    tag: Literal["na"] = field(default="na", init=False)


FieldResult = Union[Value, Bad, NotAvailable]


class Status(str, Enum):
    OK = "OK"
    BAD_VALUE = "Bad value"
    NA = "N.A."

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SolveResult:
    """Per-field outcomes of one solve plus the overall status."""

    fields: Mapping[str, FieldResult]
    status: Status
    status_reason: str = ""
    preview_angles: Optional[AngleSet] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, key: str) -> FieldResult:
        return self.fields[key]

    def value(self, key: str) -> Optional[float]:
        """Return the numeric value of ``key`` or ``None`` if it is bad or unavailable."""

        outcome = self.fields[key]
        if isinstance(outcome, Value):
            return outcome.value
        return None

    @property
    def values(self) -> Dict[str, float]:
        return {key: item.value for key, item in self.fields.items() if isinstance(item, Value)}


__all__ = [
    "ANGLE_LABELS",
    "AngleSet",
    "Bad",
    "EXTERIOR_KEYS",
    "FIELD_KEYS",
    "FieldResult",
    "Inputs",
    "MODES",
    "Mode",
    "NotAvailable",
    "Point",
    "SIDE_KEYS",
    "SolveResult",
    "StageStatus",
    "Status",
    "Value",
    "coerce_number",
]
