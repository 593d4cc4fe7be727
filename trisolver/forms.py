"""Text boundary of the angle form and the result table."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

from .types import FIELD_KEYS, Bad, Inputs, SolveResult, Value

# leading decimal number, the same prefix a browser's parseFloat accepts
_NUMBER_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")

NA_TEXT = "N.A."
BAD_TEXT = "Bad value"


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse a field's text into a finite float, or ``None`` when absent."""

    if text is None:
        return None
    match = _NUMBER_PREFIX_RE.match(text)
    if not match:
        return None
    token = match.group(1)
    if token.lstrip("+-") == "Infinity":
        return None
    number = float(token)
    return number if math.isfinite(number) else None


def read_inputs(texts: Mapping[str, Optional[str]]) -> Inputs:
    """Build :class:`Inputs` from raw field texts keyed by field name."""

    return Inputs.from_mapping({key: parse_number(text) for key, text in texts.items()})


def _value_or_empty(value: Optional[float]) -> str:
    if value is None:
        return ""
    if value == int(value):
        return str(int(value))
    return repr(value)


def input_texts(inputs: Inputs) -> Dict[str, str]:
    """Inverse of :func:`read_inputs` used to repopulate the form."""

    return {key: _value_or_empty(inputs.get(key)) for key in FIELD_KEYS}


def format_value(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return NA_TEXT
    fixed = f"{value:.2f}"
    if fixed.endswith(".00"):
        fixed = fixed[:-3]
    if fixed == "-0":
        fixed = "0"
    return fixed


CellKind = Literal["value", "bad", "na"]


@dataclass(frozen=True)
class Cell:
    text: str
    kind: CellKind
    title: str = ""


def result_cells(result: SolveResult, *, force_na: bool = False) -> Dict[str, Cell]:
    """Render every field of ``result`` as a table cell."""

    cells: Dict[str, Cell] = {}
    for key in FIELD_KEYS:
        outcome = result.fields.get(key)
        if outcome is None or force_na:
            cells[key] = Cell(NA_TEXT, "na", NA_TEXT)
        elif isinstance(outcome, Value):
            cells[key] = Cell(format_value(outcome.value), "value")
        elif isinstance(outcome, Bad):
            cells[key] = Cell(BAD_TEXT, "bad", outcome.reason or BAD_TEXT)
        else:
            cells[key] = Cell(NA_TEXT, "na", outcome.reason or NA_TEXT)
    return cells


__all__ = [
    "BAD_TEXT",
    "Cell",
    "NA_TEXT",
    "format_value",
    "input_texts",
    "parse_number",
    "read_inputs",
    "result_cells",
]
