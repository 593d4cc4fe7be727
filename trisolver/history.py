"""Single-slot history of the last recorded solve attempt.

The history moves through three phases::

    EMPTY --record--> POPULATED --replay--> SUPPRESSED
                        ^   |                   |
                        +---+------record-------+

Once an attempt is stored it is only ever replaced, never removed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from .classify import make_all_na
from .config import Tolerances
from .solver import PointLike, solve
from .types import AngleSet, Inputs, Mode, Point, SolveResult

logger = logging.getLogger(__name__)

NO_HISTORY = "No history yet."
HISTORY_IN_USE = "History used as current input."


class HistoryEmptyError(RuntimeError):
    """Raised when a replay is requested before any attempt was recorded."""


class HistoryPhase(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"
    SUPPRESSED = "suppressed"


@dataclass(frozen=True)
class HistoryAttempt:
    """Snapshot of one recorded solve."""

    mode: Mode
    result: SolveResult
    inputs: Optional[Inputs] = None
    points: Optional[Tuple[Point, ...]] = None
    preview_angles: Optional[AngleSet] = None

    @classmethod
    def capture(
        cls,
        mode: Mode,
        data: Union[Inputs, Sequence[PointLike]],
        result: SolveResult,
    ) -> "HistoryAttempt":
        if mode == "draw":
            points = tuple(Point.of(p) for p in data)  # type: ignore[union-attr]
            return cls(mode, result, points=points, preview_angles=result.preview_angles)
        if not isinstance(data, Inputs):
            raise TypeError("angle attempts must be captured from Inputs")
        return cls(mode, result, inputs=data, preview_angles=result.preview_angles)

    @property
    def data(self) -> Union[Inputs, Tuple[Point, ...]]:
        if self.mode == "draw":
            return self.points or ()
        return self.inputs or Inputs()


@dataclass(frozen=True)
class HistoryState:
    phase: HistoryPhase = HistoryPhase.EMPTY
    attempt: Optional[HistoryAttempt] = None

    def __post_init__(self) -> None:
        if (self.phase is HistoryPhase.EMPTY) != (self.attempt is None):
            raise ValueError(f"history phase {self.phase.value} inconsistent with attempt={self.attempt!r}")

    @property
    def exists(self) -> bool:
        return self.phase is not HistoryPhase.EMPTY

    @property
    def suppressed(self) -> bool:
        return self.phase is HistoryPhase.SUPPRESSED


def record(state: HistoryState, attempt: HistoryAttempt) -> HistoryState:
    """Store ``attempt``, replacing any previous one and clearing suppression."""

    logger.info("Recorded %s attempt with status=%s", attempt.mode, attempt.result.status)
    return HistoryState(HistoryPhase.POPULATED, attempt)


def mark_replayed(state: HistoryState) -> HistoryState:
    if state.attempt is None:
        raise HistoryEmptyError("no attempt has been recorded yet")
    return replace(state, phase=HistoryPhase.SUPPRESSED)


def history_display(state: HistoryState) -> SolveResult:
    """Return the result the history panel should show for ``state``."""

    if state.attempt is None:
        return make_all_na(NO_HISTORY)
    if state.suppressed:
        return make_all_na(HISTORY_IN_USE)
    return state.attempt.result


def history_meta(state: HistoryState) -> str:
    if state.attempt is None:
        return "Empty"
    return "Last: Draw" if state.attempt.mode == "draw" else "Last: Angles"


@dataclass(frozen=True)
class Replay:
    """Data to put back on the input surface, with its fresh solve."""

    mode: Mode
    result: SolveResult
    inputs: Optional[Inputs] = None
    points: Optional[Tuple[Point, ...]] = None


def replay(state: HistoryState, *, tolerances: Optional[Tolerances] = None) -> Tuple[HistoryState, Replay]:
    """Re-solve the stored attempt without recording it."""

    suppressed = mark_replayed(state)
    attempt = suppressed.attempt
    assert attempt is not None
    result = solve(attempt.mode, attempt.data, tolerances=tolerances)
    logger.info("Replayed %s attempt: status=%s", attempt.mode, result.status)
    return suppressed, Replay(attempt.mode, result, attempt.inputs, attempt.points)


class HistoryStore:
    """Owner of a :class:`HistoryState` exposing the history entry points."""

    def __init__(self, state: Optional[HistoryState] = None) -> None:
        self._state = state or HistoryState()

    def record_attempt(self, attempt: HistoryAttempt) -> None:
        self._state = record(self._state, attempt)

    def replay_last_attempt(self, *, tolerances: Optional[Tolerances] = None) -> Replay:
        self._state, outcome = replay(self._state, tolerances=tolerances)
        return outcome

    def get_history_state(self) -> HistoryState:
        return self._state


__all__ = [
    "HISTORY_IN_USE",
    "HistoryAttempt",
    "HistoryEmptyError",
    "HistoryPhase",
    "HistoryState",
    "HistoryStore",
    "NO_HISTORY",
    "Replay",
    "history_display",
    "history_meta",
    "mark_replayed",
    "record",
    "replay",
]
