"""Session state and the transitions triggered by user events.

Every transition is a pure function from one :class:`SessionState` to the
next. :class:`Controller` owns the current state for callers that prefer an
object; it runs one transition at a time and never shares partial state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Tuple, Union

from .classify import make_all_na
from .config import Tolerances
from .geometry import WAITING_FOR_POINTS
from .history import HistoryAttempt, HistoryState, HistoryStore, Replay, record, replay
from .solver import PointLike, solve
from .types import MODES, AngleSet, Inputs, Mode, Point, SolveResult

logger = logging.getLogger(__name__)

WAITING_FOR_INPUT = "Waiting for input."


def _validate_mode(mode: str) -> Mode:
    if mode not in MODES:
        raise ValueError(f"unknown mode {mode!r}; expected one of {', '.join(MODES)}")
    return mode  # type: ignore[return-value]


@dataclass(frozen=True)
class SessionState:
    mode: Mode = "draw"
    points: Tuple[Point, ...] = ()
    inputs: Inputs = field(default_factory=Inputs)
    result: SolveResult = field(default_factory=lambda: make_all_na(WAITING_FOR_INPUT))
    history: HistoryState = field(default_factory=HistoryState)

    @property
    def current_angles(self) -> Optional[AngleSet]:
        return self.result.preview_angles


def initial_state() -> SessionState:
    return SessionState()


def set_mode(state: SessionState, mode: str, *, preserve: bool = False) -> SessionState:
    """Switch modes; unless ``preserve`` is set the other mode's data is cleared."""

    mode = _validate_mode(mode)
    if preserve:
        return replace(state, mode=mode)
    return replace(
        state,
        mode=mode,
        points=(),
        inputs=Inputs(),
        result=make_all_na(WAITING_FOR_INPUT),
    )


def add_point(state: SessionState, point: PointLike) -> SessionState:
    """Append a canvas click; ignored outside draw mode or once three points exist."""

    if state.mode != "draw" or len(state.points) >= 3:
        return state
    return replace(state, points=state.points + (Point.of(point),))


def set_inputs(state: SessionState, inputs: Union[Inputs, Mapping[str, object]]) -> SessionState:
    if not isinstance(inputs, Inputs):
        inputs = Inputs.from_mapping(inputs)
    return replace(state, inputs=inputs)


def reset(state: SessionState) -> SessionState:
    if state.mode == "draw":
        return replace(state, points=(), result=make_all_na(WAITING_FOR_POINTS))
    return replace(state, inputs=Inputs(), result=make_all_na(WAITING_FOR_INPUT))


def _active_data(state: SessionState) -> Union[Inputs, Tuple[Point, ...]]:
    return state.points if state.mode == "draw" else state.inputs


def compute(
    state: SessionState,
    *,
    record_history: bool = True,
    tolerances: Optional[Tolerances] = None,
) -> SessionState:
    """Solve the active mode's data snapshot and optionally record the attempt."""

    data = _active_data(state)
    result = solve(state.mode, data, tolerances=tolerances)
    history = state.history
    if record_history:
        history = record(history, HistoryAttempt.capture(state.mode, data, result))
    return replace(state, result=result, history=history)


def _restore(state: SessionState, outcome: Replay, history: HistoryState) -> SessionState:
    restored = set_mode(state, outcome.mode, preserve=True)
    if outcome.mode == "draw":
        restored = replace(restored, points=outcome.points or ())
    else:
        restored = replace(restored, inputs=outcome.inputs or Inputs())
    return replace(restored, result=outcome.result, history=history)


def replay_last_attempt(
    state: SessionState, *, tolerances: Optional[Tolerances] = None
) -> SessionState:
    """Put the last recorded attempt back on the input surface and re-solve it.

    Raises :class:`~trisolver.history.HistoryEmptyError` when nothing was
    recorded yet. The stored attempt is left untouched.
    """

    history, outcome = replay(state.history, tolerances=tolerances)
    return _restore(state, outcome, history)


class Controller:
    """Single owner of the session state.

    History goes through a :class:`~trisolver.history.HistoryStore`; the
    session's ``history`` field mirrors the store after every transition.
    """

    def __init__(self, state: Optional[SessionState] = None, *, tolerances: Optional[Tolerances] = None) -> None:
        self._state = state or initial_state()
        self._history = HistoryStore(self._state.history)
        self._tolerances = tolerances

    @property
    def state(self) -> SessionState:
        return self._state

    def set_mode(self, mode: str, *, preserve: bool = False) -> SessionState:
        self._state = set_mode(self._state, mode, preserve=preserve)
        return self._state

    def click(self, x: float, y: float) -> SessionState:
        self._state = add_point(self._state, Point(x, y))
        return self._state

    def set_inputs(self, inputs: Union[Inputs, Mapping[str, object]]) -> SessionState:
        self._state = set_inputs(self._state, inputs)
        return self._state

    def reset(self) -> SessionState:
        self._state = reset(self._state)
        return self._state

    def compute(self, *, record_history: bool = True) -> SolveResult:
        state = compute(self._state, record_history=False, tolerances=self._tolerances)
        if record_history:
            self._history.record_attempt(
                HistoryAttempt.capture(state.mode, _active_data(state), state.result)
            )
        self._state = replace(state, history=self._history.get_history_state())
        return self._state.result

    def replay_last_attempt(self) -> SolveResult:
        """Replay the stored attempt; with an empty history the current result is returned as is."""

        if not self._history.get_history_state().exists:
            logger.debug("Replay requested with an empty history; ignoring")
            return self._state.result
        outcome = self._history.replay_last_attempt(tolerances=self._tolerances)
        self._state = _restore(self._state, outcome, self._history.get_history_state())
        return self._state.result

    def get_history_state(self) -> HistoryState:
        return self._history.get_history_state()


__all__ = [
    "Controller",
    "SessionState",
    "WAITING_FOR_INPUT",
    "add_point",
    "compute",
    "initial_state",
    "replay_last_attempt",
    "reset",
    "set_inputs",
    "set_mode",
]
