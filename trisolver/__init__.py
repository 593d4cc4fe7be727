from .config import EPS, Tolerances, get_tolerances, set_tolerances
from .types import (
    FIELD_KEYS,
    AngleSet,
    Bad,
    FieldResult,
    Inputs,
    NotAvailable,
    Point,
    SolveResult,
    Status,
    Value,
)
from .geometry import measure_points, PointMeasurement
from .angles import normalize_angles, NormalizedAngles
from .sides import resolve_sides, ResolvedSides
from .classify import classify_angles, classify_points, make_all_bad, make_all_na
from .solver import solve, solve_from_angles, solve_from_points
from .history import (
    HistoryAttempt,
    HistoryEmptyError,
    HistoryPhase,
    HistoryState,
    HistoryStore,
    Replay,
    history_display,
    history_meta,
)
from .session import Controller, SessionState, initial_state
from .forms import format_value, parse_number, read_inputs, result_cells
from .tikz_codegen import generate_tikz_code, generate_tikz_document, generate_history_tikz

__all__ = [
    'EPS',
    'Tolerances',
    'get_tolerances',
    'set_tolerances',
    'FIELD_KEYS',
    'AngleSet',
    'Bad',
    'FieldResult',
    'Inputs',
    'NotAvailable',
    'Point',
    'SolveResult',
    'Status',
    'Value',
    'measure_points',
    'PointMeasurement',
    'normalize_angles',
    'NormalizedAngles',
    'resolve_sides',
    'ResolvedSides',
    'classify_angles',
    'classify_points',
    'make_all_bad',
    'make_all_na',
    'solve',
    'solve_from_angles',
    'solve_from_points',
    'HistoryAttempt',
    'HistoryEmptyError',
    'HistoryPhase',
    'HistoryState',
    'HistoryStore',
    'Replay',
    'history_display',
    'history_meta',
    'Controller',
    'SessionState',
    'initial_state',
    'format_value',
    'parse_number',
    'read_inputs',
    'result_cells',
    'generate_tikz_code',
    'generate_tikz_document',
    'generate_history_tikz',
]
