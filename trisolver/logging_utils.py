from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

from .types import AngleSet, Inputs, SolveResult

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 6
_repr.maxtuple = 6


def _format_angle(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.4g}"


def summarize(value: Any, *, max_length: int = 300) -> str:
    """Return a short, log-friendly rendering of solver values."""

    if isinstance(value, SolveResult):
        tags = ",".join(f"{key}:{value.fields[key].tag}" for key in value.fields)
        text = f"SolveResult(status={value.status}, reason={value.status_reason!r}, {tags})"
    elif isinstance(value, AngleSet):
        text = "AngleSet(" + ", ".join(
            f"{label}={_format_angle(angle)}" for label, angle in value.as_dict().items()
        ) + ")"
    elif isinstance(value, Inputs):
        present = {key: val for key, val in value.as_dict().items() if val is not None}
        text = f"Inputs({_repr.repr(present)})"
    elif isinstance(value, np.ndarray):
        text = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    else:
        text = _repr.repr(value)
    if len(text) > max_length:
        return text[:max_length] + "... (truncated)"
    return text


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(summarize(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={summarize(val)}" for key, val in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit of a call."""

    def decorator(func: F) -> F:
        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, summarize(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call", "summarize"]
