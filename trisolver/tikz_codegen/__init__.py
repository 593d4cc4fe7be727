"""Triangle → TikZ code generation helpers."""

from .generator import (
    RenderPlan,
    generate_history_tikz,
    generate_tikz_code,
    generate_tikz_document,
    plan_canvas,
    plan_history,
)

__all__ = [
    "RenderPlan",
    "generate_history_tikz",
    "generate_tikz_code",
    "generate_tikz_document",
    "plan_canvas",
    "plan_history",
]
