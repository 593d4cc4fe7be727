"""TikZ renderer for the canvas and the history thumbnail.

Rendering is a read-only view of :class:`~trisolver.session.SessionState` and
:class:`~trisolver.history.HistoryState`: calling it any number of times never
changes either.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..history import HistoryState
from ..preview import (
    VertexLabel,
    placeholder_triangle,
    triangle_points_from_angles,
    vertex_labels,
)
from ..session import SessionState
from ..types import AngleSet, Point

PX_PER_CM = 50.0
CANVAS_SIZE = (480.0, 360.0)
HISTORY_SIZE = (160.0, 120.0)
VERTEX_NAMES = ("A", "B", "C")

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\tikzset{
  canvas/.style={fill=black},
  edge/.style={draw=red!85!black, line width=1.2pt},
  preview/.style={draw=red!85!black, line width=0.9pt, dash pattern=on 3pt off 3pt},
  vertex/.style={circle, fill=red!85!black, inner sep=0pt, minimum size=3.6pt},
  anglabel/.style={font=\footnotesize, text=white},
}
\begin{document}
%s%s
\end{document}
"""


@dataclass
class RenderPlan:
    """Everything needed to emit one picture, in canvas pixels."""

    width: float
    height: float
    points: List[Point] = field(default_factory=list)
    edges: List[Tuple[int, int]] = field(default_factory=list)
    dashed: bool = False
    show_vertices: bool = False
    labels: List[VertexLabel] = field(default_factory=list)


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _escape_text(text: str) -> str:
    repl = {
        "\\": r"\textbackslash{}",
        "&": r"\&",
        "%": r"\%",
        "#": r"\#",
        "_": r"\_",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
        "$": r"\$",
    }
    return "".join(repl.get(ch, ch) for ch in text)


def _to_tikz(point: Point, height: float) -> Tuple[str, str]:
    # canvas y grows downwards, TikZ y grows upwards
    return _format_float(point.x / PX_PER_CM), _format_float((height - point.y) / PX_PER_CM)


def _triangle_edges(count: int) -> List[Tuple[int, int]]:
    if count < 2:
        return []
    if count == 2:
        return [(0, 1)]
    return [(0, 1), (1, 2), (2, 0)]


def _angle_plan(
    angles: Optional[AngleSet], width: float, height: float, *, labels: bool
) -> RenderPlan:
    if angles is None or not angles.is_complete:
        corners = list(placeholder_triangle(width, height))
        return RenderPlan(width, height, corners, _triangle_edges(3), dashed=True)
    corners = list(triangle_points_from_angles(angles, width, height))
    plan = RenderPlan(width, height, corners, _triangle_edges(3))
    if labels:
        plan.labels = vertex_labels(corners, angles)
    return plan


def plan_canvas(state: SessionState, size: Tuple[float, float] = CANVAS_SIZE) -> RenderPlan:
    """Plan the main canvas: clicked points in draw mode, an angle preview otherwise."""

    width, height = size
    if state.mode != "draw":
        return _angle_plan(state.current_angles, width, height, labels=True)

    points = list(state.points)
    plan = RenderPlan(width, height, points, _triangle_edges(len(points)), show_vertices=True)
    if len(points) == 3 and state.current_angles is not None:
        plan.labels = vertex_labels(points, state.current_angles)
    return plan


def plan_history(history: HistoryState, size: Tuple[float, float] = HISTORY_SIZE) -> RenderPlan:
    width, height = size
    angles = history.attempt.preview_angles if history.attempt is not None else None
    return _angle_plan(angles, width, height, labels=False)


def _emit_tikz_picture(plan: RenderPlan) -> str:
    lines: List[str] = ["\\begin{tikzpicture}"]
    lines.append(
        "  \\fill[canvas] (0, 0) rectangle ({w}, {h});".format(
            w=_format_float(plan.width / PX_PER_CM), h=_format_float(plan.height / PX_PER_CM)
        )
    )
    names = VERTEX_NAMES[: len(plan.points)]
    for name, point in zip(names, plan.points):
        x, y = _to_tikz(point, plan.height)
        lines.append(f"  \\coordinate ({name}) at ({x}, {y});")

    style = "preview" if plan.dashed else "edge"
    for start, end in plan.edges:
        lines.append(f"  \\draw[{style}] ({names[start]}) -- ({names[end]});")
    if plan.show_vertices:
        for name in names:
            lines.append(f"  \\node[vertex] at ({name}) {{}};")
    for label in plan.labels:
        x, y = _to_tikz(label.anchor, plan.height)
        lines.append(f"  \\node[anglabel] at ({x}, {y}) {{{_escape_text(label.text)}}};")
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_code(state: SessionState, size: Tuple[float, float] = CANVAS_SIZE) -> str:
    return _emit_tikz_picture(plan_canvas(state, size))


def generate_history_tikz(history: HistoryState, size: Tuple[float, float] = HISTORY_SIZE) -> str:
    return _emit_tikz_picture(plan_history(history, size))


def generate_tikz_document(
    state: SessionState,
    *,
    caption: Optional[str] = None,
    include_history: bool = False,
    size: Tuple[float, float] = CANVAS_SIZE,
) -> str:
    """Render a standalone document of the canvas, optionally followed by the history thumbnail."""

    header = ""
    if caption:
        header = "\\noindent " + _escape_text(caption.strip()) + "\\par\\vspace{4pt}\n"
    pictures: Sequence[str] = [generate_tikz_code(state, size)]
    if include_history:
        pictures = [*pictures, generate_history_tikz(state.history)]
    return standalone_tpl % (header, "\n\\quad\n".join(pictures))


__all__ = [
    "RenderPlan",
    "generate_history_tikz",
    "generate_tikz_code",
    "generate_tikz_document",
    "plan_canvas",
    "plan_history",
]
