from trisolver import Controller
from trisolver.history import HistoryState
from trisolver.session import initial_state
from trisolver.tikz_codegen import (
    generate_history_tikz,
    generate_tikz_code,
    generate_tikz_document,
    plan_canvas,
    plan_history,
)


def _drawn_controller() -> Controller:
    controller = Controller()
    for x, y in [(50, 250), (250, 250), (150, 50)]:
        controller.click(x, y)
    controller.compute()
    return controller


def test_partial_draw_shows_points_and_first_edge():
    controller = Controller()
    controller.click(10, 10)
    controller.click(60, 10)
    plan = plan_canvas(controller.state)
    assert plan.edges == [(0, 1)]
    assert plan.labels == []
    tikz = generate_tikz_code(controller.state)
    assert "\\draw[edge] (A) -- (B);" in tikz
    assert "\\node[vertex] at (B) {};" in tikz
    assert "(C)" not in tikz


def test_computed_triangle_is_labelled():
    state = _drawn_controller().state
    tikz = generate_tikz_code(state)
    assert tikz.startswith("\\begin{tikzpicture}")
    assert "\\coordinate (A) at (1, 2.2);" in tikz
    assert "\\draw[edge] (C) -- (A);" in tikz
    assert "C 53.13 deg" in tikz


def test_angle_mode_without_angles_draws_dashed_placeholder():
    controller = Controller()
    controller.set_mode("angles")
    plan = plan_canvas(controller.state)
    assert plan.dashed
    assert "\\draw[preview]" in generate_tikz_code(controller.state)


def test_angle_mode_preview_after_compute():
    controller = Controller()
    controller.set_mode("angles")
    controller.set_inputs({"A": 30, "B": 60})
    controller.compute()
    plan = plan_canvas(controller.state)
    assert not plan.dashed
    assert [label.text for label in plan.labels] == ["A 30 deg", "B 60 deg", "C 90 deg"]


def test_history_thumbnail():
    assert plan_history(HistoryState()).dashed
    controller = _drawn_controller()
    plan = plan_history(controller.get_history_state())
    assert not plan.dashed
    assert plan.labels == []
    assert "anglabel" not in generate_history_tikz(controller.get_history_state())


def test_rendering_is_read_only_and_repeatable():
    controller = _drawn_controller()
    before = controller.state
    first = generate_tikz_document(before, include_history=True)
    second = generate_tikz_document(before, include_history=True)
    assert first == second
    assert controller.state is before


def test_document_escapes_caption():
    document = generate_tikz_document(initial_state(), caption="50% & more")
    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "50\\% \\& more" in document
    assert document.count("\\begin{tikzpicture}") == 1
