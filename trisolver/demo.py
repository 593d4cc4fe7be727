from . import Controller, format_value, generate_tikz_document, history_meta, result_cells

SCENARIOS = [
    ("angles", {"A": 60, "B": 60}),
    ("angles", {"A": 100, "Aext": 70}),
    ("angles", {"A": 90, "B": 45, "a": 5}),
    ("draw", [(0, 0), (10, 0), (5, 5)]),
    ("draw", [(0, 0), (5, 0), (10, 0)]),
]


def _print_result(controller: Controller) -> None:
    state = controller.state
    print(f"Status: {state.result.status} {state.result.status_reason}".rstrip())
    for key, cell in result_cells(state.result).items():
        suffix = f"  ({cell.title})" if cell.title else ""
        print(f"  {key:>4}: {cell.text}{suffix}")


def run():
    controller = Controller()
    for mode, data in SCENARIOS:
        controller.set_mode(mode)
        if mode == "draw":
            for x, y in data:
                controller.click(x, y)
        else:
            controller.set_inputs(data)
        controller.compute()
        print(f"{mode} {data}")
        _print_result(controller)
        print(f"History: {history_meta(controller.get_history_state())}\n")

    controller.set_mode("angles")
    controller.set_inputs({"A": 30, "Cext": 100, "c": 2})
    controller.compute()
    print(f"Computed a={format_value(controller.state.result.value('a'))}")

    controller.set_mode("draw")
    controller.replay_last_attempt()
    print("Replayed last attempt:")
    _print_result(controller)
    print(f"History suppressed: {controller.get_history_state().suppressed}\n")

    print(generate_tikz_document(controller.state, caption="Last attempt", include_history=True))


if __name__ == "__main__":
    run()
