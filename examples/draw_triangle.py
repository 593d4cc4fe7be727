"""Example: measure a clicked triangle and render it as TikZ."""

from trisolver import Controller, generate_tikz_document

CLICKS = [(120.0, 300.0), (380.0, 300.0), (250.0, 80.0)]


def main() -> None:
    controller = Controller()
    for x, y in CLICKS:
        controller.click(x, y)
    result = controller.compute()
    print("Status:", result.status)
    for key, value in result.values.items():
        print(f"{key}: {value:.3f}")
    print(generate_tikz_document(controller.state, include_history=True))


if __name__ == "__main__":
    main()
