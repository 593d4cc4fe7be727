"""Example: complete a right triangle from two angles and one side."""

from trisolver import Inputs, solve

INPUTS = Inputs(A=90, B=45, a=5)


def main() -> None:
    result = solve("angles", INPUTS)
    print("Status:", result.status)
    for key, value in result.values.items():
        print(f"{key}: {value:.6f}")


if __name__ == "__main__":
    main()
