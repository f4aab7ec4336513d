"""Read two integers from a file and write a fixed set of results."""

from __future__ import annotations

import sys

from .biginteger import BigInteger


def compute(first: BigInteger | str | int, third: BigInteger | str | int) -> list[BigInteger]:
    """Return A, B, A+B, A-B, A-A, 3A-2B, AB, A^2, B^2 and 9A^4+16B^5."""
    a = BigInteger(first)
    b = BigInteger(third)
    return [
        a,
        b,
        a + b,
        a - b,
        a - a,
        3 * a - 2 * b,
        a * b,
        a * a,
        b * b,
        9 * a * a * a * a + 16 * b * b * b * b * b,
    ]


def _read_operands(path: str) -> tuple[str, str]:
    with open(path, encoding="utf-8") as handle:
        lines = [line.rstrip("\n") for line in handle]
    lines += [""] * (3 - len(lines))
    return lines[0], lines[2]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: arithmetic <input file> <output file>", file=sys.stderr)
        return 1
    source, target = args

    try:
        first, third = _read_operands(source)
    except OSError:
        print(f"Unable to open file {source} for reading", file=sys.stderr)
        return 1

    try:
        results = compute(first, third)
    except ValueError as err:
        print(f"Invalid input in {source}: {err}", file=sys.stderr)
        return 1

    try:
        with open(target, "w", encoding="utf-8") as out:
            out.writelines(f"{value}\n\n" for value in results)
    except OSError:
        print(f"Unable to open file {target} for writing", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())