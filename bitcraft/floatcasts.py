"""Demonstrations of conversions between ints and single-precision floats."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Sequence


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    (result,) = struct.unpack("f", struct.pack("f", value))
    return result


def cast_checks() -> list[str]:
    """Lines reporting which int/float conversions preserve their value."""
    lines: list[str] = []

    float_begin = to_float32(3.14159)
    lines.append(f"Float number at the beginning: {float_begin:g}")
    float_after = to_float32(float(int(float_begin)))
    lines.append(f"Float number after conversion: {float_after:g}")
    same = "the same" if float_begin == float_after else "not the same"
    lines.append(f"The float number is {same} after conversion.")
    lines.append("")

    int_begin = 5
    lines.append(f"Int number at the beginning: {int_begin}")
    int_after = int(to_float32(float(int_begin)))
    lines.append(f"Int number after conversion: {int_after}")
    same = "the same" if int_begin == int_after else "not the same"
    lines.append(f"The int number is {same} after conversion.")
    lines.append("")

    f1 = to_float32(1.0)
    f2 = to_float32(1e10)
    f3 = to_float32(-1e10)
    result1 = to_float32(to_float32(f1 + f2) + f3)
    result2 = to_float32(to_float32(f2 + f3) + f1)
    lines.append(f"Result of (f1 + f2) + f3: {result1:g}")
    lines.append(f"Result of f1 + (f2 + f3): {result2:g}")
    if result1 == result2:
        lines.append("The addition of floating-point numbers is associative.")
    else:
        lines.append("The addition of floating-point numbers is not associative.")

    f = to_float32(2.0)
    i = int(3.14159 * f)
    lines.append(f"The value of i is: {i}")

    i = 3
    f = to_float32(f + to_float32(float(i)))
    lines.append(f"The value of f is: {f:g}")

    checks = [
        ("i == (int)((float)i)", i == int(to_float32(float(i)))),
        ("i == (int)((double)i)", i == int(float(i))),
    ]
    f = to_float32(3.5)
    checks += [
        ("f == (float)((int)f)", f == to_float32(float(int(f)))),
        ("f == (double)((int)f)", f == float(int(f))),
    ]
    lines.extend(f"{label}: {str(flag).lower()}" for label, flag in checks)
    lines.append("")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print the conversion checks."""
    argparse.ArgumentParser(
        prog="floatcasts",
        description="Show which conversions between int and float keep their value.",
    ).parse_args(argv)
    for line in cast_checks():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())