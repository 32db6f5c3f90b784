"""Inspect and build IEEE 754 single-precision values bit by bit."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from collections.abc import Sequence
from dataclasses import dataclass

FLOAT_BITS = 32


@dataclass(frozen=True)
class FloatFields:
    """The sign, exponent and significand fields of a 32-bit float."""

    sign: int
    exponent: int
    significand: int

    def __str__(self) -> str:
        return f"{self.sign} {self.exponent:08b} {self.significand:023b}"


def _format(value: float) -> str:
    return f"{value:g}"


def float_fields(value: float) -> FloatFields:
    """Split ``value``, rounded to single precision, into its fields."""
    (raw,) = struct.unpack(">I", struct.pack(">f", value))
    return FloatFields(raw >> 31, (raw >> 23) & 0xFF, raw & 0x7FFFFF)


def dump_float(value: float) -> str:
    """Describe the binary representation of ``value`` as one line."""
    return f"Corresponding binary representation: {float_fields(value)}"


def bits_to_float(text: str) -> float:
    """Build a single-precision float from 32 bits; spaces are ignored."""
    digits = text.replace(" ", "")
    if len(digits) != FLOAT_BITS:
        raise ValueError("Input string must be exactly 32 characters long.")
    if set(digits) - {"0", "1"}:
        raise ValueError("Input string must contain only '0' or '1'.")
    (value,) = struct.unpack(">f", int(digits, 2).to_bytes(4, "big"))
    return value


def _ieee_divide(x: float, y: float) -> float:
    if y != 0 or math.isnan(y):
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _ieee_sqrt(x: float) -> float:
    return math.nan if x < 0 else math.sqrt(x)


def special_values_report() -> list[str]:
    """Lines showing how zero, denormals, infinities and NaNs are stored."""
    lines: list[str] = []

    def show(label: str, value: float) -> None:
        lines.append(f"{label}{_format(value)}")
        lines.append(dump_float(value))
        lines.append("")

    lines.append("1.3E+20")
    lines.append(dump_float(1.3e20))
    lines.append("")

    smallest = "0 00000000 00000000000000000000001"
    lines.append(
        f"Smallest float number greater than 0: {_format(bits_to_float(smallest))}"
    )
    lines.append(f"Corresponding binary representation: {smallest}")
    lines.append("")

    inf = math.inf
    x = 1.0
    show("Zero: ", 0.0)
    show("Denormalized number: ", bits_to_float("0" * 31 + "1"))
    show("Infinity number: ", inf)
    show("NaN number: ", math.nan)

    lines.append("Mathematical operations create special float numbers: ")
    show("X - (+inf): ", x - inf)
    show("(+inf) - (+inf): ", inf - inf)
    show("X / 0: ", _ieee_divide(x, 0.0))
    show("0 / 0: ", _ieee_divide(0.0, 0.0))
    show("inf / inf: ", inf / inf)
    show("sqrt(X) with X < 0: ", _ieee_sqrt(-x))
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floatbits",
        description="Show and build the bits of 32-bit floating point numbers.",
    )
    commands = parser.add_subparsers(dest="command")
    dump = commands.add_parser("dump", help="print the bits of a number")
    dump.add_argument("value", nargs="?")
    decode = commands.add_parser("decode", help="build a number from 32 bits")
    decode.add_argument("bits", nargs="*")
    commands.add_parser("special", help="show special values")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``dump``, ``decode`` or ``special`` (default) command."""
    args = _build_parser().parse_args(argv)

    if args.command == "dump":
        text = args.value
        if text is None:
            text = input("Enter floating-point (32-bit): ")
        try:
            line = dump_float(float(text))
        except (ValueError, OverflowError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(line)
        return 0

    if args.command == "decode":
        if args.bits:
            text = " ".join(args.bits)
        else:
            text = input(
                "Enter the binary representation of the floating point number (32-bit): "
            )
        try:
            number = bits_to_float(text)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Corresponding (single) floating point number: {_format(number)}")
        print()
        return 0

    for line in special_values_report():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())