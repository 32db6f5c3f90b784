"""Two's complement rendering of integers and rebuilding integers from bits."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
WORD_BITS = 32


def two_complement_bits(x: int) -> str:
    """Return the two's complement bits of ``x``.

    Values in ``-128..127`` use 8 bits, every other 32-bit value uses 32.
    """
    if not INT32_MIN <= x <= INT32_MAX:
        raise ValueError(f"{x} does not fit in a 32-bit signed integer")
    width = 8 if -128 <= x <= 127 else WORD_BITS
    return format(x & ((1 << width) - 1), f"0{width}b")


def integer_from_bits(bits: str | Iterable[object]) -> int:
    """Build a signed 32-bit integer from 32 bits, most significant first.

    A string counts every character other than ``'0'`` as a set bit; any
    other iterable counts truthy items as set bits.
    """
    if isinstance(bits, str):
        flags = [char != "0" for char in bits]
    else:
        flags = [bool(bit) for bit in bits]
    if len(flags) != WORD_BITS:
        raise ValueError("Array A must have exactly 32 elements.")
    value = int("".join("1" if flag else "0" for flag in flags), 2)
    return value - (1 << WORD_BITS) if flags[0] else value


def _read_words(argv: Sequence[str] | None) -> list[str]:
    return sys.stdin.read().split() if argv is None else list(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an integer and 32 bits from ``argv`` words, or from standard input."""
    words = _read_words(argv)

    print("Enter an integer X: ", end="")
    if not words:
        print()
        print("Error: an integer X is required.", file=sys.stderr)
        return 1
    try:
        x = int(words[0])
        bits = two_complement_bits(x)
    except ValueError as exc:
        print()
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Binary representation of {x} by Two Complement is: {bits}")
    print()

    print("Enter an array A of 32 elements: ", end="")
    chars = "".join(words[1:])[:WORD_BITS]
    try:
        value = integer_from_bits(chars)
    except ValueError as exc:
        print()
        print(exc, file=sys.stderr)
        return 1
    print(f"Constructed integer from array is: {value}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())