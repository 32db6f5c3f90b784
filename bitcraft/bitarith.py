"""Fixed-width two's complement arithmetic on bit tuples.

Bits are tuples of 0 and 1, most significant bit first.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

WIDTH = 8

Bits = tuple[int, ...]


def _bits(values: Sequence[int]) -> Bits:
    return tuple(1 if value else 0 for value in values)


def _same_width(a: Sequence[int], b: Sequence[int]) -> None:
    if len(a) != len(b):
        raise ValueError(f"bit widths differ: {len(a)} and {len(b)}")


def parse_bits(text: str) -> Bits:
    """Parse an 8-character string of '0' and '1' into bits."""
    if len(text) != WIDTH:
        raise ValueError("Input strings must have length 8.")
    if set(text) - {"0", "1"}:
        raise ValueError("Input string must contain only '0' or '1'.")
    return tuple(int(char) for char in text)


def format_bits(bits: Sequence[int]) -> str:
    """Render bits as a string of '0' and '1'."""
    return "".join("1" if bit else "0" for bit in bits)


def add_bits(a: Sequence[int], b: Sequence[int]) -> Bits:
    """Add two bit sequences of equal width, dropping the final carry."""
    _same_width(a, b)
    digits = []
    carry = 0
    for x, y in zip(reversed(_bits(a)), reversed(_bits(b))):
        total = x + y + carry
        digits.append(total & 1)
        carry = total >> 1
    return tuple(reversed(digits))


def negate_bits(bits: Sequence[int]) -> Bits:
    """Return the two's complement negation of ``bits``."""
    inverted = tuple(1 - bit for bit in _bits(bits))
    one = (0,) * (len(inverted) - 1) + (1,)
    return add_bits(inverted, one)


def subtract_bits(a: Sequence[int], b: Sequence[int]) -> Bits:
    """Subtract ``b`` from ``a`` by adding its negation."""
    _same_width(a, b)
    return add_bits(a, negate_bits(b))


def booth_multiply(q: Sequence[int], m: Sequence[int]) -> Bits:
    """Multiply ``q`` by ``m`` with Booth's algorithm.

    The result is twice as wide as the operands.
    """
    _same_width(q, m)
    multiplicand = _bits(m)
    multiplier = _bits(q)
    accumulator: Bits = (0,) * len(multiplier)
    previous = 0
    for _ in multiplier:
        step = (multiplier[-1], previous)
        if step == (1, 0):
            accumulator = subtract_bits(accumulator, multiplicand)
        elif step == (0, 1):
            accumulator = add_bits(accumulator, multiplicand)
        previous = multiplier[-1]
        multiplier = (accumulator[-1],) + multiplier[:-1]
        accumulator = (accumulator[0],) + accumulator[:-1]
    return accumulator + multiplier


def divide_bits(a: Sequence[int], b: Sequence[int]) -> tuple[Bits, Bits]:
    """Divide ``a`` by ``b`` with restoring division.

    Returns ``(quotient, remainder)``; the quotient is truncated toward zero
    and the remainder takes the sign of the dividend.
    """
    _same_width(a, b)
    dividend = _bits(a)
    divisor = _bits(b)
    if not any(divisor):
        raise ZeroDivisionError("division by zero")

    quotient = list(negate_bits(dividend) if dividend[0] else dividend)
    magnitude = negate_bits(divisor) if divisor[0] else divisor
    remainder: Bits = (0,) * len(dividend)

    for _ in dividend:
        remainder = remainder[1:] + (quotient[0],)
        quotient = quotient[1:] + [0]
        trial = subtract_bits(remainder, magnitude)
        if not trial[0]:
            remainder = trial
            quotient[-1] = 1

    result = tuple(quotient)
    if dividend[0] != divisor[0]:
        result = negate_bits(result)
    if dividend[0]:
        remainder = negate_bits(remainder)
    return result, remainder


def main(argv: Sequence[str] | None = None) -> int:
    """Read two 8-bit words from ``argv`` or standard input and print results."""
    words = sys.stdin.read().split() if argv is None else list(argv)
    words += [""] * (2 - len(words))

    print("Enter the first 8-bit number (in two's complement):  ", end="")
    print()
    print("Enter the second 8-bit number (in two's complement): ", end="")
    print()

    try:
        first = parse_bits(words[0])
        second = parse_bits(words[1])
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Sum: {format_bits(add_bits(first, second))}")
    print(f"Difference: {format_bits(subtract_bits(first, second))}")
    print(f"Product: {format_bits(booth_multiply(first, second))}")
    try:
        quotient, remainder = divide_bits(first, second)
    except ZeroDivisionError:
        print("Error: division by zero.", file=sys.stderr)
        return 1
    print(f"Quotient: {format_bits(quotient)}")
    print(f"Remainder: {format_bits(remainder)}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())