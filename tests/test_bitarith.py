import pytest
from hypothesis import given
from hypothesis import strategies as st

from bitcraft.bitarith import (
    add_bits,
    booth_multiply,
    divide_bits,
    format_bits,
    main,
    negate_bits,
    parse_bits,
    subtract_bits,
)

BYTE = st.integers(min_value=-128, max_value=127)
SYMMETRIC = st.integers(min_value=-127, max_value=127)


def to_bits(x, width=8):
    return parse_bits(format(x % (1 << width), f"0{width}b")) if width == 8 else tuple(
        int(c) for c in format(x % (1 << width), f"0{width}b")
    )


def to_int(bits):
    value = int(format_bits(bits), 2)
    return value - (1 << len(bits)) if bits[0] else value


def wrap(x, width=8):
    x %= 1 << width
    return x - (1 << width) if x >= 1 << (width - 1) else x


def test_parse_pins_digit_order():
    assert parse_bits("00000101") == (0, 0, 0, 0, 0, 1, 0, 1)


@given(st.text(alphabet="01", min_size=8, max_size=8))
def test_parse_format_round_trip(text):
    assert format_bits(parse_bits(text)) == text


@pytest.mark.parametrize("text", ["", "0101", "000000001"])
def test_parse_rejects_wrong_length(text):
    with pytest.raises(ValueError, match="length 8"):
        parse_bits(text)


def test_parse_rejects_other_characters():
    with pytest.raises(ValueError, match="only '0' or '1'"):
        parse_bits("0120abcd")


@given(BYTE, BYTE)
def test_add_wraps_like_eight_bit_integers(x, y):
    assert to_int(add_bits(to_bits(x), to_bits(y))) == wrap(x + y)


@given(BYTE, BYTE)
def test_subtract_wraps_like_eight_bit_integers(x, y):
    assert to_int(subtract_bits(to_bits(x), to_bits(y))) == wrap(x - y)


@given(BYTE)
def test_negate_is_an_involution(x):
    bits = to_bits(x)
    assert negate_bits(negate_bits(bits)) == bits
    assert add_bits(bits, negate_bits(bits)) == (0,) * 8


def test_add_rejects_mismatched_widths():
    with pytest.raises(ValueError):
        add_bits((0, 1), (0, 1, 1))


@given(SYMMETRIC, SYMMETRIC)
def test_booth_product_is_exact(x, y):
    product = booth_multiply(to_bits(x), to_bits(y))
    assert len(product) == 16
    assert to_int(product) == x * y


@given(SYMMETRIC, SYMMETRIC.filter(lambda v: v != 0))
def test_division_truncates_toward_zero(x, y):
    quotient, remainder = divide_bits(to_bits(x), to_bits(y))
    q = to_int(quotient)
    r = to_int(remainder)
    assert q * y + r == x
    assert abs(r) < abs(y)
    assert r == 0 or (r > 0) == (x > 0)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide_bits(to_bits(5), to_bits(0))


def test_main_prints_every_result(capsys):
    first, second = "00000110", "11111101"
    assert main([first, second]) == 0
    out = capsys.readouterr().out
    a, b = parse_bits(first), parse_bits(second)
    quotient, remainder = divide_bits(a, b)
    assert f"Sum: {format_bits(add_bits(a, b))}\n" in out
    assert f"Difference: {format_bits(subtract_bits(a, b))}\n" in out
    assert f"Product: {format_bits(booth_multiply(a, b))}\n" in out
    assert f"Quotient: {format_bits(quotient)}\n" in out
    assert f"Remainder: {format_bits(remainder)}\n" in out


def test_main_rejects_short_input(capsys):
    assert main(["0101", "00000001"]) == 1
    assert "Error: Input strings must have length 8." in capsys.readouterr().err


def test_main_reports_division_by_zero(capsys):
    assert main(["00000011", "00000000"]) == 1
    assert "division by zero" in capsys.readouterr().err