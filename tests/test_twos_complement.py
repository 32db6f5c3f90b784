import pytest
from hypothesis import given
from hypothesis import strategies as st

from bitcraft.twos_complement import integer_from_bits, main, two_complement_bits

INT32 = st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1)


def test_minus_one_is_eight_ones():
    assert two_complement_bits(-1) == "11111111"


@given(st.integers(min_value=-128, max_value=127))
def test_small_values_use_eight_bits(x):
    bits = two_complement_bits(x)
    assert len(bits) == 8
    assert int(bits, 2) == x % 256


@given(INT32.filter(lambda v: not -128 <= v <= 127))
def test_large_values_use_thirty_two_bits(x):
    bits = two_complement_bits(x)
    assert len(bits) == 32
    assert int(bits, 2) == x % (1 << 32)


@pytest.mark.parametrize("x", [1 << 31, -(1 << 31) - 1])
def test_out_of_range_rejected(x):
    with pytest.raises(ValueError):
        two_complement_bits(x)


@given(INT32)
def test_string_round_trip(x):
    assert integer_from_bits(format(x % (1 << 32), "032b")) == x


@given(INT32)
def test_list_round_trip(x):
    flags = [c == "1" for c in format(x % (1 << 32), "032b")]
    assert integer_from_bits(flags) == x


@given(INT32.filter(lambda v: not -128 <= v <= 127))
def test_rebuild_from_rendered_bits(x):
    assert integer_from_bits(two_complement_bits(x)) == x


@pytest.mark.parametrize("length", [0, 8, 31, 33])
def test_wrong_length_rejected(length):
    with pytest.raises(ValueError, match="exactly 32 elements"):
        integer_from_bits("1" * length)


def test_main_prints_both_results(capsys):
    assert main(["-2", "1" * 32]) == 0
    out = capsys.readouterr().out
    assert f"Binary representation of -2 by Two Complement is: {two_complement_bits(-2)}" in out
    assert "Constructed integer from array is: -1" in out


def test_main_accepts_bits_split_across_words(capsys):
    words = ["7"] + list("0" * 31 + "1")
    assert main(words) == 0
    out = capsys.readouterr().out
    assert f"Constructed integer from array is: {integer_from_bits('0' * 31 + '1')}" in out


def test_main_reports_short_array(capsys):
    assert main(["3", "0101"]) == 1
    assert "Array A must have exactly 32 elements." in capsys.readouterr().err


def test_main_reports_bad_integer(capsys):
    assert main(["abc"]) == 1
    assert "Error" in capsys.readouterr().err