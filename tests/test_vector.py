import io

import pytest
from hypothesis import given, strategies as st

from bigbool.vector import (
    BigBool,
    BigBoolError,
    InvalidBitStringError,
    check_bits,
    equalize,
    read_bits,
)

LONG = "10101111010101110011111111011010101011101011010"
V2 = "10111010001"
V3 = "1011"
V4 = "00001110110"
V5 = "10110111"

bit_strings = st.text(alphabet="01", min_size=1, max_size=120)


def bb(text):
    return BigBool.from_string(text)


@pytest.mark.parametrize("text", ["10110111", "1011", LONG])
def test_string_round_trip(text):
    assert str(bb(text)) == text
    assert len(bb(text)) == len(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        (LONG, "01010000101010001100000000100101010100010100101"),
        (V2, "01000101110"),
        (V3, "0100"),
        (V4, "11110001001"),
        (V5, "01001000"),
    ],
)
def test_not(text, expected):
    assert str(~bb(text)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (LONG, V2, "10101111010101110011111111011010101001010001011"),
        (V2, V3, "10111011010"),
        (V2, V4, "10110100111"),
        (V4, V5, "00011000001"),
    ],
)
def test_xor(a, b, expected):
    assert str(bb(a) ^ bb(b)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (LONG, V2, "10101111010101110011111111011010101011111011011"),
        (V2, V3, "10111011011"),
        (V2, V4, "10111110111"),
        (V4, V5, "00011110111"),
    ],
)
def test_or(a, b, expected):
    assert str(bb(a) | bb(b)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (LONG, V2, "00000000000000000000000000000000000010101010000"),
        (V2, V3, "00000000001"),
        (V2, V4, "00001010000"),
        (V4, V5, "00000110110"),
    ],
)
def test_and(a, b, expected):
    assert str(bb(a) & bb(b)) == expected


@pytest.mark.parametrize(
    "number, expected",
    [
        (8192, "10000000000000"),
        (0b101111011111001000100010110100101, "101111011111001000100010110100101"),
        (0, "0"),
    ],
)
def test_from_int(number, expected):
    assert str(BigBool.from_int(number)) == expected


@pytest.mark.parametrize("number", [-1, 1 << 64])
def test_from_int_out_of_range(number):
    with pytest.raises(BigBoolError):
        BigBool.from_int(number)


def test_shifts():
    assert str(bb("10111010001") << 7) == "101110100010000000"
    assert str(bb("10100110000111") >> 4) == "1010011000"
    vec = bb("101011011111110101011")
    assert str(vec << -3) == "101011011111110101"
    assert str(vec >> -3) == "101011011111110101011000"
    assert str(bb("10111010001") >> 11) == "0"


def test_rotations():
    vec = bb(LONG)
    assert str(vec.rotate_left(14)) == "11001111111101101010101110101101010101111010101"
    assert str(vec.rotate_right(14)) == "01011101011010101011110101011100111111110110101"
    vec = bb("10101111010101110011111111011000")
    assert str(vec.rotate_left(-12)) == "11111101100010101111010101110011"
    assert str(vec.rotate_right(-5)) == "11101010111001111111101100010101"
    vec = bb("101011110101011100111111110100001001100000000100")
    assert str(vec.rotate_left(16)) == "001111111101000010011000000001001010111101010111"
    assert str(vec.rotate_right(16)) == "100110000000010010101111010101110011111111010000"


def test_length_and_empty():
    vec = bb("101100101101010101010111111101001100101111111111")
    assert len(vec) == 48
    assert str(BigBool.empty(len(vec))) == "0" * 48
    assert BigBool(5) == BigBool.empty(5)


@pytest.mark.parametrize("text", ["", "10a1", "2", "1 0"])
def test_invalid_strings(text):
    with pytest.raises(InvalidBitStringError):
        BigBool.from_string(text)
    with pytest.raises(InvalidBitStringError):
        check_bits(text)


def test_negative_length_rejected():
    with pytest.raises(BigBoolError):
        BigBool(-1)
    with pytest.raises(BigBoolError):
        bb("1").resized(-2)


def test_equalize_extends_shorter():
    first, second = equalize(bb(V3), bb(V2))
    assert len(first) == len(second) == len(V2)
    assert str(first) == V3.rjust(len(V2), "0")
    assert str(second) == V2


def test_resized_truncates_high_bits():
    assert str(bb(V3).resized(2)) == V3[-2:]


def test_repr_and_equality():
    assert repr(bb(V3)) == "BigBool('1011')"
    assert bb("01") != bb("1")
    assert hash(bb(V3)) == hash(bb(V3))


def test_read_bits():
    stream = io.StringIO("1011\n0110\n")
    assert read_bits(stream) == "1011"
    assert read_bits(stream) == "0110"
    with pytest.raises(EOFError):
        read_bits(stream)


@given(bit_strings)
def test_double_inversion(text):
    assert ~~bb(text) == bb(text)


@given(bit_strings, bit_strings)
def test_xor_identity(a, b):
    x, y = equalize(bb(a), bb(b))
    assert x ^ y == (~x & y) | (x & ~y)


@given(bit_strings, st.integers(min_value=0, max_value=120))
def test_rotation_round_trip(text, shift):
    vec = bb(text)
    k = shift % (len(vec) + 1)
    assert vec.rotate_left(k).rotate_right(k) == vec
    assert len(vec.rotate_left(k)) == len(vec)


@given(bit_strings, st.integers(min_value=0, max_value=64))
def test_shift_round_trip(text, shift):
    vec = bb(text)
    assert (vec << shift) >> shift == vec


@given(st.integers(min_value=0, max_value=(1 << 64) - 1))
def test_from_int_matches_binary(number):
    assert int(str(BigBool.from_int(number)), 2) == number