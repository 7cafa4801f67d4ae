import random

import pytest

from phonesort.domain import VALID_NUMBER_COUNT, decode, encode, is_valid_number, parse
from phonesort.errors import FormatError


@pytest.mark.parametrize(
    "n,expected",
    [
        (2_000_000, True),
        (5_550_100, True),
        (9_999_999, True),
        (0, False),
        (1_999_999, False),
        (2_110_000, False),  # 211 is an N11 code
        (9_119_999, False),
        (2_100_000, True),
        (2_010_000, True),
        (-1, False),
        (10_000_000, False),
    ],
)
def test_is_valid_number(n, expected):
    assert is_valid_number(n) is expected


def test_valid_number_count():
    # 800 prefixes start with 2-9, minus the eight N11 codes
    assert VALID_NUMBER_COUNT == 792 * 10_000


def test_encode_pads_and_inserts_dash():
    assert encode(0) == "000-0000"
    assert encode(5_550_100) == "555-0100"
    assert encode(42) == "000-0042"


def test_encode_rejects_out_of_range():
    with pytest.raises(ValueError):
        encode(10_000_000)


def test_decode_is_inverse_of_encode():
    rng = random.Random(7)
    for n in [0, 9_999_999] + [rng.randrange(10_000_000) for _ in range(200)]:
        assert decode(encode(n)) == n


@pytest.mark.parametrize(
    "text",
    ["5550100", "555-010", "555-01000", "555_0100", "55-50100", "abc-defg", "555-01a0", " 555-0100", "５５５-０１００"],
)
def test_decode_rejects_malformed(text):
    with pytest.raises(FormatError):
        decode(text)


@pytest.mark.parametrize("text", ["000-0000", "111-1111", "211-5555", "911-0000"])
def test_parse_rejects_invalid_prefix(text):
    decode(text)
    with pytest.raises(FormatError):
        parse(text)


def test_parse_accepts_valid():
    assert parse("200-0150") == 2_000_150
