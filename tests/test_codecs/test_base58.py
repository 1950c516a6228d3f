"""Tests for Base58Codec."""

import random

import pytest

from arccid.codecs import BASE58_ALPHABET, Base58Codec, base58
from arccid.errors import InvalidCharacterError


@pytest.mark.parametrize(
    ("data", "text"),
    [
        pytest.param(b"", "", id="empty"),
        pytest.param(b"\x00", "1", id="single-zero"),
        pytest.param(b"\x00\x00\x01", "112", id="leading-zeros"),
        pytest.param(b"hello world", "StV1DL6CwTryKyV", id="hello-world"),
        pytest.param(
            b"The quick brown fox jumps over the lazy dog",
            "7DdiPPYtxLjCD3wA1po2rvZHTDYjkZYiEtazrfiwJcwnKCizhGFhBGHeRdx",
            id="quick-brown-fox",
        ),
    ],
)
def test_known_vectors(data: bytes, text: str) -> None:
    assert base58.encode(data) == text
    assert base58.decode(text) == data


@pytest.mark.parametrize("length", [0, 1, 32, 64])
def test_round_trip_fixed_lengths(length: int) -> None:
    data = bytes(range(1, length + 1))
    assert base58.decode(base58.encode(data)) == data


@pytest.mark.parametrize("length", [1, 2, 32, 64])
def test_all_zero_bytes_round_trip(length: int) -> None:
    data = b"\x00" * length
    text = base58.encode(data)
    assert text == "1" * length
    assert base58.decode(text) == data


def test_round_trip_random_lengths() -> None:
    rng = random.Random(58)
    for _ in range(200):
        zeros = b"\x00" * rng.randint(0, 3)
        data = zeros + rng.randbytes(rng.randint(0, 80))
        assert base58.decode(base58.encode(data)) == data


@pytest.mark.parametrize("symbol", ["0", "O", "I", "l", "+", " "])
def test_decode_rejects_foreign_symbols(symbol: str) -> None:
    with pytest.raises(InvalidCharacterError) as exc_info:
        base58.decode(f"abc{symbol}def")
    assert exc_info.value.character == symbol
    assert exc_info.value.position == 3
    assert exc_info.value.kind == "invalid_character"


def test_default_alphabet() -> None:
    assert base58.alphabet == BASE58_ALPHABET
    assert len(BASE58_ALPHABET) == 58


def test_custom_alphabet_requires_58_distinct_symbols() -> None:
    with pytest.raises(ValueError, match="58 distinct"):
        Base58Codec("abc")
    with pytest.raises(ValueError, match="58 distinct"):
        Base58Codec("1" * 58)
