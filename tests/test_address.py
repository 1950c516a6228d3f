"""Tests for reserve address encoding."""

import hashlib
import random

import pytest

from arccid.address import (
    ADDRESS_LENGTH,
    AddressParts,
    address_from_cid,
    cid_from_address,
    compute_checksum,
    decode_address,
    encode_address,
    is_valid_address,
    split_address,
)
from arccid.cid import CID, CIDVersion, Multicodec
from arccid.codecs import UPPER_ALPHABET, base32_upper
from arccid.errors import InvalidCharacterError, InvalidCIDError, InvalidReserveAddressError

PAYLOAD = bytes(range(32))


def test_encode_produces_58_uppercase_symbols() -> None:
    address = encode_address(PAYLOAD)
    assert len(address) == ADDRESS_LENGTH
    assert set(address) <= set(UPPER_ALPHABET)
    assert "=" not in address


def test_checksum_is_tail_of_first_half_of_sha512() -> None:
    expected = hashlib.sha512(PAYLOAD).digest()[28:32]
    assert compute_checksum(PAYLOAD) == expected
    assert base32_upper.decode(encode_address(PAYLOAD)) == PAYLOAD + expected


def test_checksum_differs_from_sha512_tail() -> None:
    assert compute_checksum(PAYLOAD) != hashlib.sha512(PAYLOAD).digest()[-4:]


@pytest.mark.parametrize(
    "payload",
    [
        pytest.param(b"\x00" * 32, id="zeros"),
        pytest.param(b"\xff" * 32, id="ones"),
        pytest.param(PAYLOAD, id="counting"),
    ],
)
def test_round_trip(payload: bytes) -> None:
    assert decode_address(encode_address(payload)) == payload


def test_round_trip_random_payloads() -> None:
    rng = random.Random(36)
    for _ in range(100):
        payload = rng.randbytes(32)
        assert decode_address(encode_address(payload)) == payload


def test_flipping_any_decoded_bit_fails() -> None:
    raw = bytearray(base32_upper.decode(encode_address(PAYLOAD)))
    for index in range(len(raw)):
        for bit in range(8):
            corrupted = bytearray(raw)
            corrupted[index] ^= 1 << bit
            with pytest.raises(InvalidReserveAddressError, match="checksum mismatch"):
                decode_address(base32_upper.encode(bytes(corrupted)))


def test_flipping_any_symbol_bit_fails() -> None:
    address = encode_address(PAYLOAD)
    for position, symbol in enumerate(address):
        value = UPPER_ALPHABET.index(symbol)
        for bit in range(5):
            replacement = UPPER_ALPHABET[value ^ (1 << bit)]
            corrupted = address[:position] + replacement + address[position + 1 :]
            with pytest.raises(InvalidReserveAddressError):
                decode_address(corrupted)


@pytest.mark.parametrize("length", [0, 57, 59, 64])
def test_decode_rejects_wrong_length(length: int) -> None:
    address = (encode_address(PAYLOAD) * 2)[:length]
    with pytest.raises(InvalidReserveAddressError, match="58 characters"):
        decode_address(address)


def test_decode_rejects_foreign_characters() -> None:
    address = encode_address(PAYLOAD)
    with pytest.raises(InvalidReserveAddressError, match="Invalid character") as exc_info:
        decode_address("1" + address[1:])
    assert isinstance(exc_info.value.__cause__, InvalidCharacterError)

    with pytest.raises(InvalidReserveAddressError):
        decode_address(address.lower())


def test_decode_rejects_padding_inside_address() -> None:
    address = encode_address(PAYLOAD)
    with pytest.raises(InvalidReserveAddressError, match="36 bytes"):
        decode_address(address[:50] + "=" * 8)


def test_decode_requires_string() -> None:
    with pytest.raises(TypeError):
        decode_address(b"A" * 58)  # type: ignore[arg-type]


@pytest.mark.parametrize("length", [0, 31, 33, 36])
def test_encode_rejects_wrong_payload_length(length: int) -> None:
    with pytest.raises(InvalidReserveAddressError, match="32 bytes"):
        encode_address(b"\x01" * length)


def test_split_address_returns_unverified_parts() -> None:
    parts = split_address(encode_address(PAYLOAD))
    assert parts == AddressParts(payload=PAYLOAD, checksum=compute_checksum(PAYLOAD))

    raw = bytearray(base32_upper.decode(encode_address(PAYLOAD)))
    raw[-1] ^= 0x01
    tampered = split_address(base32_upper.encode(bytes(raw)))
    assert tampered.payload == PAYLOAD
    assert tampered.checksum != compute_checksum(PAYLOAD)


def test_is_valid_address() -> None:
    address = encode_address(PAYLOAD)
    assert is_valid_address(address)
    assert not is_valid_address(address[:-1])
    assert not is_valid_address("A" * 58)
    assert not is_valid_address(None)  # type: ignore[arg-type]


def test_custom_digest_provider_drives_checksum() -> None:
    class FixedDigests:
        def sha256(self, data: bytes) -> bytes:
            return b"\x00" * 32

        def sha512(self, data: bytes) -> bytes:
            return bytes(range(64))

    address = encode_address(PAYLOAD, digests=FixedDigests())
    assert split_address(address).checksum == bytes(range(28, 32))
    assert decode_address(address, digests=FixedDigests()) == PAYLOAD
    with pytest.raises(InvalidReserveAddressError):
        decode_address(address)


def test_cid_from_address_yields_v0_dag_pb() -> None:
    address = encode_address(PAYLOAD)
    cid = cid_from_address(address)
    assert cid == CID(CIDVersion.V0, Multicodec.DAG_PB, PAYLOAD)


def test_address_from_cid_round_trips_the_digest() -> None:
    cid = CID(CIDVersion.V1, Multicodec.RAW, PAYLOAD)
    address = address_from_cid(cid)
    assert address == encode_address(PAYLOAD)
    assert cid_from_address(address).digest == cid.digest


def test_address_from_cid_requires_32_byte_digest() -> None:
    cid = CID(CIDVersion.V0, Multicodec.DAG_PB, PAYLOAD[:31])
    with pytest.raises(InvalidCIDError, match="32 bytes"):
        address_from_cid(cid)
