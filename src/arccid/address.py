"""Reserve addresses: a 32-byte payload plus a 4-byte checksum in uppercase base32.

The checksum is the last 4 bytes of the first 32 bytes of the SHA-512 digest
of the payload. Addresses produced by earlier releases depend on exactly this
derivation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from arccid.cid import DIGEST_LENGTH, CID, CIDVersion, Multicodec
from arccid.codecs import base32_upper
from arccid.digest import default_digests
from arccid.errors import InvalidCharacterError, InvalidCIDError, InvalidReserveAddressError

if TYPE_CHECKING:
    from arccid.digest import DigestProvider

logger = logging.getLogger(__name__)

PAYLOAD_LENGTH: Final[int] = 32
CHECKSUM_LENGTH: Final[int] = 4
ADDRESS_BYTE_LENGTH: Final[int] = PAYLOAD_LENGTH + CHECKSUM_LENGTH
ADDRESS_LENGTH: Final[int] = 58


def _invalid(msg: str) -> InvalidReserveAddressError:
    logger.debug("Rejecting reserve address: %s", msg)
    return InvalidReserveAddressError(msg)


@dataclass(frozen=True, slots=True)
class AddressParts:
    """Decoded but unverified reserve address fields."""

    payload: bytes
    checksum: bytes


def compute_checksum(payload: bytes, *, digests: DigestProvider | None = None) -> bytes:
    """Return the 4-byte checksum for ``payload``."""
    provider = digests if digests is not None else default_digests
    truncated = provider.sha512(bytes(payload))[:32]
    return truncated[-CHECKSUM_LENGTH:]


def split_address(text: str) -> AddressParts:
    """Decode address text into payload and checksum without verifying the checksum."""
    if not isinstance(text, str):
        msg = "Reserve address must be a string."
        raise TypeError(msg)
    if len(text) != ADDRESS_LENGTH:
        msg = f"Reserve address must be {ADDRESS_LENGTH} characters, got {len(text)}"
        raise _invalid(msg)
    try:
        decoded = base32_upper.decode(text)
    except InvalidCharacterError as exc:
        msg = f"Invalid character in reserve address: {exc.character!r}"
        raise _invalid(msg) from exc
    if len(decoded) != ADDRESS_BYTE_LENGTH:
        msg = f"Reserve address must decode to {ADDRESS_BYTE_LENGTH} bytes, got {len(decoded)}"
        raise _invalid(msg)
    # The last symbol carries two unused bits; they must be zero.
    if base32_upper.encode(decoded) != text:
        msg = "Reserve address has non-zero trailing bits"
        raise _invalid(msg)
    return AddressParts(payload=decoded[:PAYLOAD_LENGTH], checksum=decoded[PAYLOAD_LENGTH:])


def decode_address(text: str, *, digests: DigestProvider | None = None) -> bytes:
    """Decode a reserve address and return its verified 32-byte payload."""
    parts = split_address(text)
    expected = compute_checksum(parts.payload, digests=digests)
    if parts.checksum != expected:
        msg = f"Reserve address checksum mismatch: expected {expected.hex()}, got {parts.checksum.hex()}"
        raise _invalid(msg)
    return parts.payload


def encode_address(payload: bytes, *, digests: DigestProvider | None = None) -> str:
    """Encode a 32-byte payload as a 58-character reserve address."""
    payload = bytes(payload)
    if len(payload) != PAYLOAD_LENGTH:
        msg = f"Reserve address payload must be {PAYLOAD_LENGTH} bytes, got {len(payload)}"
        raise _invalid(msg)
    return base32_upper.encode(payload + compute_checksum(payload, digests=digests))


def is_valid_address(text: str, *, digests: DigestProvider | None = None) -> bool:
    """Return whether ``text`` is a well-formed reserve address with a matching checksum."""
    try:
        decode_address(text, digests=digests)
    except (InvalidReserveAddressError, TypeError):
        return False
    return True


def cid_from_address(text: str, *, digests: DigestProvider | None = None) -> CID:
    """Read the dag-pb CIDv0 whose sha2-256 digest is stored in a reserve address."""
    return CID(CIDVersion.V0, Multicodec.DAG_PB, decode_address(text, digests=digests))


def address_from_cid(cid: CID, *, digests: DigestProvider | None = None) -> str:
    """Store a CID's digest in a reserve address."""
    if len(cid.digest) != DIGEST_LENGTH:
        msg = f"CID digest must be {DIGEST_LENGTH} bytes to fit a reserve address, got {len(cid.digest)}"
        logger.debug("Rejecting CID for reserve address: %s", msg)
        raise InvalidCIDError(msg)
    return encode_address(cid.digest, digests=digests)
