"""CID: content identifiers in the v0 and v1 text and binary forms.

Only the sha2-256 multihash is supported, so every digest is 32 bytes and the
multihash envelope is always ``0x12 0x20 <digest>``. Text forms:

- v0: base58 of the 34-byte envelope (always starts with ``"Qm"``)
- v1: ``"b"`` + lowercase base32, or ``"z"`` + base58, of
  ``0x01 <varint codec> <envelope>``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Final, Literal

from arccid.codecs import base32_lower, base58, decode_varint, encode_varint
from arccid.digest import default_digests
from arccid.errors import InvalidCharacterError, InvalidCIDError

if TYPE_CHECKING:
    from arccid.digest import DigestProvider

logger = logging.getLogger(__name__)

SHA2_256_CODE: Final[int] = 0x12
DIGEST_LENGTH: Final[int] = 32
MULTIHASH_HEADER: Final[bytes] = bytes((SHA2_256_CODE, DIGEST_LENGTH))
MULTIHASH_LENGTH: Final[int] = len(MULTIHASH_HEADER) + DIGEST_LENGTH
CIDV1_MARKER: Final[int] = 0x01

V0_PREFIX: Final[str] = "Qm"
BASE32_PREFIX: Final[str] = "b"
BASE58_PREFIX: Final[str] = "z"

CIDBase = Literal["base32", "base58"]


class CIDVersion(IntEnum):
    """CID version number."""

    V0 = 0
    V1 = 1


class Multicodec(IntEnum):
    """Content codec tags understood by this package."""

    RAW = 0x55
    DAG_PB = 0x70
    DAG_CBOR = 0x71
    DAG_JSON = 0x0129


def _invalid(msg: str) -> InvalidCIDError:
    logger.debug("Rejecting CID: %s", msg)
    return InvalidCIDError(msg)


@dataclass(frozen=True, slots=True)
class CID:
    """Immutable content identifier: version, codec tag, and sha2-256 digest."""

    version: CIDVersion
    codec: Multicodec
    digest: bytes

    def __post_init__(self) -> None:
        """Coerce fields to their enum/bytes types and reject v0 with a non dag-pb codec."""
        if not isinstance(self.digest, (bytes, bytearray, memoryview)):
            msg = "CID.digest must be bytes-like."
            raise TypeError(msg)
        try:
            version = CIDVersion(self.version)
        except ValueError:
            msg = f"Unsupported CID version: {self.version!r}"
            raise _invalid(msg) from None
        try:
            codec = Multicodec(self.codec)
        except ValueError:
            msg = f"Unsupported multicodec tag: {self.codec!r}"
            raise _invalid(msg) from None
        if version is CIDVersion.V0 and codec is not Multicodec.DAG_PB:
            msg = f"CIDv0 always uses dag-pb, got {codec.name.lower()}"
            raise _invalid(msg)

        object.__setattr__(self, "version", version)
        object.__setattr__(self, "codec", codec)
        object.__setattr__(self, "digest", bytes(self.digest))

    @classmethod
    def parse(cls, text: str) -> CID:
        """Parse a CID from its ``Qm``/``b``/``z`` text form."""
        return parse_cid(text)

    @classmethod
    def from_bytes(cls, data: bytes) -> CID:
        """Parse a CID from its binary form (bare multihash for v0)."""
        data = bytes(data)
        if len(data) == MULTIHASH_LENGTH and data.startswith(MULTIHASH_HEADER):
            return cls(CIDVersion.V0, Multicodec.DAG_PB, data[len(MULTIHASH_HEADER) :])
        return _parse_v1_bytes(data)

    @classmethod
    def from_content(
        cls,
        content: bytes,
        *,
        version: CIDVersion = CIDVersion.V1,
        codec: Multicodec = Multicodec.RAW,
        digests: DigestProvider | None = None,
    ) -> CID:
        """Hash ``content`` with sha2-256 and wrap the digest in a CID."""
        provider = digests if digests is not None else default_digests
        return cls(version, codec, provider.sha256(content))

    @property
    def multihash(self) -> bytes:
        """Return the 34-byte multihash envelope."""
        return MULTIHASH_HEADER + _require_digest(self)

    def to_bytes(self) -> bytes:
        """Return the binary CID."""
        if self.version is CIDVersion.V0:
            return self.multihash
        return bytes((CIDV1_MARKER,)) + encode_varint(int(self.codec)) + self.multihash

    def encode(self, base: CIDBase | None = None) -> str:
        """Serialize to text, optionally choosing the v1 multibase."""
        return serialize_cid(self, base=base)

    def to_v1(self) -> CID:
        """Return the v1 form of this CID (v1 CIDs are returned unchanged)."""
        if self.version is CIDVersion.V1:
            return self
        return CID(CIDVersion.V1, self.codec, self.digest)

    def to_v0(self) -> CID:
        """Return the v0 form of this CID; only dag-pb CIDs have one."""
        if self.version is CIDVersion.V0:
            return self
        if self.codec is not Multicodec.DAG_PB:
            msg = f"Only dag-pb CIDs convert to v0, got {self.codec.name.lower()}"
            raise _invalid(msg)
        return CID(CIDVersion.V0, Multicodec.DAG_PB, self.digest)

    def __str__(self) -> str:
        return serialize_cid(self)


def _require_digest(cid: CID) -> bytes:
    if len(cid.digest) != DIGEST_LENGTH:
        msg = f"CID digest must be {DIGEST_LENGTH} bytes, got {len(cid.digest)}"
        raise _invalid(msg)
    return cid.digest


def _split_multihash(envelope: bytes) -> bytes:
    """Validate a multihash envelope and return its digest."""
    if len(envelope) != MULTIHASH_LENGTH:
        msg = f"Multihash must be {MULTIHASH_LENGTH} bytes, got {len(envelope)}"
        raise _invalid(msg)
    if not envelope.startswith(MULTIHASH_HEADER):
        msg = f"Unsupported multihash header: {envelope[:2].hex()}"
        raise _invalid(msg)
    return envelope[len(MULTIHASH_HEADER) :]


def _parse_v1_bytes(data: bytes) -> CID:
    if not data or data[0] != CIDV1_MARKER:
        msg = "CIDv1 must start with version byte 0x01"
        raise _invalid(msg)
    try:
        tag, consumed = decode_varint(data, 1)
    except ValueError as exc:
        msg = f"Malformed codec varint: {exc}"
        raise _invalid(msg) from exc
    try:
        codec = Multicodec(tag)
    except ValueError:
        msg = f"Unknown multicodec tag: 0x{tag:x}"
        raise _invalid(msg) from None
    digest = _split_multihash(data[1 + consumed :])
    return CID(CIDVersion.V1, codec, digest)


def parse_cid(text: str) -> CID:
    """Parse CID text.

    ``Qm...`` is read as a base58 v0 multihash, ``b...`` as base32 v1 (the
    remainder is lowercased first) and ``z...`` as base58 v1.
    """
    if not isinstance(text, str):
        msg = "CID text must be a string."
        raise TypeError(msg)

    try:
        if text.startswith(V0_PREFIX):
            digest = _split_multihash(base58.decode(text))
            return CID(CIDVersion.V0, Multicodec.DAG_PB, digest)
        if text.startswith(BASE32_PREFIX):
            return _parse_v1_bytes(base32_lower.decode(text[1:].lower()))
        if text.startswith(BASE58_PREFIX):
            return _parse_v1_bytes(base58.decode(text[1:]))
    except InvalidCharacterError as exc:
        msg = f"Invalid CID text {text!r}: {exc}"
        raise _invalid(msg) from exc

    msg = f"CID must start with 'Qm' (v0), 'b' or 'z' (v1): {text!r}"
    raise _invalid(msg)


def serialize_cid(cid: CID, *, base: CIDBase | None = None) -> str:
    """Serialize a CID to text.

    v0 CIDs are always base58. v1 CIDs default to ``"b"`` + base32; pass
    ``base="base58"`` for the ``"z"`` form.
    """
    envelope = cid.multihash
    if cid.version is CIDVersion.V0:
        if base not in (None, "base58"):
            msg = f"CIDv0 has no {base} form"
            raise _invalid(msg)
        return base58.encode(envelope)

    payload = cid.to_bytes()
    if base in (None, "base32"):
        return BASE32_PREFIX + base32_lower.encode(payload)
    if base == "base58":
        return BASE58_PREFIX + base58.encode(payload)
    msg = f"Unsupported CID base: {base!r}"
    raise ValueError(msg)
