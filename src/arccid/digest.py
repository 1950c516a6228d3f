"""DigestProvider: protocol for the fixed-length digests the codecs rely on."""

from __future__ import annotations

import hashlib
from typing import Protocol, runtime_checkable


@runtime_checkable
class DigestProvider(Protocol):
    """Digest source for CID construction and address checksums.

    Implementations must be stateless and safe to call from any thread.
    """

    def sha256(self, data: bytes) -> bytes:
        """Return the 32-byte SHA-256 digest of ``data``."""
        ...

    def sha512(self, data: bytes) -> bytes:
        """Return the 64-byte SHA-512 digest of ``data``."""
        ...


class HashlibDigestProvider:
    """DigestProvider backed by :mod:`hashlib`."""

    def sha256(self, data: bytes) -> bytes:
        """Return the 32-byte SHA-256 digest of ``data``."""
        return hashlib.sha256(data).digest()

    def sha512(self, data: bytes) -> bytes:
        """Return the 64-byte SHA-512 digest of ``data``."""
        return hashlib.sha512(data).digest()


default_digests: DigestProvider = HashlibDigestProvider()
