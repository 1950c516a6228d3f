"""Text and integer codecs: base58, base32 (two alphabets), and varint."""

from arccid.codecs._base32 import LOWER_ALPHABET, UPPER_ALPHABET, Base32Codec, base32_lower, base32_upper
from arccid.codecs._base58 import BASE58_ALPHABET, Base58Codec, base58
from arccid.codecs._varint import MAX_UINT64, decode_varint, encode_varint

__all__ = [
    "BASE58_ALPHABET",
    "LOWER_ALPHABET",
    "MAX_UINT64",
    "UPPER_ALPHABET",
    "Base32Codec",
    "Base58Codec",
    "base32_lower",
    "base32_upper",
    "base58",
    "decode_varint",
    "encode_varint",
]
