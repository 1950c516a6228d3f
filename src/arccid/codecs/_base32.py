"""Base32Codec: unpadded RFC 4648 base-32 with a configurable alphabet."""

from typing import Final

from arccid.errors import InvalidCharacterError

LOWER_ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz234567"
UPPER_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_PADDING: Final[str] = "="


class Base32Codec:
    """Pack and unpack bytes 5 bits per symbol, most significant bits first.

    Each instance is bound to one case-sensitive alphabet. Encoding never
    emits padding; decoding stops at the first ``"="`` if one is present.
    Trailing bits that do not fill a whole byte are dropped.
    """

    __slots__ = ("_alphabet", "_index", "name")

    def __init__(self, alphabet: str, *, name: str = "base32") -> None:
        """Initialize with a 32-symbol alphabet and a display name used in errors."""
        if len(alphabet) != 32 or len(set(alphabet)) != 32:
            msg = "Base32 alphabet must contain 32 distinct symbols."
            raise ValueError(msg)
        self._alphabet = alphabet
        self._index = {symbol: value for value, symbol in enumerate(alphabet)}
        self.name = name

    @property
    def alphabet(self) -> str:
        """Return the symbol table in digit order."""
        return self._alphabet

    def encode(self, data: bytes) -> str:
        """Encode bytes to unpadded base-32 text."""
        symbols: list[str] = []
        buffer = 0
        bits = 0
        for byte in data:
            buffer = (buffer << 8) | byte
            bits += 8
            while bits >= 5:
                bits -= 5
                symbols.append(self._alphabet[(buffer >> bits) & 0x1F])
            buffer &= (1 << bits) - 1
        if bits:
            symbols.append(self._alphabet[(buffer << (5 - bits)) & 0x1F])
        return "".join(symbols)

    def decode(self, text: str) -> bytes:
        """Decode base-32 text, raising InvalidCharacterError on foreign symbols."""
        out = bytearray()
        buffer = 0
        bits = 0
        for position, symbol in enumerate(text):
            if symbol == _PADDING:
                break
            value = self._index.get(symbol)
            if value is None:
                raise InvalidCharacterError(symbol, position, self.name)
            buffer = (buffer << 5) | value
            bits += 5
            if bits >= 8:
                bits -= 8
                out.append((buffer >> bits) & 0xFF)
                buffer &= (1 << bits) - 1
        return bytes(out)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# Identifiers and ledger addresses use different cases; keep the two bindings separate.
base32_lower = Base32Codec(LOWER_ALPHABET, name="base32")
base32_upper = Base32Codec(UPPER_ALPHABET, name="base32upper")
