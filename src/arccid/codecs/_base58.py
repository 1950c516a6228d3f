"""Base58Codec: big-number base-58 text encoding with leading-zero preservation."""

from typing import Final

from arccid.errors import InvalidCharacterError

BASE58_ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


class Base58Codec:
    """Encode and decode bytes as base-58 text.

    The input is read as one big-endian unsigned integer. Every leading zero
    byte maps to one leading zero digit (``"1"`` in the default alphabet) so
    the byte length survives a round trip.
    """

    __slots__ = ("_alphabet", "_index")

    def __init__(self, alphabet: str = BASE58_ALPHABET) -> None:
        """Initialize with a 58-symbol alphabet."""
        if len(alphabet) != 58 or len(set(alphabet)) != 58:
            msg = "Base58 alphabet must contain 58 distinct symbols."
            raise ValueError(msg)
        self._alphabet = alphabet
        self._index = {symbol: value for value, symbol in enumerate(alphabet)}

    @property
    def alphabet(self) -> str:
        """Return the symbol table in digit order."""
        return self._alphabet

    def encode(self, data: bytes) -> str:
        """Encode bytes to base-58 text."""
        zero_digit = self._alphabet[0]
        leading_zeros = len(data) - len(data.lstrip(b"\x00"))
        value = int.from_bytes(data, "big")

        digits: list[str] = []
        while value:
            value, remainder = divmod(value, 58)
            digits.append(self._alphabet[remainder])
        return zero_digit * leading_zeros + "".join(reversed(digits))

    def decode(self, text: str) -> bytes:
        """Decode base-58 text to bytes, raising InvalidCharacterError on foreign symbols."""
        zero_digit = self._alphabet[0]
        value = 0
        for position, symbol in enumerate(text):
            digit = self._index.get(symbol)
            if digit is None:
                raise InvalidCharacterError(symbol, position, "base58")
            value = value * 58 + digit

        leading_zeros = len(text) - len(text.lstrip(zero_digit))
        body = value.to_bytes((value.bit_length() + 7) // 8, "big")
        return b"\x00" * leading_zeros + body

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alphabet={self._alphabet!r})"


base58 = Base58Codec()
