"""Typed errors for arccid."""

from typing import ClassVar, Literal

ErrorKind = Literal["invalid_character", "invalid_cid", "invalid_reserve_address", "invalid_url"]


class ArccidError(Exception):
    """Base exception for all arccid errors."""

    kind: ClassVar[ErrorKind]


class InvalidCharacterError(ArccidError, ValueError):
    """Raised when a text codec meets a symbol outside its alphabet."""

    kind: ClassVar[ErrorKind] = "invalid_character"

    def __init__(self, character: str, position: int, alphabet_name: str) -> None:
        """Initialize with the offending character and its index in the input."""
        self.character = character
        self.position = position
        self.alphabet_name = alphabet_name
        super().__init__(f"Invalid {alphabet_name} character {character!r} at position {position}")


class InvalidCIDError(ArccidError, ValueError):
    """Raised for a bad CID prefix, length, multihash header, or codec tag."""

    kind: ClassVar[ErrorKind] = "invalid_cid"


class InvalidReserveAddressError(ArccidError, ValueError):
    """Raised for a bad reserve address character, decoded length, or checksum."""

    kind: ClassVar[ErrorKind] = "invalid_reserve_address"


class InvalidURLError(ArccidError, ValueError):
    """Raised for a missing scheme separator, unknown scheme, or missing CID segment."""

    kind: ClassVar[ErrorKind] = "invalid_url"
