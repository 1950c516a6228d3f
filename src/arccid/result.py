"""Ok/Err result values for callers that prefer returned failures over exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, NoReturn, ParamSpec, TypeVar

from arccid.address import decode_address, encode_address
from arccid.cid import parse_cid
from arccid.errors import ArccidError
from arccid.urls import parse_url

if TYPE_CHECKING:
    from collections.abc import Callable

    from arccid.cid import CID
    from arccid.errors import ErrorKind
    from arccid.urls import IPFSUrl

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        """Return ``True``."""
        return True

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying the typed error."""

    error: ArccidError

    @property
    def ok(self) -> Literal[False]:
        """Return ``False``."""
        return False

    @property
    def kind(self) -> ErrorKind:
        """Return the error kind tag."""
        return self.error.kind

    @property
    def message(self) -> str:
        """Return the human-readable error message."""
        return str(self.error)

    def unwrap(self) -> NoReturn:
        """Re-raise the carried error."""
        raise self.error


Result = Ok[T] | Err


def attempt(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]:
    """Call ``func`` and capture an ArccidError as Err.

    Other exceptions (TypeError for wrong argument types, for example) propagate.
    """
    try:
        return Ok(func(*args, **kwargs))
    except ArccidError as exc:
        return Err(exc)


def try_parse_cid(text: str) -> Result[CID]:
    """Parse CID text into Ok(CID) or Err(invalid_cid)."""
    return attempt(parse_cid, text)


def try_decode_address(text: str) -> Result[bytes]:
    """Decode a reserve address into Ok(payload) or Err(invalid_reserve_address)."""
    return attempt(decode_address, text)


def try_encode_address(payload: bytes) -> Result[str]:
    """Encode a payload into Ok(address) or Err(invalid_reserve_address)."""
    return attempt(encode_address, payload)


def try_parse_url(text: str) -> Result[IPFSUrl]:
    """Parse a locator into Ok(IPFSUrl) or Err(invalid_url / invalid_cid)."""
    return attempt(parse_url, text)
