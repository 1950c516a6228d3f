"""IPFSUrl: ``ipfs://`` and ``template-ipfs://`` locators built on CIDs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Final

from arccid.cid import CID, parse_cid, serialize_cid
from arccid.errors import InvalidURLError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR: Final[str] = "://"
DEFAULT_GATEWAY: Final[str] = "https://gateway.pinata.cloud"


class Scheme(str, Enum):
    """Locator schemes."""

    IPFS = "ipfs"
    TEMPLATE_IPFS = "template-ipfs"


def _invalid(msg: str) -> InvalidURLError:
    logger.debug("Rejecting URL: %s", msg)
    return InvalidURLError(msg)


@dataclass(frozen=True, slots=True)
class IPFSUrl:
    """A scheme, a CID, and an optional path that may hold ``{name}`` placeholders."""

    scheme: Scheme
    cid: CID
    path: str | None = None

    def __post_init__(self) -> None:
        """Normalize the scheme to the Scheme enum."""
        try:
            scheme = Scheme(self.scheme)
        except ValueError:
            msg = f"Invalid scheme: {self.scheme!r}"
            raise _invalid(msg) from None
        object.__setattr__(self, "scheme", scheme)

    @classmethod
    def parse(cls, text: str) -> IPFSUrl:
        """Parse a locator string."""
        return parse_url(text)

    def resolve_template(self, variables: Mapping[str, str]) -> IPFSUrl:
        """Return a copy with every ``{name}`` in the path replaced by its value."""
        return resolve_template(self, variables)

    def resolve_asset_template(self, asset_id: int) -> IPFSUrl:
        """Return a copy with ``{id}`` replaced by the decimal asset ID."""
        return resolve_asset_template(self, asset_id)

    def gateway_url(self, gateway: str = DEFAULT_GATEWAY) -> str:
        """Return the HTTP gateway URL for this locator."""
        return f"{gateway.rstrip('/')}/ipfs/{serialize_cid(self.cid)}{self.path or ''}"

    def __str__(self) -> str:
        return serialize_url(self)


def parse_url(text: str) -> IPFSUrl:
    """Parse ``<scheme>://<cid>[/<path>]``.

    Only the first ``"/"`` after the CID splits it from the path; the path
    keeps its leading slash. A bare trailing slash yields no path.
    """
    if not isinstance(text, str):
        msg = "URL must be a string."
        raise TypeError(msg)

    scheme_text, separator, remainder = text.partition(SCHEME_SEPARATOR)
    if not separator:
        msg = f"Missing {SCHEME_SEPARATOR} in URL: {text!r}"
        raise _invalid(msg)
    try:
        scheme = Scheme(scheme_text)
    except ValueError:
        msg = f"Invalid scheme: {scheme_text!r}"
        raise _invalid(msg) from None

    cid_text, _, path = remainder.partition("/")
    if not cid_text:
        msg = f"Missing CID in URL: {text!r}"
        raise _invalid(msg)

    return IPFSUrl(scheme=scheme, cid=parse_cid(cid_text), path=f"/{path}" if path else None)


def serialize_url(url: IPFSUrl) -> str:
    """Serialize a locator back to text."""
    return f"{url.scheme.value}{SCHEME_SEPARATOR}{serialize_cid(url.cid)}{url.path or ''}"


def resolve_template(url: IPFSUrl, variables: Mapping[str, str]) -> IPFSUrl:
    """Replace every literal ``{name}`` in the path with ``variables[name]``."""
    if url.path is None:
        return url
    path = url.path
    for name, value in variables.items():
        path = path.replace(f"{{{name}}}", value)
    return replace(url, path=path)


def resolve_asset_template(url: IPFSUrl, asset_id: int) -> IPFSUrl:
    """Resolve the ``{id}`` placeholder with an unsigned asset ID."""
    if isinstance(asset_id, bool) or not isinstance(asset_id, int):
        msg = "asset_id must be an int."
        raise TypeError(msg)
    if asset_id < 0:
        msg = f"asset_id must be >= 0, got {asset_id}"
        raise ValueError(msg)
    return resolve_template(url, {"id": str(asset_id)})
