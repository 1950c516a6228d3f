"""arccid: CIDs, reserve addresses, and IPFS locators for ledger-anchored content."""

import importlib.metadata as importlib_metadata
import logging

from arccid.address import (
    AddressParts,
    address_from_cid,
    cid_from_address,
    compute_checksum,
    decode_address,
    encode_address,
    is_valid_address,
    split_address,
)
from arccid.cid import CID, CIDVersion, Multicodec, parse_cid, serialize_cid
from arccid.digest import DigestProvider, HashlibDigestProvider
from arccid.errors import (
    ArccidError,
    ErrorKind,
    InvalidCharacterError,
    InvalidCIDError,
    InvalidReserveAddressError,
    InvalidURLError,
)
from arccid.result import Err, Ok, Result, attempt, try_decode_address, try_encode_address, try_parse_cid, try_parse_url
from arccid.template import RESERVE_PLACEHOLDER, ReserveTemplate
from arccid.urls import (
    DEFAULT_GATEWAY,
    IPFSUrl,
    Scheme,
    parse_url,
    resolve_asset_template,
    resolve_template,
    serialize_url,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("arccid")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "CID",
    "DEFAULT_GATEWAY",
    "RESERVE_PLACEHOLDER",
    "AddressParts",
    "ArccidError",
    "CIDVersion",
    "DigestProvider",
    "Err",
    "ErrorKind",
    "HashlibDigestProvider",
    "IPFSUrl",
    "InvalidCIDError",
    "InvalidCharacterError",
    "InvalidReserveAddressError",
    "InvalidURLError",
    "Multicodec",
    "Ok",
    "ReserveTemplate",
    "Result",
    "Scheme",
    "address_from_cid",
    "attempt",
    "cid_from_address",
    "compute_checksum",
    "decode_address",
    "encode_address",
    "is_valid_address",
    "parse_cid",
    "parse_url",
    "resolve_asset_template",
    "resolve_template",
    "serialize_cid",
    "serialize_url",
    "split_address",
    "try_decode_address",
    "try_encode_address",
    "try_parse_cid",
    "try_parse_url",
]
