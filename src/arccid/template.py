"""ReserveTemplate: ``template-ipfs://`` URLs whose CID lives in a reserve address."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

from arccid.address import address_from_cid, cid_from_address
from arccid.cid import CID, serialize_cid
from arccid.errors import InvalidURLError
from arccid.serde import as_str_object_dict, require_string
from arccid.urls import SCHEME_SEPARATOR, IPFSUrl, Scheme, parse_url, resolve_asset_template

if TYPE_CHECKING:
    from collections.abc import Mapping

    from arccid.digest import DigestProvider

RESERVE_PLACEHOLDER: Final[str] = "{ipfscid:0:dag-pb:reserve:sha2-256}"
TEMPLATE_PREFIX: Final[str] = f"{Scheme.TEMPLATE_IPFS.value}{SCHEME_SEPARATOR}"
DEFAULT_PATH_TEMPLATE: Final[str] = "/{id}"


@dataclass(frozen=True, slots=True)
class ReserveTemplate:
    """A templated locator plus the reserve address that carries its CID.

    ``cid`` is derived from ``reserve_address`` on construction, so an
    invalid address fails here rather than at resolve time.
    """

    template_url: str
    reserve_address: str
    cid: CID = field(init=False, repr=False, compare=False)
    digests: DigestProvider | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Check the scheme and read the CID out of the reserve address."""
        if not isinstance(self.template_url, str):
            msg = "Reserve template URL must be a string."
            raise TypeError(msg)
        if not self.template_url.startswith(TEMPLATE_PREFIX):
            msg = f"Reserve template must use the {TEMPLATE_PREFIX} scheme: {self.template_url!r}"
            raise InvalidURLError(msg)
        object.__setattr__(self, "cid", cid_from_address(self.reserve_address, digests=self.digests))

    @classmethod
    def from_cid(
        cls,
        cid: CID,
        *,
        path_template: str = DEFAULT_PATH_TEMPLATE,
        digests: DigestProvider | None = None,
    ) -> ReserveTemplate:
        """Build a template whose reserve address stores ``cid``'s digest."""
        return cls(
            template_url=f"{TEMPLATE_PREFIX}{RESERVE_PLACEHOLDER}{path_template}",
            reserve_address=address_from_cid(cid, digests=digests),
            digests=digests,
        )

    @classmethod
    def from_url(
        cls,
        url: IPFSUrl,
        *,
        path_template: str = DEFAULT_PATH_TEMPLATE,
        digests: DigestProvider | None = None,
    ) -> ReserveTemplate:
        """Build a template from the CID of an existing locator."""
        return cls.from_cid(url.cid, path_template=path_template, digests=digests)

    def resolve_url(self, asset_id: int) -> IPFSUrl:
        """Substitute the reserve CID and ``{id}``, returning an ``ipfs://`` locator."""
        expanded = self.template_url.replace(RESERVE_PLACEHOLDER, serialize_cid(self.cid))
        url = resolve_asset_template(parse_url(expanded), asset_id)
        return replace(url, scheme=Scheme.IPFS)

    def resolve(self, asset_id: int) -> str:
        """Resolve to ``ipfs://<cid><path>`` text for one asset."""
        return str(self.resolve_url(asset_id))

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "template_url": self.template_url,
            "reserve_address": self.reserve_address,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object], *, digests: DigestProvider | None = None) -> ReserveTemplate:
        """Deserialize from a plain dictionary."""
        payload = as_str_object_dict(value, field_name="ReserveTemplate")
        return cls(
            template_url=require_string(payload.get("template_url"), field_name="ReserveTemplate.template_url"),
            reserve_address=require_string(
                payload.get("reserve_address"), field_name="ReserveTemplate.reserve_address"
            ),
            digests=digests,
        )
