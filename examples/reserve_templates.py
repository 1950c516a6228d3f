"""Reserve addresses and template-ipfs:// locators."""

from arccid import (
    CID,
    ReserveTemplate,
    cid_from_address,
    encode_address,
    parse_url,
    try_decode_address,
)

# ---- Reserve addresses ----
# A 32-byte digest plus a 4-byte checksum, as 58 uppercase base32 symbols.

cid = CID.from_content(b"metadata for collection #1").to_v1()
address = encode_address(cid.digest)
print(f"[address] {address} ({len(address)} chars)")
print(f"  cid_from_address() = {cid_from_address(address)}")

corrupted = ("B" if address[0] != "B" else "C") + address[1:]
result = try_decode_address(corrupted)
print(f"  corrupted -> ok={result.ok}, kind={getattr(result, 'kind', None)}")

# ---- Templates ----

template = ReserveTemplate.from_cid(cid, path_template="/metadata/{id}.json")
print(f"\n[template] {template.template_url}")
print(f"  reserve_address = {template.reserve_address}")
print(f"  resolve(42) = {template.resolve(42)}")

url = parse_url(template.resolve(42))
print(f"  gateway = {url.gateway_url()}")
