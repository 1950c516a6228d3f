"""Parse and serialize CIDs in every supported text form."""

from arccid import CID, CIDVersion, Multicodec, parse_cid

# ---- CIDv0 ----
# A dag-pb CID over a sha2-256 digest; always base58 and always "Qm...".

digest = bytes.fromhex("2a" * 32)
v0 = CID(CIDVersion.V0, Multicodec.DAG_PB, digest)
print(f"[v0] {v0}")
print(f"  parse(str(v0)) == v0 -> {parse_cid(str(v0)) == v0}")

# ---- CIDv1 ----
# The same digest as v1, in base32 ("b...") and base58 ("z...").

v1 = v0.to_v1()
print(f"\n[v1] base32 = {v1}")
print(f"  base58 = {v1.encode('base58')}")
print(f"  binary = {v1.to_bytes().hex()}")

# ---- From content ----

raw = CID.from_content(b"hello world")
print(f"\n[raw] {raw} (codec={raw.codec.name.lower()})")
