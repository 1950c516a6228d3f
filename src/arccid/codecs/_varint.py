"""Unsigned LEB128 varints as used for multicodec tags."""

from typing import Final

MAX_UINT64: Final[int] = (1 << 64) - 1
# ceil(64 / 7)
MAX_VARINT_LENGTH: Final[int] = 10


def encode_varint(value: int) -> bytes:
    """Encode an unsigned 64-bit integer, 7 low bits per byte, continuation bit 0x80."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = "varint value must be an int."
        raise TypeError(msg)
    if value < 0 or value > MAX_UINT64:
        msg = f"varint value out of unsigned 64-bit range: {value}"
        raise ValueError(msg)

    out = bytearray()
    while True:
        group = value & 0x7F
        value >>= 7
        if not value:
            out.append(group)
            return bytes(out)
        out.append(group | 0x80)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a varint starting at ``offset``.

    Returns ``(value, consumed)`` where ``consumed`` is the number of bytes read.
    Raises ValueError when the input ends mid-varint, the value exceeds 64 bits,
    or the encoding is not minimal (a trailing 0x00 group after the first byte).
    """
    if offset < 0:
        msg = "offset must be >= 0."
        raise ValueError(msg)

    value = 0
    shift = 0
    position = offset
    while True:
        if position >= len(data):
            msg = f"truncated varint at offset {offset}"
            raise ValueError(msg)
        if position - offset >= MAX_VARINT_LENGTH:
            msg = f"varint at offset {offset} is longer than {MAX_VARINT_LENGTH} bytes"
            raise ValueError(msg)
        byte = data[position]
        position += 1
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            break
        shift += 7

    consumed = position - offset
    if consumed > 1 and data[position - 1] == 0:
        msg = f"non-minimal varint at offset {offset}"
        raise ValueError(msg)
    if value > MAX_UINT64:
        msg = f"varint at offset {offset} overflows 64 bits"
        raise ValueError(msg)
    return value, consumed
