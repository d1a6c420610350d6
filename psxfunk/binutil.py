"""Small binary helpers: the DJB string hash and unaligned word reads."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def djb_hash(data: Union[str, Buffer]) -> int:
    """32-bit DJB hash (multiply by 33, xor) with characters taken as signed bytes."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    value = 5381
    for byte in raw:
        signed = byte - 0x100 if byte >= 0x80 else byte
        value = (((value << 5) + value) ^ signed) & 0xFFFFFFFF
    return value


def read_unaligned(buffer: Buffer, pos: int) -> int:
    """Read a little-endian 32-bit word starting at byte ``pos``."""
    data = memoryview(buffer).cast("B")
    if pos < 0 or pos + 4 > len(data):
        raise ValueError(f"cannot read 4 bytes at offset {pos} of {len(data)}")
    return int.from_bytes(data[pos:pos + 4], "little")