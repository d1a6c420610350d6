"""The header of a console executable image."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import ClassVar, Union

Buffer = Union[bytes, bytearray, memoryview]

_LAYOUT = struct.Struct("<16I")


@dataclass
class PsxExeHeader:
    """Load addresses, sizes and saved registers of an executable."""

    pc: int = 0
    gp: int = 0
    text_addr: int = 0
    text_size: int = 0
    data_addr: int = 0
    data_size: int = 0
    bss_addr: int = 0
    bss_size: int = 0
    stack_start: int = 0
    stack_size: int = 0
    saved_sp: int = 0
    saved_s8: int = 0
    saved_gp: int = 0
    saved_ra: int = 0
    saved_s0: int = 0
    unknown: int = 0

    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: Buffer) -> "PsxExeHeader":
        """Decode a header from the first ``SIZE`` bytes of ``data``."""
        raw = bytes(data)
        if len(raw) < cls.SIZE:
            raise ValueError(f"header needs {cls.SIZE} bytes, got {len(raw)}")
        return cls(*_LAYOUT.unpack_from(raw))

    def to_bytes(self) -> bytes:
        """Encode the header as little-endian 32-bit words."""
        try:
            return _LAYOUT.pack(*astuple(self))
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from exc