"""Lookup of files in a packed archive.

An archive starts with a table of 16-byte records: a NUL-padded name of at
most 12 bytes and a little-endian 32-bit offset from the archive start. A
record whose first byte is NUL ends the table.
"""

from __future__ import annotations

from typing import Iterator, Tuple, Union

_RECORD = 16
_NAME = 12

Buffer = Union[bytes, bytearray, memoryview]


class ArchiveError(LookupError):
    """Raised when an archive is malformed or lacks a requested file."""


def _key(name: bytes) -> bytes:
    return name.split(b"\0", 1)[0][:_NAME]


def _records(archive: Buffer) -> Iterator[Tuple[bytes, int]]:
    data = memoryview(archive).cast("B")
    offset = 0
    while True:
        if offset >= len(data):
            raise ArchiveError("archive table is not terminated")
        if data[offset] == 0:
            return
        if offset + _RECORD > len(data):
            raise ArchiveError("archive table record is truncated")
        record = bytes(data[offset:offset + _RECORD])
        yield _key(record[:_NAME]), int.from_bytes(record[_NAME:], "little")
        offset += _RECORD


def entries(archive: Buffer) -> Iterator[Tuple[str, int]]:
    """Yield ``(name, offset)`` for every file listed in the archive."""
    for name, pos in _records(archive):
        yield name.decode("latin-1"), pos


def find(archive: Buffer, path: str) -> bytes:
    """Return the archive's data from the offset of the file named ``path``.

    Only the first 12 bytes of the name take part in the comparison.
    """
    wanted = _key(path.encode("latin-1"))
    for name, pos in _records(archive):
        if name == wanted:
            return bytes(memoryview(archive).cast("B")[pos:])
    raise ArchiveError(f"Failed to find {path} in archive")