"""Kernel C library constants and the directory entry record."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import ClassVar, Union

Buffer = Union[bytes, bytearray, memoryview]


def make_ioctl(c: Union[str, int], s: int) -> int:
    """Build an ioctl request code from a class character and a number."""
    code = ord(c) if isinstance(c, str) else c
    return (code << 8) | s


class Errno(enum.IntEnum):
    ENOERR = 0
    EPERM = enum.auto()
    ENOENT = enum.auto()
    ESRCH = enum.auto()
    EINTR = enum.auto()
    EIO = enum.auto()
    ENXIO = enum.auto()
    E2BIG = enum.auto()
    ENOEXEC = enum.auto()
    EBADF = enum.auto()
    ECHILD = enum.auto()
    EAGAIN = enum.auto()
    ENOMEM = enum.auto()
    EACCESS = enum.auto()
    EFAULT = enum.auto()
    ENOTBLK = enum.auto()
    EBUSY = enum.auto()
    EEXIST = enum.auto()
    EXDEV = enum.auto()
    ENODEV = enum.auto()
    ENOTDIR = enum.auto()
    EISDIR = enum.auto()
    EINVAL = enum.auto()
    ENFILE = enum.auto()
    EMFILE = enum.auto()
    ENOTTY = enum.auto()
    ETXTBSY = enum.auto()
    EFBIG = enum.auto()
    ENOSPC = enum.auto()
    ESPIPE = enum.auto()
    EROFS = enum.auto()
    EFORMAT = enum.auto()
    EPIPE = enum.auto()
    EDOM = enum.auto()
    ERANGE = enum.auto()
    EWOULDBLOCK = enum.auto()
    EINPROGRESS = enum.auto()
    EALREADY = enum.auto()


class FileFlag(enum.IntFlag):
    READ = 0x0001
    WRITE = 0x0002
    NBLOCK = 0x0004
    SCAN = 0x0008
    RLOCK = 0x0010
    WLOCK = 0x0020
    APPEND = 0x0100
    CREAT = 0x0200
    TRUNC = 0x0400
    SCAN2 = 0x1000
    RCOM = 0x2000
    NBUF = 0x4000
    ASYNC = 0x8000


class Seek(enum.IntEnum):
    SET = 0
    CUR = 1
    END = 2


class Ioctl(enum.IntEnum):
    FIOCNBLOCK = make_ioctl("f", 1)
    FIOCSCAN = make_ioctl("f", 2)
    TIOCRAW = make_ioctl("t", 1)
    TIOCFLUSH = make_ioctl("t", 2)
    TIOCREOPEN = make_ioctl("t", 3)
    TIOCBAUD = make_ioctl("t", 4)
    TIOCEXIT = make_ioctl("t", 5)
    TIOCDTR = make_ioctl("t", 6)
    TIOCRTS = make_ioctl("t", 7)
    TIOCLEN = make_ioctl("t", 8)
    TIOCPARITY = make_ioctl("t", 9)
    TIOSTATUS = make_ioctl("t", 10)
    TIOERRRST = make_ioctl("t", 11)
    TIOEXIST = make_ioctl("t", 12)
    TIORLEN = make_ioctl("t", 13)
    DIOFORMAT = make_ioctl("d", 1)


_DIRENTRY = struct.Struct("<20sIIII4s")


@dataclass
class DirEntry:
    """A directory listing record as the kernel lays it out."""

    name: str = ""
    attributes: int = 0
    size: int = 0
    next: int = 0
    lba: int = 0
    fourcc: bytes = b"\0\0\0\0"

    SIZE: ClassVar[int] = _DIRENTRY.size

    @classmethod
    def from_bytes(cls, data: Buffer) -> "DirEntry":
        """Decode a record from the first ``SIZE`` bytes of ``data``."""
        raw = bytes(data)
        if len(raw) < cls.SIZE:
            raise ValueError(f"directory entry needs {cls.SIZE} bytes, got {len(raw)}")
        name, attributes, size, nxt, lba, fourcc = _DIRENTRY.unpack_from(raw)
        return cls(
            name=name.split(b"\0", 1)[0].decode("latin-1"),
            attributes=attributes,
            size=size,
            next=nxt,
            lba=lba,
            fourcc=fourcc,
        )

    def to_bytes(self) -> bytes:
        """Encode the record; the name is NUL-padded to 20 bytes."""
        name = self.name.encode("latin-1")
        if len(name) > 20:
            raise ValueError(f"name {self.name!r} is longer than 20 bytes")
        if len(self.fourcc) != 4:
            raise ValueError("fourcc must be exactly 4 bytes")
        try:
            return _DIRENTRY.pack(name, self.attributes, self.size, self.next, self.lba, bytes(self.fourcc))
        except struct.error as exc:
            raise ValueError(f"directory entry field out of range: {exc}") from exc