"""Hardware interrupt, event, CD-ROM, DMA and serial port definitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

SIO1_CLOCK = 2073600
SIO1_DEFAULT_BAUD = 115200

SIO1_DATA_ADDR = 0x1F801050
SIO1_STAT_ADDR = 0x1F801054
SIO1_MODE_ADDR = 0x1F801058
SIO1_CTRL_ADDR = 0x1F80105A
SIO1_BAUD_ADDR = 0x1F80105E


class IRQ(enum.IntFlag):
    VBLANK = 1 << 0
    GPU = 1 << 1
    CDROM = 1 << 2
    DMA = 1 << 3
    TIMER0 = 1 << 4
    TIMER1 = 1 << 5
    TIMER2 = 1 << 6
    CONTROLLER = 1 << 7
    SIO = 1 << 8
    SPU = 1 << 9
    PIO = 1 << 10


class EventClass(enum.IntEnum):
    VBLANK = 0xF0000001
    GPU = 0xF0000002
    CDROM = 0xF0000003
    DMA = 0xF0000004
    RTC0 = 0xF0000005
    RTC1 = 0xF0000006
    CONTROLLER = 0xF0000008
    SPU = 0xF0000009
    PIO = 0xF000000A
    SIO = 0xF000000B
    CARD = 0xF0000011
    BU = 0xF4000001


class EventMode(enum.IntEnum):
    CALLBACK = 0x1000
    NO_CALLBACK = 0x2000


class EventFlag(enum.IntEnum):
    FREE = 0x0000
    DISABLED = 0x1000
    ENABLED = 0x2000
    PENDING = 0x4000


class CdlCommand(enum.IntEnum):
    SYNC = 0
    NOP = 1
    SETLOC = 2
    PLAY = 3
    FORWARD = 4
    BACKWARD = 5
    READN = 6
    STANDBY = 7
    STOP = 8
    PAUSE = 9
    INIT = 10
    MUTE = 11
    DEMUTE = 12
    SETFILTER = 13
    SETMODE = 14
    GETMODE = 15
    GETLOCL = 16
    GETLOCP = 17
    READT = 18
    GETTN = 19
    GETTD = 20
    SEEKL = 21
    SEEKP = 22
    SETCLOCK = 23
    GETCLOCK = 24
    TEST = 25
    GETID = 26
    READS = 27
    RESET = 28
    GETQ = 29
    READTOC = 30


class DmaChannel(enum.IntEnum):
    MDECIN = 0
    MDECOUT = 1
    GPU = 2
    CDROM = 3
    SPU = 4
    PIO = 5
    GPUOTC = 6


@dataclass(frozen=True)
class Sio1Config:
    """Values for the serial port's control, mode and baud reload registers."""

    ctrl: int
    mode: int
    baud: int

    @property
    def tx_enabled(self) -> bool:
        return bool(self.ctrl & 0x1)

    @property
    def rx_enabled(self) -> bool:
        return bool(self.ctrl & 0x4)

    @property
    def reload_factor(self) -> int:
        """Raw baud-rate reload factor field (2 selects multiply by 16)."""
        return self.mode & 0x3

    @property
    def char_length(self) -> int:
        """Bits per character."""
        return 5 + ((self.mode >> 2) & 0x3)

    @property
    def parity_enabled(self) -> bool:
        return bool(self.mode & 0x10)

    @property
    def parity_odd(self) -> bool:
        return bool(self.mode & 0x20)

    @property
    def stop_bits_field(self) -> int:
        """Raw stop bit length field (1 selects one stop bit)."""
        return (self.mode >> 6) & 0x3

    @property
    def baud_rate(self) -> int:
        """The line rate the reload value yields."""
        return SIO1_CLOCK // self.baud


def sio1_baud_reload(baud: int) -> int:
    """Reload register value for a line rate of ``baud``."""
    if baud <= 0:
        raise ValueError(f"baud rate must be positive, got {baud}")
    reload = SIO1_CLOCK // baud
    if not 1 <= reload <= 0xFFFF:
        raise ValueError(f"baud rate {baud} cannot be reached")
    return reload


def sio1_default_config() -> Sio1Config:
    """Transmit and receive enabled, 8N1 at the default line rate."""
    return Sio1Config(ctrl=5, mode=0x4E, baud=sio1_baud_reload(SIO1_DEFAULT_BAUD))