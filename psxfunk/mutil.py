"""Integer trigonometry on a 256-step circle with 8.8 fixed-point results."""

from __future__ import annotations

import math
from typing import Tuple


def _build_sine_table() -> Tuple[int, ...]:
    # One quarter turn (0..64 inclusive), truncated towards zero.
    quarter = [int(256 * math.sin(math.pi * i / 128)) for i in range(65)]
    positive = quarter + quarter[63:0:-1]
    negative = [-v for v in positive]
    # A full turn plus a quarter, so cosine is the sine table shifted by 0x40.
    return tuple(positive + negative + positive[:0x40])


_SINE_TABLE = _build_sine_table()


def _s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def sin(x: int) -> int:
    """Sine of angle ``x`` (256 steps per turn), scaled by 256."""
    return _SINE_TABLE[x & 0xFF]


def cos(x: int) -> int:
    """Cosine of angle ``x`` (256 steps per turn), scaled by 256."""
    return _SINE_TABLE[(x & 0xFF) + 0x40]


def rotate_point(x: int, y: int, s: int, c: int) -> Tuple[int, int]:
    """Rotate ``(x, y)`` by the angle whose 8.8 sine and cosine are ``s`` and ``c``."""
    nx = ((x * c) >> 8) - ((y * s) >> 8)
    ny = ((x * s) >> 8) + ((y * c) >> 8)
    return _s16(nx), _s16(ny)