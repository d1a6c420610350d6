"""Layout of text in the bold sprite font."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Union

_ADVANCE = 13
_CELL_W = 14
_CELL_H = 16


class FontAlign(enum.Enum):
    """Horizontal anchoring of a string at its x position."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


@dataclass(frozen=True)
class Glyph:
    """One glyph: its source rectangle in the font texture and its screen position."""

    src_x: int
    src_y: int
    src_w: int
    src_h: int
    x: int
    y: int


def _bytes(text: Union[str, bytes]) -> bytes:
    return text.encode("latin-1") if isinstance(text, str) else bytes(text)


def bold_width(text: Union[str, bytes]) -> int:
    """Width in pixels of ``text`` in the bold font."""
    return len(_bytes(text)) * _ADVANCE


def bold_layout(
    text: Union[str, bytes],
    x: int,
    y: int,
    align: FontAlign = FontAlign.LEFT,
    animf_count: int = 0,
) -> List[Glyph]:
    """Place each drawable letter of ``text``.

    Repeated letters alternate between two sprite variants, and the whole
    pattern flips with bit 1 of ``animf_count``. Lower-case letters use the
    inverted-colour rows. Other characters take up space but draw nothing.
    """
    data = _bytes(text)
    if align is FontAlign.CENTER:
        x -= bold_width(data) >> 1
    elif align is FontAlign.RIGHT:
        x -= bold_width(data)

    seen = 0
    flip = (animf_count >> 1) & 1
    glyphs: List[Glyph] = []
    for byte in data:
        c = (byte - ord("A")) & 0xFF
        if c <= ord("z") - ord("A"):
            bit = c & 0x1F
            variant = ((seen >> bit) & 1) ^ flip
            glyphs.append(
                Glyph(
                    src_x=(c & 0x7) * 28 + variant * _CELL_W,
                    src_y=(c & ~0x7) << 1,
                    src_w=_CELL_W,
                    src_h=_CELL_H,
                    x=x,
                    y=y,
                )
            )
            seen ^= 1 << bit
        x += _ADVANCE
    return glyphs