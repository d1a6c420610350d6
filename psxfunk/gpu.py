"""Construction of GPU command and control words."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple

_WORD = 0xFFFFFFFF


class HResolution(enum.IntEnum):
    EXTENDED = 0
    W256 = 0
    W320 = 1
    W512 = 2
    W640 = 3


class VResolution(enum.IntEnum):
    H240 = 0
    H480 = 1


class VideoMode(enum.IntEnum):
    NTSC = 0
    PAL = 1


class ColorDepth(enum.IntEnum):
    BITS15 = 0
    BITS24 = 1


class VideoInterlace(enum.IntEnum):
    OFF = 0
    ON = 1


class HResolutionExtended(enum.IntEnum):
    NORMAL = 0
    W368 = 1


class Shading(enum.IntEnum):
    FLAT = 0
    GOURAUD = 1


class VerticesCount(enum.IntEnum):
    THREE = 0
    FOUR = 1


class LineStyle(enum.IntEnum):
    SINGLE = 0
    POLY = 1


def _s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"colour component {name}={value} out of range")

    @property
    def packed(self) -> int:
        """The colour as a little-endian packed word."""
        return self.r | (self.g << 8) | (self.b << 16)

    @classmethod
    def from_packed(cls, packed: int) -> "Color":
        return cls(packed & 0xFF, (packed >> 8) & 0xFF, (packed >> 16) & 0xFF)


@dataclass(frozen=True)
class DisplayModeConfig:
    h_resolution: HResolution = HResolution.W320
    v_resolution: VResolution = VResolution.H240
    video_mode: VideoMode = VideoMode.NTSC
    color_depth: ColorDepth = ColorDepth.BITS15
    video_interlace: VideoInterlace = VideoInterlace.OFF
    h_resolution_extended: HResolutionExtended = HResolutionExtended.NORMAL


@dataclass(frozen=True)
class FastFill:
    color: Color
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class GPUPolygonCommand:
    shading: Shading = Shading.FLAT
    vertices_count: VerticesCount = VerticesCount.THREE
    textured: bool = False
    transparency: bool = False
    blending: bool = False
    color: Color = Color()


@dataclass(frozen=True)
class GPULineCommand:
    shading: Shading = Shading.FLAT
    line_style: LineStyle = LineStyle.SINGLE
    transparency: bool = False
    color: Color = Color()


def disable_display_word() -> int:
    return 0x03000001


def enable_display_word() -> int:
    return 0x03000000


def display_mode_word(config: DisplayModeConfig) -> int:
    return (
        0x08000000
        | int(config.h_resolution)
        | (int(config.v_resolution) << 2)
        | (int(config.video_mode) << 3)
        | (int(config.color_depth) << 4)
        | (int(config.video_interlace) << 5)
        | (int(config.h_resolution_extended) << 6)
    ) & _WORD


def display_area_word(x: int, y: int) -> int:
    return (0x05000000 | _s16(x) | (_s16(y) << 10)) & _WORD


def horizontal_range_word(x1: int, x2: int) -> int:
    x1, x2 = _s16(x1), _s16(x2)
    return (0x06000000 | (x1 + 0x260) | ((x1 + x2 + 0x260) << 12)) & _WORD


def vertical_range_word(y1: int, y2: int) -> int:
    return (0x07000000 | _s16(y1) | (_s16(y2) << 10)) & _WORD


def fast_fill_words(fill: FastFill) -> Tuple[int, int, int]:
    """The three words of a fast rectangle fill command."""
    c = fill.color
    return (
        (0x02000000 | c.r | (c.g << 8) | (c.b << 16)) & _WORD,
        (_s16(fill.x) | (_s16(fill.y) << 16)) & _WORD,
        (_s16(fill.w) | (_s16(fill.h) << 16)) & _WORD,
    )


def drawing_area_start_word(x: int, y: int) -> int:
    return (0xE3000000 | _s16(x) | (_s16(y) << 10)) & _WORD


def drawing_area_end_word(x: int, y: int) -> int:
    return (0xE4000000 | (_s16(x) - 1) | ((_s16(y) - 1) << 10)) & _WORD


def drawing_offset_word(x: int, y: int) -> int:
    return (0xE5000000 | _s16(x) | (_s16(y) << 10)) & _WORD


def polygon_command_word(command: GPUPolygonCommand) -> int:
    c = command.color
    return (
        0x20000000
        | (int(command.shading) << 28)
        | (int(command.vertices_count) << 27)
        | (int(bool(command.textured)) << 26)
        | (int(bool(command.transparency)) << 25)
        | (int(bool(command.blending)) << 24)
        | (c.b << 16)
        | (c.g << 8)
        | c.r
    ) & _WORD


def line_command_word(command: GPULineCommand) -> int:
    c = command.color
    return (
        0x40000000
        | (int(command.shading) << 28)
        | (int(command.line_style) << 27)
        | (int(bool(command.transparency)) << 25)
        | (c.b << 16)
        | (c.g << 8)
        | c.r
    ) & _WORD