# psxfunk

Building blocks for a small rhythm game engine, together with helpers for a
classic console's hardware formats. Everything is pure Python with no runtime
dependencies.

## Installation

From a checkout of the project:

```
pip install .
```

With the test dependencies, then run the tests:

```
pip install ".[test]"
pytest
```

## Game engine pieces

- `psxfunk.animation`: `Animation(spd, script)` holds a speed (in 24ths of a
  second per frame) and a script of frame numbers and opcodes (`REPEAT`,
  `CHANGE_ANIM`, `BACK`). `Animatable(anims, anim=None)` plays them:
  `set_anim(anim)` starts an animation, `animate(set_frame, dt)` advances by
  `dt` seconds and calls `set_frame` for each frame shown. The `ended` flag is
  set once a script repeats or steps back. Calling `animate` before any
  animation is set raises `RuntimeError`.
- `psxfunk.archive`: an archive begins with a table of 16-byte records (a
  NUL-padded name of up to 12 bytes and a little-endian 32-bit offset),
  ending at a record whose first byte is NUL. `entries(archive)` yields
  `(name, offset)` pairs; `find(archive, path)` returns the archive's bytes
  from the named file's offset onwards. Missing files, unterminated tables
  and truncated records raise `ArchiveError` (a `LookupError`).
- `psxfunk.mutil`: a 256-step circle with results scaled by 256.
  `sin(x)` and `cos(x)` take the angle modulo 256; `rotate_point(x, y, s, c)`
  rotates a point and returns the new `(x, y)` wrapped to signed 16 bits.
- `psxfunk.objects`: `GameObject` with `tick()` (return `True` to be removed)
  and `free()`; `ObjectList` with `add(obj)` (inserts at the front),
  `remove(obj)` (frees it; `ValueError` if it is not there), `tick()` and
  `clear()`. The list supports `len()` and iteration.
- `psxfunk.font`: `FontAlign` (`LEFT`, `CENTER`, `RIGHT`), `Glyph` (source
  rectangle in the font texture and screen position), `bold_width(text)`
  (13 pixels per character) and
  `bold_layout(text, x, y, align=FontAlign.LEFT, animf_count=0)`, which
  places each letter. Repeated letters alternate between two sprite
  variants, the pattern flips with bit 1 of `animf_count`, and characters
  other than letters take up space without producing a glyph.

## Hardware and format helpers

- `psxfunk.encoder`: MIPS R3000 instruction encoders returning 32-bit words
  (`add`, `addiu`, `lui`, `sll`, `mult`, `beq`, `j`, `jal`, `jalr`, `lw`,
  `sw`, `syscall`, `nop`, and the rest) over the `Reg` enum.
- `psxfunk.gpu`: GPU control and command words: `display_mode_word`,
  `display_area_word`, `horizontal_range_word`, `vertical_range_word`,
  `enable_display_word`, `disable_display_word`, `fast_fill_words`,
  `drawing_area_start_word`, `drawing_area_end_word`, `drawing_offset_word`,
  `polygon_command_word` and `line_command_word`, built from `Color`,
  `DisplayModeConfig`, `FastFill`, `GPUPolygonCommand`, `GPULineCommand`
  and their enums.
- `psxfunk.binutil`: `djb_hash(data)` (32-bit, characters as signed bytes)
  and `read_unaligned(buffer, pos)` (little-endian 32-bit word; `ValueError`
  when out of range).
- `psxfunk.exeheader`: `PsxExeHeader` with `from_bytes` and `to_bytes` for
  the 64-byte executable header.
- `psxfunk.psxlibc`: `Errno`, `FileFlag`, `Seek`, `Ioctl`, `make_ioctl(c, s)`
  and the 40-byte `DirEntry` record with `from_bytes` and `to_bytes`.
- `psxfunk.hardware`: `IRQ`, `EventClass`, `EventMode`, `EventFlag`,
  `CdlCommand`, `DmaChannel`, and serial port setup: `sio1_baud_reload(baud)`,
  `sio1_default_config()` (transmit and receive on, 8N1 at 115200) and the
  `Sio1Config` values with their decoded fields.

## Example

```python
from psxfunk import encoder
from psxfunk.encoder import Reg
from psxfunk.mutil import sin, cos, rotate_point

word = encoder.addiu(Reg.SP, Reg.SP, -16)
x, y = rotate_point(100, 0, sin(64), cos(64))  # (0, 100)
```

## What it does not do

This is a library of pieces, not a game. It draws nothing, plays no sound,
reads no controller and has no game loop, menus or stages. Layouts and
command words are computed as values; nothing is sent to a screen or to
hardware. Only the bold font's layout is provided; there is no layout for
other fonts.