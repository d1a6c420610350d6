"""Script-driven sprite animation."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from numbers import Real
from typing import Callable, Optional, Sequence

#: Script opcode: jump back to the start of the script and mark it ended.
REPEAT = 0xFF
#: Script opcode: switch to the animation whose index follows.
CHANGE_ANIM = 0xFE
#: Script opcode: step back by the count that follows, spending one frame.
BACK = 0xFD


@dataclass(frozen=True)
class Animation:
    """An animation: a speed in 24ths of a second per frame and a frame script."""

    spd: int
    script: Sequence[int]


class Animatable:
    """Playback state for a set of animations."""

    def __init__(self, anims: Sequence[Animation], anim: Optional[int] = None) -> None:
        self.anims = anims
        self.anim: Optional[int] = None
        self.anim_p: Optional[int] = None
        self.anim_time: Real = Fraction(0)
        self.anim_spd: Real = Fraction(0)
        self.ended = False
        if anim is not None:
            self.set_anim(anim)

    def set_anim(self, anim: int) -> None:
        """Start playing animation ``anim`` from its first script entry."""
        animation = self.anims[anim]
        self.anim = anim
        self.anim_p = 0
        self.anim_spd = Fraction(animation.spd, 24)
        self.anim_time = Fraction(0)
        self.ended = False

    def animate(self, set_frame: Callable[[int], None], dt: Real) -> None:
        """Advance by ``dt`` seconds, calling ``set_frame`` for every frame shown."""
        if self.anim is None or self.anim_p is None:
            raise RuntimeError("no animation has been set")
        while self.anim_time <= 0:
            script = self.anims[self.anim].script
            op = script[self.anim_p]
            if op == REPEAT:
                self.anim_p = 0
                self.ended = True
            elif op == CHANGE_ANIM:
                self.set_anim(script[self.anim_p + 1])
            elif op == BACK:
                self.anim_time += self.anim_spd
                self.anim_p -= script[self.anim_p + 1]
                self.ended = True
            else:
                set_frame(op)
                self.anim_time += self.anim_spd
                self.anim_p += 1
        self.anim_time -= dt