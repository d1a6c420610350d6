from fractions import Fraction

import pytest

from psxfunk.animation import BACK, CHANGE_ANIM, REPEAT, Animatable, Animation


def run(animatable, calls, dt=1):
    shown = []
    for _ in range(calls):
        frames = []
        animatable.animate(frames.append, dt)
        shown.append(frames)
    return shown


def test_set_anim_resets_state():
    a = Animatable([Animation(24, (1, REPEAT)), Animation(12, (2, REPEAT))])
    a.set_anim(1)
    assert a.anim == 1
    assert a.anim_p == 0
    assert a.anim_time == 0
    assert a.anim_spd == Fraction(12, 24)
    assert a.ended is False


def test_frames_then_repeat_marks_ended():
    a = Animatable([Animation(24, (1, 2, REPEAT))], anim=0)
    shown = run(a, 4)
    assert shown == [[1], [2], [1], [2]]
    assert a.ended is True


def test_not_ended_before_repeat():
    a = Animatable([Animation(24, (1, 2, REPEAT))], anim=0)
    run(a, 2)
    assert a.ended is False


def test_change_anim_switches():
    anims = [Animation(24, (5, CHANGE_ANIM, 1)), Animation(24, (7, REPEAT))]
    a = Animatable(anims, anim=0)
    shown = run(a, 3)
    assert shown == [[5], [7], [7]]
    assert a.anim == 1


def test_back_steps_back_and_spends_frame():
    a = Animatable([Animation(24, (3, 4, BACK, 1))], anim=0)
    shown = run(a, 5)
    assert shown == [[3], [4], [], [4], []]
    assert a.ended is True


def test_smaller_dt_holds_frame():
    a = Animatable([Animation(24, (3, 4, REPEAT))], anim=0)
    shown = run(a, 3, dt=Fraction(1, 2))
    assert shown == [[3], [], [4]]


def test_animate_without_anim_raises():
    a = Animatable([Animation(24, (1, REPEAT))])
    with pytest.raises(RuntimeError):
        a.animate(lambda frame: None, 1)