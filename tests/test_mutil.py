import pytest

from psxfunk.mutil import cos, rotate_point, sin


def test_cardinal_values():
    assert sin(0) == 0
    assert sin(0x40) == 256
    assert sin(0xC0) == -256
    assert cos(0) == 256


@pytest.mark.parametrize("x", range(256))
def test_cos_is_shifted_sin(x):
    assert cos(x) == sin((x + 0x40) & 0xFF)


@pytest.mark.parametrize("x", range(256))
def test_sin_is_odd(x):
    assert sin(x) == -sin((x + 0x80) & 0xFF)


def test_angle_wraps():
    assert sin(256 + 10) == sin(10)
    assert cos(-1) == cos(255)


def test_rotate_by_zero_is_identity():
    assert rotate_point(100, -37, sin(0), cos(0)) == (100, -37)


def test_rotate_quarter_turn():
    assert rotate_point(256, 0, sin(0x40), cos(0x40)) == (0, 256)


def test_rotate_half_turn_negates():
    assert rotate_point(50, 20, sin(0x80), cos(0x80)) == (-50, -20)