import pytest

from psxfunk.objects import GameObject, ObjectList


class Countdown(GameObject):
    def __init__(self, name, lifetime, log):
        self.name = name
        self.lifetime = lifetime
        self.log = log

    def tick(self):
        self.log.append(("tick", self.name))
        self.lifetime -= 1
        return self.lifetime <= 0

    def free(self):
        self.log.append(("free", self.name))


def test_add_puts_newest_first():
    log = []
    objs = ObjectList()
    a, b = Countdown("a", 5, log), Countdown("b", 5, log)
    objs.add(a)
    objs.add(b)
    assert list(objs) == [b, a]
    assert len(objs) == 2


def test_tick_order_and_removal():
    log = []
    objs = ObjectList()
    objs.add(Countdown("a", 2, log))
    objs.add(Countdown("b", 1, log))
    objs.tick()
    assert log == [("tick", "b"), ("free", "b"), ("tick", "a")]
    assert [o.name for o in objs] == ["a"]
    objs.tick()
    assert len(objs) == 0


def test_remove_frees_object():
    log = []
    objs = ObjectList()
    a = Countdown("a", 5, log)
    objs.add(a)
    objs.remove(a)
    assert log == [("free", "a")]
    assert len(objs) == 0


def test_remove_missing_raises():
    objs = ObjectList()
    with pytest.raises(ValueError):
        objs.remove(Countdown("x", 1, []))


def test_clear_frees_all_newest_first():
    log = []
    objs = ObjectList()
    objs.add(Countdown("a", 5, log))
    objs.add(Countdown("b", 5, log))
    objs.clear()
    assert log == [("free", "b"), ("free", "a")]
    assert len(objs) == 0


def test_base_object_stays():
    objs = ObjectList()
    obj = GameObject()
    objs.add(obj)
    objs.tick()
    assert list(objs) == [obj]