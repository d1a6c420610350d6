"""Self-removing game objects kept in a list."""

from __future__ import annotations

from typing import Iterator, List


class GameObject:
    """Base for objects that live in an ObjectList."""

    freed: bool = False

    def tick(self) -> bool:
        """Advance one frame; return True when the object should be removed."""
        return False

    def free(self) -> None:
        """Release the object's resources when it leaves its list."""
        self.freed = True


class ObjectList:
    """Objects ticked newest first, removed once their tick reports completion."""

    def __init__(self) -> None:
        self._objects: List[GameObject] = []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)

    def add(self, obj: GameObject) -> None:
        """Put ``obj`` at the front of the list."""
        self._objects.insert(0, obj)

    def remove(self, obj: GameObject) -> None:
        """Take ``obj`` out of the list and free it."""
        for index, item in enumerate(self._objects):
            if item is obj:
                del self._objects[index]
                break
        else:
            raise ValueError("object is not in this list")
        obj.free()

    def tick(self) -> None:
        """Tick every object, removing those that report they are done."""
        for obj in list(self._objects):
            if obj.tick():
                self.remove(obj)

    def clear(self) -> None:
        """Free every object and empty the list."""
        objects, self._objects = self._objects, []
        for obj in objects:
            obj.free()