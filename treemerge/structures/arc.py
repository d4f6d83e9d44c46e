from __future__ import annotations

from .vertex import Vertex, same_group


class Arc():
    """
    Weighted arc between two vertices, ordered by weight.

    Arcs are immutable. Equality is identity, two arcs of the same weight
    are still distinct arcs.
    """

    __slots__ = ('_v1', '_v2', '_weight')

    def __init__(self, v1: Vertex, v2: Vertex, weight):
        object.__setattr__(self, '_v1', v1)
        object.__setattr__(self, '_v2', v2)
        object.__setattr__(self, '_weight', weight)

    def __setattr__(self, name, value):
        raise AttributeError(f"Arc is immutable, can not set '{name}'.")

    def __delattr__(self, name):
        raise AttributeError(f"Arc is immutable, can not delete '{name}'.")

    @property
    def v1(self) -> Vertex:
        return self._v1

    @property
    def v2(self) -> Vertex:
        return self._v2

    @property
    def weight(self):
        return self._weight

    def endpoints(self) -> tuple:
        return (self._v1.name, self._v2.name)

    def is_stale(self) -> bool:
        return same_group(self._v1, self._v2)

    def __lt__(self, other: Arc):
        if not isinstance(other, Arc):
            return NotImplemented
        return self._weight < other._weight

    def __le__(self, other: Arc):
        if not isinstance(other, Arc):
            return NotImplemented
        return self._weight <= other._weight

    def __gt__(self, other: Arc):
        if not isinstance(other, Arc):
            return NotImplemented
        return self._weight > other._weight

    def __ge__(self, other: Arc):
        if not isinstance(other, Arc):
            return NotImplemented
        return self._weight >= other._weight

    def __str__(self):
        return f'{{{self._v1.name} {self._v2.name} {self._weight}}}'

    def __repr__(self):
        return f'Arc({self._v1.name!r}, {self._v2.name!r}, {self._weight})'
