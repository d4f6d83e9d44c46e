from __future__ import annotations

from typing import Optional

from ..config import get_merge_strategy
from .heap import ArcPriorityQueue, heap_union
from .vertex import Vertex, root, union


class PartialTree():
    """
    A fragment of the minimum spanning tree, identified by the root of its
    anchor vertex, with the queue of arcs that may leave it.
    """

    __slots__ = ('_vertex', '_arcs')

    def __init__(self, vertex: Vertex):
        self._vertex = vertex
        self._arcs = ArcPriorityQueue()

    def get_arcs(self) -> ArcPriorityQueue:
        return self._arcs

    def get_root(self) -> Vertex:
        return root(self._vertex)

    def merge(self, other: Optional[PartialTree], strategy: str = None):
        """
        Absorb ``other`` into this tree

        The root of ``other`` is hung under the root of this tree and all of
        its arcs move to this tree's queue, stale ones included. Merging
        ``None`` does nothing.

        Args:
            other: tree to absorb
            strategy: heap merge strategy, default from the config
        """
        if other is None:
            return
        strategy = get_merge_strategy(strategy)
        union(self.get_root(), other.get_root())
        heap_union(self._arcs, other._arcs, strategy)

    def __str__(self):
        arcs = sorted(self._arcs, key=lambda a: a.weight)
        return f'Root: {self.get_root()}, Arcs: [{", ".join(map(str, arcs))}]'

    def __repr__(self):
        return f'PartialTree({self.get_root()!r}, {len(self._arcs)} arcs)'
