from __future__ import annotations

from typing import Iterator

from ..config import check_merge_strategy
from ..errors import EmptyQueueError
from .arc import Arc


class ArcPriorityQueue():
    """
    Binary min-heap of arcs keyed by weight

    Attributes:
        key_number: number of arcs in the heap

    Methods:
        insert(arc): insert an arc into the heap
        extract_min(): remove and return the arc with the minimum weight
        is_empty(): whether the heap holds no arc
    """

    __slots__ = ('_items', )

    def __init__(self, arcs=None):
        self._items: list[Arc] = []
        if arcs is not None:
            self._items.extend(arcs)
            self.heapify()

    @property
    def key_number(self) -> int:
        return len(self._items)

    def insert(self, arc: Arc):
        self._items.append(arc)
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> Arc:
        if not self._items:
            raise EmptyQueueError('extract_min from an empty arc queue')
        items = self._items
        last = items.pop()
        if not items:
            return last
        ret, items[0] = items[0], last
        self._sift_down(0)
        return ret

    def peek(self) -> Arc:
        if not self._items:
            raise EmptyQueueError('peek into an empty arc queue')
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def heapify(self):
        for i in reversed(range(len(self._items) // 2)):
            self._sift_down(i)

    def clear(self):
        self._items.clear()

    def _sift_up(self, i):
        items = self._items
        arc = items[i]
        while i > 0:
            parent = (i - 1) >> 1
            if items[parent].weight <= arc.weight:
                break
            items[i] = items[parent]
            i = parent
        items[i] = arc

    def _sift_down(self, i):
        items = self._items
        n = len(items)
        arc = items[i]
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            if child + 1 < n and items[child + 1].weight < items[child].weight:
                child += 1
            if arc.weight <= items[child].weight:
                break
            items[i] = items[child]
            i = child
        items[i] = arc

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self) -> Iterator[Arc]:
        """Arcs in heap array order, the heap is left untouched."""
        return iter(list(self._items))

    def __repr__(self):
        return f'ArcPriorityQueue({self._items!r})'


def heap_union(a: ArcPriorityQueue,
               b: ArcPriorityQueue,
               strategy: str = 'drain') -> ArcPriorityQueue:
    """
    Move every arc of ``b`` into ``a``

    Args:
        a: queue receiving the arcs
        b: queue to empty
        strategy: 'drain' extracts and reinserts each arc of ``b``,
            'concat' appends the arrays and rebuilds the heap

    Returns:
        ``a``
    """
    check_merge_strategy(strategy)
    if b is None or b is a or b.is_empty():
        return a
    if strategy == 'drain':
        while not b.is_empty():
            a.insert(b.extract_min())
    else:
        a._items.extend(b._items)
        b.clear()
        a.heapify()
    return a
