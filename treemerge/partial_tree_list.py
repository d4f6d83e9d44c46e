from __future__ import annotations

import logging
from typing import Iterator, Optional

from .config import get_merge_strategy
from .errors import EmptyListError, InvalidArgument, NotFoundError
from .structures.arc import Arc
from .structures.graph import Graph
from .structures.partial_tree import PartialTree
from .structures.vertex import Vertex, root

logger = logging.getLogger(__name__)


class PartialTreeList():
    """
    Circular linked list of partial trees

    ``rear`` is the last node, ``rear.next`` the front one.
    """

    class Node():
        __slots__ = ('tree', 'next')

        def __init__(self, tree: PartialTree):
            self.tree = tree
            self.next: Optional[PartialTreeList.Node] = None

    def __init__(self):
        self.rear: Optional[PartialTreeList.Node] = None
        self._size = 0

    def append(self, tree: PartialTree):
        node = PartialTreeList.Node(tree)
        if self.rear is None:
            node.next = node
        else:
            node.next = self.rear.next
            self.rear.next = node
        self.rear = node
        self._size += 1

    def remove(self) -> PartialTree:
        """
        Remove the tree at the front of the list.

        Raises:
            EmptyListError: the list is empty
        """
        if self.rear is None:
            raise EmptyListError('remove from an empty partial tree list')
        front = self.rear.next
        if front is self.rear:
            self.rear = None
        else:
            self.rear.next = front.next
        front.next = None
        self._size -= 1
        return front.tree

    def remove_tree_containing(self, vertex: Vertex) -> PartialTree:
        """
        Remove the first tree, from the front, whose root is the root of
        ``vertex``.

        Raises:
            NotFoundError: ``vertex`` is None, the list is empty or no tree
                contains the vertex
        """
        if vertex is None:
            raise NotFoundError('vertex is None')
        if self.rear is None:
            raise NotFoundError('partial tree list is empty')

        target = root(vertex)
        prev = self.rear
        for _ in range(self._size):
            current = prev.next
            if current.tree.get_root() is target:
                if current is prev:
                    self.rear = None
                else:
                    prev.next = current.next
                    if current is self.rear:
                        self.rear = prev
                current.next = None
                self._size -= 1
                return current.tree
            prev = current
        raise NotFoundError(f'no partial tree contains vertex {vertex!r}')

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[PartialTree]:
        rest = self._size
        ptr = self.rear.next if rest > 0 else None
        while rest > 0:
            yield ptr.tree
            ptr = ptr.next
            rest -= 1

    def __repr__(self):
        return f'PartialTreeList({list(self)!r})'

    @staticmethod
    def initialize(graph: Graph) -> PartialTreeList:
        return initialize(graph)

    @staticmethod
    def execute(ptlist: PartialTreeList, strategy: str = None) -> list[Arc]:
        return execute(ptlist, strategy)


def initialize(graph: Graph) -> PartialTreeList:
    """
    Build one single-vertex partial tree per vertex of the graph

    Every adjacency entry becomes an arc in the tree's queue, so an edge
    shows up once in each endpoint's queue.

    Args:
        graph: graph whose minimum spanning tree is wanted

    Returns:
        the initial partial tree list, in the graph's vertex order
    """
    if graph is None:
        raise InvalidArgument('graph is None')

    ptlist = PartialTreeList()
    for v in graph.vertices:
        tree = PartialTree(v)
        v.parent = v
        arcs = tree.get_arcs()
        for nbr in v.neighbors:
            arcs.insert(Arc(v, nbr.vertex, nbr.weight))
        ptlist.append(tree)
    logger.debug('initialized %d partial trees', ptlist.size())
    return ptlist


def _next_arc(tree: PartialTree) -> Optional[Arc]:
    """Cheapest arc of ``tree`` leaving it, stale arcs are dropped."""
    arcs = tree.get_arcs()
    while not arcs.is_empty():
        arc = arcs.extract_min()
        if root(arc.v1) is not root(arc.v2):
            return arc
    return None


def execute(ptlist: PartialTreeList, strategy: str = None) -> list[Arc]:
    """
    Run the partial tree merging loop

    The front tree takes its cheapest arc to another tree, absorbs that
    tree and goes to the back of the list. A tree whose queue runs out
    goes to the back unchanged; once every tree left is exhausted the
    remaining trees form a spanning forest.

    Args:
        ptlist: initial partial tree list, consumed
        strategy: heap merge strategy, default from the config

    Returns:
        arcs of the minimum spanning tree (or forest), order irrelevant
    """
    strategy = get_merge_strategy(strategy)
    mst: list[Arc] = []
    exhausted = 0

    while ptlist.size() > 1 and exhausted < ptlist.size():
        current = ptlist.remove()
        next_arc = _next_arc(current)

        removed = None
        if next_arc is not None:
            mst.append(next_arc)
            removed = ptlist.remove_tree_containing(next_arc.v2)
            logger.debug('arc %s joins %s and %s', next_arc,
                         current.get_root(), removed.get_root())
            exhausted = 0
        else:
            exhausted += 1
            logger.debug('partial tree %s has no arc left',
                         current.get_root())

        current.merge(removed, strategy)
        ptlist.append(current)

    if ptlist.size() > 1:
        logger.info('graph is disconnected, %d partial trees remain',
                    ptlist.size())
    logger.info('selected %d arcs, total weight %s', len(mst),
                sum(arc.weight for arc in mst))
    return mst
