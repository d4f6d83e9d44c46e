from __future__ import annotations


class Neighbor():
    __slots__ = ('vertex', 'weight')

    def __init__(self, vertex: Vertex, weight):
        self.vertex = vertex
        self.weight = weight

    def __repr__(self):
        return f'Neighbor({self.vertex.name!r}, {self.weight})'


class Vertex():
    """
    Graph vertex

    Attributes:
        name: label of the vertex
        neighbors: adjacency entries, in insertion order
        parent: group parent, the vertex itself when it is the root of
            its fragment
    """

    __slots__ = ('name', 'neighbors', 'parent')

    def __init__(self, name):
        self.name = name
        self.neighbors: list[Neighbor] = []
        self.parent: Vertex = self

    def add_neighbor(self, vertex: Vertex, weight):
        self.neighbors.append(Neighbor(vertex, weight))

    def get_root(self) -> Vertex:
        return root(self)

    def is_root(self) -> bool:
        return self.parent is self

    def __repr__(self):
        return f'{self.name}'


def root(vertex: Vertex) -> Vertex:
    """
    Follow group parents up to the fragment root.

    The chain is not compressed, the cost is the length of the chain.
    """
    while vertex.parent is not vertex:
        vertex = vertex.parent
    return vertex


def union(vertex: Vertex, absorbed_root: Vertex) -> None:
    """
    Hang the root of an absorbed fragment under ``vertex``.

    Members of the absorbed fragment keep their parents and still reach
    the new root through ``absorbed_root``.
    """
    absorbed_root.parent = vertex


def same_group(a: Vertex, b: Vertex) -> bool:
    return root(a) is root(b)
