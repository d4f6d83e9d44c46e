"""
Weighted undirected graphs and the graph file format

A graph file holds the vertex count, one vertex name per line, then one
edge per line as two vertex names and a weight::

    3
    A
    B
    C
    A B 1
    B C 2
    A C 5
"""
from __future__ import annotations

from pathlib import Path
from typing import Hashable, Iterable, Iterator

import numpy as np
from pyparsing import ParseException, Regex, StringEnd, Word, nums, printables

from ..errors import GraphParseError, InvalidArgument
from .vertex import Vertex


def _to_number(token: str):
    if any(c in token for c in '.eE'):
        return float(token)
    return int(token)


integer = Word(nums).set_parse_action(lambda tokens: [int(tokens[0])])
number = Regex(r"[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?").set_parse_action(
    lambda tokens: [_to_number(tokens[0])])
name = Word(printables)

count_line = integer + StringEnd()
name_line = name + StringEnd()
edge_line = name + name + number + StringEnd()


class Graph():
    """
    Weighted undirected graph with vertices kept in insertion order.
    """

    def __init__(self):
        self.vertices: list[Vertex] = []
        self._index: dict[Hashable, Vertex] = {}

    def add_vertex(self, name: Hashable) -> Vertex:
        if name in self._index:
            raise InvalidArgument(f"Duplicate vertex {name!r}.")
        v = Vertex(name)
        self.vertices.append(v)
        self._index[name] = v
        return v

    def vertex(self, name: Hashable) -> Vertex:
        return self._index[name]

    def add_edge(self, a: Hashable, b: Hashable, weight=1):
        """
        Add an undirected edge, creating missing vertices.
        """
        va = self._index[a] if a in self._index else self.add_vertex(a)
        vb = self._index[b] if b in self._index else self.add_vertex(b)
        va.add_neighbor(vb, weight)
        if vb is not va:
            vb.add_neighbor(va, weight)

    def edges(self) -> Iterator[tuple[Hashable, Hashable, object]]:
        """Each undirected edge once, as ``(a, b, weight)``."""
        position = {id(v): i for i, v in enumerate(self.vertices)}
        for i, v in enumerate(self.vertices):
            for nbr in v.neighbors:
                j = position[id(nbr.vertex)]
                if j > i:
                    yield (v.name, nbr.vertex.name, nbr.weight)
                elif j == i:
                    yield (v.name, v.name, nbr.weight)

    def __len__(self):
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __contains__(self, name):
        return name in self._index

    def __repr__(self):
        return f'Graph({len(self.vertices)} vertices)'

    @classmethod
    def from_edges(cls, edges: Iterable[tuple]) -> Graph:
        """
        Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples, weight
        defaults to 1.
        """
        g = cls()
        for e in edges:
            if len(e) == 2:
                g.add_edge(e[0], e[1], 1)
            elif len(e) == 3:
                g.add_edge(*e)
            else:
                raise InvalidArgument(
                    f"Edge {e!r} should be (u, v) or (u, v, weight).")
        return g

    @classmethod
    def from_matrix(cls, matrix, names=None) -> Graph:
        """
        Build a graph from a symmetric adjacency matrix

        Args:
            matrix: square array, zero entries mean no edge
            names: vertex names, default to row indices

        Returns:
            Graph
        """
        m = np.asarray(matrix)
        if m.ndim != 2 or m.shape[0] != m.shape[1]:
            raise InvalidArgument(
                f"Adjacency matrix should be square, got shape {m.shape}.")
        if not np.array_equal(m, m.T):
            raise InvalidArgument("Adjacency matrix should be symmetric.")
        n = m.shape[0]
        if names is None:
            names = list(range(n))
        elif len(names) != n:
            raise InvalidArgument(
                f"Got {len(names)} names for a {n}x{n} matrix.")

        g = cls()
        for name in names:
            g.add_vertex(name)
        for i, j in zip(*np.nonzero(np.triu(m))):
            g.add_edge(names[i], names[j], m[i, j].item())
        return g

    @classmethod
    def parse(cls, text: str) -> Graph:
        lines = [(lineno, line.strip())
                 for lineno, line in enumerate(text.splitlines(), start=1)
                 if line.strip()]
        g = cls()
        if not lines:
            return g

        lineno, line = lines[0]
        n = _parse_line(count_line, line, lineno, 'vertex count')[0]
        if len(lines) - 1 < n:
            raise GraphParseError(
                f"expected {n} vertex names, got {len(lines) - 1}", lineno)

        for lineno, line in lines[1:n + 1]:
            vname = _parse_line(name_line, line, lineno, 'vertex name')[0]
            if vname in g:
                raise GraphParseError(f"duplicate vertex {vname!r}", lineno)
            g.add_vertex(vname)

        for lineno, line in lines[n + 1:]:
            a, b, w = _parse_line(edge_line, line, lineno, 'edge')
            for vname in (a, b):
                if vname not in g:
                    raise GraphParseError(f"unknown vertex {vname!r}", lineno)
            g.add_edge(a, b, w)
        return g

    @classmethod
    def load(cls, path) -> Graph:
        path = Path(path)
        with path.open('r', encoding='utf-8') as f:
            try:
                text = f.read()
            except UnicodeDecodeError as e:
                raise GraphParseError(f"{path} is not a text file: {e}") from e
        return cls.parse(text)


def _parse_line(grammar, line, lineno, what):
    try:
        return grammar.parse_string(line, parse_all=True)
    except ParseException as e:
        raise GraphParseError(f"malformed {what} {line!r}: {e.msg}",
                              lineno) from e
