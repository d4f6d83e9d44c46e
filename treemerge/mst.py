from typing import Hashable

from .partial_tree_list import PartialTreeList, execute, initialize
from .structures.arc import Arc
from .structures.graph import Graph


def spanning_forest(graph: Graph,
                    strategy: str = None) -> tuple[list[Arc], PartialTreeList]:
    """
    spanning forest

    Args:
        graph: graph to span
        strategy: heap merge strategy

    Returns:
        arcs of the minimum spanning forest and the list of partial trees
        left, one per connected component
    """
    ptlist = initialize(graph)
    arcs = execute(ptlist, strategy)
    return arcs, ptlist


def minimum_spanning_tree(
    edges: list[tuple[Hashable, Hashable]]
    | list[tuple[Hashable, Hashable, float]],
    strategy: str = None
) -> list[tuple[Hashable, Hashable]]:
    """
    minimum spanning tree

    Args:
        edges: list of edges, weight defaults to 1

    Returns:
        list of edges in minimum spanning tree
    """
    if not edges:
        return []

    arcs, _ = spanning_forest(Graph.from_edges(edges), strategy)
    return [arc.endpoints() for arc in arcs]


def total_weight(arcs: list[Arc]):
    return sum(arc.weight for arc in arcs)
