from .arc import Arc
from .graph import Graph
from .heap import ArcPriorityQueue, heap_union
from .partial_tree import PartialTree
from .vertex import Neighbor, Vertex, root, same_group, union
