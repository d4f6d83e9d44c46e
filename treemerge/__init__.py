from .config import Config
from .errors import (EmptyListError, EmptyQueueError, GraphParseError,
                     InvalidArgument, NotFoundError, TreeMergeError)
from .mst import minimum_spanning_tree, spanning_forest, total_weight
from .partial_tree_list import PartialTreeList, execute, initialize
from .structures import (Arc, ArcPriorityQueue, Graph, PartialTree, Vertex,
                         root, union)
from .version import __version__
