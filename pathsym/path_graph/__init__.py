from .dict_path_graph import DictPathGraph
from .function_path_graph import FunctionPathGraph, zero_heuristic
from .grid_path_graph import GridPathGraph
from .path_graph import PathGraph
from .path_graph_transformer import (
    FilterNeighborsGraph,
    LimitNeighborsGraph,
    PredicateFilterGraph,
    UnitCostGraph,
)
