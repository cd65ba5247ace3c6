from pathsym.frontier.priority_frontier import EmptyFrontierError, PriorityFrontier
from pathsym.path_graph.dict_path_graph import DictPathGraph
from pathsym.path_graph.function_path_graph import FunctionPathGraph, zero_heuristic
from pathsym.path_graph.grid_path_graph import GridPathGraph
from pathsym.path_graph.path_graph import PathGraph
from pathsym.path_graph.path_graph_transformer import (
    FilterNeighborsGraph,
    LimitNeighborsGraph,
    PredicateFilterGraph,
    UnitCostGraph,
)
from pathsym.search.path_finder import PathFinder, astar
from pathsym.search.search_node import NodeRegistry, SearchNode
from pathsym.search.search_result import NOT_FOUND, NotFound, SearchResult
from pathsym.search.search_session import SearchSession
from pathsym.utils.documentation import internal_only, is_internal_only

from . import frontier, path_graph, search
