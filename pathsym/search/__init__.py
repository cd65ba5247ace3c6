from .path_finder import PathFinder, astar
from .search_node import NodeRegistry, SearchNode
from .search_result import NOT_FOUND, NotFound, SearchResult
from .search_session import SearchSession
