import itertools
from abc import abstractmethod
from typing import Callable

from .path_graph import PathGraph


class FilterNeighborsGraph(PathGraph):
    """
    Abstract class for graphs that filter edges based on some criterion.
    """

    def __init__(self, graph: PathGraph):
        self.graph = graph

    @abstractmethod
    def include_edge(self, s, t) -> bool:
        """
        Returns True if the edge from s to t should be included in the graph.
        """

    def neighbors(self, node):
        return [t for t in self.graph.neighbors(node) if self.include_edge(node, t)]

    def heuristic(self, node, goal):
        return self.graph.heuristic(node, goal)

    def edge_cost(self, source, target):
        return self.graph.edge_cost(source, target)


class PredicateFilterGraph(FilterNeighborsGraph):
    """
    Keeps the edges ``(s, t)`` for which ``predicate(s, t)`` is true.

    :param graph: The graph to filter the edges of.
    :param predicate: Called with the source and target of each edge.
    """

    def __init__(self, graph: PathGraph, predicate: Callable[[object, object], bool]):
        super().__init__(graph)
        self.predicate = predicate

    def include_edge(self, s, t) -> bool:
        return self.predicate(s, t)


class LimitNeighborsGraph(PathGraph):
    """
    Limits the number of edges that can be expanded from a node, by only expanding the first
    ``limit`` edges.

    :param graph: The graph to limit the edges of.
    :param limit: The limit on the number of edges to expand.
    """

    def __init__(self, graph: PathGraph, limit: int):
        assert limit > 0, f"limit must be positive, got {limit}"
        self.graph = graph
        self.limit = limit

    def neighbors(self, node):
        return list(itertools.islice(self.graph.neighbors(node), self.limit))

    def heuristic(self, node, goal):
        return self.graph.heuristic(node, goal)

    def edge_cost(self, source, target):
        return self.graph.edge_cost(source, target)


class UnitCostGraph(PathGraph):
    """
    Gives every edge of the underlying graph a cost of 1, so that the accumulated cost of a
    node is the number of steps taken to reach it.

    :param graph: The graph whose neighbors and heuristic are used.
    """

    def __init__(self, graph: PathGraph):
        self.graph = graph

    def neighbors(self, node):
        return self.graph.neighbors(node)

    def heuristic(self, node, goal):
        return self.graph.heuristic(node, goal)

    def edge_cost(self, source, target):
        return 1.0
