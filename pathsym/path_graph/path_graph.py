from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, TypeVar

N = TypeVar("N")


class PathGraph(ABC, Generic[N]):
    """
    Represents an implicit graph to search for paths in. Nodes are arbitrary hashable
    objects, and edges are given by ``neighbors``.
    """

    @abstractmethod
    def neighbors(self, node: N) -> Iterable[N]:
        """
        Find the neighbors of a node. Must return a finite iterable for every node
        reachable from a search's start node.
        """

    @abstractmethod
    def heuristic(self, node: N, goal: N) -> float:
        """
        Estimate of the remaining cost from ``node`` to ``goal``. Should be non-negative,
        and must never overestimate the true cost for the returned paths to be optimal.
        """

    def edge_cost(self, source: N, target: N) -> float:
        """
        Cost of moving from ``source`` to its neighbor ``target``.

        Defaults to 0, in which case the accumulated cost of a node is simply the cost of
        the node it was reached from, and the heuristic alone orders the search. Override
        this (or use ``with_unit_costs``) to search with unit or weighted edges.
        """
        del source, target
        return 0.0

    def filter_neighbors(self, predicate: Callable[[N, N], bool]) -> "PathGraph[N]":
        """
        Return a graph with only the edges ``(s, t)`` for which ``predicate(s, t)`` holds.
        """
        # pylint: disable=cyclic-import
        from .path_graph_transformer import PredicateFilterGraph

        return PredicateFilterGraph(self, predicate)

    def limit_neighbors(self, limit: int) -> "PathGraph[N]":
        """
        Return a graph that only expands the first ``limit`` neighbors of each node.
        """
        # pylint: disable=cyclic-import
        from .path_graph_transformer import LimitNeighborsGraph

        return LimitNeighborsGraph(self, limit)

    def with_unit_costs(self) -> "PathGraph[N]":
        """
        Return a graph where every edge costs 1.
        """
        # pylint: disable=cyclic-import
        from .path_graph_transformer import UnitCostGraph

        return UnitCostGraph(self)
