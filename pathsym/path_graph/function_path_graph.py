from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

from .path_graph import PathGraph

N = TypeVar("N")


def zero_heuristic(node, goal) -> float:
    """
    Heuristic that always returns 0. Admissible for any graph, in which case the search
    reduces to a uniform cost search.
    """
    del node, goal
    return 0.0


@dataclass
class FunctionPathGraph(PathGraph[N]):
    """
    Path graph defined by plain functions.

    :param neighbors_fn: Maps a node to its neighbors.
    :param heuristic_fn: Maps a node and the goal to an estimate of the remaining cost.
    :param edge_cost_fn: Maps an edge's source and target to its cost. If None, the
        ``PathGraph`` default is used.
    """

    neighbors_fn: Callable[[N], Iterable[N]]
    heuristic_fn: Callable[[N, N], float] = zero_heuristic
    edge_cost_fn: Optional[Callable[[N, N], float]] = None

    def neighbors(self, node):
        return self.neighbors_fn(node)

    def heuristic(self, node, goal):
        return self.heuristic_fn(node, goal)

    def edge_cost(self, source, target):
        if self.edge_cost_fn is None:
            return super().edge_cost(source, target)
        return self.edge_cost_fn(source, target)
