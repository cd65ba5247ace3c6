from typing import Callable, Dict, Hashable, Iterable, Mapping, Union

from frozendict import frozendict

from .function_path_graph import zero_heuristic
from .path_graph import PathGraph


class DictPathGraph(PathGraph):
    """
    Path graph given explicitly as an adjacency mapping.

    Each value of ``adjacency`` is either an iterable of neighbors, or a mapping from
    neighbor to the cost of the edge. Nodes that are not keys of ``adjacency`` have no
    neighbors. Edges are directed; list both directions for an undirected graph.

    :param adjacency: Mapping from each node to its neighbors.
    :param heuristic_fn: Estimate of the remaining cost from a node to the goal.
        Defaults to 0 everywhere.
    :param default_edge_cost: Cost of edges whose neighbors were given as an iterable.
    """

    def __init__(
        self,
        adjacency: Mapping[
            Hashable, Union[Iterable[Hashable], Mapping[Hashable, float]]
        ],
        heuristic_fn: Callable[[Hashable, Hashable], float] = zero_heuristic,
        default_edge_cost: float = 0.0,
    ):
        self.adjacency = frozendict(
            {
                node: _edge_costs(targets, default_edge_cost)
                for node, targets in adjacency.items()
            }
        )
        self.heuristic_fn = heuristic_fn
        self.default_edge_cost = default_edge_cost

    @classmethod
    def undirected(cls, edges, **kwargs) -> "DictPathGraph":
        """
        Build a graph from an iterable of ``(a, b)`` or ``(a, b, cost)`` edges, each of which
        can be traversed in both directions. Remaining keyword arguments are passed to the
        constructor.

        When several edges join the same pair of nodes, the cheapest one is kept.
        """
        default_edge_cost = kwargs.get("default_edge_cost", 0.0)
        adjacency: Dict[Hashable, Dict[Hashable, float]] = {}
        for edge in edges:
            if len(edge) == 2:
                a, b = edge
                cost = default_edge_cost
            elif len(edge) == 3:
                a, b, cost = edge
            else:
                raise ValueError(f"Edges must have 2 or 3 elements, got {edge!r}")
            for source, target in ((a, b), (b, a)):
                targets = adjacency.setdefault(source, {})
                targets[target] = min(cost, targets.get(target, float("inf")))
        return cls(adjacency, **kwargs)

    def nodes(self):
        """
        Every node that appears in the graph, as a source or as a target.
        """
        result = dict.fromkeys(self.adjacency)
        for targets in self.adjacency.values():
            result.update(dict.fromkeys(targets))
        return list(result)

    def neighbors(self, node):
        return list(self.adjacency.get(node, ()))

    def heuristic(self, node, goal):
        return self.heuristic_fn(node, goal)

    def edge_cost(self, source, target):
        return self.adjacency[source][target]


def _edge_costs(targets, default_edge_cost) -> frozendict:
    if isinstance(targets, Mapping):
        return frozendict({t: float(cost) for t, cost in targets.items()})
    return frozendict({t: float(default_edge_cost) for t in targets})
