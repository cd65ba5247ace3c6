from typing import Dict, Generic, List, TypeVar

from pathsym.frontier.priority_frontier import PriorityFrontier

from .search_node import NodeRegistry, SearchNode

T = TypeVar("T")


class SearchSession(Generic[T]):
    """
    All the state of one A* search: the node registry, the best known cost of each node,
    the node each one was most cheaply reached from, and the frontier.

    ``PathFinder`` opens a new session for every search, so nothing carries over between
    searches. A session can also be held on to and ``reset`` explicitly.
    """

    def __init__(self):
        self.registry: NodeRegistry[T] = NodeRegistry()
        self.cost: Dict[SearchNode[T], float] = {}
        self.predecessor: Dict[SearchNode[T], SearchNode[T]] = {}
        self.expanded_at: Dict[SearchNode[T], float] = {}
        self.frontier: PriorityFrontier[SearchNode[T]] = PriorityFrontier()

    def reset(self):
        """
        Discard every node, cost, predecessor and frontier entry.
        """
        self.registry.clear()
        self.cost.clear()
        self.predecessor.clear()
        self.expanded_at.clear()
        self.frontier.clear()

    def resolve(self, location: T) -> SearchNode[T]:
        return self.registry.resolve(location)

    def seed(self, start: SearchNode[T], priority: float):
        """
        Make ``start`` the root of the search. It costs nothing to reach and is its own
        predecessor.
        """
        self.cost[start] = 0.0
        self.predecessor[start] = start
        start.priority = priority
        self.frontier.insert(start)

    def improves(self, node: SearchNode[T], tentative_cost: float) -> bool:
        """
        Whether ``tentative_cost`` is cheaper than any known way of reaching ``node``.
        """
        return node not in self.cost or tentative_cost < self.cost[node]

    def relax(
        self,
        current: SearchNode[T],
        neighbor: SearchNode[T],
        tentative_cost: float,
        priority: float,
    ):
        """
        Record that ``neighbor`` is best reached through ``current`` at ``tentative_cost``,
        and enqueue it with ``priority``.
        """
        self.cost[neighbor] = tentative_cost
        self.predecessor[neighbor] = current
        neighbor.priority = priority
        self.frontier.insert(neighbor)

    def improvable(self, node: SearchNode[T]) -> bool:
        """
        Whether expanding ``node`` could find anything new: it has never been expanded,
        or its cost has dropped since it last was.
        """
        return node not in self.expanded_at or self.cost[node] < self.expanded_at[node]

    def mark_expanded(self, node: SearchNode[T]):
        self.expanded_at[node] = self.cost[node]

    def reconstruct_path(self, end: SearchNode[T]) -> List[T]:
        """
        Follow predecessors back from ``end`` to the node that is its own predecessor,
        and return the locations in start-to-end order.
        """
        path = [end.location]
        node = end
        while self.predecessor[node] is not node:
            node = self.predecessor[node]
            path.append(node.location)
        path.reverse()
        return path
