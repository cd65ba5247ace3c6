from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, TypeVar

from pathsym.utils.documentation import internal_only

T = TypeVar("T")


@dataclass(eq=False)
@internal_only
class SearchNode(Generic[T]):
    """
    Wraps a location of the caller's graph during a single search.

    Equality and hashing are those of ``location``. ``priority`` is the estimated total cost
    (cost so far plus heuristic) the node was last enqueued with, and means nothing once
    the node has left the frontier.
    """

    location: T
    priority: float = field(default=0.0)

    def __eq__(self, other):
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.location == other.location

    def __hash__(self):
        return hash(self.location)


class NodeRegistry(Generic[T]):
    """
    Creates the ``SearchNode`` for each location the first time it is seen, and returns
    that same node every time afterwards.
    """

    def __init__(self):
        self._nodes: Dict[T, SearchNode[T]] = {}

    def resolve(self, location: T) -> SearchNode[T]:
        """
        Return the node for ``location``, creating it if needed.

        :raises TypeError: If ``location`` is not hashable.
        """
        node = self._nodes.get(location)
        if node is None:
            node = self._nodes[location] = SearchNode(location)
        return node

    def clear(self):
        """
        Forget every node.
        """
        self._nodes.clear()

    def __contains__(self, location) -> bool:
        return location in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode[T]]:
        return iter(self._nodes.values())
