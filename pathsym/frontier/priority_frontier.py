import heapq
import itertools
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

X = TypeVar("X")


class EmptyFrontierError(IndexError):
    """
    Raised when an element is requested from an empty ``PriorityFrontier``.
    """


class PriorityFrontier(Generic[X]):
    """
    Min-priority queue over elements that expose a mutable ``priority`` attribute.

    Each call to ``insert`` records the element's ``priority`` at that moment, so the same
    element may be inserted several times with different priorities, each insertion being
    a separate entry. Changing ``item.priority`` after insertion does not reorder existing
    entries.

    Elements with equal priority are extracted in insertion order.
    """

    def __init__(self):
        self._heap: List[_FrontierEntry] = []
        self._counter = itertools.count()

    def insert(self, item: X):
        """
        Add ``item`` to the frontier, keyed by its current ``priority``.
        """
        entry = _FrontierEntry(item.priority, next(self._counter), item)
        heapq.heappush(self._heap, entry)

    def extract_min(self) -> X:
        """
        Remove and return the element with the smallest priority.

        :raises EmptyFrontierError: If the frontier is empty.
        """
        if not self._heap:
            raise EmptyFrontierError("extract_min from an empty frontier")
        return heapq.heappop(self._heap).item

    def peek(self) -> X:
        """
        Return the element ``extract_min`` would return, without removing it.

        :raises EmptyFrontierError: If the frontier is empty.
        """
        if not self._heap:
            raise EmptyFrontierError("peek at an empty frontier")
        return self._heap[0].item

    def size(self) -> int:
        """
        Number of entries currently in the frontier.
        """
        return len(self._heap)

    def clear(self):
        """
        Remove every entry. Insertion order restarts from zero.
        """
        self._heap = []
        self._counter = itertools.count()

    def __len__(self):
        return self.size()

    def __bool__(self):
        return bool(self._heap)

    def __repr__(self):
        return f"{type(self).__name__}(size={self.size()})"


@dataclass(order=True)
class _FrontierEntry:
    """
    Represents one insertion into the frontier.
    """

    priority: float
    order: int
    item: X = field(compare=False)
