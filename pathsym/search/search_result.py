from dataclasses import dataclass
from typing import Generic, List, TypeVar, Union

T = TypeVar("T")


class NotFound:
    """
    Returned instead of a path when the goal cannot be reached from the start. There is a
    single instance, ``NOT_FOUND``, and it is falsy, so ``if path:`` distinguishes a found
    path from a failed search.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOT_FOUND"

    def __reduce__(self):
        return (NotFound, ())


NOT_FOUND = NotFound()


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class SearchResult(Generic[T]):
    """
    Outcome of ``PathFinder.search``.

    :param path: The locations from start to end inclusive, or ``NOT_FOUND``.
    :param cost: Accumulated cost of the end location along ``path``; infinite if
        no path was found.
    :param nodes_expanded: Number of nodes whose neighbors were generated.
    :param nodes_discovered: Number of distinct locations the search encountered.
    :param iteration_limit_reached: Whether the search stopped because it hit
        ``max_iterations`` rather than because the frontier was exhausted.

    Results compare equal field by field, but are not hashable since ``path`` is a list.
    """

    path: Union[List[T], NotFound]
    cost: float
    nodes_expanded: int
    nodes_discovered: int
    iteration_limit_reached: bool = False

    @property
    def found(self) -> bool:
        """
        Whether a path was found.
        """
        return self.path is not NOT_FOUND
