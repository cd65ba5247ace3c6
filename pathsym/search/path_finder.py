import logging
from typing import Generic, List, Optional, TypeVar, Union

from pathsym.path_graph.path_graph import PathGraph

from .search_result import NOT_FOUND, NotFound, SearchResult
from .search_session import SearchSession

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PathFinder(Generic[T]):
    """
    A* search for a path between two locations of a ``PathGraph``.

    Every call opens its own ``SearchSession``, so a ``PathFinder`` holds no state between
    calls and repeated searches with the same arguments return the same result.

    :param graph: Provides the neighbors of each location, the heuristic, and the edge costs.
    :param max_iterations: Maximum number of nodes to expand before giving up. If None,
        the search runs until the goal is found or the frontier is exhausted.
    :param skip_stale: Whether to skip nodes popped from the frontier whose cost has not
        improved since they were last expanded. Expanding them again cannot change the
        result, so this only saves work.

    :raises AssertionError: If ``max_iterations`` is given and not positive.
    """

    def __init__(
        self,
        graph: PathGraph[T],
        max_iterations: Optional[int] = None,
        skip_stale: bool = True,
    ):
        assert (
            max_iterations is None or max_iterations > 0
        ), f"max_iterations must be positive, got {max_iterations}"
        self.graph = graph
        self.max_iterations = max_iterations
        self.skip_stale = skip_stale

    def find_path(self, start: T, end: T) -> Union[List[T], NotFound]:
        """
        Find a path from ``start`` to ``end``.

        :return: The list of locations from ``start`` to ``end`` inclusive, or
            ``NOT_FOUND`` if ``end`` cannot be reached (or was not reached within
            ``max_iterations``).
        """
        return self.search(start, end).path

    def search(self, start: T, end: T) -> SearchResult[T]:
        """
        Like ``find_path``, but also reports the cost of the path and how much of the
        graph was explored.
        """
        session: SearchSession[T] = SearchSession()
        start_node = session.resolve(start)
        end_node = session.resolve(end)
        session.seed(start_node, self.graph.heuristic(start, end))
        logger.debug("Searching for a path from %r to %r", start, end)

        expanded = 0
        while session.frontier:
            current = session.frontier.extract_min()
            if current.location == end:
                path = session.reconstruct_path(end_node)
                logger.debug(
                    "Found a path of length %d and cost %s after %d expansions",
                    len(path),
                    session.cost[end_node],
                    expanded,
                )
                return SearchResult(
                    path=path,
                    cost=session.cost[end_node],
                    nodes_expanded=expanded,
                    nodes_discovered=len(session.registry),
                )
            if self.skip_stale and not session.improvable(current):
                continue
            if self.max_iterations is not None and expanded >= self.max_iterations:
                logger.debug(
                    "Gave up on %r -> %r after %d expansions", start, end, expanded
                )
                return self._not_found(session, expanded, iteration_limit_reached=True)
            self._expand(session, current, end)
            expanded += 1

        logger.debug("No path from %r to %r after %d expansions", start, end, expanded)
        return self._not_found(session, expanded, iteration_limit_reached=False)

    def _expand(self, session: SearchSession[T], current, end: T):
        session.mark_expanded(current)
        current_cost = session.cost[current]
        for location in self.graph.neighbors(current.location):
            neighbor = session.resolve(location)
            tentative_cost = current_cost + self.graph.edge_cost(
                current.location, location
            )
            if not session.improves(neighbor, tentative_cost):
                continue
            session.relax(
                current,
                neighbor,
                tentative_cost,
                tentative_cost + self.graph.heuristic(location, end),
            )

    @staticmethod
    def _not_found(session, expanded, iteration_limit_reached) -> SearchResult:
        return SearchResult(
            path=NOT_FOUND,
            cost=float("inf"),
            nodes_expanded=expanded,
            nodes_discovered=len(session.registry),
            iteration_limit_reached=iteration_limit_reached,
        )


def astar(
    graph: PathGraph[T], start: T, end: T, **kwargs
) -> Union[List[T], NotFound]:
    """
    Find a path from ``start`` to ``end`` in ``graph`` with A* search. Keyword arguments
    are passed to ``PathFinder``.

    :param graph: Graph to search over
    :param start: Location to start from
    :param end: Location to reach
    """
    return PathFinder(graph, **kwargs).find_path(start, end)
