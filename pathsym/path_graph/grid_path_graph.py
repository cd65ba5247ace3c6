import math
from typing import List, Tuple

import numpy as np

from .path_graph import PathGraph

Cell = Tuple[int, int]

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_DIAGONAL = ((-1, 1), (1, 1), (1, -1), (-1, -1))


class GridPathGraph(PathGraph[Cell]):
    """
    Path graph over the cells of a 2-D occupancy grid. Nodes are ``(row, col)`` tuples.

    Orthogonal moves cost 1 and diagonal moves cost sqrt(2). A diagonal move is only
    allowed when both orthogonal cells it passes between are free, so paths never cut
    the corner of a blocked cell. The heuristic is the Manhattan distance on a
    4-connected grid and the octile distance on an 8-connected one; both are admissible
    and consistent for these edge costs.

    :param blocked: 2-D array, truthy where a cell cannot be entered.
    :param allow_diagonal: Whether to connect each cell to its 8 neighbors instead of 4.
    """

    def __init__(self, blocked, allow_diagonal: bool = False):
        blocked = np.asarray(blocked, dtype=bool)
        if blocked.ndim != 2:
            raise ValueError(f"Expected a 2-D grid, got shape {blocked.shape}")
        self.blocked = blocked
        self.allow_diagonal = allow_diagonal

    @classmethod
    def from_strings(cls, rows, blocked_chars="#", **kwargs) -> "GridPathGraph":
        """
        Parse a grid drawn as text, one string per row. Characters in ``blocked_chars``
        are blocked cells, anything else is free.
        """
        rows = list(rows)
        width = max((len(row) for row in rows), default=0)
        blocked = np.ones((len(rows), width), dtype=bool)
        for r, row in enumerate(rows):
            for c, char in enumerate(row):
                blocked[r, c] = char in blocked_chars
        return cls(blocked, **kwargs)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.blocked.shape

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.shape[0] and 0 <= col < self.shape[1]

    def is_free(self, cell: Cell) -> bool:
        """
        Whether ``cell`` is inside the grid and not blocked.
        """
        return self.in_bounds(cell) and not self.blocked[cell]

    def neighbors(self, node: Cell) -> List[Cell]:
        if not self.is_free(node):
            return []
        row, col = node
        result = [
            (row + dr, col + dc)
            for dr, dc in _ORTHOGONAL
            if self.is_free((row + dr, col + dc))
        ]
        if self.allow_diagonal:
            result += [
                (row + dr, col + dc)
                for dr, dc in _DIAGONAL
                if self.is_free((row + dr, col + dc))
                and self.is_free((row + dr, col))
                and self.is_free((row, col + dc))
            ]
        return result

    def heuristic(self, node: Cell, goal: Cell) -> float:
        drow = abs(node[0] - goal[0])
        dcol = abs(node[1] - goal[1])
        if not self.allow_diagonal:
            return float(drow + dcol)
        return max(drow, dcol) + (math.sqrt(2) - 1) * min(drow, dcol)

    def edge_cost(self, source: Cell, target: Cell) -> float:
        if source[0] != target[0] and source[1] != target[1]:
            return math.sqrt(2)
        return 1.0
