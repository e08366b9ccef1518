"""DistanceField — hop distance from every tile to the nearest outside tile.

The field is a multi-source breadth-first search seeded from every
contestable tile (not ours, scrap > 0).  It is stored as a NumPy 2D
integer array indexed ``[y, x]`` and rebuilt from scratch each turn.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from grassbot.grid.state import GridState

UNREACHABLE = -1


@dataclass
class DistanceField:
    """Per-tile BFS distance to the nearest outside tile.

    Attributes:
        grid: Distances (``UNREACHABLE`` where no path exists), shape
            ``(height, width)``.
    """

    grid: NDArray[np.int64]

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    def distance_at(self, x: int, y: int) -> int:
        """Return the distance stored at ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            The hop count, or ``UNREACHABLE``.
        """
        return int(self.grid[y, x])

    def is_reachable(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` has a defined distance."""
        return self.distance_at(x, y) != UNREACHABLE

    def seeds(self) -> list[tuple[int, int]]:
        """Return the ``(x, y)`` positions at distance 0, row-major."""
        ys, xs = np.nonzero(self.grid == 0)
        return [(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def render(self) -> str:
        """Return the field as space-separated rows, one line per row."""
        return "\n".join(" ".join(str(int(v)) for v in row) for row in self.grid)


def build_distance_field(state: GridState) -> DistanceField:
    """Run a multi-source BFS from every outside tile.

    Seeds are visited in row-major order and neighbours are expanded in
    east, south, west, north order.  Only passable tiles are entered, so
    impassable tiles and pockets walled off by them keep
    ``UNREACHABLE``.  A board with no outside tile at all yields a field
    that is ``UNREACHABLE`` everywhere.

    Args:
        state: The board for this turn.

    Returns:
        A freshly built DistanceField.
    """
    grid = np.full((state.height, state.width), UNREACHABLE, dtype=np.int64)
    frontier: deque[tuple[int, int]] = deque()

    for cell in state.outside_cells():
        grid[cell.y, cell.x] = 0
        frontier.append((cell.x, cell.y))

    while frontier:
        x, y = frontier.popleft()
        current = grid[y, x]
        for neighbour in state.neighbours(x, y):
            if not neighbour.is_passable:
                continue
            if grid[neighbour.y, neighbour.x] != UNREACHABLE:
                continue
            grid[neighbour.y, neighbour.x] = current + 1
            frontier.append((neighbour.x, neighbour.y))

    return DistanceField(grid=grid)
