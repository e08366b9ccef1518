"""GridState — the board snapshot for one turn.

The GridState owns the cells arranged in a 2D grid together with both
players' matter counters, and provides the spatial queries (neighbours,
robot stacks, outside tiles) used by the distance field and the
planners.  It is rebuilt from scratch every turn.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grassbot.grid.cell import Cell, Owner

# East, south, west, north.  Tie-breaking in the planners depends on
# this order.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass
class GridState:
    """A height x width board plus matter counters.

    Attributes:
        width: Number of columns in the grid.
        height: Number of rows in the grid.
        my_matter: Our matter, spent on spawning and building.
        enemy_matter: The opponent's matter.
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    width: int
    height: int
    my_matter: int = 0
    enemy_matter: int = 0
    cells: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Fill in empty neutral cells when no rows were supplied."""
        if self.width <= 0 or self.height <= 0:
            msg = f"grid must be non-empty, got {self.width}x{self.height}"
            raise ValueError(msg)
        if not self.cells:
            self.cells = [
                [Cell(x=x, y=y) for x in range(self.width)]
                for y in range(self.height)
            ]
        elif len(self.cells) != self.height or any(
            len(row) != self.width for row in self.cells
        ):
            msg = f"cell rows do not match {self.width}x{self.height}"
            raise ValueError(msg)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self.cells[y][x]

    def neighbours(self, x: int, y: int) -> list[Cell]:
        """Return the 4-connected neighbours of ``(x, y)``.

        Neighbours come back in east, south, west, north order with
        off-board positions dropped (no wraparound).

        Args:
            x: Column index.
            y: Row index.
        """
        result: list[Cell] = []
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append(self.cells[ny][nx])
        return result

    def iter_cells(self) -> list[Cell]:
        """Return every cell in row-major order."""
        return [cell for row in self.cells for cell in row]

    def my_robot_cells(self) -> list[Cell]:
        """Return the cells holding one of our unit stacks, row-major."""
        return [cell for cell in self.iter_cells() if cell.has_my_robots]

    def outside_cells(self) -> list[Cell]:
        """Return every contestable (non-owned, passable) cell, row-major."""
        return [cell for cell in self.iter_cells() if cell.is_outside]

    def count_owned(self, owner: Owner) -> int:
        """Return how many tiles ``owner`` controls."""
        return sum(1 for cell in self.iter_cells() if cell.owner is owner)

    def total_units(self, owner: Owner) -> int:
        """Return the number of units ``owner`` has on the board."""
        return sum(cell.units for cell in self.iter_cells() if cell.owner is owner)
