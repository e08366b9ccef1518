"""Spawn planning — spend matter on new units along the frontier.

The frontier is every tile we own that touches at least one outside
tile.  Each unit of budget picks a frontier tile uniformly at random
(with replacement), so several spawns can stack on the same tile.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grassbot.grid.cell import Owner
from grassbot.planning.actions import Spawn

if TYPE_CHECKING:
    from numpy.random import Generator

    from grassbot.grid.cell import Cell
    from grassbot.grid.state import GridState

SPAWN_COST = 10

logger = logging.getLogger(__name__)


def frontier_cells(state: GridState) -> list[Cell]:
    """Return our tiles that border an outside tile, row-major."""
    return [
        cell
        for cell in state.iter_cells()
        if cell.owner is Owner.MINE
        and any(n.is_outside for n in state.neighbours(cell.x, cell.y))
    ]


def spawn_budget(my_matter: int, spawn_cost: int = SPAWN_COST) -> int:
    """Return how many units ``my_matter`` pays for.

    Raises:
        ValueError: If ``spawn_cost`` is not positive.
    """
    if spawn_cost <= 0:
        msg = f"spawn_cost must be > 0, got {spawn_cost}"
        raise ValueError(msg)
    return max(0, my_matter) // spawn_cost


def plan_spawns(
    state: GridState,
    rng: Generator,
    spawn_cost: int = SPAWN_COST,
) -> list[Spawn]:
    """Spend all available matter on single-unit spawns at the frontier.

    Args:
        state: The board for this turn.
        rng: Seeded random generator used to pick frontier tiles.
        spawn_cost: Matter price of one unit.

    Returns:
        One ``Spawn(1, x, y)`` per affordable unit, or nothing when the
        frontier is empty.
    """
    budget = spawn_budget(state.my_matter, spawn_cost)
    if budget == 0:
        return []

    frontier = frontier_cells(state)
    if not frontier:
        logger.debug("no frontier tile, skipping %d spawns", budget)
        return []

    spawns: list[Spawn] = []
    for _ in range(budget):
        cell = frontier[int(rng.integers(0, len(frontier)))]
        spawns.append(Spawn(amount=1, x=cell.x, y=cell.y))
    return spawns
