"""Movement planning — push every unit stack toward the nearest outside tile.

Each of our stacks looks at its passable neighbours and picks the ones
with the smallest distance-to-outside.  The stack is split as evenly as
possible between those neighbours; leftover units go to the earliest
neighbours in east, south, west, north order.

Stacks are planned independently of one another: two stacks may well
converge on the same tile.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grassbot.fields.distance import UNREACHABLE
from grassbot.planning.actions import Move

if TYPE_CHECKING:
    from grassbot.fields.distance import DistanceField
    from grassbot.grid.cell import Cell
    from grassbot.grid.state import GridState

logger = logging.getLogger(__name__)


def split_units(units: int, slots: int) -> list[int]:
    """Partition ``units`` over ``slots`` as evenly as possible.

    The first ``units % slots`` slots receive one extra unit, so the
    result always sums to ``units``.

    Args:
        units: Number of units to distribute.
        slots: Number of destinations (must be > 0).

    Raises:
        ValueError: If ``slots`` is not positive.
    """
    if slots <= 0:
        msg = f"slots must be > 0, got {slots}"
        raise ValueError(msg)
    base, extra = divmod(units, slots)
    return [base + 1 if i < extra else base for i in range(slots)]


def closest_destinations(
    state: GridState,
    field: DistanceField,
    cell: Cell,
) -> list[Cell]:
    """Return the passable neighbours of ``cell`` nearest to the outside.

    Unreachable neighbours never win against a reachable one; if every
    passable neighbour is unreachable (or there is none) the result is
    empty.

    Args:
        state: The board for this turn.
        field: Distance-to-outside for the same board.
        cell: The tile the stack stands on.

    Returns:
        Neighbours sharing the minimal distance, in east, south, west,
        north order.
    """
    candidates = [
        (n, field.distance_at(n.x, n.y))
        for n in state.neighbours(cell.x, cell.y)
        if n.is_passable
    ]
    reachable = [(n, d) for n, d in candidates if d != UNREACHABLE]
    if not reachable:
        return []

    min_dist = min(d for _, d in reachable)
    return [n for n, d in reachable if d == min_dist]


def plan_moves(state: GridState, field: DistanceField) -> list[Move]:
    """Plan one turn of movement for all of our unit stacks.

    Args:
        state: The board for this turn.
        field: Distance-to-outside for the same board.

    Returns:
        Move actions, grouped by source stack in row-major order.
        Stacks with nowhere to go contribute nothing.
    """
    moves: list[Move] = []
    for cell in state.my_robot_cells():
        destinations = closest_destinations(state, field, cell)
        logger.debug(
            "stack at (%d, %d) with %d units -> %s",
            cell.x,
            cell.y,
            cell.units,
            [(d.x, d.y) for d in destinations],
        )
        if not destinations:
            continue

        shares = split_units(cell.units, len(destinations))
        for dest, amount in zip(destinations, shares, strict=True):
            if amount == 0:
                continue
            moves.append(
                Move(
                    amount=amount,
                    from_x=cell.x,
                    from_y=cell.y,
                    to_x=dest.x,
                    to_y=dest.y,
                ),
            )
    return moves
