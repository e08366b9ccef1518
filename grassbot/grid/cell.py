"""Cell — a single tile on the game board.

Each cell holds its scrap (traversability), its owner, the unit stack
standing on it, and the structure flags the game server reports.  Cells
are read-only inputs to planning: nothing in the decision pipeline
mutates them once a turn has been ingested.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Owner(Enum):
    """Territorial control of a cell."""

    NEUTRAL = "neutral"
    ENEMY = "enemy"
    MINE = "mine"

    @classmethod
    def from_code(cls, code: int) -> Owner:
        """Translate the wire-protocol owner integer.

        Args:
            code: ``-1`` (neutral), ``0`` (enemy) or ``1`` (mine).

        Raises:
            ValueError: If ``code`` is not one of the known values.
        """
        try:
            return _OWNER_BY_CODE[code]
        except KeyError:
            msg = f"unknown owner code {code!r}"
            raise ValueError(msg) from None

    @property
    def code(self) -> int:
        """Return the wire-protocol integer for this owner."""
        return _CODE_BY_OWNER[self]


_OWNER_BY_CODE: dict[int, Owner] = {
    -1: Owner.NEUTRAL,
    0: Owner.ENEMY,
    1: Owner.MINE,
}
_CODE_BY_OWNER: dict[Owner, int] = {o: c for c, o in _OWNER_BY_CODE.items()}


@dataclass(frozen=True)
class Cell:
    """A single tile of the board.

    Attributes:
        x: Column position.
        y: Row position.
        scrap_amount: Scrap left on the tile; 0 means impassable.
        owner: Who controls the tile.
        units: Size of the unit stack standing here.
        is_recycler: A recycler stands on this tile.
        can_build: A recycler may be built here this turn.
        can_spawn: Units may be spawned here this turn.
        in_range_of_recycler: The tile is being eaten by a recycler.
    """

    x: int
    y: int
    scrap_amount: int = 0
    owner: Owner = Owner.NEUTRAL
    units: int = 0
    is_recycler: bool = False
    can_build: bool = False
    can_spawn: bool = False
    in_range_of_recycler: bool = False

    def __post_init__(self) -> None:
        """Reject negative scrap or unit counts."""
        if self.scrap_amount < 0:
            msg = f"scrap_amount must be >= 0, got {self.scrap_amount}"
            raise ValueError(msg)
        if self.units < 0:
            msg = f"units must be >= 0, got {self.units}"
            raise ValueError(msg)

    @property
    def is_passable(self) -> bool:
        """Return True if units can stand on or cross this tile."""
        return self.scrap_amount > 0

    @property
    def is_outside(self) -> bool:
        """Return True for contestable tiles: passable and not ours."""
        return self.owner is not Owner.MINE and self.scrap_amount > 0

    @property
    def has_my_robots(self) -> bool:
        """Return True if one of our unit stacks stands here."""
        return self.owner is Owner.MINE and self.units > 0
