"""Actions — the orders a turn can issue.

The set is closed: Move, Spawn, Build, Wait and Message.  Each action
knows its own protocol text; joining them into a turn line is the
protocol writer's job.  Coordinates follow the game's convention of
``x`` = column and ``y`` = row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Send ``amount`` units from one tile to another."""

    amount: int
    from_x: int
    from_y: int
    to_x: int
    to_y: int

    def to_command(self) -> str:
        return (
            f"MOVE {self.amount} {self.from_x} {self.from_y} {self.to_x} {self.to_y}"
        )


@dataclass(frozen=True)
class Spawn:
    """Create ``amount`` new units on an owned tile."""

    amount: int
    x: int
    y: int

    def to_command(self) -> str:
        return f"SPAWN {self.amount} {self.x} {self.y}"


@dataclass(frozen=True)
class Build:
    """Build a recycler on an owned tile."""

    x: int
    y: int

    def to_command(self) -> str:
        return f"BUILD {self.x} {self.y}"


@dataclass(frozen=True)
class Wait:
    """Do nothing this turn."""

    def to_command(self) -> str:
        return "WAIT"


@dataclass(frozen=True)
class Message:
    """Display ``text`` in the game viewer."""

    text: str

    def to_command(self) -> str:
        return f"MESSAGE {self.text}"


Action = Move | Spawn | Build | Wait | Message
