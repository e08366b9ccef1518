"""Reader — parse the game server's line protocol into GridStates.

The server sends one setup line (``width height``) and then, every
turn, a matter line followed by one line per tile in row-major order::

    my_matter enemy_matter
    scrap owner units recycler can_build can_spawn in_range_of_recycler
    ...

Malformed input raises ProtocolError; running out of input raises
EOFError so the caller can end the game loop.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from grassbot.grid.cell import Cell, Owner
from grassbot.grid.state import GridState

_TILE_FIELDS = 7


class ProtocolError(ValueError):
    """A line from the game server did not have the expected shape."""


def _ints(line: str, expected: int, what: str) -> list[int]:
    tokens = line.split()
    if len(tokens) != expected:
        msg = f"{what}: expected {expected} integers, got {line.strip()!r}"
        raise ProtocolError(msg)
    try:
        return [int(t) for t in tokens]
    except ValueError:
        msg = f"{what}: non-integer token in {line.strip()!r}"
        raise ProtocolError(msg) from None


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise EOFError("game input closed") from None


def read_dimensions(line: str) -> tuple[int, int]:
    """Parse the setup line.

    Returns:
        ``(width, height)``.
    """
    width, height = _ints(line, 2, "setup line")
    if width <= 0 or height <= 0:
        msg = f"setup line: board must be non-empty, got {width}x{height}"
        raise ProtocolError(msg)
    return width, height


def parse_tile(line: str, x: int, y: int) -> Cell:
    """Parse one tile line into the Cell at ``(x, y)``.

    Flag fields read as true when nonzero.
    """
    scrap, owner, units, recycler, can_build, can_spawn, in_range = _ints(
        line,
        _TILE_FIELDS,
        f"tile ({x}, {y})",
    )
    try:
        return Cell(
            x=x,
            y=y,
            scrap_amount=scrap,
            owner=Owner.from_code(owner),
            units=units,
            is_recycler=recycler != 0,
            can_build=can_build != 0,
            can_spawn=can_spawn != 0,
            in_range_of_recycler=in_range != 0,
        )
    except ValueError as exc:
        msg = f"tile ({x}, {y}): {exc}"
        raise ProtocolError(msg) from exc


def read_turn(lines: Iterator[str], width: int, height: int) -> GridState:
    """Consume one turn's worth of lines and build the board.

    Args:
        lines: Iterator over the remaining input lines.
        width: Board columns from the setup line.
        height: Board rows from the setup line.

    Raises:
        EOFError: If input ends before the matter line.
        ProtocolError: If input ends mid-turn or a line is malformed.
    """
    my_matter, enemy_matter = _ints(_next_line(lines), 2, "matter line")

    cells: list[list[Cell]] = []
    for y in range(height):
        row: list[Cell] = []
        for x in range(width):
            try:
                line = _next_line(lines)
            except EOFError:
                msg = f"input ended before tile ({x}, {y})"
                raise ProtocolError(msg) from None
            row.append(parse_tile(line, x, y))
        cells.append(row)

    return GridState(
        width=width,
        height=height,
        my_matter=my_matter,
        enemy_matter=enemy_matter,
        cells=cells,
    )


def iter_turns(stream: TextIO | Iterable[str]) -> Iterator[GridState]:
    """Yield one GridState per turn until the input closes.

    The first line of ``stream`` must be the setup line.
    """
    lines = iter(stream)
    try:
        width, height = read_dimensions(_next_line(lines))
    except EOFError:
        return
    while True:
        try:
            yield read_turn(lines, width, height)
        except EOFError:
            return
