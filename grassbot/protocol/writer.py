"""Writer — serialise a turn's actions into the server's output line."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from grassbot.planning.actions import Action, Wait


def format_actions(actions: Sequence[Action]) -> str:
    """Join actions with ``;``.  An empty turn becomes ``WAIT``."""
    if not actions:
        return Wait().to_command()
    return ";".join(action.to_command() for action in actions)


def write_actions(actions: Sequence[Action], out: TextIO) -> None:
    """Write one turn line to ``out`` and flush it to the server."""
    out.write(format_actions(actions) + "\n")
    out.flush()
