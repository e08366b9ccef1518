"""Entry point for ``python -m grassbot``.

By default plays the game: reads the setup line and then one snapshot
per turn from stdin, answering each with a single action line on
stdout until the server closes the input.  With ``--view`` it instead
opens a Pygame window on a recorded turn.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import TextIO

from grassbot.engine.config import BotConfig
from grassbot.engine.turn import TurnEngine
from grassbot.fields.distance import build_distance_field
from grassbot.protocol.reader import iter_turns
from grassbot.protocol.writer import write_actions

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

logger = logging.getLogger("grassbot")


def load_config(path: pathlib.Path) -> BotConfig:
    """Load ``path`` if it exists, otherwise fall back to defaults."""
    if path.is_file():
        return BotConfig.from_yaml(path)
    return BotConfig()


def play(
    engine: TurnEngine,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the turn loop until input closes.

    Args:
        engine: The decision engine.
        stdin: Source of server lines (default ``sys.stdin``).
        stdout: Destination for action lines (default ``sys.stdout``).

    Returns:
        The number of turns played.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    turns = 0
    for state in iter_turns(stdin):
        write_actions(engine.step(state), stdout)
        turns += 1
    logger.info("input closed after %d turns", turns)
    return turns


def view(engine: TurnEngine, snapshot: pathlib.Path, cell_size: int) -> None:
    """Plan a recorded turn and show it in a Pygame window."""
    # Imported here so pygame's import banner never reaches the game's stdout.
    from grassbot.ui.pygame_client import SnapshotRenderer

    with snapshot.open("r") as f:
        state = next(iter_turns(f), None)
    if state is None:
        msg = f"{snapshot} holds no complete turn"
        raise SystemExit(msg)

    actions = engine.step(state)
    renderer = SnapshotRenderer(
        state=state,
        distances=build_distance_field(state),
        actions=actions,
        cell_size=cell_size,
    )
    renderer.run()


def main() -> None:
    """Parse CLI args, configure logging, then play or view."""
    parser = argparse.ArgumentParser(
        prog="grassbot",
        description="grassbot - greedy territory bot for a grid-conquest game",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the RNG seed from the config file",
    )
    parser.add_argument(
        "--view",
        type=pathlib.Path,
        default=None,
        metavar="SNAPSHOT",
        help="Show a recorded turn (setup line + one turn) in a window",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=40,
        help="Pixel size per grid cell in the viewer (default: 40)",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    if args.seed is not None:
        config.seed = args.seed

    # stdout carries the game protocol, so diagnostics go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = TurnEngine(config=config)
    if args.view is not None:
        view(engine, args.view, args.cell_size)
    else:
        play(engine)


if __name__ == "__main__":
    main()
