"""TurnEngine — the per-turn decision pipeline.

Owns the configuration and the random generator, and runs the canonical
turn order on each fresh snapshot:

1. Build the distance-to-outside field
2. Plan movement for every unit stack
3. Plan spawns along the frontier

Nothing computed for one turn is kept for the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from grassbot.engine.config import BotConfig
from grassbot.fields.distance import build_distance_field
from grassbot.grid.cell import Owner
from grassbot.grid.state import GridState
from grassbot.planning.actions import Action
from grassbot.planning.movement import plan_moves
from grassbot.planning.spawning import plan_spawns

logger = logging.getLogger(__name__)


@dataclass
class TurnEngine:
    """Turns board snapshots into action lists.

    Attributes:
        config: Loaded bot configuration.
        rng: Random generator handed to the spawn planner.
        turn: Number of turns played so far.
    """

    config: BotConfig = field(default_factory=BotConfig)
    rng: Generator = field(init=False)
    turn: int = 0

    def __post_init__(self) -> None:
        """Seed the RNG from config."""
        self.rng = np.random.default_rng(self.config.seed)

    def step(self, state: GridState) -> list[Action]:
        """Decide this turn's actions.

        Args:
            state: The freshly ingested board.

        Returns:
            Moves followed by spawns; empty when nothing can be done.
        """
        distances = build_distance_field(state)
        if self.config.log_distance_field:
            logger.debug("turn %d distance field:\n%s", self.turn, distances.render())

        actions: list[Action] = []
        actions.extend(plan_moves(state, distances))
        actions.extend(plan_spawns(state, self.rng, self.config.spawn_cost))

        logger.debug(
            "turn %d: matter=%d/%d tiles=%d units=%d actions=%d",
            self.turn,
            state.my_matter,
            state.enemy_matter,
            state.count_owned(Owner.MINE),
            state.total_units(Owner.MINE),
            len(actions),
        )
        self.turn += 1
        return actions
