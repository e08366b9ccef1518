"""Config — load bot parameters from YAML files.

The handful of tunable values (spawn price, RNG seed, diagnostics) live
in YAML and are parsed into a typed dataclass here, so a tournament run
can be replayed or tweaked without touching code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class BotConfig:
    """Top-level bot configuration.

    Attributes:
        seed: RNG seed for reproducible spawn choices; ``None`` draws
            fresh OS entropy.
        spawn_cost: Matter price of one unit.
        log_level: Name of the stderr logging level.
        log_distance_field: Dump the distance field to the log every
            turn.
    """

    seed: int | None = None
    spawn_cost: int = 10
    log_level: str = "WARNING"
    log_distance_field: bool = False

    def __post_init__(self) -> None:
        """Validate the spawn price."""
        if self.spawn_cost <= 0:
            msg = f"spawn_cost must be > 0, got {self.spawn_cost}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> BotConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated BotConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            spawn_cost=data.get("spawn_cost", cls.spawn_cost),
            log_level=str(data.get("log_level", cls.log_level)).upper(),
            log_distance_field=bool(
                data.get("log_distance_field", cls.log_distance_field),
            ),
        )
