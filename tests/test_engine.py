"""Tests for grassbot.engine — config loading and the turn pipeline."""

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from grassbot.__main__ import load_config, play
from grassbot.engine.config import BotConfig
from grassbot.engine.turn import TurnEngine
from grassbot.grid.state import GridState
from grassbot.planning.actions import Move, Spawn


class TestBotConfig:
    """Tests for YAML config loading."""

    def test_defaults(self) -> None:
        cfg = BotConfig()
        assert cfg.seed is None
        assert cfg.spawn_cost == 10
        assert cfg.log_level == "WARNING"
        assert cfg.log_distance_field is False

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("seed: 99\nspawn_cost: 20\nlog_level: debug\n")
        cfg = BotConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert cfg.spawn_cost == 20
        assert cfg.log_level == "DEBUG"
        assert cfg.log_distance_field is False

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert BotConfig.from_yaml(yaml_file) == BotConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            BotConfig.from_yaml(tmp_path / "nope.yaml")

    def test_bad_spawn_cost(self) -> None:
        with pytest.raises(ValueError):
            BotConfig(spawn_cost=0)

    def test_load_config_falls_back(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "absent.yaml") == BotConfig()

    def test_shipped_default_config(self) -> None:
        path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
        cfg = BotConfig.from_yaml(path)
        assert cfg.spawn_cost == 10


class TestTurnEngine:
    """Tests for the per-turn pipeline."""

    def test_line_scenario(
        self,
        line_state: GridState,
        default_config: BotConfig,
    ) -> None:
        engine = TurnEngine(config=default_config)
        actions = engine.step(line_state)
        assert actions == [
            Move(3, 0, 0, 1, 0),
            Spawn(1, 0, 0),
            Spawn(1, 0, 0),
        ]
        assert engine.turn == 1

    def test_enclosed_board_yields_nothing(
        self,
        enclosed_state: GridState,
        default_config: BotConfig,
    ) -> None:
        engine = TurnEngine(config=default_config)
        assert engine.step(enclosed_state) == []

    def test_spawn_cost_from_config(self, line_state: GridState) -> None:
        engine = TurnEngine(config=BotConfig(seed=1, spawn_cost=5))
        spawns = [a for a in engine.step(line_state) if isinstance(a, Spawn)]
        assert len(spawns) == 5

    def test_same_seed_same_plan(self, make_state: Callable[..., GridState]) -> None:
        rows = ["M1 M1:3 N1 M1", "E1 M1 M1:2 M1", "M1 M1 M1 N2"]
        plans = []
        for _ in range(2):
            engine = TurnEngine(config=BotConfig(seed=2024))
            plans.append(engine.step(make_state(rows, my_matter=90)))
        assert plans[0] == plans[1]

    def test_distance_field_logged_when_enabled(
        self,
        line_state: GridState,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        engine = TurnEngine(config=BotConfig(seed=1, log_distance_field=True))
        with caplog.at_level("DEBUG", logger="grassbot"):
            engine.step(line_state)
        assert "1 0 0" in caplog.text


class TestPlay:
    """Tests for the stdin/stdout game loop."""

    def test_plays_until_input_closes(self, default_config: BotConfig) -> None:
        lines = [
            "3 1",
            "25 0",
            "5 1 3 0 0 1 0",
            "4 -1 0 0 0 0 0",
            "4 0 0 0 0 0 0",
            "0 0",
            "5 1 0 0 0 1 0",
            "5 1 0 0 0 1 0",
            "5 1 0 0 0 1 0",
        ]
        stdin = io.StringIO("\n".join(lines) + "\n")
        stdout = io.StringIO()
        turns = play(TurnEngine(config=default_config), stdin=stdin, stdout=stdout)
        assert turns == 2
        assert stdout.getvalue().splitlines() == [
            "MOVE 3 0 0 1 0;SPAWN 1 0 0;SPAWN 1 0 0",
            "WAIT",
        ]
