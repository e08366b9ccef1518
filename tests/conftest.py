"""Shared fixtures for the grassbot test suite."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest
from numpy.random import Generator

from grassbot.engine.config import BotConfig
from grassbot.grid.cell import Cell, Owner
from grassbot.grid.state import GridState

_OWNERS = {"M": Owner.MINE, "E": Owner.ENEMY, "N": Owner.NEUTRAL}

StateFactory = Callable[..., GridState]


def _parse_tile(token: str, x: int, y: int) -> Cell:
    # "M5:3" = mine, scrap 5, 3 units; "#" = impassable neutral tile
    if token == "#":
        return Cell(x=x, y=y)
    owner = _OWNERS[token[0]]
    scrap, _, units = token[1:].partition(":")
    return Cell(
        x=x,
        y=y,
        scrap_amount=int(scrap),
        owner=owner,
        units=int(units or 0),
    )


def build_state(rows: list[str], my_matter: int = 0, enemy_matter: int = 0) -> GridState:
    """Build a board from compact row strings such as ``"M5:3 N4 #"``."""
    cells = [
        [_parse_tile(token, x, y) for x, token in enumerate(row.split())]
        for y, row in enumerate(rows)
    ]
    return GridState(
        width=len(cells[0]),
        height=len(cells),
        my_matter=my_matter,
        enemy_matter=enemy_matter,
        cells=cells,
    )


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def make_state() -> StateFactory:
    """Factory building a GridState from compact row strings."""
    return build_state


@pytest.fixture
def line_state() -> GridState:
    """The 1x3 board: three of our units next to a neutral then an enemy tile."""
    return build_state(["M5:3 N4 E4"], my_matter=25)


@pytest.fixture
def enclosed_state() -> GridState:
    """A 3x3 board we own completely, with no outside tile anywhere."""
    return build_state(
        [
            "M1 M1 M1",
            "M1 M1:4 M1",
            "M1 M1 M1",
        ],
        my_matter=50,
    )


@pytest.fixture
def default_config() -> BotConfig:
    """Default bot config with a fixed seed (no YAML file needed)."""
    return BotConfig(seed=42)
