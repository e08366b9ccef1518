"""Pygame viewer for a single recorded turn.

Draws the board (owners, scrap, unit stacks), the distance-to-outside
field and the moves and spawns the engine would issue, so a strange
decision can be inspected by eye.  Nothing is simulated: the window
shows one frozen snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from grassbot.grid.cell import Owner
from grassbot.planning.actions import Move, Spawn

if TYPE_CHECKING:
    from grassbot.fields.distance import DistanceField
    from grassbot.grid.state import GridState
    from grassbot.planning.actions import Action

# Colour palette
_BG = (20, 20, 20)
_GRID_LINE = (45, 45, 45)
_IMPASSABLE = (10, 10, 10)
_TEXT = (200, 200, 200)
_MOVE_COLOUR = (255, 220, 60)
_SPAWN_COLOUR = (255, 255, 255)

_OWNER_COLOURS: dict[Owner, tuple[int, int, int]] = {
    Owner.NEUTRAL: (90, 90, 90),
    Owner.ENEMY: (200, 70, 70),
    Owner.MINE: (70, 120, 220),
}

# Scrap brightens a tile from half to full owner colour
_SCRAP_FULL = 10.0


class SnapshotRenderer:
    """Renders one GridState with its distance field and planned actions.

    Attributes:
        state: The board to draw.
        distances: Distance-to-outside for the same board.
        actions: Actions the engine planned for this board.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    def __init__(
        self,
        state: GridState,
        distances: DistanceField,
        actions: list[Action],
        cell_size: int = 40,
    ) -> None:
        """Initialise the viewer.

        Args:
            state: The board to draw.
            distances: Distance field computed for ``state``.
            actions: Planned actions for ``state``.
            cell_size: Pixel width/height per grid cell.
        """
        self.state = state
        self.distances = distances
        self.actions = actions
        self.cell_size = cell_size
        self.show_distances = True

        self._panel_width = 220
        self._win_w = state.width * cell_size + self._panel_width
        self._win_h = max(state.height * cell_size, 260)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("grassbot")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events and redraw until closed.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_d:
                    self.show_distances = not self.show_distances

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_tiles()
        if self.show_distances:
            self._draw_distances()
        self._draw_moves()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_tiles(self) -> None:
        """Fill each tile by owner, dimmed when scrap runs low."""
        cs = self.cell_size
        for cell in self.state.iter_cells():
            rect = (cell.x * cs, cell.y * cs, cs, cs)
            if not cell.is_passable:
                pygame.draw.rect(self.screen, _IMPASSABLE, rect)
            else:
                t = min(cell.scrap_amount / _SCRAP_FULL, 1.0)
                base = np.array(_OWNER_COLOURS[cell.owner], dtype=np.float64)
                colour = base * (0.5 + 0.5 * t)
                pygame.draw.rect(self.screen, colour.astype(int).tolist(), rect)
            pygame.draw.rect(self.screen, _GRID_LINE, rect, 1)

            if cell.units > 0:
                label = self.font.render(str(cell.units), True, _TEXT)
                self.screen.blit(label, (cell.x * cs + 3, cell.y * cs + cs - 17))
            if cell.is_recycler:
                pygame.draw.circle(
                    self.screen,
                    _TEXT,
                    (cell.x * cs + cs // 2, cell.y * cs + cs // 2),
                    max(2, cs // 4),
                    1,
                )

    def _draw_distances(self) -> None:
        """Write each reachable tile's distance in its top-left corner."""
        cs = self.cell_size
        for y in range(self.distances.height):
            for x in range(self.distances.width):
                if not self.distances.is_reachable(x, y):
                    continue
                label = self.font.render(
                    str(self.distances.distance_at(x, y)),
                    True,
                    _TEXT,
                )
                self.screen.blit(label, (x * cs + 3, y * cs + 2))

    def _draw_moves(self) -> None:
        """Draw planned moves as lines and spawns as dots."""
        cs = self.cell_size
        half = cs // 2
        for action in self.actions:
            if isinstance(action, Move):
                pygame.draw.line(
                    self.screen,
                    _MOVE_COLOUR,
                    (action.from_x * cs + half, action.from_y * cs + half),
                    (action.to_x * cs + half, action.to_y * cs + half),
                    max(1, min(action.amount, 5)),
                )
            elif isinstance(action, Spawn):
                pygame.draw.circle(
                    self.screen,
                    _SPAWN_COLOUR,
                    (action.x * cs + half, action.y * cs + half),
                    max(2, cs // 8),
                )

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.state.width * self.cell_size + 10
        y = 10

        moves = sum(1 for a in self.actions if isinstance(a, Move))
        spawns = sum(a.amount for a in self.actions if isinstance(a, Spawn))
        lines = [
            f"Board: {self.state.width}x{self.state.height}",
            f"Matter: {self.state.my_matter} / {self.state.enemy_matter}",
            f"Tiles: {self.state.count_owned(Owner.MINE)}"
            f" / {self.state.count_owned(Owner.ENEMY)}",
            f"Units: {self.state.total_units(Owner.MINE)}"
            f" / {self.state.total_units(Owner.ENEMY)}",
            "",
            "--- Plan ---",
            f"Moves: {moves}",
            f"Spawns: {spawns}",
            "",
            "--- Controls ---",
            "D: distances",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
