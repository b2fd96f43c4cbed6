"""
Conway's Game of Life on a toroidal grid.

The neighbour count is a single wrap-around convolution per generation, so a
few hundred generations on a 64x64 board are cheap enough for tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from scipy.signal import convolve2d

from aletheia.worlds.base import (
    Action,
    Experimentable,
    FlipCell,
    GridState,
    GridSummary,
    Observation,
    World,
)

_NEIGHBOURS = np.array([[1, 1, 1],
                        [1, 0, 1],
                        [1, 1, 1]], dtype=int)

# Live-cell offsets (row, col) relative to the pattern's top-left corner.
PATTERNS: Dict[str, List[Tuple[int, int]]] = {
    "r_pentomino": [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    "blinker": [(0, 0), (0, 1), (0, 2)],
}


@dataclass
class LifeConfig:
    """Configuration for a Game of Life board."""
    rows: int = 64
    cols: int = 64
    pattern: str = "r_pentomino"    # Seeded at the centre on construction


class LifeWorld(World, Experimentable):
    """
    Game of Life with hooks for an experimenter.

    The agent sees a grid summary (live cell count and board size), may flip
    individual cells, and is rewarded by the number of generations survived.
    """

    def __init__(self, config: Optional[LifeConfig] = None):
        self.config = config or LifeConfig()
        assert self.config.rows > 0 and self.config.cols > 0
        self.cells = np.zeros((self.config.rows, self.config.cols), dtype=bool)
        self.generation = 0
        self._stamp(self.config.pattern)

    def _stamp(self, name: str) -> bool:
        offsets = PATTERNS.get(name)
        if offsets is None:
            return False
        r0 = self.config.rows // 2 - 1
        c0 = self.config.cols // 2 - 1
        for dr, dc in offsets:
            self.cells[(r0 + dr) % self.config.rows,
                       (c0 + dc) % self.config.cols] = True
        return True

    # --- World ---

    def step(self) -> None:
        counts = convolve2d(self.cells.astype(int), _NEIGHBOURS,
                            mode="same", boundary="wrap")
        self.cells = (counts == 3) | (self.cells & (counts == 2))
        self.generation += 1

    def get_state(self) -> GridState:
        return GridState(
            offset_x=-(self.config.cols // 2),
            offset_y=-(self.config.rows // 2),
            width=self.config.cols,
            height=self.config.rows,
            cells=self.cells.copy(),
        )

    def set_param(self, key: str, value: Any) -> None:
        if key == "inject_pattern" and isinstance(value, str) and value in PATTERNS:
            # Replaces the universe with the named pattern, centred
            self.cells[:] = False
            self._stamp(value)

    def as_experimentable(self) -> Experimentable:
        return self

    # --- Experimentable ---

    def observe(self) -> Observation:
        return GridSummary(
            alive=int(self.cells.sum()),
            width=self.config.cols,
            height=self.config.rows,
        )

    def apply_action(self, action: Action) -> None:
        """FlipCell toggles the cell (live cells die, dead cells are born)."""
        if isinstance(action, FlipCell):
            r, c = action.row, action.col
            if 0 <= r < self.config.rows and 0 <= c < self.config.cols:
                self.cells[r, c] = not self.cells[r, c]

    def reward(self) -> float:
        return float(self.generation)

    @property
    def alive(self) -> int:
        return int(self.cells.sum())

    def render(self) -> str:
        """ASCII rendering of the board for debugging."""
        return "\n".join(
            "".join("O" if cell else "." for cell in row) for row in self.cells
        )
