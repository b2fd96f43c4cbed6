"""
Gray-Scott reaction-diffusion on a torus.

Two chemicals U and V react (U + 2V -> 3V) while diffusing. The agent sees the
total mass of V together with the feed and kill rates, can inject V, and is
rewarded for keeping the pattern alive without saturating the grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
from scipy.ndimage import convolve

from aletheia.worlds.base import (
    Action,
    Experimentable,
    FloatGridState,
    Observation,
    Perturb,
    SetParam,
    StateVec,
    World,
    as_float,
)

# 9-point isotropic Laplacian, weights sum to zero.
LAPLACIAN = np.array([[0.05, 0.2, 0.05],
                      [0.2, -1.0, 0.2],
                      [0.05, 0.2, 0.05]])


@dataclass
class GrayScottConfig:
    """Grid size and reaction constants ("coral" preset by default)."""
    width: int = 128
    height: int = 128
    f: float = 0.055        # Feed rate
    k: float = 0.062        # Kill rate
    da: float = 1.0         # Diffusion of U
    db: float = 0.5         # Diffusion of V
    dt: float = 1.0
    seed_radius: int = 10   # Half-width of the initial V square
    inject_radius: int = 4  # Radius of the disc added by a Perturb


class GrayScottWorld(World, Experimentable):
    """Reaction-diffusion grid with agent hooks."""

    def __init__(self, config: Optional[GrayScottConfig] = None):
        self.config = config or GrayScottConfig()
        c = self.config
        assert c.width > 0 and c.height > 0
        self.u = np.ones((c.height, c.width))
        self.v = np.zeros((c.height, c.width))
        self._seed_center()

    def _seed_center(self) -> None:
        c = self.config
        cy, cx, r = c.height // 2, c.width // 2, c.seed_radius
        self.v[max(0, cy - r):cy + r, max(0, cx - r):cx + r] = 1.0

    # --- World ---

    def step(self) -> None:
        c = self.config
        lap_u = convolve(self.u, LAPLACIAN, mode="wrap")
        lap_v = convolve(self.v, LAPLACIAN, mode="wrap")
        uvv = self.u * self.v * self.v
        du = (c.da * lap_u - uvv + c.f * (1.0 - self.u)) * c.dt
        dv = (c.db * lap_v + uvv - (c.f + c.k) * self.v) * c.dt
        self.u = np.clip(self.u + du, 0.0, 1.0)
        self.v = np.clip(self.v + dv, 0.0, 1.0)

    def get_state(self) -> FloatGridState:
        return FloatGridState(
            width=self.config.width,
            height=self.config.height,
            values=self.v.copy(),
        )

    def set_param(self, key: str, value: Any) -> None:
        number = as_float(value)
        if number is None:
            return
        if key == "f":
            self.config.f = number
        elif key == "k":
            self.config.k = number

    def as_experimentable(self) -> Experimentable:
        return self

    # --- Experimentable ---

    def observe(self) -> Observation:
        return StateVec((float(self.v.sum()), self.config.f, self.config.k))

    def apply_action(self, action: Action) -> None:
        if isinstance(action, Perturb):
            if action.axis == 0:
                self._inject(action.delta)
        elif isinstance(action, SetParam):
            self.set_param(action.name, action.value)

    def _inject(self, delta: float) -> None:
        """Add V in a disc whose position is derived from ``delta``."""
        c = self.config
        if not np.isfinite(delta):
            return
        cx = int(c.width * (abs(delta) % 1.0))
        cy = int(c.height * (abs(delta * 10.0) % 1.0))
        ys, xs = np.ogrid[:c.height, :c.width]
        disc = (xs - cx) ** 2 + (ys - cy) ** 2 < c.inject_radius ** 2
        self.v[disc] = np.minimum(self.v[disc] + 0.5, 1.0)

    def reward(self) -> float:
        # Gaussian in coverage, peaked at 20%: dead and saturated both score ~0
        coverage = float(self.v.mean())
        return float(np.exp(-((coverage - 0.2) ** 2) * 100.0) * 10.0)
