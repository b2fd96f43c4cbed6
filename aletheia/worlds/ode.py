"""
Continuous chaotic attractors (Lorenz, Rossler) integrated with fixed-step RK4.

The agent observes the raw 3-vector state, may kick one axis at a time, and is
rewarded for keeping the trajectory slow (a stability measure).
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from aletheia.worlds.base import (
    Action,
    Experimentable,
    Observation,
    Perturb,
    PointsState,
    SetParam,
    StateVec,
    World,
    as_float,
)

# Points kept for rendering the attractor tail.
MAX_HISTORY = 800

INITIAL_STATE = (1.0, 1.0, 1.0)


@dataclass
class ODEConfig:
    """Parameters for the Lorenz and Rossler systems."""
    system: str = "lorenz"          # "lorenz" or "rossler"
    dt: float = 0.01
    # Lorenz
    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0
    # Rossler
    a: float = 0.2
    b: float = 0.2
    c: float = 5.7


def rk4_step(state: np.ndarray, dt: float,
             f: Callable[[np.ndarray], np.ndarray]) -> np.ndarray:
    """One classical Runge-Kutta step."""
    k1 = f(state)
    k2 = f(state + k1 * (dt * 0.5))
    k3 = f(state + k2 * (dt * 0.5))
    k4 = f(state + k3 * dt)
    return state + (k1 + 2.0 * k2 + 2.0 * k3 + k4) * (dt / 6.0)


class ODEWorld(World, Experimentable):
    """A three-dimensional ODE system stepped at a fixed dt."""

    SYSTEMS = ("lorenz", "rossler")
    FLOAT_PARAMS = ("sigma", "rho", "beta", "a", "b", "c")

    def __init__(self, config: Optional[ODEConfig] = None):
        self.config = config or ODEConfig()
        assert self.config.system in self.SYSTEMS, \
            f"system must be one of {self.SYSTEMS}"
        assert self.config.dt > 0, "dt must be positive"
        self.tail: deque = deque(maxlen=MAX_HISTORY)
        self.reset_state()

    def reset_state(self) -> None:
        """Reset the initial condition and clear the tail."""
        self.state = np.array(INITIAL_STATE, dtype=float)
        self.tail.clear()

    def deriv(self, s: np.ndarray) -> np.ndarray:
        x, y, z = s
        p = self.config
        if p.system == "rossler":
            return np.array([-y - z, x + p.a * y, p.b + z * (x - p.c)])
        return np.array([p.sigma * (y - x), x * (p.rho - z) - y, x * y - p.beta * z])

    # --- World ---

    def step(self) -> None:
        self.state = rk4_step(self.state, self.config.dt, self.deriv)
        self.tail.append(tuple(float(v) for v in self.state))

    def get_state(self) -> PointsState:
        return PointsState(points=list(self.tail))

    def set_param(self, key: str, value: Any) -> None:
        if key in self.FLOAT_PARAMS:
            number = as_float(value)
            if number is not None:
                setattr(self.config, key, number)
        elif key == "system":
            if isinstance(value, str):
                if value in self.SYSTEMS:
                    self.config.system = value
                self.reset_state()
        elif key == "reset":
            if value is True:
                self.reset_state()

    def as_experimentable(self) -> Experimentable:
        return self

    # --- Experimentable ---

    def observe(self) -> Observation:
        return StateVec(tuple(float(v) for v in self.state))

    def apply_action(self, action: Action) -> None:
        if isinstance(action, Perturb):
            if 0 <= action.axis < 3:
                self.state[action.axis] += action.delta
        elif isinstance(action, SetParam):
            self.set_param(action.name, action.value)

    def reward(self) -> float:
        speed = float(np.linalg.norm(self.deriv(self.state)))
        return 10.0 / (1.0 + speed)
