"""
The world boundary: what a simulation must offer to be driven by a Session.

Every world can be stepped and rendered. Worlds that can also be experimented
on expose an ``Experimentable`` handle through ``as_experimentable()``;
the Session asks for it once per tick instead of inspecting types.

The observation and action types here are the world's own vocabulary. They
mirror the agent vocabulary in ``aletheia.vocabulary`` but are not shared with
it; ``aletheia.bridge`` translates between the two.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

import numpy as np


# ---------------------------------------------------------------------------
# Observations and actions (world side)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GridSummary:
    alive: int
    width: int
    height: int


@dataclass(frozen=True)
class StateVec:
    values: Tuple[float, float, float]


@dataclass(frozen=True)
class TextObservation:
    text: str


@dataclass(frozen=True)
class NoObservation:
    pass


NO_OBSERVATION = NoObservation()

Observation = Union[GridSummary, StateVec, TextObservation, NoObservation]


@dataclass(frozen=True)
class FlipCell:
    row: int
    col: int


@dataclass(frozen=True)
class Perturb:
    axis: int
    delta: float


@dataclass(frozen=True)
class SetParam:
    name: str
    value: float


@dataclass(frozen=True)
class Noop:
    pass


NOOP = Noop()

Action = Union[FlipCell, Perturb, SetParam, Noop]


# ---------------------------------------------------------------------------
# Render snapshots
# ---------------------------------------------------------------------------

@dataclass
class GridState:
    """Boolean cells, row-major, ``height`` x ``width``."""
    offset_x: int
    offset_y: int
    width: int
    height: int
    cells: np.ndarray

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return (self.offset_x == other.offset_x
                and self.offset_y == other.offset_y
                and self.width == other.width
                and self.height == other.height
                and np.array_equal(self.cells, other.cells))


@dataclass
class PointsState:
    """Recent trajectory of a continuous system, oldest first."""
    points: List[Tuple[float, float, float]] = field(default_factory=list)


@dataclass
class FloatGridState:
    """Intensity map with values in 0..1."""
    width: int
    height: int
    values: np.ndarray

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatGridState):
            return NotImplemented
        return (self.width == other.width
                and self.height == other.height
                and np.array_equal(self.values, other.values))


StateSnapshot = Union[GridState, PointsState, FloatGridState]


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

class Experimentable(ABC):
    """Hooks that let an agent observe, act on, and be rewarded by a world."""

    @abstractmethod
    def observe(self) -> Observation:
        ...

    @abstractmethod
    def apply_action(self, action: Action) -> None:
        ...

    @abstractmethod
    def reward(self) -> float:
        ...


class World(ABC):
    """
    A dynamical system that advances one step at a time.

    ``set_param`` is best-effort: unknown keys and values of the wrong type
    are ignored, never raised.
    """

    @abstractmethod
    def step(self) -> None:
        ...

    @abstractmethod
    def get_state(self) -> StateSnapshot:
        ...

    @abstractmethod
    def set_param(self, key: str, value: Any) -> None:
        ...

    def as_experimentable(self) -> Optional[Experimentable]:
        return None


def as_float(value: Any) -> Optional[float]:
    """Return ``value`` as a float if it is a real number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    return None
