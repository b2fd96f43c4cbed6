"""
Worlds: dynamical systems a scientist can observe and poke.

Each world implements the ``World`` boundary (step, get_state, set_param) and,
where experimentation makes sense, the ``Experimentable`` hooks
(observe, apply_action, reward). The reference worlds cover the three kinds of
dynamics the lab is built around:

- LifeWorld: discrete cellular automaton
- ODEWorld: continuous chaotic attractor (Lorenz / Rossler)
- GrayScottWorld: reaction-diffusion field
"""

from aletheia.worlds.base import (
    World,
    Experimentable,
    GridState,
    PointsState,
    FloatGridState,
)
from aletheia.worlds.life import LifeWorld, LifeConfig
from aletheia.worlds.ode import ODEWorld, ODEConfig
from aletheia.worlds.gray_scott import GrayScottWorld, GrayScottConfig


def make_world(tag: str) -> World:
    """Build a reference world with default settings by name."""
    if tag == "life":
        return LifeWorld()
    if tag == "lorenz":
        return ODEWorld(ODEConfig(system="lorenz"))
    if tag == "rossler":
        return ODEWorld(ODEConfig(system="rossler"))
    if tag == "gray_scott":
        return GrayScottWorld()
    raise ValueError(f"Unknown world: {tag!r}")


__all__ = [
    "World",
    "Experimentable",
    "GridState",
    "PointsState",
    "FloatGridState",
    "LifeWorld",
    "LifeConfig",
    "ODEWorld",
    "ODEConfig",
    "GrayScottWorld",
    "GrayScottConfig",
    "make_world",
]
