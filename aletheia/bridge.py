"""
Translation between a world's vocabulary and the agent's.

Both functions are total: anything not recognised becomes "no observation" on
the agent side or a no-op on the world side, so attaching an agent to a new
kind of world can degrade behaviour but never stop the loop.
"""

from __future__ import annotations

from typing import Any

from aletheia import vocabulary as agent
from aletheia.worlds import base as world


def to_agent_observation(obs: Any) -> agent.AgentObservation:
    """World observation -> agent observation."""
    if isinstance(obs, world.GridSummary):
        return agent.GridSummary(width=obs.width, height=obs.height)
    if isinstance(obs, world.StateVec):
        return agent.StateVec(tuple(obs.values))
    return agent.NO_OBSERVATION


def to_world_action(action: Any) -> world.Action:
    """Agent action -> world action."""
    if isinstance(action, agent.FlipCell):
        return world.FlipCell(row=action.row, col=action.col)
    if isinstance(action, agent.Perturb):
        return world.Perturb(axis=action.axis, delta=action.delta)
    if isinstance(action, agent.SetParam):
        return world.SetParam(name=action.name, value=action.value)
    return world.NOOP
