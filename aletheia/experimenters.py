"""
Experimenters: policies that choose an action each tick and may report findings.

An experimenter is stateful across calls; the Session hands it the translated
observation, the world's reward, and the tick index. Implementations are
chosen at construction time through ``make_experimenter``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from aletheia.vocabulary import (
    NOOP,
    AgentAction,
    AgentObservation,
    DiscoveryEvent,
    FlipCell,
    GridSummary,
    Perturb,
    StateVec,
    TextEvent,
)


class Experimenter(ABC):
    """A scientist: chooses actions and can publish discoveries."""

    @abstractmethod
    def act(self, observation: AgentObservation, reward: float,
            step: int) -> Tuple[AgentAction, Optional[DiscoveryEvent]]:
        ...


class NoopExperimenter(Experimenter):
    """Control: never acts, never reports."""

    def act(self, observation: AgentObservation, reward: float,
            step: int) -> Tuple[AgentAction, Optional[DiscoveryEvent]]:
        return NOOP, None


@dataclass
class ScriptedConfig:
    """Fixed schedule for the scripted experimenter. 0 disables an entry."""
    flip_every: int = 60        # Flip the centre cell of a grid
    perturb_every: int = 30     # Kick axis 0 of a state vector
    perturb_delta: float = 2.0
    report_every: int = 120     # Emit a status line (never at tick 0)


class ScriptedExperimenter(Experimenter):
    """
    A clock-driven scientist that pokes the world on a fixed schedule.

    Useful as a control that acts without learning. With every interval set
    to 0 it is indistinguishable from ``NoopExperimenter``.
    """

    def __init__(self, config: Optional[ScriptedConfig] = None):
        self.config = config or ScriptedConfig()
        c = self.config
        assert c.flip_every >= 0 and c.perturb_every >= 0 and c.report_every >= 0

    @staticmethod
    def _due(step: int, every: int) -> bool:
        return every > 0 and step % every == 0

    def act(self, observation: AgentObservation, reward: float,
            step: int) -> Tuple[AgentAction, Optional[DiscoveryEvent]]:
        c = self.config
        action: AgentAction = NOOP
        if isinstance(observation, GridSummary):
            if self._due(step, c.flip_every):
                action = FlipCell(row=observation.height // 2,
                                  col=observation.width // 2)
        elif isinstance(observation, StateVec):
            if self._due(step, c.perturb_every):
                action = Perturb(axis=0, delta=c.perturb_delta)

        discovery = None
        if step > 0 and self._due(step, c.report_every):
            discovery = TextEvent(
                f"Scientist: Tick {step} shows interesting stability.")
        return action, discovery


def make_experimenter(tag: str, **kwargs) -> Experimenter:
    """
    Build an experimenter by name.

    Parameters
    ----------
    tag : str
        "noop", "scripted" or "curious".
    **kwargs
        Passed to the constructor (e.g. ``config=``, ``rng=``).
    """
    if tag == "noop":
        return NoopExperimenter(**kwargs)
    if tag == "scripted":
        return ScriptedExperimenter(**kwargs)
    if tag == "curious":
        from aletheia.curiosity import CuriosityAgent
        return CuriosityAgent(**kwargs)
    raise ValueError(f"Unknown experimenter: {tag!r}")
