"""
Session — one world, one scientist, advanced one tick at a time.

Each tick runs the loop

    observe → reward → act → apply → step

when the world is experimentable, and just ``step`` when it is not. The
Session is the only thing that touches both sides; the bridge keeps their
vocabularies apart. Resetting means building a new Session.
"""

from __future__ import annotations

import logging
from typing import Optional

from aletheia.bridge import to_agent_observation, to_world_action
from aletheia.experimenters import Experimenter
from aletheia.vocabulary import DiscoveryEvent
from aletheia.worlds.base import StateSnapshot, World

logger = logging.getLogger(__name__)


class Session:
    """
    Drives exactly one (world, experimenter) pair.

    Not reentrant: callers must not overlap ``tick()`` calls.
    """

    def __init__(self, world: World, agent: Experimenter):
        self.world = world
        self.agent = agent
        self._step_count = 0
        self._discoveries = 0

    @property
    def step_count(self) -> int:
        return self._step_count

    def tick(self) -> Optional[DiscoveryEvent]:
        """Advance one tick. Returns a discovery if the scientist made one."""
        discovery = None

        lab = self.world.as_experimentable()
        if lab is not None:
            observation = to_agent_observation(lab.observe())
            reward = lab.reward()
            action, discovery = self.agent.act(observation, reward, self._step_count)
            lab.apply_action(to_world_action(action))

        self.world.step()
        self._step_count += 1

        if discovery is not None:
            self._discoveries += 1
            logger.info("step %d: discovery %s", self._step_count - 1, discovery)
        return discovery

    def get_state(self) -> StateSnapshot:
        return self.world.get_state()

    def summary(self) -> str:
        lines = [
            "═" * 50,
            "  Session Summary",
            "═" * 50,
            f"  World:         {type(self.world).__name__}",
            f"  Experimenter:  {type(self.agent).__name__}",
            f"  Ticks:         {self._step_count}",
            f"  Discoveries:   {self._discoveries}",
            f"  Experimentable: {'Yes' if self.world.as_experimentable() else 'No'}",
            "═" * 50,
        ]
        return "\n".join(lines)
