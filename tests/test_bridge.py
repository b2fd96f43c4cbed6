"""Tests for the world <-> agent translation."""

import unittest

from aletheia import bridge
from aletheia import vocabulary as agent
from aletheia.worlds import base as world


class TestObservationBridge(unittest.TestCase):

    def test_grid_summary_drops_alive(self):
        obs = bridge.to_agent_observation(world.GridSummary(alive=12, width=8, height=6))
        self.assertEqual(obs, agent.GridSummary(width=8, height=6))

    def test_state_vec_passes_through(self):
        obs = bridge.to_agent_observation(world.StateVec((1.0, -2.0, 3.5)))
        self.assertIsInstance(obs, agent.StateVec)
        self.assertEqual(obs.values, (1.0, -2.0, 3.5))

    def test_text_and_unknown_become_none(self):
        self.assertIs(bridge.to_agent_observation(world.TextObservation("hi")),
                      agent.NO_OBSERVATION)
        self.assertIs(bridge.to_agent_observation(world.NO_OBSERVATION),
                      agent.NO_OBSERVATION)
        self.assertIs(bridge.to_agent_observation(object()), agent.NO_OBSERVATION)
        self.assertIs(bridge.to_agent_observation(None), agent.NO_OBSERVATION)


class TestActionBridge(unittest.TestCase):

    def test_one_to_one(self):
        self.assertEqual(bridge.to_world_action(agent.FlipCell(2, 3)),
                         world.FlipCell(row=2, col=3))
        self.assertEqual(bridge.to_world_action(agent.Perturb(1, -0.5)),
                         world.Perturb(axis=1, delta=-0.5))
        self.assertEqual(bridge.to_world_action(agent.SetParam("rho", 20.0)),
                         world.SetParam(name="rho", value=20.0))

    def test_noop_and_unknown(self):
        self.assertIs(bridge.to_world_action(agent.NOOP), world.NOOP)
        self.assertIs(bridge.to_world_action("jump"), world.NOOP)
        self.assertIs(bridge.to_world_action(None), world.NOOP)


if __name__ == "__main__":
    unittest.main()
