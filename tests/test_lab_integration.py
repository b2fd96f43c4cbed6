"""
Integration tests — the full loop with a learning scientist.

A curiosity agent is attached to each reference world and left to run. The
checks are about the loop as a whole: it keeps running, learns tables that
only grow, reports discoveries, and degrades to idling on worlds whose
observations it cannot use.
"""

import unittest

from aletheia.curiosity import CuriosityAgent, CuriosityConfig
from aletheia.runner import DiscoveryFeed, run_session
from aletheia.session import Session
from aletheia.vocabulary import Insight, TextEvent
from aletheia.worlds import (
    GrayScottConfig, GrayScottWorld, LifeConfig, LifeWorld, ODEConfig, ODEWorld,
)


class TestLorenzLab(unittest.TestCase):
    """End-to-end: a curious scientist on the Lorenz attractor."""

    def test_full_pipeline(self):
        agent = CuriosityAgent(CuriosityConfig(seed=42, summary_interval=200))
        session = Session(ODEWorld(), agent)
        feed = DiscoveryFeed(maxlen=50)

        states_seen = 0
        for _ in range(1000):
            feed.push(session.tick())
            self.assertGreaterEqual(agent.num_states, states_seen)
            states_seen = agent.num_states

        self.assertEqual(session.step_count, 1000)
        self.assertGreater(agent.num_states, 10)
        self.assertGreater(agent.world_model_size, 10)
        self.assertAlmostEqual(agent.exploration_rate, 0.05)
        self.assertGreater(len(feed), 0)
        for event in feed:
            self.assertIsInstance(event, (Insight, TextEvent))

    def test_rossler_with_novelty_shaping(self):
        agent = CuriosityAgent(CuriosityConfig(seed=7, reward_shaping="novelty"))
        session = Session(ODEWorld(ODEConfig(system="rossler")), agent)
        result = run_session(session, 500)
        self.assertEqual(result.ticks, 500)
        self.assertGreater(agent.num_states, 3)
        topics = {e.topic for e in result.discoveries if isinstance(e, Insight)}
        self.assertTrue(topics <= {"Novel region"})


class TestGrayScottLab(unittest.TestCase):

    def test_runs_and_learns(self):
        world = GrayScottWorld(GrayScottConfig(width=32, height=32, seed_radius=4))
        agent = CuriosityAgent(CuriosityConfig(seed=1))
        session = Session(world, agent)
        run_session(session, 150)
        self.assertGreaterEqual(agent.num_states, 1)
        self.assertGreater(agent.world_model_size, 1)
        values = session.get_state().values
        self.assertTrue(((values >= 0.0) & (values <= 1.0)).all())


class TestLifeLab(unittest.TestCase):

    def test_grid_world_leaves_agent_idle(self):
        """The curiosity agent only understands state vectors."""
        world = LifeWorld(LifeConfig(rows=16, cols=16))
        agent = CuriosityAgent(CuriosityConfig(seed=0))
        session = Session(world, agent)
        result = run_session(session, 50)
        self.assertEqual(result.discoveries, [])
        self.assertEqual(agent.num_states, 0)
        self.assertEqual(world.generation, 50)


if __name__ == "__main__":
    unittest.main()
