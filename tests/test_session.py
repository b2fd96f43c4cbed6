"""Tests for the Session loop driver."""

import unittest

import numpy as np

from aletheia.curiosity import CuriosityAgent, CuriosityConfig
from aletheia.experimenters import Experimenter, NoopExperimenter
from aletheia.session import Session
from aletheia.vocabulary import NOOP, Perturb, StateVec, TextEvent
from aletheia.worlds import LifeConfig, LifeWorld, ODEWorld, make_world
from aletheia.worlds.base import PointsState, World


class CounterWorld(World):
    """A world with no experiment hooks: it only counts its steps."""

    def __init__(self):
        self.count = 0

    def step(self):
        self.count += 1

    def get_state(self):
        return PointsState(points=[(float(self.count), 0.0, 0.0)])

    def set_param(self, key, value):
        pass


class RecordingExperimenter(Experimenter):
    """Remembers what it was shown and replays a fixed action."""

    def __init__(self, action=NOOP, discovery_at=None):
        self.calls = []
        self.action = action
        self.discovery_at = discovery_at

    def act(self, observation, reward, step):
        self.calls.append((observation, reward, step))
        discovery = TextEvent(f"tick {step}") if step == self.discovery_at else None
        return self.action, discovery


class TestSession(unittest.TestCase):

    def test_noop_session_matches_raw_steps(self):
        """100 ticks with a no-op agent equal 100 plain steps."""
        for tag in ("life", "lorenz", "gray_scott"):
            with self.subTest(world=tag):
                session = Session(make_world(tag), NoopExperimenter())
                raw = make_world(tag)
                for _ in range(100):
                    self.assertIsNone(session.tick())
                    raw.step()
                self.assertEqual(session.step_count, 100)
                self.assertEqual(session.get_state(), raw.get_state())

    def test_agent_sees_translated_observation(self):
        agent = RecordingExperimenter()
        session = Session(ODEWorld(), agent)
        session.tick()
        session.tick()
        observation, reward, step = agent.calls[1]
        self.assertIsInstance(observation, StateVec)
        self.assertEqual(step, 1)
        self.assertGreater(reward, 0.0)

    def test_action_applied_before_step(self):
        kicked = ODEWorld()
        session = Session(kicked, RecordingExperimenter(action=Perturb(axis=0, delta=5.0)))
        session.tick()
        reference = ODEWorld()
        reference.state[0] += 5.0
        reference.step()
        np.testing.assert_array_equal(kicked.state, reference.state)

    def test_discovery_returned(self):
        session = Session(LifeWorld(LifeConfig(rows=8, cols=8)),
                          RecordingExperimenter(discovery_at=3))
        events = [session.tick() for _ in range(5)]
        self.assertEqual(events[3], TextEvent("tick 3"))
        self.assertEqual(sum(e is not None for e in events), 1)

    def test_world_without_hooks(self):
        """A non-experimentable world is stepped and the agent is never asked."""
        agent = RecordingExperimenter(discovery_at=0)
        world = CounterWorld()
        session = Session(world, agent)
        for _ in range(7):
            self.assertIsNone(session.tick())
        self.assertEqual(world.count, 7)
        self.assertEqual(session.step_count, 7)
        self.assertEqual(agent.calls, [])

    def test_get_state_is_live(self):
        session = Session(CounterWorld(), NoopExperimenter())
        session.tick()
        self.assertEqual(session.get_state().points, [(1.0, 0.0, 0.0)])
        session.tick()
        self.assertEqual(session.get_state().points, [(2.0, 0.0, 0.0)])

    def test_step_count_read_only(self):
        session = Session(CounterWorld(), NoopExperimenter())
        with self.assertRaises(AttributeError):
            session.step_count = 5

    def test_curious_agent_on_lorenz(self):
        agent = CuriosityAgent(CuriosityConfig(seed=42))
        session = Session(ODEWorld(), agent)
        for _ in range(300):
            session.tick()
        self.assertEqual(session.step_count, 300)
        self.assertGreater(agent.num_states, 3)
        self.assertIn("Session Summary", session.summary())


if __name__ == "__main__":
    unittest.main()
