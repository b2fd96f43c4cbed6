"""Tests for batch runs, auto-play and the discovery feed."""

import unittest

from aletheia.experimenters import NoopExperimenter, ScriptedConfig, ScriptedExperimenter
from aletheia.runner import AutoPlay, DiscoveryFeed, run_session
from aletheia.session import Session
from aletheia.vocabulary import TextEvent
from aletheia.worlds import LifeConfig, LifeWorld


def small_session(agent=None) -> Session:
    return Session(LifeWorld(LifeConfig(rows=8, cols=8)), agent or NoopExperimenter())


class TestDiscoveryFeed(unittest.TestCase):

    def test_bounded(self):
        feed = DiscoveryFeed(maxlen=3)
        for i in range(5):
            feed.push(TextEvent(str(i)))
        self.assertEqual(len(feed), 3)
        self.assertEqual([e.text for e in feed], ["2", "3", "4"])
        self.assertEqual([e.text for e in feed.newest_first()], ["4", "3", "2"])

    def test_ignores_none(self):
        feed = DiscoveryFeed()
        feed.push(None)
        feed.extend([TextEvent("a")])
        self.assertEqual(len(feed), 1)


class TestRunSession(unittest.TestCase):

    def test_collects_discoveries(self):
        agent = ScriptedExperimenter(ScriptedConfig(report_every=10))
        result = run_session(small_session(agent), 35)
        self.assertEqual(result.ticks, 35)
        self.assertEqual(len(result.discoveries), 3)
        self.assertIn("Lab Run Result", result.summary())


class TestAutoPlay(unittest.TestCase):

    def test_earned_ticks(self):
        session = small_session()
        play = AutoPlay(session, ticks_per_second=10, max_catchup=5)
        play.advance(0.25)
        self.assertEqual(session.step_count, 2)
        play.advance(0.06)
        self.assertEqual(session.step_count, 3)

    def test_catchup_is_bounded(self):
        session = small_session()
        play = AutoPlay(session, ticks_per_second=60, max_catchup=4)
        play.advance(10.0)
        self.assertEqual(session.step_count, 4)
        # The backlog was dropped, not carried over
        play.advance(0.001)
        self.assertEqual(session.step_count, 4)

    def test_pause_and_single_step(self):
        session = small_session()
        play = AutoPlay(session, ticks_per_second=10)
        self.assertFalse(play.toggle())
        play.advance(1.0)
        self.assertEqual(session.step_count, 0)
        play.step()
        self.assertEqual(session.step_count, 1)

    def test_returns_events(self):
        agent = ScriptedExperimenter(ScriptedConfig(report_every=2))
        play = AutoPlay(small_session(agent), ticks_per_second=10, max_catchup=5)
        events = play.advance(0.55)
        self.assertEqual(len(events), 2)  # Ticks 2 and 4

    def test_nan_elapsed_is_ignored(self):
        session = small_session()
        play = AutoPlay(session, ticks_per_second=10, max_catchup=5)
        self.assertEqual(play.advance(float("nan")), [])
        play.advance(1.0)
        self.assertEqual(session.step_count, 5)


if __name__ == "__main__":
    unittest.main()
