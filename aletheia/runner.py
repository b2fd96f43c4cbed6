"""
Driving a Session from outside: batch runs, auto-play, and the discovery feed.

The core never schedules itself. Whatever drives it (a test, a script, a
render loop) calls ``Session.tick()``; the helpers here express the common
ways of doing that:

- ``run_session``: N ticks back to back, optionally printing progress
- ``AutoPlay``: wall-clock auto-play with bounded catch-up per callback
- ``DiscoveryFeed``: the bounded, newest-first history a display keeps
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from aletheia.session import Session
from aletheia.vocabulary import DiscoveryEvent


class DiscoveryFeed:
    """Append-only event history that forgets the oldest past ``maxlen``."""

    def __init__(self, maxlen: int = 50):
        assert maxlen > 0, "maxlen must be positive"
        self._events: deque = deque(maxlen=maxlen)

    def push(self, event: Optional[DiscoveryEvent]) -> None:
        if event is not None:
            self._events.append(event)

    def extend(self, events: List[DiscoveryEvent]) -> None:
        for event in events:
            self.push(event)

    def newest_first(self) -> List[DiscoveryEvent]:
        return list(reversed(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[DiscoveryEvent]:
        return iter(self._events)


@dataclass
class RunResult:
    """Outcome of a batch run."""
    ticks: int
    discoveries: List[DiscoveryEvent] = field(default_factory=list)

    def summary(self) -> str:
        lines = [
            "═" * 55,
            "  Lab Run Result",
            "═" * 55,
            f"  Ticks run:         {self.ticks}",
            f"  Discoveries:       {len(self.discoveries)}",
            "",
        ]
        for event in self.discoveries[-10:]:
            lines.append(f"    {event}")
        lines.append("═" * 55)
        return "\n".join(lines)


def run_session(session: Session, ticks: int, verbose: bool = False,
                print_every: int = 100) -> RunResult:
    """Tick ``session`` ``ticks`` times and collect every discovery."""
    result = RunResult(ticks=0)
    for _ in range(ticks):
        event = session.tick()
        result.ticks += 1
        if event is not None:
            result.discoveries.append(event)
            if verbose:
                print(f"  [tick {session.step_count - 1:6d}] {event}")
        if verbose and session.step_count % print_every == 0:
            print(f"  [tick {session.step_count:6d}] "
                  f"discoveries={len(result.discoveries):3d}")
    return result


class AutoPlay:
    """
    Continuous play driven by an external clock.

    Elapsed time accumulates; each ``advance`` runs the whole ticks it has
    earned, but never more than ``max_catchup``. Any backlog beyond that is
    dropped, so a slow host sees the simulation slow down instead of an
    ever-growing burst of work.

    Parameters
    ----------
    session : Session
        The session to drive.
    ticks_per_second : float
        Target speed. Default 30.
    max_catchup : int
        Maximum ticks run per ``advance`` call. Default 5.
    """

    def __init__(self, session: Session, ticks_per_second: float = 30.0,
                 max_catchup: int = 5):
        assert ticks_per_second > 0, "ticks_per_second must be positive"
        assert max_catchup > 0, "max_catchup must be positive"
        self.session = session
        self.ticks_per_second = ticks_per_second
        self.max_catchup = max_catchup
        self.playing = True
        self._accumulator = 0.0

    def advance(self, elapsed_seconds: float) -> List[DiscoveryEvent]:
        """Account for ``elapsed_seconds`` of wall time; return any discoveries."""
        # Written so NaN is rejected too; it must never reach the accumulator
        if not self.playing or not elapsed_seconds > 0:
            return []
        interval = 1.0 / self.ticks_per_second
        self._accumulator += elapsed_seconds

        events = []
        ticks = 0
        while self._accumulator >= interval and ticks < self.max_catchup:
            self._accumulator -= interval
            ticks += 1
            event = self.session.tick()
            if event is not None:
                events.append(event)

        if self._accumulator >= interval:
            self._accumulator = 0.0
        return events

    def step(self) -> Optional[DiscoveryEvent]:
        """Manual single step; only meaningful while paused."""
        return self.session.tick()

    def toggle(self) -> bool:
        self.playing = not self.playing
        self._accumulator = 0.0
        return self.playing
