"""
Benchmark suite for the Aletheia lab.

Runs every pairing of reference world and experimenter for a fixed number of
ticks, measuring:
- Throughput (ticks per second)
- Exploration breadth (distinct states the curiosity agent learned about)
- Discoveries reported

The no-op and scripted experimenters are the controls: their throughput is
the cost of the world alone, and they learn nothing.
"""

import time
from dataclasses import dataclass
from typing import Callable, List

from aletheia import CuriosityAgent, CuriosityConfig, Session, make_experimenter
from aletheia.experimenters import Experimenter
from aletheia.worlds import GrayScottConfig, GrayScottWorld, LifeWorld, ODEConfig, ODEWorld
from aletheia.worlds.base import World


@dataclass
class BenchmarkProblem:
    """A world to benchmark: how to build it and how long to run it."""
    name: str
    make_world: Callable[[], World]
    ticks: int = 1000


BENCHMARKS = [
    BenchmarkProblem("lorenz", lambda: ODEWorld(ODEConfig(system="lorenz"))),
    BenchmarkProblem("rossler", lambda: ODEWorld(ODEConfig(system="rossler"))),
    BenchmarkProblem("gray_scott",
                     lambda: GrayScottWorld(GrayScottConfig(width=64, height=64)),
                     ticks=300),
    BenchmarkProblem("life", LifeWorld, ticks=500),
]

EXPERIMENTERS = ["noop", "scripted", "curious"]


@dataclass
class BenchmarkResult:
    problem: str
    experimenter: str
    ticks: int
    elapsed: float
    states: int
    discoveries: int

    @property
    def ticks_per_second(self) -> float:
        return self.ticks / max(self.elapsed, 1e-9)


def build_experimenter(tag: str, seed: int) -> Experimenter:
    if tag == "curious":
        return make_experimenter(tag, config=CuriosityConfig(seed=seed))
    return make_experimenter(tag)


def run_benchmark(problem: BenchmarkProblem, tag: str,
                  seed: int = 42) -> BenchmarkResult:
    agent = build_experimenter(tag, seed)
    session = Session(problem.make_world(), agent)
    discoveries = 0

    start = time.perf_counter()
    for _ in range(problem.ticks):
        if session.tick() is not None:
            discoveries += 1
    elapsed = time.perf_counter() - start

    states = agent.num_states if isinstance(agent, CuriosityAgent) else 0
    return BenchmarkResult(problem.name, tag, problem.ticks, elapsed,
                           states, discoveries)


def main():
    print("=" * 72)
    print("  Aletheia Lab — Benchmark Suite")
    print("=" * 72)
    print(f"  {'world':<12s} {'agent':<10s} {'ticks':>6s} "
          f"{'ticks/s':>10s} {'states':>7s} {'found':>6s}")
    print("-" * 72)

    results: List[BenchmarkResult] = []
    for problem in BENCHMARKS:
        for tag in EXPERIMENTERS:
            r = run_benchmark(problem, tag)
            results.append(r)
            print(f"  {r.problem:<12s} {r.experimenter:<10s} {r.ticks:6d} "
                  f"{r.ticks_per_second:10.1f} {r.states:7d} {r.discoveries:6d}")

    print("=" * 72)


if __name__ == "__main__":
    main()
