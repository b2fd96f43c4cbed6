"""
Lab Demo: a curious scientist let loose on three worlds.

Each world is paired with a CuriosityAgent and run for a while. The agent is
rewarded by the world (stability, survival, pattern health) plus its own
surprise, and reports anomalies when its forward model is caught out:
- Lorenz: kicks along x/y/z throw the trajectory between the two lobes
- Gray-Scott: injections of V revive or saturate the pattern
- Game of Life: grid summaries are not state vectors, so the scientist idles
"""

import logging

from aletheia import CuriosityAgent, CuriosityConfig, Session, run_session
from aletheia.worlds import GrayScottConfig, GrayScottWorld, LifeWorld, ODEWorld


def run_lab(title, world, ticks, config):
    print(f"\n--- {title} ---\n")
    agent = CuriosityAgent(config)
    session = Session(world, agent)
    result = run_session(session, ticks, verbose=True, print_every=250)
    print()
    print(result.summary())
    print(agent.summary())
    print(session.summary())


def main():
    logging.basicConfig(level=logging.WARNING)

    print("=" * 60)
    print("  Aletheia — Live Universe with a Curious Scientist")
    print("=" * 60)

    run_lab("Lorenz Attractor", ODEWorld(), 1000,
            CuriosityConfig(seed=42, summary_interval=250))

    run_lab("Gray-Scott Reaction-Diffusion",
            GrayScottWorld(GrayScottConfig(width=64, height=64)), 500,
            CuriosityConfig(seed=42, summary_interval=250, perturb_magnitude=0.37))

    run_lab("Game of Life", LifeWorld(), 200,
            CuriosityConfig(seed=42))


if __name__ == "__main__":
    main()
