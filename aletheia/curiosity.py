"""
Curiosity-driven scientist — tabular Q-learning with a learned forward model.

Every tick is a full cycle:

    discretize → predict & measure surprise → update world model
    → shape reward → learn → decide → act → remember → report

The agent keeps three tables, all keyed by a discretized view of the
continuous state (see ``aletheia.utils.discretize``):

1. **Q-table**: state key → value estimate per discrete action
2. **World model**: (state key, action) → predicted next continuous state
3. **Visit counts**: state key → number of ticks spent there

The world model is the source of curiosity: when the observed next state is
far from what the model predicted, the prediction error (surprise) is added to
the world's reward, pulling the agent toward transitions it does not yet
understand. Alternatively, ``reward_shaping="novelty"`` scales the world's
reward by ``1 + k / visits`` instead. Only one shaping applies per agent.

Exploration is epsilon-greedy with a multiplicative decay toward a floor:
explore freely early, exploit later, but never become fully greedy.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from aletheia.experimenters import Experimenter
from aletheia.utils import discretize, safe_divisor, sanitize_reward, sanitize_state
from aletheia.vocabulary import (
    NOOP,
    AgentAction,
    AgentObservation,
    DiscoveryEvent,
    Insight,
    Perturb,
    StateVec,
    TextEvent,
)

logger = logging.getLogger(__name__)

# "Previous" memory before the first tick; never present in any table.
START_KEY = "<start>"
START_ACTION = -1

# Discrete action ids: 0 is a no-op, then (axis, sign) pairs.
ACTION_NAMES = ["noop", "+x", "-x", "+y", "-y", "+z", "-z"]
ACTION_AXES: List[Optional[Tuple[int, float]]] = [
    None, (0, 1.0), (0, -1.0), (1, 1.0), (1, -1.0), (2, 1.0), (2, -1.0),
]
NUM_ACTIONS = len(ACTION_NAMES)


@dataclass
class CuriosityConfig:
    """Hyperparameters for the curiosity agent."""
    initial_exploration: float = 1.0   # Starting epsilon
    exploration_decay: float = 0.995   # Multiplicative decay per tick
    min_exploration: float = 0.05      # Floor epsilon
    learning_rate: float = 0.1         # Alpha
    discount: float = 0.9              # Gamma
    fovea_scale: float = 2.0           # Bins per unit of log-magnitude
    perturb_magnitude: float = 1.0     # Size of each axis kick
    reward_shaping: str = "surprise"   # "surprise" (additive) or "novelty" (multiplicative)
    surprise_gain: float = 1.0
    surprise_cap: float = 10.0
    first_time_surprise: float = 1.0   # Bonus for a never-tried (state, action)
    model_smoothing: float = 0.2       # EMA weight of a new observation
    novelty_weight: float = 1.0        # k in 1 + k / visits
    insight_threshold: float = 5.0     # Surprise needed for an anomaly insight
    novelty_threshold: float = 0.5     # Novelty needed for a novel-region insight
    insight_interval: int = 10         # Insights only on multiples of this tick
    summary_interval: int = 500        # Periodic status text
    seed: Optional[int] = None


class CuriosityAgent(Experimenter):
    """
    An experimenter that learns which pokes make the world surprising.

    Only state-vector observations are understood; anything else yields a
    no-op without touching the agent's memory.

    Parameters
    ----------
    config : CuriosityConfig, optional
        Hyperparameters. Defaults to ``CuriosityConfig()``.
    rng : random.Random, optional
        Source of exploration randomness. Defaults to
        ``random.Random(config.seed)``.
    """

    def __init__(self, config: Optional[CuriosityConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or CuriosityConfig()
        c = self.config
        assert c.reward_shaping in ("surprise", "novelty")
        assert 0.0 <= c.min_exploration <= 1.0, "min_exploration must be in [0, 1]"
        assert 0.0 < c.exploration_decay <= 1.0, "exploration_decay must be in (0, 1]"
        assert 0.0 < c.learning_rate <= 1.0, "learning_rate must be in (0, 1]"
        assert 0.0 <= c.discount < 1.0, "discount must be in [0, 1)"
        assert 0.0 < c.model_smoothing <= 1.0, "model_smoothing must be in (0, 1]"
        assert c.fovea_scale > 0, "fovea_scale must be positive"
        assert c.insight_interval > 0 and c.summary_interval > 0

        self.rng = rng or random.Random(c.seed)
        self._exploration = max(c.min_exploration, c.initial_exploration)

        self._q_table: Dict[str, np.ndarray] = {}
        self._world_model: Dict[Tuple[str, int], np.ndarray] = {}
        self._visits: Dict[str, int] = {}

        self._prev_key = START_KEY
        self._prev_action = START_ACTION
        self._prev_state: Optional[np.ndarray] = None

        self.last_signal = 0.0
        self.last_effective_reward = 0.0

    # ------------------------------------------------------------------
    # The tick
    # ------------------------------------------------------------------

    def act(self, observation: AgentObservation, reward: float,
            step: int) -> Tuple[AgentAction, Optional[DiscoveryEvent]]:
        if not isinstance(observation, StateVec):
            logger.debug("tick %d: no state vector (%s), idling",
                         step, type(observation).__name__)
            return NOOP, None

        c = self.config
        state = sanitize_state(observation.values)
        key = discretize(state, c.fovea_scale)
        self._visits[key] = self._visits.get(key, 0) + 1
        first_tick = self._prev_key == START_KEY

        surprise = self._measure_surprise(state)
        if not first_tick:
            self._update_world_model(state)

        if c.reward_shaping == "surprise":
            signal = surprise
            effective = sanitize_reward(reward) + surprise
        else:
            signal = c.novelty_weight / safe_divisor(self._visits[key])
            effective = sanitize_reward(reward) * (1.0 + signal)
        effective = sanitize_reward(effective)

        row = self._row(key)
        if not first_tick:
            self._learn(key, effective)

        action_id = self._choose(row)
        self._exploration = max(c.min_exploration,
                                self._exploration * c.exploration_decay)

        self._prev_key = key
        self._prev_action = action_id
        self._prev_state = state
        self.last_signal = signal
        self.last_effective_reward = effective

        return self._to_action(action_id), self._report(key, signal, step)

    # ------------------------------------------------------------------
    # Steps of the cycle
    # ------------------------------------------------------------------

    def _measure_surprise(self, state: np.ndarray) -> float:
        """Prediction error for the transition that just happened."""
        c = self.config
        predicted = self._world_model.get((self._prev_key, self._prev_action))
        if predicted is None:
            return c.first_time_surprise
        error = float(np.linalg.norm(state - predicted))
        return min(c.surprise_cap, c.surprise_gain * error)

    def _update_world_model(self, state: np.ndarray) -> None:
        pair = (self._prev_key, self._prev_action)
        predicted = self._world_model.get(pair)
        if predicted is None:
            self._world_model[pair] = state.copy()
        else:
            predicted += self.config.model_smoothing * (state - predicted)

    def _row(self, key: str) -> np.ndarray:
        row = self._q_table.get(key)
        if row is None:
            row = np.zeros(NUM_ACTIONS)
            self._q_table[key] = row
        return row

    def _learn(self, key: str, effective_reward: float) -> None:
        """One-step Q-learning backup into the previous (state, action)."""
        c = self.config
        prev_row = self._row(self._prev_key)
        target = effective_reward + c.discount * float(self._q_table[key].max())
        prev_row[self._prev_action] += c.learning_rate * (target - prev_row[self._prev_action])

    def _choose(self, row: np.ndarray) -> int:
        if self.rng.random() < self._exploration:
            return self.rng.randrange(NUM_ACTIONS)
        # argmax returns the first of tied maxima
        return int(np.argmax(row))

    def _to_action(self, action_id: int) -> AgentAction:
        axis_sign = ACTION_AXES[action_id]
        if axis_sign is None:
            return NOOP
        axis, sign = axis_sign
        return Perturb(axis=axis, delta=sign * self.config.perturb_magnitude)

    def _report(self, key: str, signal: float,
                step: int) -> Optional[DiscoveryEvent]:
        c = self.config
        if step % c.insight_interval == 0:
            if c.reward_shaping == "surprise" and signal > c.insight_threshold:
                insight = Insight(
                    topic="Anomaly",
                    content=(f"Prediction missed by surprise={signal:.3f} "
                             f"entering state {key}; the dynamics here are "
                             f"not what my model expected."),
                )
                logger.info("tick %d: %s", step, insight)
                return insight
            if c.reward_shaping == "novelty" and signal > c.novelty_threshold:
                insight = Insight(
                    topic="Novel region",
                    content=(f"State {key} is unfamiliar (novelty={signal:.3f}, "
                             f"visits={self._visits[key]})."),
                )
                logger.info("tick %d: %s", step, insight)
                return insight
        if step > 0 and step % c.summary_interval == 0:
            return TextEvent(
                f"Scientist: tick {step}, {self.num_states} distinct states "
                f"visited, exploration rate {self._exploration:.3f}.")
        return None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def exploration_rate(self) -> float:
        return self._exploration

    @property
    def num_states(self) -> int:
        return len(self._q_table)

    @property
    def world_model_size(self) -> int:
        return len(self._world_model)

    def q_values(self, key: str) -> np.ndarray:
        """Copy of the value estimates for ``key`` (zeros if unseen)."""
        row = self._q_table.get(key)
        return np.zeros(NUM_ACTIONS) if row is None else row.copy()

    def prediction(self, key: str, action_id: int) -> Optional[np.ndarray]:
        predicted = self._world_model.get((key, action_id))
        return None if predicted is None else predicted.copy()

    def visits(self, key: str) -> int:
        return self._visits.get(key, 0)

    def summary(self) -> str:
        """Human-readable summary of what the agent has learned."""
        lines = [
            "═" * 50,
            "  Curiosity Agent Summary",
            "═" * 50,
            f"  Reward shaping:      {self.config.reward_shaping}",
            f"  States visited:      {self.num_states}",
            f"  Model entries:       {self.world_model_size}",
            f"  Exploration rate:    {self._exploration:.3f}",
            "",
        ]
        busiest = sorted(self._visits.items(), key=lambda kv: -kv[1])[:5]
        for key, count in busiest:
            best = ACTION_NAMES[int(np.argmax(self._q_table[key]))]
            lines.append(f"  [{key:>12s}] visits={count:5d}  best={best}")
        lines.append("═" * 50)
        return "\n".join(lines)
