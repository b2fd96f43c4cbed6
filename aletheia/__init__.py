"""
Aletheia: a live laboratory pairing evolving worlds with a curious scientist.

A Session binds a world (cellular automaton, chaotic ODE, reaction-diffusion
field, ...) to an experimenter. Each tick the experimenter observes the world,
receives its reward, chooses an action, and may report a discovery; the world
then advances one step. The curiosity agent learns online which actions lead
to transitions its own forward model fails to predict.
"""

from aletheia.vocabulary import (
    FlipCell,
    Perturb,
    SetParam,
    NOOP,
    GridSummary,
    StateVec,
    NO_OBSERVATION,
    TextEvent,
    Insight,
    ObjectDetection,
    event_from_dict,
)
from aletheia.experimenters import (
    Experimenter,
    NoopExperimenter,
    ScriptedExperimenter,
    ScriptedConfig,
    make_experimenter,
)
from aletheia.curiosity import CuriosityAgent, CuriosityConfig
from aletheia.session import Session
from aletheia.runner import AutoPlay, DiscoveryFeed, run_session

__version__ = "0.1.0"
__all__ = [
    "FlipCell",
    "Perturb",
    "SetParam",
    "NOOP",
    "GridSummary",
    "StateVec",
    "NO_OBSERVATION",
    "TextEvent",
    "Insight",
    "ObjectDetection",
    "event_from_dict",
    "Experimenter",
    "NoopExperimenter",
    "ScriptedExperimenter",
    "ScriptedConfig",
    "make_experimenter",
    "CuriosityAgent",
    "CuriosityConfig",
    "Session",
    "AutoPlay",
    "DiscoveryFeed",
    "run_session",
]
