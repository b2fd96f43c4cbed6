"""
Agent-facing vocabulary: what a scientist sees, what it can do, what it reports.

These types are deliberately independent of any world implementation. The
bridge (``aletheia.bridge``) translates world observations into this
vocabulary and agent actions back into world actions, so an experimenter can
be attached to any world that speaks it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union


# ---------------------------------------------------------------------------
# Observations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GridSummary:
    """A cellular world reduced to its dimensions."""
    width: int
    height: int


@dataclass(frozen=True)
class StateVec:
    """A continuous 3-vector state."""
    values: Tuple[float, float, float]


@dataclass(frozen=True)
class NoObservation:
    """Nothing the agent understands."""


NO_OBSERVATION = NoObservation()

AgentObservation = Union[GridSummary, StateVec, NoObservation]


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FlipCell:
    row: int
    col: int


@dataclass(frozen=True)
class Perturb:
    """Nudge one axis of a continuous state by ``delta``."""
    axis: int
    delta: float


@dataclass(frozen=True)
class SetParam:
    """Change a simulation constant."""
    name: str
    value: float


@dataclass(frozen=True)
class Noop:
    pass


NOOP = Noop()

AgentAction = Union[FlipCell, Perturb, SetParam, Noop]


# ---------------------------------------------------------------------------
# Discovery events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextEvent:
    """A free-form status line from the scientist."""
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"Text": self.text}

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Insight:
    """A named hypothesis or finding."""
    topic: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"Insight": {"topic": self.topic, "content": self.content}}

    def __str__(self) -> str:
        return f"HYPOTHESIS: {self.topic} - {self.content}"


@dataclass(frozen=True)
class ObjectDetection:
    """Something recognised in the world, with a confidence in 0..1."""
    label: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {"ObjectDetection": {"label": self.label,
                                    "confidence": self.confidence}}

    def __str__(self) -> str:
        return f"DETECTION: {self.label} ({self.confidence:.0%})"


DiscoveryEvent = Union[TextEvent, Insight, ObjectDetection]


def event_from_dict(data: Dict[str, Any]) -> DiscoveryEvent:
    """
    Rebuild a discovery event from its ``to_dict()`` shape.

    Raises ValueError for anything that is not exactly one known tag.
    """
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"Expected a single-tag mapping, got {data!r}")
    (tag, body), = data.items()
    if tag == "Text":
        return TextEvent(str(body))
    if tag == "Insight":
        return Insight(topic=str(body["topic"]), content=str(body["content"]))
    if tag == "ObjectDetection":
        return ObjectDetection(label=str(body["label"]),
                               confidence=float(body["confidence"]))
    raise ValueError(f"Unknown discovery event tag: {tag!r}")
