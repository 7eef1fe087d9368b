"""Map (warmth, competence) scores onto the stereotype content quadrants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

# Midpoint of the 1..7 scale; a score equal to it counts as "high".
QUADRANT_THRESHOLD: float = 4


class Quadrant(str, Enum):
    """The four regions of the warmth x competence plane."""

    ADMIRED = "Admired"
    PATERNALIZED = "Paternalized"
    ENVIED = "Envied"
    DEHUMANIZED = "Dehumanized"


@dataclass(frozen=True)
class BiasPrediction:
    """Emotion and behaviour predicted for a quadrant."""

    emotion: str
    behavior: str


_BIAS_TABLE: Dict[Quadrant, BiasPrediction] = {
    Quadrant.ADMIRED: BiasPrediction("Admiration", "Active & Passive Help"),
    Quadrant.PATERNALIZED: BiasPrediction("Pity", "Active Help, Passive Neglect"),
    Quadrant.ENVIED: BiasPrediction("Envy", "Passive Help, Active Harm"),
    Quadrant.DEHUMANIZED: BiasPrediction("Contempt", "Active & Passive Harm"),
}

# Chart colours per quadrant (legend and scatter points).
QUADRANT_COLORS: Dict[Quadrant, str] = {
    Quadrant.ADMIRED: "#22c55e",
    Quadrant.PATERNALIZED: "#eab308",
    Quadrant.ENVIED: "#ef4444",
    Quadrant.DEHUMANIZED: "#94a3b8",
}


def quadrant(warmth: float, competence: float) -> Quadrant:
    """Classify a (warmth, competence) pair."""
    high_warmth = warmth >= QUADRANT_THRESHOLD
    high_competence = competence >= QUADRANT_THRESHOLD
    if high_warmth and high_competence:
        return Quadrant.ADMIRED
    if high_warmth:
        return Quadrant.PATERNALIZED
    if high_competence:
        return Quadrant.ENVIED
    return Quadrant.DEHUMANIZED


def bias_for(q: Quadrant | str) -> BiasPrediction:
    """Return the emotion/behaviour pair for quadrant *q*.

    Raises
    ------
    ValueError
        If *q* is not one of the four quadrant names.
    """
    return _BIAS_TABLE[Quadrant(q)]


def describe(q: Quadrant | str) -> str:
    """One-line card label, e.g. ``"Envied: Envy / Passive Help, Active Harm"``."""
    q = Quadrant(q)
    bias = _BIAS_TABLE[q]
    return f"{q.value}: {bias.emotion} / {bias.behavior}"
