"""Data structures for the results pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from bias_map.scoring.classifier import Quadrant


@dataclass(slots=True)
class GroupResult:
    """Scores, quadrant and bias prediction for one group."""

    group: str
    warmth: float
    competence: float
    quadrant: Quadrant
    emotion: str
    behavior: str
    answered: int = 0
    total_items: int = 0

    def completion_ratio(self) -> float:
        """Return fraction of items answered (0‒1)."""
        return self.answered / (self.total_items or 1)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["quadrant"] = self.quadrant.value
        return data


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """One scatter point: competence on x, warmth on y."""

    group: str
    x: float
    y: float
    quadrant: Quadrant
    color: str
