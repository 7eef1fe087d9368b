"""Context dataclass for rendering the results summary.

`SummaryContext` holds every value the Jinja2 template
`templates/summary.md.j2` expects, keeping the scoring side and the
template decoupled.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime as _dt
from datetime import timezone as _tz
from typing import Any, Dict, List, Sequence

from bias_map.reporting import config
from bias_map.reporting.models import GroupResult
from bias_map.reporting.projector import quadrant_counts
from bias_map.scoring.classifier import QUADRANT_THRESHOLD

__all__ = [
    "Card",
    "SummaryContext",
    "build_summary_context",
]


@dataclass(slots=True)
class Card:
    """One summary card as displayed under the chart."""

    group: str
    warmth: str
    competence: str
    quadrant: str
    emotion: str
    behavior: str
    complete: bool = True


@dataclass(slots=True)
class SummaryContext:
    """Container with all fields used by the summary template."""

    date: str  # ISO-8601 date string (UTC)
    cards: List[Card] = field(default_factory=list)
    quadrant_counts: Dict[str, int] = field(default_factory=dict)
    incomplete_groups: List[str] = field(default_factory=list)
    threshold: float = QUADRANT_THRESHOLD
    truncated: int = 0
    version: str = "1"

    def to_dict(self) -> Dict[str, Any]:  # noqa: D401 – simple helper
        """Return a *plain* ``dict`` (recursively) for Jinja rendering."""
        return asdict(self)

    __call__ = to_dict


def _card(result: GroupResult) -> Card:
    return Card(
        group=result.group,
        warmth=f"{result.warmth:.2f}",
        competence=f"{result.competence:.2f}",
        quadrant=result.quadrant.value,
        emotion=result.emotion,
        behavior=result.behavior,
        complete=result.answered == result.total_items,
    )


def build_summary_context(results: Sequence[GroupResult]) -> SummaryContext:
    """Convert projected results into a :class:`SummaryContext`."""
    # a zero or negative cap shows no cards rather than slicing from the end
    limit = max(0, config.MAX_CARDS)
    cards = [_card(r) for r in results[:limit]]
    return SummaryContext(
        date=_dt.now(tz=_tz.utc).strftime("%Y-%m-%d"),
        cards=cards,
        quadrant_counts=quadrant_counts(results),
        incomplete_groups=[r.group for r in results if r.answered < r.total_items],
        truncated=len(results) - len(cards),
        version=config.REPORT_VERSION,
    )
