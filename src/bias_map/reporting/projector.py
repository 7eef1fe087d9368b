"""Project a :class:`SurveyState` into per-group results.

Everything here is recomputed from the snapshot on each call; nothing is
cached, so results can never go stale relative to the state.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List

from bias_map.reporting.models import ChartPoint, GroupResult
from bias_map.scoring.aggregator import mean
from bias_map.scoring.classifier import QUADRANT_COLORS, Quadrant, bias_for, quadrant
from bias_map.survey_state import GroupEntry, SurveyState

logger = logging.getLogger(__name__)


def _zero_filled(ratings: Iterable[object]) -> List[object]:
    return [0 if v is None else v for v in ratings]


def project_group(entry: GroupEntry) -> GroupResult:
    """Score a single group."""
    warmth = mean(_zero_filled(entry.warmth))
    competence = mean(_zero_filled(entry.competence))
    q = quadrant(warmth, competence)
    bias = bias_for(q)
    return GroupResult(
        group=entry.name,
        warmth=warmth,
        competence=competence,
        quadrant=q,
        emotion=bias.emotion,
        behavior=bias.behavior,
        answered=entry.answered_count,
        total_items=entry.total_items,
    )


def project_results(state: SurveyState) -> List[GroupResult]:
    """Return one :class:`GroupResult` per group, in group order.

    The function is read-only; it does not mutate *state*.
    """
    results = [project_group(entry) for entry in state]
    logger.debug("Projected %d group result(s)", len(results))
    return results


def chart_points(results: Iterable[GroupResult]) -> List[ChartPoint]:
    """Scatter-plot data for *results* (x = competence, y = warmth)."""
    return [
        ChartPoint(
            group=r.group,
            x=r.competence,
            y=r.warmth,
            quadrant=r.quadrant,
            color=QUADRANT_COLORS[r.quadrant],
        )
        for r in results
    ]


def quadrant_counts(results: Iterable[GroupResult]) -> Dict[str, int]:
    """Return a mapping of quadrant name to count, including empty quadrants."""
    counts: Counter[str] = Counter(r.quadrant.value for r in results)
    return {q.value: counts.get(q.value, 0) for q in Quadrant}
