"""Completion checks that decide whether the survey may move forward."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from bias_map.survey_state import SurveyState

if TYPE_CHECKING:  # pragma: no cover
    from bias_map.flow import Stage


def has_groups(state: SurveyState) -> bool:
    """True iff at least one group is being evaluated."""
    return len(state) > 0


def all_rated(state: SurveyState) -> bool:
    """True iff every slot of every group holds a rating.

    One missing answer anywhere blocks the whole cohort.  With no groups
    there is nothing left to rate, so this is vacuously true.
    """
    return all(entry.is_complete for entry in state)


def pending_groups(state: SurveyState) -> List[str]:
    """Names of groups that still have unanswered items, in group order."""
    return [entry.name for entry in state if not entry.is_complete]


def can_advance(stage: "Stage", state: SurveyState) -> bool:
    """Return True if *stage* may move forward given *state*."""
    from bias_map.flow import Stage  # local import to avoid cycles

    if stage is Stage.SELECTING:
        return has_groups(state)
    if stage is Stage.RATING:
        return all_rated(state)
    return False
