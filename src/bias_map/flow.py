"""Three-stage survey progression: Groups, then Survey, then BIAS Map.

Forward moves are gated by :mod:`bias_map.gate`; going back is always
allowed; the only other move is restarting from the results stage.
"""
from __future__ import annotations

from enum import IntEnum

from bias_map.exceptions import InvalidTransitionError, StageBlockedError
from bias_map.gate import can_advance
from bias_map.survey_state import SurveyState


class Stage(IntEnum):
    """Where the user is in the survey."""

    SELECTING = 0
    RATING = 1
    VIEWING = 2

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Stage.SELECTING: "Groups",
    Stage.RATING: "Survey",
    Stage.VIEWING: "BIAS Map",
}


def advance(stage: Stage, state: SurveyState) -> Stage:
    """Move one stage forward.

    Raises
    ------
    InvalidTransitionError
        If *stage* is already the last stage.
    StageBlockedError
        If the completion gate refuses the move.
    """
    stage = Stage(stage)
    if stage is Stage.VIEWING:
        raise InvalidTransitionError("Already viewing results; use restart().")
    if not can_advance(stage, state):
        if stage is Stage.SELECTING:
            raise StageBlockedError("Add at least one group before rating.")
        raise StageBlockedError("Every item for every group must be rated first.")
    return Stage(stage + 1)


def back(stage: Stage) -> Stage:
    """Move one stage back; the first stage stays where it is."""
    stage = Stage(stage)
    return Stage(stage - 1) if stage > Stage.SELECTING else stage


def restart(stage: Stage) -> Stage:
    """Return to group selection from the results stage. Ratings are kept."""
    stage = Stage(stage)
    if stage is not Stage.VIEWING:
        raise InvalidTransitionError(
            f"Restart is only possible from {Stage.VIEWING.label}, not {stage.label}."
        )
    return Stage.SELECTING
