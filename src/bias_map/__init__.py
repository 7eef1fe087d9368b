"""BIAS Map survey engine: warmth/competence scoring and stereotype quadrants."""

from bias_map.survey_state import GroupEntry, SurveyState
from bias_map.survey_store import ThreadSafeSurveyStore

__all__ = ["GroupEntry", "SurveyState", "ThreadSafeSurveyStore"]

__version__ = "0.1.0"
