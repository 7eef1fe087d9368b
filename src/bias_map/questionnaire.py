"""Static questionnaire content.

Item text is configuration only: the engine cares about the number of items
per dimension, the rendering layer shows the wording.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class Dimension(str, Enum):
    """The two perceptual dimensions every group is rated on."""

    WARMTH = "warmth"
    COMPETENCE = "competence"


LIKERT_MIN: int = 1
LIKERT_MAX: int = 7

WARMTH_ITEMS: Tuple[str, ...] = (
    "…is trustworthy",
    "…has good intentions toward our team/org",
    "…is friendly and approachable",
    "…is honest and sincere",
    "…would cooperate rather than compete if resources were scarce",
)

COMPETENCE_ITEMS: Tuple[str, ...] = (
    "…is capable of achieving its goals",
    "…possesses the skills and expertise required for success",
    "…is efficient and reliable in execution",
    "…has the resources or status to get things done",
    "…earns respect for technical or strategic excellence",
)

DEFAULT_GROUPS: Tuple[str, ...] = ("Cloud Engineering", "Compliance (Regional)")
