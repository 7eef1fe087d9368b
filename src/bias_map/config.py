"""Survey configuration.

:class:`SurveyConfig` is handed to the store's constructor; nothing in the
engine reads process-wide mutable state.  :func:`load_config` builds one from
environment variables (``.env`` is loaded by :mod:`bias_map.app`).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from bias_map.questionnaire import (
    COMPETENCE_ITEMS,
    DEFAULT_GROUPS,
    WARMTH_ITEMS,
    Dimension,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurveyConfig:
    """Static inputs for a survey session."""

    warmth_items: Tuple[str, ...] = WARMTH_ITEMS
    competence_items: Tuple[str, ...] = COMPETENCE_ITEMS
    default_groups: Tuple[str, ...] = DEFAULT_GROUPS
    # None == unlimited
    max_groups: Optional[int] = None

    def item_count(self, dimension: Dimension | str) -> int:
        """Return the number of questionnaire items for *dimension*."""
        if Dimension(dimension) is Dimension.WARMTH:
            return len(self.warmth_items)
        return len(self.competence_items)


def _parse_groups(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated list, dropping blanks and repeats."""
    groups: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in groups:
            groups.append(name)
    return tuple(groups)


def _get_max_groups_from_env() -> Optional[int]:
    raw_val = os.getenv("BIAS_MAP_MAX_GROUPS")
    if not raw_val:
        return None
    try:
        parsed = int(raw_val)
    except ValueError:
        logger.warning(
            "Invalid BIAS_MAP_MAX_GROUPS value '%s'; must be integer.", raw_val
        )
        return None
    if parsed <= 0:
        logger.warning(
            "Ignoring BIAS_MAP_MAX_GROUPS=%s (must be positive int)", raw_val
        )
        return None
    return parsed


def load_config() -> SurveyConfig:
    """Build a :class:`SurveyConfig` from the environment."""
    raw_groups = os.getenv("BIAS_MAP_DEFAULT_GROUPS")
    default_groups = (
        _parse_groups(raw_groups) if raw_groups is not None else DEFAULT_GROUPS
    )
    max_groups = _get_max_groups_from_env()
    if max_groups is not None and len(default_groups) > max_groups:
        logger.warning(
            "Trimming default groups to BIAS_MAP_MAX_GROUPS=%d", max_groups
        )
        default_groups = default_groups[:max_groups]
    return SurveyConfig(default_groups=default_groups, max_groups=max_groups)
