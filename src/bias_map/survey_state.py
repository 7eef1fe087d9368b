"""Immutable snapshots of an in-progress survey.

A :class:`SurveyState` holds the ordered groups being evaluated.  Each group
is one :class:`GroupEntry` carrying both of its rating sets, so a group can
never exist with only one of them.  Every mutating method returns a *new*
snapshot and leaves the receiver untouched; when a method raises, no snapshot
is produced at all.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

from bias_map.config import SurveyConfig
from bias_map.exceptions import (
    DuplicateGroupError,
    IndexOutOfRangeError,
    InvalidRatingValueError,
    UnknownGroupError,
)
from bias_map.questionnaire import LIKERT_MAX, LIKERT_MIN, Dimension

Ratings = Tuple[Optional[int], ...]


def _unanswered(count: int) -> Ratings:
    return (None,) * count


def _validate_rating(value: object) -> int:
    # bool is an int subclass; True must not sneak in as a 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRatingValueError(
            f"Rating must be an integer between {LIKERT_MIN} and {LIKERT_MAX}, got {value!r}."
        )
    if not LIKERT_MIN <= value <= LIKERT_MAX:
        raise InvalidRatingValueError(
            f"Rating {value} is outside the {LIKERT_MIN}-{LIKERT_MAX} scale."
        )
    return value


@dataclass(frozen=True)
class GroupEntry:
    """A group and its warmth/competence rating sets (``None`` = unanswered)."""

    name: str
    warmth: Ratings
    competence: Ratings

    def ratings(self, dimension: Dimension | str) -> Ratings:
        if Dimension(dimension) is Dimension.WARMTH:
            return self.warmth
        return self.competence

    @property
    def answered_count(self) -> int:
        return sum(1 for v in self.warmth + self.competence if v is not None)

    @property
    def total_items(self) -> int:
        return len(self.warmth) + len(self.competence)

    @property
    def is_complete(self) -> bool:  # noqa: D401 – property
        """True when no slot in either rating set is unanswered."""
        return self.answered_count == self.total_items


@dataclass(frozen=True)
class SurveyState:
    """Ordered groups plus their ratings; one immutable snapshot."""

    entries: Tuple[GroupEntry, ...] = ()
    warmth_items: int = 5
    competence_items: int = 5

    @classmethod
    def initial(cls, config: Optional[SurveyConfig] = None) -> "SurveyState":
        """Return a state seeded with ``config.default_groups``."""
        config = config or SurveyConfig()
        state = cls(
            warmth_items=len(config.warmth_items),
            competence_items=len(config.competence_items),
        )
        for name in config.default_groups:
            state = state.add_group(name)
        return state

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def groups(self) -> Tuple[str, ...]:
        """Group names in creation order."""
        return tuple(entry.name for entry in self.entries)

    def item_count(self, dimension: Dimension | str) -> int:
        if Dimension(dimension) is Dimension.WARMTH:
            return self.warmth_items
        return self.competence_items

    def get(self, name: str) -> Optional[GroupEntry]:
        """Return the entry for *name*, or None if absent."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self.entries)

    def __iter__(self) -> Iterator[GroupEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def add_group(self, name: str) -> "SurveyState":
        """Append *name* with both rating sets unanswered.

        Raises
        ------
        DuplicateGroupError
            If *name* is blank or already present.
        """
        if not isinstance(name, str) or not name.strip():
            raise DuplicateGroupError("Group name must not be empty.")
        if name in self:
            raise DuplicateGroupError(f"Group {name!r} already exists.")
        entry = GroupEntry(
            name=name,
            warmth=_unanswered(self.warmth_items),
            competence=_unanswered(self.competence_items),
        )
        return replace(self, entries=self.entries + (entry,))

    def remove_group(self, name: str) -> "SurveyState":
        """Drop *name* and its ratings; removing an absent group is a no-op."""
        if name not in self:
            return self
        return replace(
            self, entries=tuple(e for e in self.entries if e.name != name)
        )

    def set_rating(
        self,
        group: str,
        dimension: Dimension | str,
        item_index: int,
        value: int,
    ) -> "SurveyState":
        """Record *value* for one questionnaire item of *group*.

        Raises
        ------
        UnknownGroupError
            If *group* is not in the survey.
        IndexOutOfRangeError
            If *item_index* is outside ``[0, item_count)`` for *dimension*.
        InvalidRatingValueError
            If *value* is not an integer on the Likert scale.
        ValueError
            If *dimension* is not ``warmth`` or ``competence``.
        """
        entry = self.get(group)
        if entry is None:
            raise UnknownGroupError(f"Group {group!r} not found.")
        dimension = Dimension(dimension)
        count = self.item_count(dimension)
        if (
            isinstance(item_index, bool)
            or not isinstance(item_index, int)
            or not 0 <= item_index < count
        ):
            raise IndexOutOfRangeError(
                f"Item index {item_index!r} out of range for {dimension.value} "
                f"(0..{count - 1})."
            )
        value = _validate_rating(value)

        slots = list(entry.ratings(dimension))
        slots[item_index] = value
        updated = replace(entry, **{dimension.value: tuple(slots)})
        return self._replace_entry(updated)

    def clear_ratings(self, group: str) -> "SurveyState":
        """Reset every slot of *group* to unanswered."""
        entry = self.get(group)
        if entry is None:
            raise UnknownGroupError(f"Group {group!r} not found.")
        cleared = replace(
            entry,
            warmth=_unanswered(self.warmth_items),
            competence=_unanswered(self.competence_items),
        )
        return self._replace_entry(cleared)

    def _replace_entry(self, updated: GroupEntry) -> "SurveyState":
        return replace(
            self,
            entries=tuple(
                updated if e.name == updated.name else e for e in self.entries
            ),
        )
