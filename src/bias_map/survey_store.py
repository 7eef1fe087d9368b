import logging
import threading
from typing import Callable, List, Optional, Tuple

from bias_map import flow, gate
from bias_map.config import SurveyConfig
from bias_map.exceptions import GroupLimitError
from bias_map.flow import Stage
from bias_map.questionnaire import Dimension
from bias_map.reporting.models import GroupResult
from bias_map.reporting.projector import project_results
from bias_map.survey_state import SurveyState

Listener = Callable[[SurveyState], None]


class ThreadSafeSurveyStore:
    """Single-writer holder of the current survey snapshot and stage.

    Mutations swap in a new :class:`SurveyState` under one lock; readers get
    whichever snapshot was current and can keep it as long as they like.
    """

    def __init__(self, config: Optional[SurveyConfig] = None):
        """Create a new :class:`ThreadSafeSurveyStore`.

        Args:
            config: Questionnaire sizes, default groups and the optional
                ``max_groups`` cap.  Defaults to :class:`SurveyConfig()`.
        """
        self._config = config or SurveyConfig()
        self._state = SurveyState.initial(self._config)
        self._stage = Stage.SELECTING
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()
        # Serialises fan-out so listeners see snapshots in commit order.
        self._notify_lock = threading.RLock()
        self._last_notified = self._state
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def config(self) -> SurveyConfig:
        return self._config

    @property
    def state(self) -> SurveyState:
        """The current snapshot."""
        with self._lock:
            return self._state

    @property
    def groups(self) -> Tuple[str, ...]:
        return self.state.groups

    @property
    def stage(self) -> Stage:
        with self._lock:
            return self._stage

    def has_groups(self) -> bool:
        return gate.has_groups(self.state)

    def all_rated(self) -> bool:
        return gate.all_rated(self.state)

    def results(self) -> List[GroupResult]:
        """Per-group results for the current snapshot."""
        return project_results(self.state)

    # ------------------------------------------------------------------
    # State mutations
    # ------------------------------------------------------------------

    def modify_state(
        self, modifier: Callable[[SurveyState], SurveyState]
    ) -> SurveyState:
        """Atomically replace the snapshot with ``modifier(current)``.

        If *modifier* raises, the current snapshot is kept and the error
        propagates.  Listeners run after the lock is released, and only when
        the snapshot actually changed.
        """
        with self._lock:
            previous = self._state
            updated = modifier(previous)
            self._state = updated
        if updated is not previous:
            self._notify()
        return updated

    def add_group(self, name: str) -> SurveyState:
        """Add *name* to the survey.

        Raises DuplicateGroupError for blank or existing names and
        GroupLimitError when ``max_groups`` is reached.
        """

        def _apply(state: SurveyState) -> SurveyState:
            # name checks come first so a duplicate at the cap is still a duplicate
            updated = state.add_group(name)
            max_groups = self._config.max_groups
            if max_groups is not None and len(updated) > max_groups:
                raise GroupLimitError(
                    f"Maximum of {max_groups} groups reached. "
                    "Remove a group before adding another."
                )
            return updated

        state = self.modify_state(_apply)
        self._logger.info("group_added", extra={"group": name})
        return state

    def remove_group(self, name: str) -> SurveyState:
        """Remove *name* and its ratings (idempotent)."""
        existed = False

        def _apply(state: SurveyState) -> SurveyState:
            nonlocal existed
            existed = name in state
            return state.remove_group(name)

        state = self.modify_state(_apply)
        if existed:
            self._logger.info("group_removed", extra={"group": name})
        return state

    def set_rating(
        self,
        group: str,
        dimension: Dimension | str,
        item_index: int,
        value: int,
    ) -> SurveyState:
        """Record one rating; see :meth:`SurveyState.set_rating` for errors."""
        state = self.modify_state(
            lambda s: s.set_rating(group, dimension, item_index, value)
        )
        self._logger.debug(
            "rating_recorded",
            extra={
                "group": group,
                "dimension": Dimension(dimension).value,
                "item_index": item_index,
                "value": value,
            },
        )
        return state

    def clear_ratings(self, group: str) -> SurveyState:
        """Reset every rating of *group* to unanswered."""
        state = self.modify_state(lambda s: s.clear_ratings(group))
        self._logger.info("ratings_cleared", extra={"group": group})
        return state

    # ------------------------------------------------------------------
    # Stage navigation
    # ------------------------------------------------------------------

    def _move(self, transition: Callable[[Stage, SurveyState], Stage]) -> Stage:
        with self._lock:
            previous = self._stage
            self._stage = transition(previous, self._state)
            current = self._stage
        if current is not previous:
            self._logger.info(
                "stage_changed",
                extra={"from_stage": previous.label, "to_stage": current.label},
            )
        return current

    def advance(self) -> Stage:
        """Move forward if the completion gate allows it."""
        return self._move(flow.advance)

    def back(self) -> Stage:
        return self._move(lambda stage, _state: flow.back(stage))

    def restart(self) -> Stage:
        """Go from the results back to group selection, keeping all ratings."""
        return self._move(lambda stage, _state: flow.restart(stage))

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with each new snapshot. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        """Deliver the *current* snapshot to every listener, in commit order.

        Reading the snapshot under the notify lock means a slow listener can
        delay a later notification but never let an older one land last.
        """
        with self._notify_lock:
            with self._lock:
                state = self._state
                listeners = list(self._listeners)
            if state is self._last_notified:
                return
            self._last_notified = state
            for listener in listeners:
                if self._last_notified is not state:
                    # a listener changed the store; the nested call already
                    # delivered the newer snapshot to everyone
                    break
                try:
                    listener(state)
                except Exception as exc:  # noqa: BLE001 – keep notifying the rest
                    self._logger.error("State listener %r failed: %s", listener, exc)
