import unittest

import pytest

from bias_map.config import SurveyConfig
from bias_map.exceptions import (
    DuplicateGroupError,
    IndexOutOfRangeError,
    InvalidRatingValueError,
    UnknownGroupError,
)
from bias_map.questionnaire import Dimension
from bias_map.survey_state import GroupEntry, SurveyState


class TestSurveyStateCreation(unittest.TestCase):
    def test_initial_uses_default_groups(self):
        state = SurveyState.initial()
        self.assertEqual(state.groups, ("Cloud Engineering", "Compliance (Regional)"))
        for entry in state:
            self.assertEqual(entry.warmth, (None,) * 5)
            self.assertEqual(entry.competence, (None,) * 5)

    def test_initial_respects_config(self):
        config = SurveyConfig(
            warmth_items=("a", "b"),
            competence_items=("c", "d", "e"),
            default_groups=("X",),
        )
        state = SurveyState.initial(config)
        self.assertEqual(state.groups, ("X",))
        entry = state.get("X")
        self.assertEqual(len(entry.warmth), 2)
        self.assertEqual(len(entry.competence), 3)

    def test_empty_state(self):
        state = SurveyState()
        self.assertEqual(state.groups, ())
        self.assertEqual(len(state), 0)
        self.assertIsNone(state.get("anything"))


class TestAddRemoveGroup(unittest.TestCase):
    def setUp(self):
        self.state = SurveyState()

    def test_add_group_appends_in_order(self):
        state = self.state.add_group("A").add_group("B").add_group("C")
        self.assertEqual(state.groups, ("A", "B", "C"))
        self.assertIn("B", state)

    def test_add_group_returns_new_snapshot(self):
        updated = self.state.add_group("A")
        self.assertIsNot(updated, self.state)
        self.assertEqual(self.state.groups, ())
        self.assertNotEqual(updated, self.state)

    def test_add_duplicate_raises(self):
        state = self.state.add_group("A")
        with self.assertRaisesRegex(DuplicateGroupError, "already exists"):
            state.add_group("A")
        self.assertEqual(state.groups, ("A",))

    def test_add_blank_raises(self):
        for name in ("", "   ", "\t"):
            with self.assertRaises(DuplicateGroupError):
                self.state.add_group(name)

    def test_remove_group(self):
        state = self.state.add_group("A").add_group("B")
        state = state.remove_group("A")
        self.assertEqual(state.groups, ("B",))
        self.assertIsNone(state.get("A"))

    def test_remove_absent_group_is_noop(self):
        state = self.state.add_group("A")
        self.assertIs(state.remove_group("Ghost"), state)

    def test_add_then_remove_round_trip(self):
        before = SurveyState.initial().set_rating("Cloud Engineering", "warmth", 0, 6)
        after = before.add_group("Temp").remove_group("Temp")
        self.assertEqual(after, before)
        self.assertEqual(after.groups, before.groups)

    def test_re_adding_starts_unanswered(self):
        state = self.state.add_group("A").set_rating("A", "warmth", 0, 7)
        state = state.remove_group("A").add_group("A")
        self.assertEqual(state.get("A").warmth, (None,) * 5)


class TestSetRating(unittest.TestCase):
    def setUp(self):
        self.state = SurveyState().add_group("A").add_group("B")

    def test_replaces_exactly_one_slot(self):
        state = self.state.set_rating("A", Dimension.WARMTH, 2, 6)
        self.assertEqual(state.get("A").warmth, (None, None, 6, None, None))
        self.assertEqual(state.get("A").competence, (None,) * 5)
        self.assertEqual(state.get("B"), self.state.get("B"))
        # previous snapshot untouched
        self.assertEqual(self.state.get("A").warmth, (None,) * 5)

    def test_accepts_dimension_name(self):
        state = self.state.set_rating("B", "competence", 4, 1)
        self.assertEqual(state.get("B").competence, (None, None, None, None, 1))

    def test_overwrites_existing_answer(self):
        state = self.state.set_rating("A", "warmth", 0, 2).set_rating("A", "warmth", 0, 5)
        self.assertEqual(state.get("A").warmth[0], 5)

    def test_unknown_group(self):
        with self.assertRaises(UnknownGroupError):
            self.state.set_rating("Ghost", "warmth", 0, 5)

    def test_index_out_of_range(self):
        for index in (-1, 5, 99):
            with self.assertRaises(IndexOutOfRangeError):
                self.state.set_rating("A", "warmth", index, 5)

    def test_non_int_index(self):
        with self.assertRaises(IndexOutOfRangeError):
            self.state.set_rating("A", "warmth", 1.0, 5)

    def test_invalid_dimension(self):
        with self.assertRaises(ValueError):
            self.state.set_rating("A", "charm", 0, 5)

    def test_rating_bounds_are_inclusive(self):
        state = self.state.set_rating("A", "warmth", 0, 1).set_rating("A", "warmth", 1, 7)
        self.assertEqual(state.get("A").warmth[:2], (1, 7))


@pytest.mark.parametrize("value", [0, 8, -3, 4.0, 3.5, "5", None, True])
def test_invalid_rating_values_are_rejected(value):
    state = SurveyState().add_group("A")
    with pytest.raises(InvalidRatingValueError):
        state.set_rating("A", "warmth", 0, value)
    assert state.get("A").warmth == (None,) * 5


def test_failed_operation_leaves_state_unchanged():
    state = SurveyState.initial()
    snapshot = state
    with pytest.raises(UnknownGroupError):
        state.set_rating("Ghost", Dimension.WARMTH, 0, 5)
    assert state is snapshot
    assert state == SurveyState.initial()


def test_clear_ratings():
    state = SurveyState().add_group("A").set_rating("A", "warmth", 0, 3)
    state = state.set_rating("A", "competence", 4, 6).clear_ratings("A")
    assert state.get("A").answered_count == 0
    with pytest.raises(UnknownGroupError):
        state.clear_ratings("Ghost")


def test_group_entry_helpers():
    entry = GroupEntry(name="G", warmth=(1, None, 3), competence=(4, 5))
    assert entry.answered_count == 4
    assert entry.total_items == 5
    assert not entry.is_complete
    assert entry.ratings("competence") == (4, 5)
    assert GroupEntry("H", (1,), (2,)).is_complete


def test_snapshots_are_immutable():
    state = SurveyState().add_group("A")
    with pytest.raises(AttributeError):
        state.entries = ()  # type: ignore[misc]
