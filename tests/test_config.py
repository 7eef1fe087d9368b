"""Tests for environment-driven survey configuration."""
from __future__ import annotations

import os
import unittest
from contextlib import contextmanager
from typing import Iterator

from bias_map.config import SurveyConfig, load_config
from bias_map.questionnaire import DEFAULT_GROUPS, Dimension


@contextmanager
def _temp_env(key: str, value: str | None) -> Iterator[None]:
    """Temporarily set / unset an environment variable inside the context."""
    original = os.environ.get(key)
    if value is None:
        os.environ.pop(key, None)
    else:
        os.environ[key] = value
    try:
        yield
    finally:
        if original is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original


class TestLoadConfig(unittest.TestCase):
    def test_defaults(self):
        with _temp_env("BIAS_MAP_DEFAULT_GROUPS", None), _temp_env(
            "BIAS_MAP_MAX_GROUPS", None
        ):
            config = load_config()
        self.assertEqual(config.default_groups, DEFAULT_GROUPS)
        self.assertIsNone(config.max_groups)
        self.assertEqual(config.item_count(Dimension.WARMTH), 5)
        self.assertEqual(config.item_count("competence"), 5)

    def test_groups_parsed_from_env(self):
        with _temp_env("BIAS_MAP_DEFAULT_GROUPS", " Sales, ,Legal,Sales ,HR"):
            config = load_config()
        self.assertEqual(config.default_groups, ("Sales", "Legal", "HR"))

    def test_empty_groups_env_means_no_defaults(self):
        with _temp_env("BIAS_MAP_DEFAULT_GROUPS", ""):
            self.assertEqual(load_config().default_groups, ())

    def test_max_groups_valid(self):
        with _temp_env("BIAS_MAP_MAX_GROUPS", "3"):
            self.assertEqual(load_config().max_groups, 3)

    def test_max_groups_invalid_ignored(self):
        for raw in ("abc", "0", "-2"):
            with _temp_env("BIAS_MAP_MAX_GROUPS", raw):
                with self.assertLogs("bias_map.config", level="WARNING"):
                    self.assertIsNone(load_config().max_groups)

    def test_defaults_trimmed_to_limit(self):
        with _temp_env("BIAS_MAP_DEFAULT_GROUPS", "A,B,C"), _temp_env(
            "BIAS_MAP_MAX_GROUPS", "2"
        ):
            config = load_config()
        self.assertEqual(config.default_groups, ("A", "B"))


def test_item_count_rejects_unknown_dimension():
    import pytest

    with pytest.raises(ValueError):
        SurveyConfig().item_count("charm")
