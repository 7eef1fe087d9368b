"""Tests for the composition root."""
from __future__ import annotations

import logging
from unittest.mock import patch

import bias_map.app as app_module
from bias_map.survey_store import ThreadSafeSurveyStore


def test_create_store_loads_env_and_config(monkeypatch):
    monkeypatch.setenv("BIAS_MAP_DEFAULT_GROUPS", "Finance,Design")
    monkeypatch.delenv("BIAS_MAP_MAX_GROUPS", raising=False)
    with patch.object(app_module, "load_dotenv") as dotenv_mp, patch.object(
        app_module, "configure_logging"
    ) as logging_mp:
        store = app_module.create_store()

    dotenv_mp.assert_called_once()
    logging_mp.assert_called_once()
    assert isinstance(store, ThreadSafeSurveyStore)
    assert store.groups == ("Finance", "Design")


def test_configure_logging_uses_env_level(monkeypatch):
    monkeypatch.setenv("BIAS_MAP_LOG_LEVEL", "debug")
    with patch.object(logging, "basicConfig") as basic_mp:
        app_module.configure_logging()
    basic_mp.assert_called_once_with(format=app_module.LOG_FORMAT, level="DEBUG")
