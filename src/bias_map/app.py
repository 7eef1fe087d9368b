"""Composition root for an embedding UI.

Importing this module has no side effects; :func:`create_store` loads
``.env``, configures logging and hands back a ready store.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from bias_map.config import load_config
from bias_map.survey_store import ThreadSafeSurveyStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Set up root logging from ``BIAS_MAP_LOG_LEVEL`` (default INFO)."""
    logging_level = os.environ.get("BIAS_MAP_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(format=LOG_FORMAT, level=logging_level)


def create_store() -> ThreadSafeSurveyStore:
    """Return a fresh store configured from the environment."""
    load_dotenv()
    configure_logging()
    config = load_config()
    store = ThreadSafeSurveyStore(config)
    logger.info(
        "Survey store ready with %d default group(s)", len(config.default_groups)
    )
    return store
