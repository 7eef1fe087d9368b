"""Render the results summary using Jinja2 templates."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from bias_map.reporting.context import build_summary_context
from bias_map.reporting.models import GroupResult

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Markdown output; HTML escaping would mangle "&" in behaviour labels.
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_summary(results: Sequence[GroupResult]) -> str:
    """Render Markdown summary cards for *results*."""
    context = build_summary_context(results)
    template = _env.get_template("summary.md.j2")
    text = template.render(**context.to_dict())
    logger.debug("Summary rendered for %d group(s) len=%d", len(results), len(text))
    return text
