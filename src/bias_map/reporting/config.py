"""Configuration constants for the results summary."""
from __future__ import annotations

import os

# Maximum number of group cards rendered in the Markdown summary
MAX_CARDS: int = int(os.getenv("REPORT_MAX_CARDS", "50"))

# Version string printed in the summary footer
REPORT_VERSION: str = os.getenv("REPORT_VERSION", "0.1")
