"""Runtime configuration defaults for logging."""

from __future__ import annotations

import os

_DEBUG_LOG_ENV = "CHEFKISS_DEBUG_LOG"
_LOG_LEVEL_ENV = "CHEFKISS_LOG_LEVEL"

DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "/tmp/chefkiss-debug.log")
LOG_LEVEL = os.environ.get(_LOG_LEVEL_ENV, "INFO").upper()

# Rows shown in a list pane before it has been laid out.
DEFAULT_VISIBLE_ROWS = 8
