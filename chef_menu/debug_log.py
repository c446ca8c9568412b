"""Append-only debug log shared by the app screens."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from chef_menu.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH


def debug_log_path() -> Path:
    """Resolve the log file, honoring CHEF_MENU_DEBUG_LOG when set."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(override or DEBUG_LOG_PATH)


def log_debug(message: str) -> None:
    """Write one timestamped line to the debug log."""
    path = debug_log_path()
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
