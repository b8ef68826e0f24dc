"""aoc2023.logging_utils
=========================

Simple logging utilities, mainly for recording failed solver runs so the
offending input can be inspected later.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .constants import FAIL_LOG


def log_failure(day: int, advanced: bool, error: BaseException, path: Optional[str] = None) -> None:
    """Append a JSON line describing a failed run to ``path`` (default :data:`FAIL_LOG`)."""

    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "day": day,
        "advanced": advanced,
        "error": type(error).__name__,
        "stage": getattr(error, "stage", None),
        "message": getattr(error, "message", str(error)),
    }
    with Path(path or FAIL_LOG).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_failure"]
