from __future__ import annotations

from datetime import datetime, timezone


def today_iso() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()
