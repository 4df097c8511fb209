"""
One fetch cycle: pick the configured source, normalize, build a store.

The sheet path falls back to the embedded seed data on any failure so the
API keeps answering with the same response shape.
"""
from __future__ import annotations

import logging
from typing import Optional

from config import Settings, settings as default_settings
from providers import seed
from providers.sheets import SheetsClient
from services.store import EventStore
from utils.cache import SnapshotCache
from utils.http_client import HttpClient

logger = logging.getLogger(__name__)


def _sheets_client(s: Settings) -> SheetsClient:
    http = HttpClient(timeout=s.http_timeout_seconds, max_retries=s.http_max_retries)
    return SheetsClient(s.google_sheet_id, api_key=s.google_api_key, client=http)


def load_seed_store() -> EventStore:
    return EventStore(seed.load_events())


def load_store(
    s: Optional[Settings] = None,
    *,
    sheets: Optional[SheetsClient] = None,
) -> EventStore:
    s = s or default_settings
    if not s.use_google_sheets:
        return load_seed_store()

    client = sheets or _sheets_client(s)
    try:
        events = client.load_events(s.events_tab)
    except Exception:
        logger.exception(
            "Failed to fetch from Sheets (%s/%s), falling back to seed data",
            s.google_sheet_id,
            s.events_tab,
        )
        return load_seed_store()
    return EventStore(events)


_cache: SnapshotCache[EventStore] = SnapshotCache(ttl=default_settings.cache_ttl_seconds)


def get_cache() -> SnapshotCache[EventStore]:
    return _cache


def get_store() -> EventStore:
    """Cached entry point used by the HTTP layer."""
    return _cache.get_or_refresh(load_store)
