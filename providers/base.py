from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from schemas import EVENT_STATUSES, EVENT_TYPES, Event
from services.normalize import clean_text, parse_bool, parse_list, parse_number, slugify

logger = logging.getLogger(__name__)

# Sheet column -> cell index. Order matches the "Events" tab.
EVENT_COLUMNS: Dict[str, int] = {
    "id": 0,
    "name": 1,
    "event_type": 2,
    "start_date": 3,
    "end_date": 4,
    "city": 5,
    "region": 6,
    "venue": 7,
    "genres": 8,
    "artists": 9,
    "organizer": 10,
    "official_website": 11,
    "ticket_url": 12,
    "status": 13,
    "is_verified": 14,
    "is_pinned": 15,
    "cultural_significance": 16,
    "description": 17,
    "image_url": 18,
}

DEFAULT_EVENT_TYPE = "concert"
DEFAULT_STATUS = "announced"


def _coerce_choice(value: Any, choices: Sequence[str], default: str) -> str:
    v = (clean_text(value) or "").lower()
    return v if v in choices else default


# --------------------------
# Public builder
# --------------------------

def build_event(
    *,
    index: int,
    name: Any,
    start_date: Any,
    id: Any = None,
    event_type: Any = None,
    end_date: Any = None,
    city: Any = None,
    region: Any = None,
    venue: Any = None,
    genres: Any = None,
    artists: Any = None,
    organizer: Any = None,
    official_website: Any = None,
    ticket_url: Any = None,
    status: Any = None,
    is_verified: Any = None,
    is_pinned: Any = None,
    cultural_significance: Any = None,
    description: Any = None,
    image_url: Any = None,
    **_ignored: Any,
) -> Optional[Event]:
    """
    Standardizes one raw record into an Event.

    Returns None when name or start_date is blank; callers drop those rows.
    Slugs are always derived from the display strings, so any slug carried
    by the source is ignored (it lands in ``_ignored``).
    """
    name_s = clean_text(name)
    start_s = clean_text(start_date)
    if not name_s or not start_s:
        return None

    city_s = clean_text(city) or ""
    region_s = clean_text(region) or ""

    return Event(
        id=clean_text(id) or f"event-{index}",
        name=name_s,
        slug=slugify(name_s),
        event_type=_coerce_choice(event_type, EVENT_TYPES, DEFAULT_EVENT_TYPE),
        start_date=start_s,
        end_date=clean_text(end_date),
        city=city_s,
        city_slug=slugify(city_s),
        region=region_s,
        region_slug=slugify(region_s),
        venue=clean_text(venue),
        genres=tuple(parse_list(genres)),
        artists=tuple(parse_list(artists)),
        organizer=clean_text(organizer),
        official_website=clean_text(official_website),
        ticket_url=clean_text(ticket_url),
        status=_coerce_choice(status, EVENT_STATUSES, DEFAULT_STATUS),
        is_verified=parse_bool(is_verified),
        is_pinned=parse_bool(is_pinned),
        cultural_significance=parse_number(cultural_significance, 0),
        description=clean_text(description),
        image_url=clean_text(image_url),
    )


# --------------------------
# Adapters
# --------------------------

def event_from_row(
    row: Sequence[Any],
    index: int,
    columns: Mapping[str, int] = EVENT_COLUMNS,
) -> Optional[Event]:
    """Positional sheet row -> Event. Short rows read missing cells as blank."""
    fields = {
        field: (row[col] if col < len(row) else None)
        for field, col in columns.items()
    }
    return build_event(index=index, **fields)


def event_from_seed(obj: Mapping[str, Any], index: int) -> Optional[Event]:
    """Keyed seed object -> Event."""
    fields = {k: v for k, v in obj.items() if k != "index"}
    fields.setdefault("name", None)
    fields.setdefault("start_date", None)
    return build_event(index=index, **fields)


def build_events(
    records: Iterable[Any],
    adapter: Callable[[Any, int], Optional[Event]],
) -> List[Event]:
    """Run ``adapter`` over records (1-based index) and discard dropped rows."""
    out: List[Event] = []
    dropped = 0
    for i, rec in enumerate(records, start=1):
        ev = adapter(rec, i)
        if ev is None:
            dropped += 1
            continue
        out.append(ev)
    if dropped:
        logger.debug("dropped %d record(s) missing name or start_date", dropped)
    return out
