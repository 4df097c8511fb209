from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from pydantic import BaseModel

from schemas import Event
from services.store import EventStore, is_upcoming, matches_genre, month_prefix
from utils.dates import today_iso

Predicate = Callable[[Event], bool]


class EventQuery(BaseModel):
    """Optional filters; every one that is set must match (AND)."""

    city: Optional[str] = None
    region: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    status: Optional[str] = None
    event_type: Optional[str] = None
    upcoming: bool = False


def build_predicates(q: EventQuery, *, today: Optional[str] = None) -> List[Predicate]:
    preds: List[Predicate] = []
    if q.city:
        city = q.city
        preds.append(lambda e: e.city_slug == city)
    if q.genre:
        genre = q.genre
        preds.append(lambda e: matches_genre(e, genre))
    if q.year is not None and q.month is not None:
        if 1 <= q.month <= 12:
            prefix = month_prefix(q.year, q.month)
            preds.append(lambda e: e.start_date.startswith(prefix))
        else:
            preds.append(lambda e: False)
    if q.status:
        status = q.status
        preds.append(lambda e: e.status == status)
    if q.event_type:
        event_type = q.event_type
        preds.append(lambda e: e.event_type == event_type)
    if q.upcoming:
        ref = today or today_iso()
        preds.append(lambda e: is_upcoming(e, ref))
    return preds


def sort_events(events: Iterable[Event]) -> List[Event]:
    """Pinned first, then ascending start_date. Stable for equal keys."""
    return sorted(events, key=lambda e: (not e.is_pinned, e.start_date))


def query_events(
    store: EventStore,
    q: EventQuery,
    *,
    today: Optional[str] = None,
) -> List[Event]:
    preds = build_predicates(q, today=today)
    candidates = store.by_region(q.region) if q.region else store
    matched = [e for e in candidates if all(p(e) for p in preds)]
    return sort_events(matched)
