from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from schemas import ACTIVE_STATUSES, CitySummary, Event, GenreSummary, RegionSummary
from services.normalize import slugify
from utils.dates import today_iso

logger = logging.getLogger(__name__)

FEATURED_MIN_SIGNIFICANCE = 8


class EventStore:
    """
    Immutable snapshot of normalized events for one fetch cycle.

    Every query returns a new list in store order; nothing here mutates
    the snapshot. A refresh builds a new store.
    """

    def __init__(self, events: Iterable[Event]) -> None:
        self._events: Tuple[Event, ...] = tuple(events)
        self._warn_slug_collisions()

    def _warn_slug_collisions(self) -> None:
        seen: Dict[str, str] = {}
        for e in self._events:
            first = seen.setdefault(e.slug, e.id)
            if first != e.id:
                logger.warning(
                    "slug collision %r: %s shadowed by %s", e.slug, e.id, first
                )

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    # ---------- Filters ----------

    def by_city(self, city_slug: str) -> List[Event]:
        return [e for e in self._events if e.city_slug == city_slug]

    def by_region(self, region_slug: str) -> List[Event]:
        return [e for e in self._events if e.region_slug == region_slug]

    def by_genre(self, genre: str) -> List[Event]:
        return [e for e in self._events if matches_genre(e, genre)]

    def by_month(self, year: int, month: int) -> List[Event]:
        if not 1 <= month <= 12:
            return []
        prefix = month_prefix(year, month)
        return [e for e in self._events if e.start_date.startswith(prefix)]

    def upcoming(self, today: Optional[str] = None) -> List[Event]:
        ref = today or today_iso()
        return [e for e in self._events if is_upcoming(e, ref)]

    def featured(self) -> List[Event]:
        picked = [
            e for e in self._events
            if e.is_pinned or e.cultural_significance >= FEATURED_MIN_SIGNIFICANCE
        ]
        return sorted(picked, key=lambda e: e.cultural_significance, reverse=True)

    def by_slug_or_id(self, key: str) -> Optional[Event]:
        for e in self._events:
            if e.slug == key:
                return e
        for e in self._events:
            if e.id == key:
                return e
        return None

    # ---------- Aggregates ----------

    def distinct_cities(self) -> List[CitySummary]:
        counts: Dict[str, CitySummary] = {}
        for e in self._events:
            c = counts.get(e.city_slug)
            if c is None:
                counts[e.city_slug] = CitySummary(
                    name=e.city, slug=e.city_slug, region=e.region or None, count=1
                )
            else:
                c.count += 1
        return _by_count(counts.values())

    def distinct_genres(self) -> List[GenreSummary]:
        counts: Dict[str, GenreSummary] = {}
        for e in self._events:
            for g in e.genres:
                slug = slugify(g)
                c = counts.get(slug)
                if c is None:
                    counts[slug] = GenreSummary(name=g, slug=slug, count=1)
                else:
                    c.count += 1
        return _by_count(counts.values())

    def distinct_regions(self) -> List[RegionSummary]:
        counts: Dict[str, RegionSummary] = {}
        for e in self._events:
            c = counts.get(e.region_slug)
            if c is None:
                counts[e.region_slug] = RegionSummary(
                    name=e.region, slug=e.region_slug, count=1
                )
            else:
                c.count += 1
        return _by_count(counts.values())


# Predicates shared with services.query

def month_prefix(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def matches_genre(e: Event, genre: str) -> bool:
    g = genre.strip().lower()
    return any(eg.lower() == g or slugify(eg) == g for eg in e.genres)


def is_upcoming(e: Event, today: str) -> bool:
    return e.start_date >= today and e.status in ACTIVE_STATUSES


def _by_count(items):
    # sorted() is stable: ties keep first-seen order
    return sorted(items, key=lambda x: x.count, reverse=True)
