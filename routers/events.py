from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from schemas import CitySummary, ErrorResponse, EventsResponse, RegionSummary
from services.geo import city_coordinates, region_center
from services.loader import get_store
from services.query import EventQuery, query_events
from services.store import EventStore
from utils.dates import today_iso

router = APIRouter(prefix="/api", tags=["events"])

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch events"
NOT_FOUND = "Event not found"


def get_today() -> str:
    """Reference date for `upcoming`; overridden in tests."""
    return today_iso()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _listing(items: List[Any]) -> Dict[str, Any]:
    return {
        "data": [i.model_dump() for i in items],
        "meta": {"total": len(items)},
    }


def _is_enabled(flag: Optional[str]) -> bool:
    return flag in ("true", "1")


# ---------- Routes ----------


@router.get(
    "/events",
    response_model=None,
    responses={200: {"model": EventsResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_events(
    *,
    slug: Optional[str] = Query(None, description="Event slug or id; returns a single event"),
    city: Optional[str] = Query(None, description="City slug, e.g. essaouira"),
    region: Optional[str] = Query(None, description="Region slug, e.g. marrakech-safi"),
    genre: Optional[str] = Query(None, description="Genre name or slug, case-insensitive"),
    year: Optional[int] = Query(None, ge=1),
    month: Optional[int] = Query(None, ge=1, le=12),
    status: Optional[str] = None,
    event_type: Optional[str] = Query(None, alias="type"),
    upcoming: Optional[str] = Query(None, description='"true" or "1" keeps upcoming events only'),
    store: EventStore = Depends(get_store),
    today: str = Depends(get_today),
):
    """
    Filtered event listing.

    - `slug` short-circuits to a single event (404 when missing).
    - Every other filter is ANDed; results are pinned-first, then by date.
    """
    try:
        if slug:
            event = store.by_slug_or_id(slug)
            if event is None:
                return _error(404, NOT_FOUND)
            return {"data": event.model_dump()}

        q = EventQuery(
            city=city,
            region=region,
            genre=genre,
            year=year,
            month=month,
            status=status,
            event_type=event_type,
            upcoming=_is_enabled(upcoming),
        )
        return _listing(query_events(store, q, today=today))
    except Exception:
        logger.exception("events query failed")
        return _error(500, FETCH_FAILED)


@router.get("/events/featured", response_model=None)
def featured_events(store: EventStore = Depends(get_store)):
    try:
        return _listing(store.featured())
    except Exception:
        logger.exception("featured events failed")
        return _error(500, FETCH_FAILED)


@router.get("/cities", response_model=None)
def list_cities(store: EventStore = Depends(get_store)):
    try:
        cities: List[CitySummary] = []
        for c in store.distinct_cities():
            coords = city_coordinates(c.slug)
            if coords:
                c = c.model_copy(update={"latitude": coords[0], "longitude": coords[1]})
            cities.append(c)
        return _listing(cities)
    except Exception:
        logger.exception("city aggregation failed")
        return _error(500, FETCH_FAILED)


@router.get("/genres", response_model=None)
def list_genres(store: EventStore = Depends(get_store)):
    try:
        return _listing(store.distinct_genres())
    except Exception:
        logger.exception("genre aggregation failed")
        return _error(500, FETCH_FAILED)


@router.get("/regions", response_model=None)
def list_regions(store: EventStore = Depends(get_store)):
    try:
        regions: List[RegionSummary] = []
        for r in store.distinct_regions():
            coords = region_center(r.slug)
            if coords:
                r = r.model_copy(update={"latitude": coords[0], "longitude": coords[1]})
            regions.append(r)
        return _listing(regions)
    except Exception:
        logger.exception("region aggregation failed")
        return _error(500, FETCH_FAILED)
