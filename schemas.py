from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

EventType = Literal["festival", "concert", "showcase", "ritual", "conference"]
EventStatus = Literal["announced", "confirmed", "cancelled", "archived"]

EVENT_TYPES: tuple[str, ...] = ("festival", "concert", "showcase", "ritual", "conference")
EVENT_STATUSES: tuple[str, ...] = ("announced", "confirmed", "cancelled", "archived")
ACTIVE_STATUSES: frozenset[str] = frozenset({"announced", "confirmed"})


class Event(BaseModel):
    """Canonical event record. Built by providers.base.build_event only."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slug: str
    event_type: EventType = "concert"
    start_date: str = Field(..., description="ISO date, YYYY-MM-DD")
    end_date: Optional[str] = None
    city: str = ""
    city_slug: str = ""
    region: str = ""
    region_slug: str = ""
    venue: Optional[str] = None
    genres: Tuple[str, ...] = ()
    artists: Tuple[str, ...] = ()
    organizer: Optional[str] = None
    official_website: Optional[str] = None
    ticket_url: Optional[str] = None
    status: EventStatus = "announced"
    is_verified: bool = False
    is_pinned: bool = False
    cultural_significance: float = 0
    description: Optional[str] = None
    image_url: Optional[str] = None


class CitySummary(BaseModel):
    name: str
    slug: str
    region: Optional[str] = None
    count: int
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class GenreSummary(BaseModel):
    name: str
    slug: str
    count: int


class RegionSummary(BaseModel):
    name: str
    slug: str
    count: int
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Meta(BaseModel):
    total: int


class EventsResponse(BaseModel):
    data: Union[List[Event], Event]
    meta: Optional[Meta] = None


class ErrorResponse(BaseModel):
    error: str
