import logging

from services.store import EventStore
from tests.factories import make_event


def _store():
    return EventStore([
        make_event("Gnaoua", "2025-06-26", index=1, city="Essaouira", region="Marrakech-Safi",
                   genres="Gnawa, World Music, Jazz", status="confirmed", is_pinned=True,
                   cultural_significance=10),
        make_event("Oasis", "2025-09-12", index=2, city="Marrakech", region="Marrakech-Safi",
                   genres="Electronic, House", cultural_significance=6),
        make_event("Atlas Electronic", "2025-03-28", index=3, city="Marrakech", region="Marrakech-Safi",
                   genres="Electronic", status="confirmed", cultural_significance=5),
        make_event("Visa For Music", "2025-11-19", index=4, city="Rabat", region="Rabat-Salé-Kénitra",
                   genres="World Music", event_type="conference", status="cancelled",
                   cultural_significance=8),
    ])


def test_by_city():
    assert [e.name for e in _store().by_city("marrakech")] == ["Oasis", "Atlas Electronic"]
    assert _store().by_city("agadir") == []


def test_by_genre_accepts_raw_or_slug_any_case():
    s = _store()
    assert [e.name for e in s.by_genre("world music")] == ["Gnaoua", "Visa For Music"]
    assert [e.name for e in s.by_genre("World-Music")] == ["Gnaoua", "Visa For Music"]
    assert [e.name for e in s.by_genre("JAZZ")] == ["Gnaoua"]


def test_by_month():
    s = _store()
    assert [e.name for e in s.by_month(2025, 6)] == ["Gnaoua"]
    assert [e.name for e in s.by_month(2025, 3)] == ["Atlas Electronic"]
    assert s.by_month(2025, 13) == []
    assert s.by_month(2024, 6) == []


def test_upcoming_reference_date():
    s = EventStore([
        make_event("June", "2025-06-26", index=1, status="confirmed"),
        make_event("May", "2025-05-01", index=2, status="confirmed"),
        make_event("Cancelled", "2025-07-01", index=3, status="cancelled"),
        make_event("Same day", "2025-06-01", index=4, status="announced"),
        make_event("Archived", "2025-08-01", index=5, status="archived"),
    ])
    assert [e.name for e in s.upcoming("2025-06-01")] == ["June", "Same day"]


def test_upcoming_defaults_to_today(monkeypatch):
    monkeypatch.setattr("services.store.today_iso", lambda: "2025-10-01")
    assert [e.name for e in _store().upcoming()] == []
    monkeypatch.setattr("services.store.today_iso", lambda: "2025-01-01")
    assert [e.name for e in _store().upcoming()] == ["Gnaoua", "Oasis", "Atlas Electronic"]


def test_filters_on_empty_store():
    s = EventStore([])
    assert s.by_city("rabat") == []
    assert s.by_genre("jazz") == []
    assert s.by_month(2025, 6) == []
    assert s.upcoming("2025-01-01") == []
    assert len(s) == 0


def test_by_slug_or_id_prefers_slug():
    s = EventStore([
        make_event("First", "2025-01-01", index=1, id="oasis"),
        make_event("Oasis", "2025-02-01", index=2, id="oasis-2025"),
    ])
    assert s.by_slug_or_id("oasis").name == "Oasis"
    assert s.by_slug_or_id("event-1") is None
    assert s.by_slug_or_id("oasis-2025").name == "Oasis"
    assert s.by_slug_or_id("nonexistent-event") is None


def test_slug_collision_first_wins_and_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="services.store"):
        s = EventStore([
            make_event("Jazz Fest!", "2025-01-01", index=1),
            make_event("Jazz Fest", "2025-02-01", index=2),
        ])
    assert s.by_slug_or_id("jazz-fest").id == "event-1"
    assert "slug collision" in caplog.text


def test_distinct_cities_sorted_by_count():
    cities = _store().distinct_cities()
    assert [(c.slug, c.count) for c in cities] == [("marrakech", 2), ("essaouira", 1), ("rabat", 1)]
    assert cities[0].region == "Marrakech-Safi"
    assert cities[0].name == "Marrakech"


def test_distinct_genres_keep_first_seen_name():
    genres = _store().distinct_genres()
    assert [(g.slug, g.count) for g in genres[:2]] == [("world-music", 2), ("electronic", 2)]
    assert genres[0].name == "World Music"
    assert {g.slug for g in genres} == {"gnawa", "world-music", "jazz", "electronic", "house"}


def test_distinct_regions():
    regions = _store().distinct_regions()
    assert [(r.slug, r.count) for r in regions] == [("marrakech-safi", 3), ("rabat-sale-kenitra", 1)]
    assert regions[1].name == "Rabat-Salé-Kénitra"


def test_featured():
    assert [e.name for e in _store().featured()] == ["Gnaoua", "Visa For Music"]


def test_by_region():
    assert len(_store().by_region("marrakech-safi")) == 3
