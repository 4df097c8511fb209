from fastapi.testclient import TestClient

from main import app
from routers.events import get_today
from services.loader import get_store
from services.store import EventStore
from tests.factories import make_event


def test_city_filter_end_to_end(client):
    r = client.get("/api/events", params={"city": "essaouira"})
    assert r.status_code == 200
    body = r.json()
    assert body["meta"] == {"total": 1}
    assert [e["name"] for e in body["data"]] == ["Festival Gnaoua"]


def test_listing_is_pinned_first(client):
    body = client.get("/api/events").json()
    assert [e["name"] for e in body["data"]] == ["Festival Gnaoua", "Mawazine"]
    assert body["meta"]["total"] == 2


def test_event_shape_uses_nulls(client):
    event = client.get("/api/events", params={"slug": "mawazine"}).json()["data"]
    assert event["slug"] == "mawazine"
    assert event["region_slug"] == "rabat-sale-kenitra"
    assert event["venue"] is None
    assert event["end_date"] is None
    assert event["genres"] == ["Pop", "World Music"]


def test_slug_lookup_falls_back_to_id(client):
    r = client.get("/api/events", params={"slug": "event-1"})
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Festival Gnaoua"
    assert "meta" not in r.json()


def test_unknown_slug_is_404(client):
    r = client.get("/api/events", params={"slug": "nonexistent-event"})
    assert r.status_code == 404
    assert r.json() == {"error": "Event not found"}


def test_genre_and_month_filters(client):
    body = client.get("/api/events", params={"genre": "world-music", "year": 2025, "month": 6}).json()
    assert body["meta"]["total"] == 2
    body = client.get("/api/events", params={"genre": "POP"}).json()
    assert [e["name"] for e in body["data"]] == ["Mawazine"]


def test_status_and_type_filters(client):
    assert client.get("/api/events", params={"status": "confirmed"}).json()["meta"]["total"] == 1
    assert client.get("/api/events", params={"type": "festival"}).json()["meta"]["total"] == 0
    assert client.get("/api/events", params={"type": "concert"}).json()["meta"]["total"] == 2


def test_upcoming_flag_uses_reference_date(client):
    # reference date is pinned to 2025-06-01 by the fixture
    for flag in ("true", "1"):
        assert client.get("/api/events", params={"upcoming": flag}).json()["meta"]["total"] == 2

    app.dependency_overrides[get_today] = lambda: "2025-06-21"
    body = client.get("/api/events", params={"upcoming": "true"}).json()
    assert [e["name"] for e in body["data"]] == ["Festival Gnaoua"]


def test_upcoming_flag_other_values_ignored(client):
    app.dependency_overrides[get_today] = lambda: "2026-01-01"
    assert client.get("/api/events", params={"upcoming": "true"}).json()["meta"]["total"] == 0
    assert client.get("/api/events", params={"upcoming": "yes"}).json()["meta"]["total"] == 2


def test_invalid_month_is_400(client):
    r = client.get("/api/events", params={"year": 2025, "month": 13})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid query parameters"}


def test_non_get_is_405(client):
    r = client.post("/api/events")
    assert r.status_code == 405
    assert r.json() == {"error": "Method not allowed"}


def test_api_headers(client):
    r = client.get("/api/events")
    assert r.headers["access-control-allow-origin"] == "*"
    assert r.headers["access-control-allow-methods"] == "GET"
    assert r.headers["cache-control"] == "s-maxage=300, stale-while-revalidate"


class ExplodingStore:
    def __iter__(self):
        raise RuntimeError("secret internal detail")

    def by_slug_or_id(self, key):
        raise RuntimeError("secret internal detail")


def test_unexpected_failure_is_generic_500():
    app.dependency_overrides[get_store] = lambda: ExplodingStore()
    try:
        r = TestClient(app).get("/api/events")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch events"}
    assert "secret" not in r.text
    assert "cache-control" not in r.headers


def test_aggregate_endpoints(client):
    cities = client.get("/api/cities").json()
    assert [c["slug"] for c in cities["data"]] == ["essaouira", "rabat"]
    assert cities["data"][0]["latitude"] == 31.5085
    genres = client.get("/api/genres").json()
    assert genres["data"][0] == {"name": "World Music", "slug": "world-music", "count": 2}
    regions = client.get("/api/regions").json()
    assert regions["meta"]["total"] == 2
    assert regions["data"][0]["slug"] == "marrakech-safi"
    assert (regions["data"][0]["latitude"], regions["data"][0]["longitude"]) == (31.8, -8.5)


def test_region_filter_end_to_end(client):
    body = client.get("/api/events", params={"region": "rabat-sale-kenitra"}).json()
    assert [e["name"] for e in body["data"]] == ["Mawazine"]
    assert client.get("/api/events", params={"region": "souss-massa"}).json()["meta"]["total"] == 0


def test_non_finite_significance_is_served():
    store = EventStore([
        make_event("A", "2025-06-01", index=1, cultural_significance="Infinity"),
        make_event("B", "2025-06-02", index=2, cultural_significance="1e999"),
    ])
    app.dependency_overrides[get_store] = lambda: store
    try:
        r = TestClient(app).get("/api/events")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 200
    assert [e["cultural_significance"] for e in r.json()["data"]] == [0, 0]


def test_featured_endpoint(client):
    body = client.get("/api/events/featured").json()
    assert [e["name"] for e in body["data"]] == ["Festival Gnaoua"]


def test_seed_backed_default_store():
    r = TestClient(app).get("/api/events", params={"city": "essaouira"})
    assert r.status_code == 200
    assert r.json()["data"][0]["id"] == "gnaoua-2025"


def test_health():
    assert TestClient(app).get("/health").json() == {"status": "ok"}
