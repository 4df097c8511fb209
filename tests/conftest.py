"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from main import app
from routers.events import get_today
from services.loader import get_cache, get_store
from services.store import EventStore
from tests.factories import make_event


@pytest.fixture
def essaouira_rabat_store() -> EventStore:
    return EventStore([
        make_event(
            "Festival Gnaoua", "2025-06-26", index=1,
            city="Essaouira", region="Marrakech-Safi",
            genres="Gnawa, World Music", status="confirmed", is_pinned="yes",
        ),
        make_event(
            "Mawazine", "2025-06-20", index=2,
            city="Rabat", region="Rabat-Salé-Kénitra",
            genres="Pop, World Music", status="announced",
        ),
    ])


@pytest.fixture
def client(essaouira_rabat_store: EventStore):
    app.dependency_overrides[get_store] = lambda: essaouira_rabat_store
    app.dependency_overrides[get_today] = lambda: "2025-06-01"
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clear_cache():
    get_cache().invalidate()
    yield
    get_cache().invalidate()
