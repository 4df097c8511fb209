"""
Service package marker.

Intentionally empty to avoid import cycles at package import time.
Import the concrete modules directly, e.g.:

    from services.normalize import slugify, parse_list, parse_bool
    from services.store import EventStore
    from services.query import EventQuery, query_events
    from services.loader import get_store, load_store
"""
__all__: list[str] = []
