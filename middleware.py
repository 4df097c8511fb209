from __future__ import annotations

from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

API_PREFIX = "/api"
CACHE_CONTROL = "s-maxage=300, stale-while-revalidate"


class ApiHeadersMiddleware(BaseHTTPMiddleware):
    """Open CORS + shared-cache headers on every /api response except 5xx."""

    def __init__(self, app, cache_control: str = CACHE_CONTROL) -> None:
        super().__init__(app)
        self.cache_control = cache_control

    async def dispatch(self, request: Request, call_next: Callable):
        response = await call_next(request)
        if request.url.path.startswith(API_PREFIX):
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
            response.headers["Access-Control-Allow-Methods"] = "GET"
            if response.status_code < 500:
                response.headers["Cache-Control"] = self.cache_control
        return response
