from __future__ import annotations

import logging
import time as _t

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from middleware import ApiHeadersMiddleware
from routers import events as events_router

app = FastAPI(title="festivals-morocco-api", version="1.0.0")

# CORS: read-only public API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_middleware(
    ApiHeadersMiddleware,
    cache_control=f"s-maxage={int(settings.cache_ttl_seconds)}, stale-while-revalidate",
)

_log = logging.getLogger("uvicorn.error")

_HTTP_ERRORS = {
    404: "Not found",
    405: "Method not allowed",
}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = _t.perf_counter()  # monotonic for durations
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        dur_ms = int((_t.perf_counter() - start) * 1000)
        status = getattr(response, "status_code", "-")
        _log.info(
            "method=%s path=%s status=%s dur_ms=%s",
            request.method,
            request.url.path,
            status,
            dur_ms,
        )


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    message = _HTTP_ERRORS.get(exc.status_code) or str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    _log.info("rejected query path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid query parameters"})


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    _log.error("unhandled error path=%s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to fetch events"})


# Routers
app.include_router(events_router.router)


@app.get("/health")
def health():
    return {"status": "ok"}
