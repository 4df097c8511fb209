from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional
import logging
import os

from requests import Response, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "FestivalsMorocco/1.0 (+https://festivalsinmorocco.com)"


def _build_retry(total: int = 3, backoff_factor: float = 0.5) -> Retry:
    """
    Exponential backoff via urllib3 Retry.
    Retries transient upstream errors + 429 on idempotent reads.
    """
    return Retry(
        total=total,
        read=total,
        connect=total,
        status=total,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"HEAD", "GET"}),
        raise_on_status=False,
        respect_retry_after_header=True,
    )


class HttpClient:
    """
    requests.Session with retries and a per-request timeout.
    Non-2xx responses are left to the caller (check ``status_code``
    or call ``raise_for_status``).
    """

    def __init__(
        self,
        timeout: float = 8.0,
        max_retries: int = 3,
        user_agent: Optional[str] = None,
    ) -> None:
        self._timeout = timeout
        self._session = Session()

        adapter = HTTPAdapter(max_retries=_build_retry(total=max_retries))
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

        ua = user_agent or os.getenv("HTTP_USER_AGENT", DEFAULT_USER_AGENT)
        self._default_headers: dict[str, str] = {
            "User-Agent": ua,
            "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
        }

    def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Response:
        merged: MutableMapping[str, str] = dict(self._default_headers)
        if headers:
            merged.update(headers)
        t = timeout or self._timeout
        logger.debug("GET %s", url)
        return self._session.get(url, params=params, headers=merged, timeout=t)
