from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional
from urllib.parse import quote

from providers.base import build_events, event_from_row
from schemas import Event
from utils.http_client import HttpClient

KEY = "sheets"
NAME = "Google Sheets"

VALUES_URL = "https://sheets.googleapis.com/v4/spreadsheets/{sheet_id}/values/{tab}"
GVIZ_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq"

logger = logging.getLogger(__name__)

_gviz_date_re = re.compile(r"^Date\((\d{4}),(\d{1,2}),(\d{1,2})(?:,.*)?\)$")


class SheetFetchError(RuntimeError):
    """The spreadsheet could not be fetched or its payload was unreadable."""


def _cell_to_str(cell: Any) -> str:
    """gviz cell -> string, the way the sheet displays plain values."""
    if not isinstance(cell, dict):
        return ""
    v = cell.get("v")
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    s = str(v)
    m = _gviz_date_re.match(s)
    if m:
        # gviz months are 0-based
        y, mo, d = (int(g) for g in m.groups())
        return f"{y:04d}-{mo + 1:02d}-{d:02d}"
    return s


def parse_gviz(text: str) -> List[List[str]]:
    """
    Parse a gviz ``tqx=out:json`` response. The JSON is wrapped in a JS
    callback, so everything before the first ``{`` and after the last ``}``
    is stripped.
    """
    start, end = text.find("{"), text.rfind("}")
    if start < 0 or end < start:
        raise SheetFetchError("gviz payload has no JSON body")
    try:
        data = json.loads(text[start:end + 1])
        rows = data["table"]["rows"]
    except (ValueError, KeyError, TypeError) as e:
        raise SheetFetchError(f"unreadable gviz payload: {e}") from e
    return [[_cell_to_str(c) for c in (row.get("c") or [])] for row in rows]


class SheetsClient:
    """Reads one tab of a spreadsheet as rows of strings (header row first)."""

    def __init__(
        self,
        sheet_id: str,
        api_key: Optional[str] = None,
        client: Optional[HttpClient] = None,
    ) -> None:
        self.sheet_id = sheet_id
        self.api_key = api_key
        self.client = client or HttpClient()

    def fetch_rows(self, tab: str) -> List[List[str]]:
        if self.api_key:
            url = VALUES_URL.format(sheet_id=self.sheet_id, tab=quote(tab, safe=""))
            resp = self.client.get(url, params={"key": self.api_key})
        else:
            url = GVIZ_URL.format(sheet_id=self.sheet_id)
            resp = self.client.get(url, params={"tqx": "out:json", "sheet": tab})

        if not 200 <= resp.status_code < 300:
            raise SheetFetchError(f"Failed to fetch sheet {tab}: {resp.status_code}")

        if not self.api_key:
            return parse_gviz(resp.text)

        try:
            values = resp.json().get("values") or []
        except ValueError as e:
            raise SheetFetchError(f"non-JSON response for sheet {tab}") from e
        return [["" if c is None else str(c) for c in row] for row in values]

    def load_events(self, tab: str) -> List[Event]:
        rows = self.fetch_rows(tab)
        events = build_events(rows[1:], event_from_row)
        logger.info("sheet %s/%s: %d rows -> %d events", self.sheet_id, tab, max(len(rows) - 1, 0), len(events))
        return events
