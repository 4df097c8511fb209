from __future__ import annotations

import math
import re
import unicodedata
from typing import Any, Iterable, List, Optional

_ws_re = re.compile(r"\s+")
_non_slug_re = re.compile(r"[^a-z0-9]+")
_number_prefix_re = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

TRUTHY = {"true", "yes", "1"}


def clean_text(s: Any) -> Optional[str]:
    if s is None:
        return None
    s = _ws_re.sub(" ", str(s)).strip()
    return s or None


def slugify(text: Optional[str]) -> str:
    """
    URL-safe slug: lowercase, diacritics stripped, every run of
    non-alphanumerics collapsed to a single hyphen.

        slugify("Rabat-Salé-Kénitra") == "rabat-sale-kenitra"
        slugify("L'Boulevard Festival") == "l-boulevard-festival"
    """
    if not text:
        return ""
    s = unicodedata.normalize("NFD", str(text).lower())
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = _non_slug_re.sub("-", s)
    return s.strip("-")


def parse_list(raw: Any) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        parts: Iterable[Any] = raw
    else:
        parts = str(raw).split(",")
    out: List[str] = []
    for p in parts:
        if p is None:
            continue
        s = str(p).strip()
        if s:
            out.append(s)
    return out


def parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    if isinstance(raw, (int, float)):
        return raw == 1
    return str(raw).strip().lower() in TRUTHY


def parse_number(raw: Any, default: float = 0) -> float:
    """
    Leading-number parse: "8/10" -> 8, "12abc" -> 12. Anything without a
    numeric prefix, and anything non-finite, yields ``default``.
    """
    if isinstance(raw, bool):
        return default
    if isinstance(raw, (int, float)):
        return raw if math.isfinite(raw) else default
    if raw is None:
        return default
    m = _number_prefix_re.match(str(raw).strip())
    if not m:
        return default
    n = float(m.group(0))
    return n if math.isfinite(n) else default
