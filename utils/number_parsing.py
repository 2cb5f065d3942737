from __future__ import annotations

import math
import re
from typing import Any, Optional


_STRIP_CHARS = re.compile(r"[€$£%\s\u00a0\u202f]")
_STRICT_FLOAT = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
# '1.500.000' / '2,000,000': only complete three-digit groups count as grouping
_GROUPED_DOTS = re.compile(r"^[+-]?\d{1,3}(?:\.\d{3})+$")
_GROUPED_COMMAS = re.compile(r"^[+-]?\d{1,3}(?:,\d{3})+$")


def _resolve_separators(s: str) -> str:
    has_comma = "," in s
    has_dot = "." in s
    if has_comma and has_dot:
        # Last separator wins as the decimal mark
        if s.rfind(",") > s.rfind("."):
            return s.replace(".", "").replace(",", ".")
        return s.replace(",", "")
    if has_comma:
        if s.count(",") > 1:
            return s.replace(",", "") if _GROUPED_COMMAS.match(s) else s
        # '1,200' is ambiguous; resolved as a decimal comma
        return s.replace(",", ".")
    if s.count(".") > 1 and _GROUPED_DOTS.match(s):
        return s.replace(".", "")
    # Anything else is left for the strict parse to accept or reject
    return s


def parse_locale_number(value: Any) -> Optional[float]:
    """Parse locale-formatted amounts like '1.234,56 €', '1,234.56' or '12%'.

    Returns None ("absent") for empty or unparsable inputs; never raises.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    s = _STRIP_CHARS.sub("", str(value))
    if not s:
        return None
    s = _resolve_separators(s)
    if not _STRICT_FLOAT.match(s):
        return None
    parsed = float(s)
    return parsed if math.isfinite(parsed) else None
