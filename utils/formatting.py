from __future__ import annotations

import math
from typing import Optional


PLACEHOLDER = "-"


def _is_displayable(value: Optional[float]) -> bool:
    return value is not None and not isinstance(value, bool) and math.isfinite(value)


def _group_es(value: float, decimals: int) -> str:
    # 1234567.891 -> '1.234.567,89' (es-ES grouping, decimal comma)
    text = f"{abs(value):,.{decimals}f}"
    text = text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    if decimals and "," in text:
        text = text.rstrip("0").rstrip(",")
    return f"-{text}" if value < 0 and text.strip("0,.") else text


def format_number(value: Optional[float], decimals: int = 2) -> str:
    if not _is_displayable(value):
        return PLACEHOLDER
    return _group_es(value, decimals)


def format_currency(value: Optional[float]) -> str:
    """Whole euros, es-ES style: '1.500.000 €'. Absent renders as '-'."""
    if not _is_displayable(value):
        return PLACEHOLDER
    return f"{_group_es(value, 0)} €"


def format_percent(value: Optional[float]) -> str:
    """Ratio as a percentage with up to two decimals: 0.1234 -> '12,34 %'."""
    if not _is_displayable(value):
        return PLACEHOLDER
    return f"{_group_es(value * 100, 2)} %"
