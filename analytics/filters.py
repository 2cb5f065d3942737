from __future__ import annotations

from typing import Iterable, List, Optional

from models.company_record import CompanyRecord


ALL = "Todas"


def sort_by_revenue(records: Iterable[CompanyRecord]) -> List[CompanyRecord]:
    """Largest revenue first; absent revenue sorts as zero."""
    return sorted(records, key=lambda r: r.revenue or 0.0, reverse=True)


def _matches_term(record: CompanyRecord, term: str) -> bool:
    if not term:
        return True
    haystack = (record.legal_name, record.tax_id, record.short_name)
    return any(term in (value or "").lower() for value in haystack)


def search_records(
    records: Iterable[CompanyRecord],
    term: Optional[str] = None,
    category: str = ALL,
    subcategory: str = ALL,
) -> List[CompanyRecord]:
    needle = (term or "").strip().lower()
    out: List[CompanyRecord] = []
    for r in records:
        if not _matches_term(r, needle):
            continue
        if category != ALL and r.category != category:
            continue
        if subcategory != ALL and r.subcategory != subcategory:
            continue
        out.append(r)
    return out


def _distinct(values: Iterable[Optional[str]]) -> List[str]:
    seen: List[str] = []
    for v in values:
        if v and v not in seen:
            seen.append(v)
    return seen


def list_categories(records: Iterable[CompanyRecord]) -> List[str]:
    return [ALL] + _distinct(r.category for r in records)


def list_subcategories(records: Iterable[CompanyRecord], category: str = ALL) -> List[str]:
    scoped = (r for r in records if category == ALL or r.category == category)
    return [ALL] + _distinct(r.subcategory for r in scoped)
