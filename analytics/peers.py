from __future__ import annotations

from typing import Iterable, List

from models.company_record import CompanyRecord


def find_peers(reference: CompanyRecord, records: Iterable[CompanyRecord], limit: int = 4) -> List[CompanyRecord]:
    """Closest companies by absolute revenue distance; ties keep snapshot order."""
    ref_revenue = reference.revenue or 0.0
    candidates = [r for r in records if r.id != reference.id]
    # sorted() is stable, so equal distances keep their original order
    ranked = sorted(candidates, key=lambda r: abs((r.revenue or 0.0) - ref_revenue))
    return ranked[:max(0, limit)]
