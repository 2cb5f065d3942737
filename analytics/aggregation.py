from __future__ import annotations

from typing import Dict, Iterable, Optional

from models.analytics import CategoryStats, PortfolioSummary
from models.company_record import CompanyRecord


DEFAULT_CATEGORY = "GENERAL"


def _as_amount(value: Optional[float]) -> float:
    # Sums are the one place where an absent amount counts as zero
    return value if value is not None else 0.0


def summarize_portfolio(records: Iterable[CompanyRecord]) -> PortfolioSummary:
    """Recompute portfolio totals and category groupings from a full snapshot."""
    count = 0
    total_revenue = 0.0
    total_ebitda = 0.0
    buckets: Dict[str, Dict[str, float]] = {}
    for record in records:
        count += 1
        revenue = _as_amount(record.revenue)
        total_revenue += revenue
        total_ebitda += _as_amount(record.ebitda)
        bucket = buckets.setdefault(record.category or DEFAULT_CATEGORY, {"count": 0, "revenue_sum": 0.0})
        bucket["count"] += 1
        bucket["revenue_sum"] += revenue

    return PortfolioSummary(
        record_count=count,
        total_revenue=total_revenue,
        total_ebitda=total_ebitda,
        categories={
            name: CategoryStats(count=int(b["count"]), revenue_sum=b["revenue_sum"])
            for name, b in buckets.items()
        },
    )
