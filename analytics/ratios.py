from __future__ import annotations

import math
from typing import Optional

from models.analytics import IncomeStatementView, RatioSet
from models.company_record import CompanyRecord


def safe_ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    """Guarded division: None when either side is absent, the divisor is 0, or the result is not finite."""
    if numerator is None or denominator is None or denominator == 0:
        return None
    result = numerator / denominator
    return result if math.isfinite(result) else None


def _total_assets(record: CompanyRecord) -> Optional[float]:
    if record.current_assets is None and record.non_current_assets is None:
        return None
    return (record.current_assets or 0.0) + (record.non_current_assets or 0.0)


def compute_ratios(record: CompanyRecord) -> RatioSet:
    return RatioSet(
        ebitda_margin=safe_ratio(record.ebitda, record.revenue),
        net_margin=safe_ratio(record.net_income, record.revenue),
        roe=safe_ratio(record.net_income, record.equity),
        roa=safe_ratio(record.net_income, _total_assets(record)),
        liquidity_ratio=safe_ratio(record.current_assets, record.current_liabilities),
        revenue_per_employee=safe_ratio(record.revenue, record.employee_count),
        cost_per_employee=safe_ratio(record.personnel_cost, record.employee_count),
    )


def income_statement(record: CompanyRecord) -> IncomeStatementView:
    """Condensed P&L: revenue less procurement gives the gross margin."""
    gross_margin = None
    if record.revenue is not None:
        gross_margin = record.revenue - (record.procurement_cost or 0.0)
    return IncomeStatementView(
        revenue=record.revenue,
        procurement_cost=record.procurement_cost,
        gross_margin=gross_margin,
        personnel_cost=record.personnel_cost,
        operating_result=record.operating_result,
    )
