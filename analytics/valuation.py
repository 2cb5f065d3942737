from __future__ import annotations

from models.analytics import ValuationEstimate
from models.company_record import CompanyRecord


MULTIPLE_RANGE = (4.0, 15.0)
OPEX_ADJUSTMENT_RANGE = (-30.0, 30.0)


def simulate_valuation(record: CompanyRecord, multiple: float, opex_adjustment_pct: float = 0.0) -> ValuationEstimate:
    """EV/EBITDA-style equity estimate under a hypothetical personnel-cost change.

    Absent inputs count as zero; the estimate is floored at zero.
    """
    low, high = MULTIPLE_RANGE
    if not low <= multiple <= high:
        raise ValueError(f"EBITDA multiple must be within [{low:g}, {high:g}], got {multiple}")
    low, high = OPEX_ADJUSTMENT_RANGE
    if not low <= opex_adjustment_pct <= high:
        raise ValueError(f"OPEX adjustment must be within [{low:g}, {high:g}]%, got {opex_adjustment_pct}")

    ebitda = record.ebitda or 0.0
    personnel_cost = record.personnel_cost or 0.0
    adjusted_ebitda = ebitda - personnel_cost * (opex_adjustment_pct / 100.0)
    net_debt_proxy = (record.current_liabilities or 0.0) - (record.current_assets or 0.0)
    estimate = max(0.0, adjusted_ebitda * multiple - net_debt_proxy)
    return ValuationEstimate(
        multiple=multiple,
        opex_adjustment_pct=opex_adjustment_pct,
        adjusted_ebitda=adjusted_ebitda,
        net_debt_proxy=net_debt_proxy,
        equity_value_estimate=estimate,
    )
