from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .company_record import CompanyRecord


class CategoryStats(BaseModel):
    count: int = 0
    revenue_sum: float = 0.0

    model_config = ConfigDict(frozen=True)


class PortfolioSummary(BaseModel):
    """Portfolio-level sums over one snapshot; absent amounts count as zero."""

    record_count: int = 0
    total_revenue: float = 0.0
    total_ebitda: float = 0.0
    categories: Dict[str, CategoryStats] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class RatioSet(BaseModel):
    """Per-company ratios. None means the ratio is undefined (zero/absent divisor)."""

    ebitda_margin: float | None = None
    net_margin: float | None = None
    roe: float | None = None
    roa: float | None = None
    liquidity_ratio: float | None = None
    revenue_per_employee: float | None = None
    cost_per_employee: float | None = None

    model_config = ConfigDict(frozen=True)


class IncomeStatementView(BaseModel):
    revenue: float | None = None
    procurement_cost: float | None = None
    gross_margin: float | None = None
    personnel_cost: float | None = None
    operating_result: float | None = None

    model_config = ConfigDict(frozen=True)


class ValuationEstimate(BaseModel):
    multiple: float
    opex_adjustment_pct: float
    adjusted_ebitda: float
    net_debt_proxy: float
    equity_value_estimate: float

    model_config = ConfigDict(frozen=True)


class CompanyView(BaseModel):
    """Everything the presentation layer shows for one selected company."""

    record: CompanyRecord
    ratios: RatioSet
    income_statement: IncomeStatementView
    peers: List[CompanyRecord] = Field(default_factory=list)
    valuation: ValuationEstimate

    model_config = ConfigDict(frozen=True)
