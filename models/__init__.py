from .company_record import CompanyRecord
from .analytics import (
    CategoryStats,
    CompanyView,
    IncomeStatementView,
    PortfolioSummary,
    RatioSet,
    ValuationEstimate,
)
from .ingest_result import IngestResult

__all__ = [
    "CompanyRecord",
    "CategoryStats",
    "CompanyView",
    "IncomeStatementView",
    "PortfolioSummary",
    "RatioSet",
    "ValuationEstimate",
    "IngestResult",
]
