from __future__ import annotations

from typing import Optional

from models.analytics import PortfolioSummary
from models.ingest_result import IngestResult
from utils.formatting import format_currency


def print_ingest_summary(result: IngestResult, source: Optional[str] = None) -> None:
    """Print summary of one ingestion run."""
    print("\n" + "=" * 60)
    print("COMPANY FINANCIALS - INGEST SUMMARY")
    print("=" * 60)
    if source:
        print(f"Source: {source}")
    print(f"Status: {result.status}")
    print(f"Parsed Records: {result.parsed}")
    print(f"Persisted Records: {result.persisted}")
    if result.status == "empty":
        print("No header row found or no usable rows; check the export format.")
    if result.status == "partial":
        print(f"Abandoned Records: {result.abandoned}")
        print(f"Failed At: {result.failed_record_id}")
        print(f"Error: {result.error}")
    print("=" * 60)


def print_portfolio_summary(summary: PortfolioSummary) -> None:
    print("\n" + "=" * 60)
    print("PORTFOLIO")
    print("=" * 60)
    print(f"Companies: {summary.record_count}")
    print(f"Total Revenue: {format_currency(summary.total_revenue)}")
    print(f"Total EBITDA: {format_currency(summary.total_ebitda)}")
    if summary.categories:
        print("By Category:")
        for name, stats in summary.categories.items():
            print(f"  {name}: companies={stats.count}, revenue={format_currency(stats.revenue_sum)}")
    print("=" * 60)
