from __future__ import annotations

import logging
from typing import List, Optional

from analytics.aggregation import summarize_portfolio
from analytics.filters import ALL, list_categories, list_subcategories, search_records, sort_by_revenue
from analytics.peers import find_peers
from analytics.ratios import compute_ratios, income_statement
from analytics.valuation import simulate_valuation
from models.analytics import CompanyView, PortfolioSummary
from models.company_record import CompanyRecord
from ports.store import RecordStorePort, Unsubscribe


logger = logging.getLogger(__name__)


class Dashboard:
    """Read side for the presentation layer.

    Holds the latest pushed snapshot and recomputes every derived value from it;
    nothing is updated incrementally.
    """

    def __init__(self, default_multiple: float = 8.0, peer_count: int = 4) -> None:
        self.default_multiple = default_multiple
        self.peer_count = peer_count
        self.status = "loading"
        self.last_error: Optional[str] = None
        self._snapshot: List[CompanyRecord] = []
        self._records: List[CompanyRecord] = []
        self._summary = PortfolioSummary()
        self._unsubscribe: Optional[Unsubscribe] = None

    def attach(self, store: RecordStorePort) -> None:
        self.detach()
        self._unsubscribe = store.subscribe(self.on_snapshot, self.on_error)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_snapshot(self, records: List[CompanyRecord]) -> None:
        self._snapshot = list(records)
        self._records = sort_by_revenue(self._snapshot)
        self._summary = summarize_portfolio(self._records)
        self.status = "ready"
        self.last_error = None

    def on_error(self, err: Exception) -> None:
        # Keep the last good snapshot; only the status changes
        logger.warning("Record subscription failed", extra={"step": "subscribe", "status": "error", "error": str(err)})
        self.status = "error"
        self.last_error = str(err)

    @property
    def records(self) -> List[CompanyRecord]:
        return list(self._records)

    @property
    def summary(self) -> PortfolioSummary:
        return self._summary

    def get(self, record_id: str) -> CompanyRecord:
        for r in self._records:
            if r.id == record_id:
                return r
        raise KeyError(record_id)

    def company_view(
        self,
        record_id: str,
        multiple: Optional[float] = None,
        opex_adjustment_pct: float = 0.0,
        peer_limit: Optional[int] = None,
    ) -> CompanyView:
        record = self.get(record_id)
        return CompanyView(
            record=record,
            ratios=compute_ratios(record),
            income_statement=income_statement(record),
            peers=find_peers(record, self._snapshot, peer_limit if peer_limit is not None else self.peer_count),
            valuation=simulate_valuation(
                record,
                multiple if multiple is not None else self.default_multiple,
                opex_adjustment_pct,
            ),
        )

    def filter(self, term: Optional[str] = None, category: str = ALL, subcategory: str = ALL) -> List[CompanyRecord]:
        return search_records(self._records, term, category, subcategory)

    def categories(self) -> List[str]:
        return list_categories(self._records)

    def subcategories(self, category: str = ALL) -> List[str]:
        return list_subcategories(self._records, category)
