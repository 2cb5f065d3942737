from .aggregation import summarize_portfolio
from .filters import list_categories, list_subcategories, search_records, sort_by_revenue
from .peers import find_peers
from .ratios import compute_ratios, income_statement, safe_ratio
from .valuation import simulate_valuation

__all__ = [
    "summarize_portfolio",
    "list_categories",
    "list_subcategories",
    "search_records",
    "sort_by_revenue",
    "find_peers",
    "compute_ratios",
    "income_statement",
    "safe_ratio",
    "simulate_valuation",
]
