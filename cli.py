import argparse
import json
import logging

import requests

from analytics.filters import ALL
from config.settings import get_settings
from db.connection import get_connection
from db.record_store import SqliteRecordStore
from pipelines.ingest_records import ingest_text
from services.advisory import AdvisoryService
from services.dashboard import Dashboard
from services.llm_client import LLMClient
from services.reporting import print_ingest_summary, print_portfolio_summary
from sources.registry import get_source
from utils.formatting import format_currency, format_number, format_percent
from utils.logging_setup import init_logging
import sources  # noqa: F401  (registers built-in export sources)


logger = logging.getLogger(__name__)


class _DisabledLLM:
	def complete(self, *, use_case, prompt, prompt_name=None):
		raise RuntimeError("AI is disabled (set AI_ENABLED=true and AI_PROVIDER=openai)")


def _open_store(args):
	conn = get_connection(args.db)
	return SqliteRecordStore(conn)


def _open_dashboard(args):
	settings = args.settings
	dashboard = Dashboard(default_multiple=settings.default_ebitda_multiple, peer_count=settings.peer_count)
	dashboard.attach(_open_store(args))
	return dashboard


def _dump(payload):
	print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_bootstrap(args):
	_open_store(args)
	print("Schema ready")


def cmd_ingest(args):
	settings = args.settings
	if args.url:
		source, location = get_source("url", timeout_seconds=settings.request_timeout_seconds), args.url
	else:
		source, location = get_source("file"), args.input
	try:
		text = source.read(location)
	except (OSError, requests.RequestException) as e:
		logger.error("Could not read export", extra={"step": "read", "status": "error", "error": str(e)})
		print(f"Could not read export {location}: {e}")
		raise SystemExit(1)

	def _progress(done, total, percent):
		print(f"[{done}/{total}] {percent}%")

	store = _open_store(args)
	result = ingest_text(
		store,
		text,
		scan_limit=settings.header_scan_limit,
		min_fields=settings.min_row_fields,
		on_progress=_progress if args.progress else None,
	)
	print_ingest_summary(result, location)
	if result.status == "partial":
		raise SystemExit(1)


def cmd_list(args):
	dashboard = _open_dashboard(args)
	rows = dashboard.filter(args.search, args.category, args.subcategory)[: args.limit]
	_dump([
		{
			"id": r.id,
			"name": r.display_name,
			"category": r.category,
			"subcategory": r.subcategory,
			"revenue": format_currency(r.revenue),
			"ebitda": format_currency(r.ebitda),
		}
		for r in rows
	])


def cmd_summary(args):
	dashboard = _open_dashboard(args)
	print_portfolio_summary(dashboard.summary)


def cmd_company(args):
	dashboard = _open_dashboard(args)
	try:
		view = dashboard.company_view(
			args.id,
			multiple=args.multiple,
			opex_adjustment_pct=args.opex_adjustment,
			peer_limit=args.peers,
		)
	except KeyError:
		print(f"No record found for id {args.id}")
		raise SystemExit(1)
	except ValueError as e:
		print(str(e))
		raise SystemExit(2)
	ratios = view.ratios
	_dump({
		"id": view.record.id,
		"name": view.record.display_name,
		"legal_name": view.record.legal_name,
		"fiscal_year": view.record.fiscal_year,
		"income_statement": {k: format_currency(v) for k, v in view.income_statement.model_dump().items()},
		"ratios": {
			"ebitda_margin": format_percent(ratios.ebitda_margin),
			"net_margin": format_percent(ratios.net_margin),
			"roe": format_percent(ratios.roe),
			"roa": format_percent(ratios.roa),
			"liquidity_ratio": format_number(ratios.liquidity_ratio),
			"revenue_per_employee": format_currency(ratios.revenue_per_employee),
			"cost_per_employee": format_currency(ratios.cost_per_employee),
		},
		"peers": [{"id": p.id, "name": p.display_name, "revenue": format_currency(p.revenue)} for p in view.peers],
		"valuation": {
			"multiple": view.valuation.multiple,
			"opex_adjustment_pct": view.valuation.opex_adjustment_pct,
			"adjusted_ebitda": format_currency(view.valuation.adjusted_ebitda),
			"net_debt_proxy": format_currency(view.valuation.net_debt_proxy),
			"equity_value_estimate": format_currency(view.valuation.equity_value_estimate),
		},
	})


def cmd_advise(args):
	settings = args.settings
	if settings.ai_enabled and settings.ai_provider == "openai":
		llm = LLMClient(settings)
	else:
		llm = _DisabledLLM()
	dashboard = _open_dashboard(args)
	service = AdvisoryService(llm, max_records=settings.advisory_max_records)
	print(service.advise(args.question, dashboard.records))


def main():
	settings = get_settings()
	init_logging(settings.log_level)
	parser = argparse.ArgumentParser(description="Company financials CLI")
	parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
	parser.set_defaults(settings=settings)
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_boot = sub.add_parser("bootstrap", help="Create tables")
	p_boot.set_defaults(func=cmd_bootstrap)

	p_ing = sub.add_parser("ingest", help="Parse a spreadsheet export and upsert its companies")
	src = p_ing.add_mutually_exclusive_group(required=True)
	src.add_argument("--input", help="Path to a CSV export")
	src.add_argument("--url", help="URL of a CSV export")
	p_ing.add_argument("--progress", action="store_true", help="Print progress after each record")
	p_ing.set_defaults(func=cmd_ingest)

	p_ls = sub.add_parser("list", help="List companies, largest revenue first")
	p_ls.add_argument("--search", "-q", default=None, help="Match name, tax id or acronym")
	p_ls.add_argument("--category", default=ALL)
	p_ls.add_argument("--subcategory", default=ALL)
	p_ls.add_argument("--limit", type=int, default=20)
	p_ls.set_defaults(func=cmd_list)

	p_sum = sub.add_parser("summary", help="Portfolio totals and category breakdown")
	p_sum.set_defaults(func=cmd_summary)

	p_co = sub.add_parser("company", help="Ratios, peers and valuation for one company")
	p_co.add_argument("--id", required=True, help="Record id (sanitized tax id)")
	p_co.add_argument("--multiple", type=float, default=settings.default_ebitda_multiple, help="EBITDA multiple, 4-15")
	p_co.add_argument("--opex-adjustment", type=float, default=0.0, help="Personnel cost change in percent, -30..30")
	p_co.add_argument("--peers", type=int, default=settings.peer_count, help="Number of peers to show")
	p_co.set_defaults(func=cmd_company)

	p_adv = sub.add_parser("advise", help="Ask the advisory model about the portfolio")
	p_adv.add_argument("--question", required=True)
	p_adv.set_defaults(func=cmd_advise)

	args = parser.parse_args()
	args.func(args)


if __name__ == "__main__":
	main()
