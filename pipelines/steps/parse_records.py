from __future__ import annotations

from typing import Optional

from config.header_vocabulary import HeaderVocabulary
from parsing.csv_reader import parse_financial_csv
from pipelines.runner import RunContext


class ParseRecords:
    def __init__(self, vocabulary: Optional[HeaderVocabulary] = None, scan_limit: int = 20, min_fields: int = 5) -> None:
        self.vocabulary = vocabulary
        self.scan_limit = scan_limit
        self.min_fields = min_fields

    def run(self, ctx: RunContext) -> RunContext:
        ctx.records = parse_financial_csv(
            ctx.raw_text or "",
            self.vocabulary,
            scan_limit=self.scan_limit,
            min_fields=self.min_fields,
        )
        ctx.meta["parsed_records"] = len(ctx.records)
        return ctx
