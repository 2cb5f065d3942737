from __future__ import annotations

import logging
from typing import List, Optional

from config.header_vocabulary import DEFAULT_VOCABULARY, HeaderVocabulary
from models.company_record import CompanyRecord
from parsing.dialect import detect_dialect, split_lines
from parsing.field_classifier import FieldClassifier
from parsing.row_splitter import split_row
from services.mapping import RecordBuilder


logger = logging.getLogger(__name__)


def parse_financial_csv(
    text: str,
    vocabulary: Optional[HeaderVocabulary] = None,
    *,
    scan_limit: int = 20,
    min_fields: int = 5,
) -> List[CompanyRecord]:
    """Parse a spreadsheet export into canonical records, in file order.

    Unparseable input (no header marker) yields an empty list. Short rows and
    rows without a usable tax identifier are skipped; nothing here raises on bad content.
    """
    vocab = vocabulary or DEFAULT_VOCABULARY
    lines = split_lines(text)
    dialect = detect_dialect(lines, vocab, scan_limit=scan_limit)
    if dialect is None:
        logger.warning("No header row found", extra={"step": "parse", "status": "empty"})
        return []

    headers = split_row(lines[dialect.header_index], dialect.delimiter, dialect.quote_char)
    kinds = FieldClassifier(vocab).classify_headers(headers)
    builder = RecordBuilder(headers, kinds, vocab)

    records: List[CompanyRecord] = []
    rows_total = 0
    rows_short = 0
    rows_without_id = 0
    for line in lines[dialect.header_index + 1:]:
        rows_total += 1
        values = split_row(line, dialect.delimiter, dialect.quote_char)
        if len(values) < min_fields:
            rows_short += 1
            logger.debug("Skipping short row (%d fields)", len(values), extra={"step": "parse", "status": "skipped"})
            continue
        record = builder.build(values)
        if record is None:
            rows_without_id += 1
            continue
        records.append(record)

    logger.info(
        "Parsed %d records (rows=%d short=%d without_id=%d delimiter=%r)",
        len(records), rows_total, rows_short, rows_without_id, dialect.delimiter,
        extra={"step": "parse", "status": "ok"},
    )
    return records
