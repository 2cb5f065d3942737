from __future__ import annotations

from typing import Callable, Optional

from config.header_vocabulary import HeaderVocabulary
from models.ingest_result import IngestResult
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.parse_records import ParseRecords
from pipelines.steps.persist_records import PersistRecords
from ports.store import RecordStorePort


def ingest_text(
    store: RecordStorePort,
    text: str,
    *,
    vocabulary: Optional[HeaderVocabulary] = None,
    scan_limit: int = 20,
    min_fields: int = 5,
    on_progress: Optional[Callable[[int, int, int], None]] = None,
) -> IngestResult:
    """Parse an export and upsert every record sequentially into `store`."""
    ctx = RunContext(raw_text=text)
    pipeline = Pipeline([
        ParseRecords(vocabulary, scan_limit=scan_limit, min_fields=min_fields),
        PersistRecords(store, on_progress=on_progress),
    ])
    ctx = pipeline.run(ctx)

    parsed = int(ctx.meta.get("parsed_records") or 0)
    persisted = int(ctx.meta.get("persisted_records") or 0)
    if parsed == 0:
        status = "empty"
    elif ctx.meta.get("failed_record_id"):
        status = "partial"
    else:
        status = "complete"
    return IngestResult(
        status=status,
        parsed=parsed,
        persisted=persisted,
        failed_record_id=ctx.meta.get("failed_record_id"),
        error=ctx.meta.get("persist_error"),
    )
