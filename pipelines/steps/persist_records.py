from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from pipelines.runner import RunContext
from ports.store import RecordStorePort, StoreWriteError


logger = logging.getLogger(__name__)


class PersistRecords:
    """Upsert parsed records one at a time, stopping at the first failed write.

    Records written before a failure stay committed; there is no rollback.
    """

    def __init__(self, store: RecordStorePort, on_progress: Optional[Callable[[int, int, int], None]] = None) -> None:
        self.store = store
        self.on_progress = on_progress

    def run(self, ctx: RunContext) -> RunContext:
        records = ctx.records or []
        total = len(records)
        persisted = 0
        ctx.meta["failed_record_id"] = None
        ctx.meta["persist_error"] = None
        t0 = time.time()

        for record in records:
            try:
                self.store.upsert(record.id, record)
            except StoreWriteError as e:
                ctx.meta["failed_record_id"] = record.id
                ctx.meta["persist_error"] = str(e)
                logger.error(
                    "Aborting ingest after %d/%d records",
                    persisted, total,
                    extra={"step": "persist", "status": "partial", "error": str(e), "record_id": record.id},
                )
                break
            persisted += 1
            if self.on_progress:
                try:
                    self.on_progress(persisted, total, round(persisted * 100 / total))
                except Exception:
                    logger.debug("Progress callback failed", exc_info=True)

        ctx.meta["persisted_records"] = persisted
        logger.info(
            "Persisted %d/%d records",
            persisted, total,
            extra={"step": "persist", "status": "ok" if persisted == total else "partial",
                   "duration_ms": int((time.time() - t0) * 1000)},
        )
        return ctx
