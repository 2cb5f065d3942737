from __future__ import annotations

import logging
import sqlite3
from typing import Dict, List, Tuple

from db import schema
from db.repos.companies_repo import CompaniesRepo
from models.company_record import CompanyRecord
from ports.store import ErrorCallback, SnapshotCallback, StoreWriteError, Unsubscribe


logger = logging.getLogger(__name__)


class SqliteRecordStore:
    """Upsert sink over SQLite with push-style snapshot subscriptions.

    Every delivery is the complete current record set; subscribers never diff.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self.repo = CompaniesRepo(conn)
        schema.bootstrap(conn)
        self._subscribers: Dict[int, Tuple[SnapshotCallback, ErrorCallback]] = {}
        self._next_token = 0

    def upsert(self, key: str, record: CompanyRecord) -> None:
        try:
            self.repo.upsert(key, record.to_document())
        except sqlite3.Error as e:
            raise StoreWriteError(f"Failed to write record {key}: {e}") from e
        self._publish()

    def subscribe(self, on_snapshot: SnapshotCallback, on_error: ErrorCallback) -> Unsubscribe:
        token = self._next_token
        self._next_token += 1
        self._subscribers[token] = (on_snapshot, on_error)
        self._deliver(on_snapshot, on_error)

        def _unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return _unsubscribe

    def snapshot(self) -> List[CompanyRecord]:
        return [CompanyRecord.from_document(doc) for doc in self.repo.list_documents()]

    def _publish(self) -> None:
        for on_snapshot, on_error in list(self._subscribers.values()):
            self._deliver(on_snapshot, on_error)

    def _deliver(self, on_snapshot: SnapshotCallback, on_error: ErrorCallback) -> None:
        try:
            records = self.snapshot()
        except Exception as e:
            logger.warning("Snapshot load failed", extra={"step": "subscribe", "status": "error", "error": str(e)})
            on_error(e)
            return
        try:
            on_snapshot(records)
        except Exception as e:
            # A broken subscriber must not fail the write that triggered it
            logger.exception("Snapshot subscriber failed", extra={"step": "subscribe", "status": "error", "error": str(e)})
