from __future__ import annotations

from typing import Callable, List, Protocol

from models.company_record import CompanyRecord


SnapshotCallback = Callable[[List[CompanyRecord]], None]
ErrorCallback = Callable[[Exception], None]
Unsubscribe = Callable[[], None]


class StoreWriteError(RuntimeError):
    """A single upsert could not be committed."""


class RecordStorePort(Protocol):
    def upsert(self, key: str, record: CompanyRecord) -> None:
        """Insert or fully replace the record stored under `key`.

        Raises StoreWriteError on failure.
        """
        ...

    def subscribe(self, on_snapshot: SnapshotCallback, on_error: ErrorCallback) -> Unsubscribe:
        """Push the complete current record set now and after every change."""
        ...
