from __future__ import annotations

from typing import List

from db.connection import get_connection
from db.record_store import SqliteRecordStore
from models.company_record import CompanyRecord
from pipelines.ingest_records import ingest_text
from ports.store import StoreWriteError
from tests.helpers.sample_exports import SEMICOLON_EXPORT


class _FlakyStore:
    """In-memory store whose Nth upsert fails."""

    def __init__(self, fail_on: int) -> None:
        self.fail_on = fail_on
        self.calls = 0
        self.written: List[str] = []

    def upsert(self, key: str, record: CompanyRecord) -> None:
        self.calls += 1
        if self.calls == self.fail_on:
            raise StoreWriteError(f"disk full at {key}")
        self.written.append(key)

    def subscribe(self, on_snapshot, on_error):
        return lambda: None


def test_complete_ingest_persists_every_record(tmp_path):
    store = SqliteRecordStore(get_connection(str(tmp_path / "ingest.db")))
    result = ingest_text(store, SEMICOLON_EXPORT)
    assert result.status == "complete"
    assert result.parsed == 3
    assert result.persisted == 3
    assert result.abandoned == 0
    assert [r.id for r in store.snapshot()] == ["A1234567B", "B7654321", "C111222C"]


def test_reingesting_the_same_export_is_idempotent(tmp_path):
    store = SqliteRecordStore(get_connection(str(tmp_path / "ingest.db")))
    ingest_text(store, SEMICOLON_EXPORT)
    first = [r.to_document() for r in store.snapshot()]
    ingest_text(store, SEMICOLON_EXPORT)
    assert [r.to_document() for r in store.snapshot()] == first


def test_unrecognised_export_is_empty_and_writes_nothing():
    store = _FlakyStore(fail_on=0)
    result = ingest_text(store, "just;some;text\n1;2;3")
    assert result.status == "empty"
    assert result.parsed == 0
    assert store.calls == 0


def test_write_failure_stops_the_run_and_reports_partial():
    store = _FlakyStore(fail_on=2)
    result = ingest_text(store, SEMICOLON_EXPORT)
    assert result.status == "partial"
    assert result.parsed == 3
    assert result.persisted == 1
    assert result.abandoned == 2
    assert result.failed_record_id == "B7654321"
    assert "disk full" in (result.error or "")
    # Nothing after the failed record was attempted
    assert store.calls == 2
    assert store.written == ["A1234567B"]


def test_progress_is_reported_after_each_write():
    seen = []
    ingest_text(_FlakyStore(fail_on=0), SEMICOLON_EXPORT, on_progress=lambda d, t, p: seen.append((d, t, p)))
    assert seen == [(1, 3, 33), (2, 3, 67), (3, 3, 100)]


def test_broken_progress_callback_does_not_abort_ingest():
    def _boom(done, total, percent):
        raise RuntimeError("ui gone")

    store = _FlakyStore(fail_on=0)
    result = ingest_text(store, SEMICOLON_EXPORT, on_progress=_boom)
    assert result.status == "complete"
    assert store.written == ["A1234567B", "B7654321", "C111222C"]


def test_rows_sharing_a_sanitized_id_collapse_to_the_last_row(tmp_path):
    text = "\n".join([
        "CIF EMPRESA;DENOMINACIÓN SOCIAL;CATEGORÍA;EBITDA;EMPLEADOS",
        "A-1;Primera S.L.;Digital;100,00;5",
        "A1;Segunda S.L.;;200,00;",
    ])
    store = SqliteRecordStore(get_connection(str(tmp_path / "dupes.db")))
    result = ingest_text(store, text)

    assert result.status == "complete"
    assert result.parsed == 2
    [record] = store.snapshot()
    assert record.id == "A1"
    assert record.legal_name == "Segunda S.L."
    assert record.ebitda == 200.0
    # Fields the later row leaves empty are absent, not carried over
    assert record.category is None
    assert record.employee_count is None
