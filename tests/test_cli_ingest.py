from __future__ import annotations

import json
import sys
import sqlite3
from typing import List

import pytest

from services.advisory import FALLBACK_MESSAGE
from tests.helpers.sample_exports import SEMICOLON_EXPORT


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


@pytest.fixture
def ingested_db(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("AI_ENABLED", "false")
    export = tmp_path / "export.csv"
    export.write_text(SEMICOLON_EXPORT, encoding="utf-8")
    db_path = tmp_path / "cli_ingest.db"
    _run_cli_with_args(["--db", str(db_path), "bootstrap"])
    _run_cli_with_args(["--db", str(db_path), "ingest", "--input", str(export)])
    capsys.readouterr()
    return db_path


def test_cli_ingest_writes_db(ingested_db):
    conn = sqlite3.connect(str(ingested_db))
    try:
        cur = conn.cursor()
        cur.execute("SELECT id FROM companies ORDER BY rowid")
        assert [row[0] for row in cur.fetchall()] == ["A1234567B", "B7654321", "C111222C"]
        cur.execute("SELECT document_json FROM companies WHERE id = 'A1234567B'")
        doc = json.loads(cur.fetchone()[0])
        assert doc["revenue"] == 1500000.0
        assert doc["extra"] == {"PAIS": "España"}
    finally:
        conn.close()


def test_cli_ingest_prints_summary_with_progress(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("AI_ENABLED", "false")
    export = tmp_path / "export.csv"
    export.write_text(SEMICOLON_EXPORT, encoding="utf-8")
    _run_cli_with_args(["--db", str(tmp_path / "p.db"), "ingest", "--input", str(export), "--progress"])
    out = capsys.readouterr().out
    assert "[3/3] 100%" in out
    assert "Status: complete" in out
    assert "Persisted Records: 3" in out


def test_cli_ingest_missing_file_exits_nonzero(tmp_path, monkeypatch):
    monkeypatch.setenv("AI_ENABLED", "false")
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(tmp_path / "m.db"), "ingest", "--input", str(tmp_path / "missing.csv")])
    assert exc.value.code == 1


def test_cli_list_orders_by_revenue(ingested_db, capsys):
    _run_cli_with_args(["--db", str(ingested_db), "list", "--limit", "2"])
    rows = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rows] == ["A1234567B", "B7654321"]
    assert rows[0]["revenue"] == "1.500.000 €"

    _run_cli_with_args(["--db", str(ingested_db), "list", "-q", "medios"])
    rows = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rows] == ["C111222C"]
    assert rows[0]["revenue"] == "-"


def test_cli_summary(ingested_db, capsys):
    _run_cli_with_args(["--db", str(ingested_db), "summary"])
    out = capsys.readouterr().out
    assert "Companies: 3" in out
    assert "Total Revenue: 2.400.000 €" in out
    assert "Digital: companies=1" in out


def test_cli_company_view(ingested_db, capsys):
    _run_cli_with_args(["--db", str(ingested_db), "company", "--id", "A1234567B", "--peers", "1"])
    view = json.loads(capsys.readouterr().out)
    assert view["name"] == "NORTE"
    assert view["ratios"]["ebitda_margin"] == "20 %"
    assert [p["id"] for p in view["peers"]] == ["B7654321"]
    assert view["valuation"]["equity_value_estimate"] == "2.500.000 €"


def test_cli_company_errors(ingested_db, capsys):
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(ingested_db), "company", "--id", "NOPE"])
    assert exc.value.code == 1
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(ingested_db), "company", "--id", "A1234567B", "--multiple", "20"])
    assert exc.value.code == 2


def test_cli_advise_without_ai_prints_fallback(ingested_db, capsys):
    _run_cli_with_args(["--db", str(ingested_db), "advise", "--question", "¿Quién crece más?"])
    assert capsys.readouterr().out.strip() == FALLBACK_MESSAGE
