from __future__ import annotations

import json

from utils.llm_logger import log_call, sha256_text


def test_llm_trace_writes_jsonl(tmp_path, monkeypatch):
    log_file = tmp_path / "llm_calls.jsonl"
    monkeypatch.setenv("LLM_TRACE", "true")
    monkeypatch.setenv("LLM_LOG_PATH", str(log_file))
    monkeypatch.setenv("RUN_ID", "test-run-123")

    log_call(
        caller="unit.test",
        provider="openai",
        model="gpt-x",
        operation="advisory",
        prompt_name="portfolio_advice",
        prompt_hash=sha256_text("prompt"),
        duration_ms=42,
        status="ok",
        usage={"total_tokens": 10},
        extras={"records": 3},
    )

    assert log_file.exists()
    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[-1])
    assert rec["caller"] == "unit.test"
    assert rec["provider"] == "openai"
    assert rec["operation"] == "advisory"
    assert rec["run_id"] == "test-run-123"
    assert rec["prompt_hash"] == sha256_text("prompt")
    assert rec.get("usage", {}).get("total_tokens") == 10
    assert rec["extras"] == {"records": 3}


def test_tracing_disabled_writes_nothing(tmp_path, monkeypatch):
    log_file = tmp_path / "llm_calls.jsonl"
    monkeypatch.setenv("LLM_TRACE", "false")
    monkeypatch.setenv("LLM_LOG_PATH", str(log_file))

    log_call(caller="unit.test", provider="openai", model=None, operation="advisory")

    assert not log_file.exists()


def test_sha256_text_of_empty_is_none():
    assert sha256_text("") is None
    assert sha256_text(None) is None
