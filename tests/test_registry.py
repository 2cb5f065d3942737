from __future__ import annotations

import pytest


def test_builtin_sources_registered():
    # Import package to trigger registration
    import sources  # noqa: F401
    from sources.registry import available_sources, get_source

    names = available_sources().keys()
    assert "file" in names
    assert "url" in names

    src = get_source("url", timeout_seconds=5)
    assert getattr(src, "source_name", None) == "url"


def test_unknown_source_raises():
    from sources.registry import get_source
    with pytest.raises(KeyError):
        get_source("does_not_exist")


def test_file_source_decodes_utf8_and_windows_exports(tmp_path):
    import sources  # noqa: F401
    from sources.registry import get_source

    utf8 = tmp_path / "utf8.csv"
    utf8.write_bytes("\ufeffCIF EMPRESA;DENOMINACIÓN SOCIAL\n".encode("utf-8"))
    legacy = tmp_path / "legacy.csv"
    legacy.write_bytes("CIF EMPRESA;DENOMINACIÓN SOCIAL\n".encode("cp1252"))

    src = get_source("file")
    assert src.read(str(utf8)) == "CIF EMPRESA;DENOMINACIÓN SOCIAL\n"
    assert src.read(str(legacy)) == "CIF EMPRESA;DENOMINACIÓN SOCIAL\n"


def test_url_source_fetches_with_timeout(monkeypatch):
    import sources.url_export as url_export

    calls = {}

    class _Resp:
        content = "CIF EMPRESA;EBITDA\n".encode("utf-8")

        def raise_for_status(self):
            return None

    def _fake_get(url, timeout=None, headers=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return _Resp()

    monkeypatch.setattr(url_export.requests, "get", _fake_get)
    src = url_export.UrlExportSource(timeout_seconds=7)
    assert src.read("https://example.com/export.csv") == "CIF EMPRESA;EBITDA\n"
    assert calls == {"url": "https://example.com/export.csv", "timeout": 7}
