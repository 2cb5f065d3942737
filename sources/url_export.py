from __future__ import annotations

from typing import Optional

import requests

from config.settings import get_settings
from ports.source import ExportSourcePort
from sources.file_export import decode_export
from sources.registry import register


class UrlExportSource(ExportSourcePort):
    source_name = "url"

    def __init__(self, timeout_seconds: Optional[int] = None) -> None:
        self.timeout_seconds = timeout_seconds or get_settings().request_timeout_seconds

    def read(self, location: str) -> str:
        resp = requests.get(location, timeout=self.timeout_seconds, headers={"User-Agent": "Mozilla/5.0"})
        resp.raise_for_status()
        return decode_export(resp.content)


def _register():
    register(UrlExportSource.source_name, UrlExportSource)


_register()
