from __future__ import annotations

from typing import Protocol


class ExportSourcePort(Protocol):
    """Delivers the raw text of one spreadsheet export."""

    source_name: str

    def read(self, location: str) -> str:
        ...
