from __future__ import annotations

import logging
from pathlib import Path

from ports.source import ExportSourcePort
from sources.registry import register


logger = logging.getLogger(__name__)


def decode_export(data: bytes) -> str:
    """Decode export bytes: UTF-8 (BOM tolerant) first, then Windows-1252."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.info("Export is not UTF-8; decoding as cp1252", extra={"step": "read"})
        return data.decode("cp1252", errors="replace")


class FileExportSource(ExportSourcePort):
    source_name = "file"

    def read(self, location: str) -> str:
        return decode_export(Path(location).read_bytes())


def _register():
    register(FileExportSource.source_name, FileExportSource)


_register()
