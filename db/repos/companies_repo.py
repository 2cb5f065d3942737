from __future__ import annotations

import json
import sqlite3
from typing import Any, Dict, List


class CompaniesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def upsert(self, record_id: str, document: Dict[str, Any]) -> None:
        """Insert or fully replace the document stored under `record_id`."""
        # Preserve non-ASCII characters (e.g., accents in legal names) in stored JSON text
        payload = json.dumps(document, ensure_ascii=False)
        self.conn.execute(
            "INSERT INTO companies (id, document_json, updated_at) VALUES (?, ?, datetime('now')) "
            "ON CONFLICT(id) DO UPDATE SET document_json = excluded.document_json, updated_at = excluded.updated_at",
            (record_id, payload),
        )
        self.conn.commit()

    def list_documents(self) -> List[Dict[str, Any]]:
        """All documents in first-insert order."""
        cur = self.conn.cursor()
        cur.execute("SELECT document_json FROM companies ORDER BY rowid")
        return [json.loads(row[0]) for row in cur.fetchall()]

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM companies")
        return int(cur.fetchone()[0])
