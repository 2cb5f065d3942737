from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the companies document table (idempotent)."""
    cur = conn.cursor()

    # One JSON document per company, keyed by sanitized tax id.
    # Writes replace the whole document; rowid keeps first-insert order.
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS companies (\n"
            "  id TEXT PRIMARY KEY,\n"
            "  document_json TEXT NOT NULL,\n"
            "  updated_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    conn.commit()
