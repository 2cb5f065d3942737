from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


IngestStatus = Literal["empty", "complete", "partial"]


class IngestResult(BaseModel):
    """Outcome of one bulk ingestion run.

    "partial" means a store write failed: rows before it stay committed,
    rows after it were not attempted.
    """

    status: IngestStatus
    parsed: int = 0
    persisted: int = 0
    failed_record_id: str | None = None
    error: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def abandoned(self) -> int:
        return max(0, self.parsed - self.persisted)
