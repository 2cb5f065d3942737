from __future__ import annotations

import math
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


NUMERIC_FIELDS: tuple[str, ...] = (
    "revenue",
    "procurement_cost",
    "personnel_cost",
    "operating_cost",
    "ebitda",
    "operating_result",
    "net_income",
    "equity",
    "current_assets",
    "non_current_assets",
    "current_liabilities",
    "employee_count",
)

TEXT_FIELDS: tuple[str, ...] = (
    "tax_id",
    "legal_name",
    "short_name",
    "category",
    "subcategory",
    "fiscal_year",
    "url",
    "business_description",
)

ExtraValue = Union[float, str, None]


class CompanyRecord(BaseModel):
    """Canonical, immutable financial statement of one company for one fiscal year.

    Numeric fields hold a finite float or None ("absent"); absent is never zero.
    """

    id: str

    tax_id: str | None = None
    legal_name: str | None = None
    short_name: str | None = None
    category: str | None = None
    subcategory: str | None = None
    fiscal_year: str | None = None
    url: str | None = None
    business_description: str | None = None

    revenue: float | None = None
    procurement_cost: float | None = None
    personnel_cost: float | None = None
    operating_cost: float | None = None
    ebitda: float | None = None
    operating_result: float | None = None
    net_income: float | None = None
    equity: float | None = None
    current_assets: float | None = None
    non_current_assets: float | None = None
    current_liabilities: float | None = None
    employee_count: float | None = None

    extra: Dict[str, ExtraValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_text_is_absent(cls, value: Any) -> Any:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _non_finite_is_absent(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value) if math.isfinite(value) else None
        return value

    @field_validator("extra", mode="before")
    @classmethod
    def _clean_extra(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        cleaned: Dict[str, ExtraValue] = {}
        for key, item in value.items():
            if isinstance(item, float) and not math.isfinite(item):
                item = None
            cleaned[str(key)] = item
        return cleaned

    @property
    def display_name(self) -> str:
        return self.short_name or self.legal_name or "EMPRESA"

    def to_document(self) -> Dict[str, Any]:
        """JSON-compatible dict used as the stored document."""
        return self.model_dump(mode="json")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "CompanyRecord":
        return cls.model_validate(document)
