from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


def normalize_header_key(header: Optional[str]) -> str:
    """Uppercase, accent-fold and collapse whitespace so header variants compare equal."""
    if not header:
        return ""
    text = unicodedata.normalize("NFKD", str(header))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return re.sub(r"\s+", " ", text).strip().upper()


# Canonical CompanyRecord field -> header spellings seen in exports.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "tax_id": ("CIF EMPRESA", "CIF", "TAX ID"),
    "legal_name": ("DENOMINACIÓN SOCIAL", "LEGAL NAME"),
    "short_name": ("ACRONIMO", "ACRÓNIMO", "SHORT NAME"),
    "category": ("CATEGORÍA", "CATEGORY"),
    "subcategory": ("SUBCATEGORÍA", "SUBCATEGORY"),
    "fiscal_year": ("EJERCICIO", "FISCAL YEAR"),
    "url": ("URL", "WEB"),
    "business_description": ("OBJETO SOCIAL", "BUSINESS DESCRIPTION"),
    "revenue": (
        "IMPORTEN NETO DE LA CIFRA DE NEGOCIO",
        "IMPORTE NETO DE LA CIFRA DE NEGOCIO",
        "IMPORTE NETO DE LA CIFRA DE NEGOCIOS",
        "IMPORTE NETO CIFRA DE NEGOCIO",
        "CIFRA DE NEGOCIO",
        "REVENUE",
    ),
    "procurement_cost": ("APROVISIONAMIENTOS", "PROCUREMENT"),
    "personnel_cost": ("GASTOS DE PERSONAL", "PERSONNEL EXPENSES"),
    "operating_cost": ("OTROS GASTOS DE EXPLOTACIÓN", "OPERATING EXPENSES"),
    "ebitda": ("EBITDA",),
    "operating_result": ("RESULTADO DE EXPLOTACIÓN", "OPERATING RESULT"),
    "net_income": ("RESULTADO DEL EJERCICIO", "NET INCOME"),
    "equity": ("PATRIMONIO NETO", "EQUITY"),
    "current_assets": ("ACTIVO CORRIENTE", "CURRENT ASSETS"),
    "non_current_assets": ("ACTIVO NO CORRIENTE", "NON-CURRENT ASSETS", "NON CURRENT ASSETS"),
    "current_liabilities": ("PASIVO CORRIENTE", "CURRENT LIABILITIES"),
    "employee_count": ("EMPLEADOS", "EMPLOYEES", "HEADCOUNT"),
}

NUMERIC_KEYWORDS: Tuple[str, ...] = (
    # Spanish
    "IMPORTE",
    "CIFRA DE NEGOCIO",
    "GASTOS",
    "RESULTADO",
    "EBITDA",
    "ACTIVO",
    "PASIVO",
    "PATRIMONIO",
    "EMPLEADOS",
    "APROVISIONAMIENTOS",
    # English
    "REVENUE",
    "EXPENSE",
    "RESULT",
    "INCOME",
    "ASSET",
    "LIABILIT",
    "EQUITY",
    "HEADCOUNT",
    "EMPLOYEES",
    "PROCUREMENT",
)

HEADER_MARKERS: Tuple[str, ...] = ("CIF EMPRESA", "TAX ID")


@dataclass(frozen=True)
class HeaderVocabulary:
    markers: Tuple[str, ...] = HEADER_MARKERS
    numeric_keywords: Tuple[str, ...] = NUMERIC_KEYWORDS
    field_aliases: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: dict(FIELD_ALIASES))

    def header_index(self) -> Dict[str, str]:
        """Return normalized header -> canonical field name."""
        index: Dict[str, str] = {}
        for field_name, aliases in self.field_aliases.items():
            for alias in aliases:
                index.setdefault(normalize_header_key(alias), field_name)
        return index

    def is_header_line(self, line: str) -> bool:
        upper = normalize_header_key(line)
        return any(normalize_header_key(m) in upper for m in self.markers)


DEFAULT_VOCABULARY = HeaderVocabulary()
