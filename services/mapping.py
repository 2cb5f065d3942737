from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from config.header_vocabulary import DEFAULT_VOCABULARY, HeaderVocabulary, normalize_header_key
from models.company_record import NUMERIC_FIELDS, CompanyRecord
from parsing.field_classifier import FieldKind
from services.identity_utils import derive_record_id
from utils.number_parsing import parse_locale_number


class RecordBuilder:
    """Map one split row onto the canonical CompanyRecord fields.

    The header index is resolved once per file; unknown headers land in `extra`.
    """

    def __init__(self, headers: Sequence[str], kinds: Sequence[FieldKind], vocabulary: HeaderVocabulary = DEFAULT_VOCABULARY) -> None:
        self.headers = list(headers)
        self.kinds = list(kinds)
        index = vocabulary.header_index()
        self.targets = [index.get(normalize_header_key(h)) for h in self.headers]

    def build(self, values: Sequence[str]) -> Optional[CompanyRecord]:
        fields: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for header, kind, target, value in zip(self.headers, self.kinds, self.targets, values):
            if not header:
                continue
            if target is None:
                extra[header] = parse_locale_number(value) if kind is FieldKind.NUMERIC else value
            elif target in NUMERIC_FIELDS:
                # Canonical type wins over the keyword classification
                if fields.get(target) is None:
                    fields[target] = parse_locale_number(value)
            else:
                fields.setdefault(target, value)

        record_id = derive_record_id(fields.get("tax_id"))
        if not record_id:
            return None
        return CompanyRecord(id=record_id, extra=extra, **fields)


def build_company_record(
    headers: Sequence[str],
    kinds: Sequence[FieldKind],
    values: Sequence[str],
    vocabulary: HeaderVocabulary = DEFAULT_VOCABULARY,
) -> Optional[CompanyRecord]:
    """Convenience wrapper for a single row."""
    return RecordBuilder(headers, kinds, vocabulary).build(values)
