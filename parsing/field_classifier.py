from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from config.header_vocabulary import DEFAULT_VOCABULARY, HeaderVocabulary, normalize_header_key


class FieldKind(str, Enum):
    NUMERIC = "numeric"
    TEXT = "text"


class FieldClassifier:
    """Keyword lookup deciding whether a column holds an amount/count or opaque text."""

    def __init__(self, vocabulary: HeaderVocabulary = DEFAULT_VOCABULARY) -> None:
        self.keywords = tuple(normalize_header_key(k) for k in vocabulary.numeric_keywords)

    def classify(self, header: str) -> FieldKind:
        upper = normalize_header_key(header)
        if upper and any(k in upper for k in self.keywords):
            return FieldKind.NUMERIC
        return FieldKind.TEXT

    def classify_headers(self, headers: Sequence[str]) -> List[FieldKind]:
        return [self.classify(h) for h in headers]
