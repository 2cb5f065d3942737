from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from config.header_vocabulary import DEFAULT_VOCABULARY, HeaderVocabulary


@dataclass(frozen=True)
class Dialect:
    header_index: int
    delimiter: str
    quote_char: str = '"'


def split_lines(text: str) -> List[str]:
    """Split raw export text into trimmed, non-empty lines."""
    if not text:
        return []
    if text.startswith("\ufeff"):
        text = text[1:]
    return [line.strip() for line in text.split("\n") if line.strip()]


def infer_delimiter(header_line: str) -> str:
    # Per-file decision taken from the header row only
    return ";" if header_line.count(";") > header_line.count(",") else ","


def detect_dialect(
    lines: List[str],
    vocabulary: HeaderVocabulary = DEFAULT_VOCABULARY,
    scan_limit: int = 20,
) -> Optional[Dialect]:
    """Locate the header row among the first `scan_limit` lines and infer the delimiter.

    Returns None when no header marker is found; the input is then unparseable.
    """
    for idx, line in enumerate(lines[:scan_limit]):
        if vocabulary.is_header_line(line):
            return Dialect(header_index=idx, delimiter=infer_delimiter(line))
    return None
