from __future__ import annotations

import csv
from typing import List


def split_row(line: str, delimiter: str, quote_char: str = '"') -> List[str]:
    """Split one line on `delimiter`, keeping delimiters that sit inside quoted fields.

    '"ACME, S.L.",Digital' with ',' -> ['ACME, S.L.', 'Digital']
    A quote in the middle of an unquoted field ('5" pantalla') is kept as text.
    """
    reader = csv.reader([line], delimiter=delimiter, quotechar=quote_char, skipinitialspace=True)
    return [field.strip() for field in next(reader, [])]
