from __future__ import annotations

import re
from typing import Optional


_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def derive_record_id(tax_id: Optional[str]) -> Optional[str]:
    """Sanitize a raw tax identifier into a stable record key.

    'A-1234567 B' -> 'A1234567B'. Case is preserved; an empty result means no identity.
    """
    if tax_id is None:
        return None
    cleaned = _NON_ALNUM.sub("", str(tax_id))
    return cleaned or None
