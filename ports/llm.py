from __future__ import annotations

from typing import Optional, Protocol


class LLMClientPort(Protocol):
    def complete(
        self,
        *,
        use_case: str,
        prompt: str,
        prompt_name: Optional[str] = None,
    ) -> str:
        ...
