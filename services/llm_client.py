from __future__ import annotations

import time
from typing import Any, Dict, Optional

from openai import OpenAI

from config.llm_routes import ROUTES
from config.settings import Settings, get_settings
from utils.llm_logger import log_call, sha256_text


class LLMClient:
    """Minimal wrapper to centralize per-use-case routing and call tracing."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._client: Optional[OpenAI] = None

    def _openai(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.settings.openai_api_key)
        return self._client

    def complete(self, *, use_case: str, prompt: str, prompt_name: Optional[str] = None) -> str:
        route = ROUTES.get(use_case, {})
        provider = route.get("provider", "openai")
        model = route.get("model") or self.settings.openai_model or "gpt-4o-mini"
        op = route.get("operation", use_case)
        temp = route.get("temperature")

        if provider != "openai":
            raise NotImplementedError(f"Provider not implemented: {provider}")

        kwargs: Dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": "You are a corporate finance analyst. Answer concisely."},
                {"role": "user", "content": prompt},
            ],
        }
        # Only pass temperature if configured (some models only accept default)
        if temp is not None:
            kwargs["temperature"] = temp

        t0 = time.time()
        try:
            resp = self._openai().chat.completions.create(**kwargs)
        except Exception as e:
            log_call(
                caller=f"llm_client.complete:{use_case}",
                provider=provider,
                model=model,
                operation=op,
                prompt_name=prompt_name,
                prompt_hash=sha256_text(prompt),
                duration_ms=int((time.time() - t0) * 1000),
                status="error",
                error=str(e),
                settings=self.settings,
            )
            raise
        dt_ms = int((time.time() - t0) * 1000)

        usage_obj = None
        usage = getattr(resp, "usage", None)
        if usage:
            usage_obj = {
                "prompt_tokens": getattr(usage, "prompt_tokens", None),
                "completion_tokens": getattr(usage, "completion_tokens", None),
                "total_tokens": getattr(usage, "total_tokens", None),
            }
        log_call(
            caller=f"llm_client.complete:{use_case}",
            provider=provider,
            model=model,
            operation=op,
            prompt_name=prompt_name,
            prompt_hash=sha256_text(prompt),
            duration_ms=dt_ms,
            status="ok",
            usage=usage_obj,
            settings=self.settings,
        )
        content = resp.choices[0].message.content if resp.choices else None
        return content or ""
