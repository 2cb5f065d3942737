from __future__ import annotations

import os


# Central routing for LLM use-cases. Edit here to change per-operation defaults.
# Per-route models can be overridden via env vars for quick testing.
#
# Keys are use_case identifiers consumed by services/llm_client.py
ROUTES: dict[str, dict] = {
    # Free-text portfolio advice (OpenAI chat)
    "advisory": {
        "provider": os.getenv("LLM_ADVISORY_PROVIDER", "openai"),
        "model": os.getenv("OPENAI_MODEL_ADVISORY"),  # falls back to global OPENAI_MODEL
        "temperature": 0.3,
        # Logical operation name for logging (not a vendor API name)
        "operation": "advisory",
    },
}
