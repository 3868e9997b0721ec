"""Provider/runtime configuration for the LLM layer and the orchestrator.

Architectural role:
    Centralizes provider selection, model identifier, credential lookup and the
    service knobs consumed by `satire_api.llm.service` and
    `satire_api.core.engine`.

Determinism:
    Deterministic for a fixed process environment and key files. Module-level
    constants are resolved at import time; `ServiceConfig.from_env` re-reads the
    environment on every call.

Failure behavior:
    A missing credential is represented as `None`. The orchestrator treats that
    as degraded operation (local fallback only), not as an error.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# OpenAI-compatible chat-completions endpoints.
PROVIDERS = {

    "xai": {
        "url": "https://api.x.ai/v1/chat/completions",
        "key_file": "config/xai.key",
        "default_model": "grok-4-fast-reasoning",
    },

    "openai": {
        "url": "https://api.openai.com/v1/chat/completions",
        "key_file": "config/openai.key",
        "default_model": "gpt-4o-mini",
    },

    "groq": {
        "url": "https://api.groq.com/openai/v1/chat/completions",
        "key_file": "config/groq.key",
        "default_model": "llama-3.1-8b-instant",
    },

    "local": {
        "url": "http://127.0.0.1:8080/v1/chat/completions",
        "key_file": None,
        "default_model": "qwen2.5:3b",
    },

}

DEFAULT_PROVIDER = "xai"

# Leaves headroom under the 25 s platform request ceiling.
UPSTREAM_TIMEOUT_SECONDS = 18.0
PLATFORM_REQUEST_CEILING_SECONDS = 25.0


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/xai.key` -> `XAI_API_KEY`).
        2. Raw file contents at `path`.

    Edge cases:
        - `None` path returns `None`.
        - Missing file or blank contents return `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name, "").strip()
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return f.read().strip() or None


@dataclass(frozen=True)
class ServiceConfig:
    """Runtime configuration snapshot.

    Relevant environment variables:
        - `PROVIDER`
        - `XAI_MODEL` / `MODEL_NAME`
        - `<PROVIDER>_API_KEY` (or key file `config/<provider>.key`)
        - `SATIRE_UPSTREAM_TIMEOUT_SECONDS`
        - `SATIRE_FALLBACK_MODE`
        - `SATIRE_INSTRUCTION_VARIANT`

    `api_key` is `None` for keyed providers without a credential. The `local`
    provider needs no key and is always considered configured.
    """

    provider: str = DEFAULT_PROVIDER
    url: str = PROVIDERS[DEFAULT_PROVIDER]["url"]
    model_name: str = PROVIDERS[DEFAULT_PROVIDER]["default_model"]
    api_key: Optional[str] = None
    requires_key: bool = True
    timeout_seconds: float = UPSTREAM_TIMEOUT_SECONDS
    fallback_mode: str = "templated"
    instruction_variant: str = "standard"

    @property
    def generation_enabled(self) -> bool:
        return bool(self.api_key) or not self.requires_key

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        provider = os.getenv("PROVIDER", DEFAULT_PROVIDER).strip().lower()
        if provider not in PROVIDERS:
            provider = DEFAULT_PROVIDER
        entry = PROVIDERS[provider]

        model_name = (
            os.getenv("XAI_MODEL" if provider == "xai" else "MODEL_NAME", "").strip()
            or entry["default_model"]
        )

        try:
            timeout_seconds = float(
                os.getenv("SATIRE_UPSTREAM_TIMEOUT_SECONDS", UPSTREAM_TIMEOUT_SECONDS)
            )
        except ValueError:
            timeout_seconds = UPSTREAM_TIMEOUT_SECONDS
        if not 0 < timeout_seconds < PLATFORM_REQUEST_CEILING_SECONDS:
            timeout_seconds = UPSTREAM_TIMEOUT_SECONDS

        return cls(
            provider=provider,
            url=entry["url"],
            model_name=model_name,
            api_key=load_key(entry["key_file"]),
            requires_key=entry["key_file"] is not None,
            timeout_seconds=timeout_seconds,
            fallback_mode=os.getenv("SATIRE_FALLBACK_MODE", "templated").strip().lower(),
            instruction_variant=os.getenv(
                "SATIRE_INSTRUCTION_VARIANT", "standard"
            ).strip().lower(),
        )
