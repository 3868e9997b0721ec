"""Core request orchestration for satire generation.

Architectural role:
    Sequences normalization, instruction building, bounded generation and the
    local fallback into one response per request. API and CLI adapters call
    `RequestOrchestrator.handle` and only shape the transport.

Control-flow model (terminal states):
    1. Method other than POST -> 405.
    2. `ValidationError` from normalization -> 400.
    3. No generation capability configured -> 200 with fallback content.
    4. Bounded generation `Success` -> 200 with model content.
    5. Bounded generation `Failure` -> 200 with fallback content + `error`.
    Any other exception is caught at the outer boundary of `handle` and
    converted into a 200 response with a generic fallback + `error`.

Concurrency:
    One coroutine per request with a single suspension point (the upstream call).
    The orchestrator holds no per-request state; concurrent requests share only
    immutable configuration and the read-only language registry.

Side effects:
    Emits logs for degraded paths and unhandled faults. No persistence.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from satire_api.core.errors import MethodNotAllowed, ValidationError
from satire_api.core.types import CanonicalRequest, Failure
from satire_api.fallback.generator import FallbackGenerator
from satire_api.llm.client import ChatCompletionsGenerator, TextGenerator
from satire_api.llm.provider_config import ServiceConfig
from satire_api.llm.service import BoundedGenerator
from satire_api.nlp import input_normalizer, language_registry
from satire_api.prompting import instruction_builder


logger = logging.getLogger(__name__)

ALLOWED_METHOD = "POST"


@dataclass(frozen=True)
class OrchestratorResponse:
    """Transport-neutral response: HTTP-style status plus JSON payload."""

    status_code: int
    payload: dict = field(default_factory=dict)


def build_text_generator(config: ServiceConfig) -> Optional[TextGenerator]:
    """Return the configured upstream capability, or `None` in degraded mode."""
    if not config.generation_enabled:
        return None
    return ChatCompletionsGenerator(
        url=config.url,
        model_name=config.model_name,
        api_key=config.api_key,
        provider=config.provider,
    )


class RequestOrchestrator:
    """Per-request pipeline.

    Args:
        config: Service configuration; read from the environment when omitted.
        text_generator: Upstream capability override. When omitted it is built
            from `config`; `None` after that means degraded operation.
        fallback_generator: Fallback override (tests pass a seeded instance).
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        text_generator: Optional[TextGenerator] = None,
        fallback_generator: Optional[FallbackGenerator] = None,
    ):
        self.config = config or ServiceConfig.from_env()
        if text_generator is None:
            text_generator = build_text_generator(self.config)
        self.text_generator = text_generator
        self.bounded_generator = (
            BoundedGenerator(text_generator, self.config.timeout_seconds)
            if text_generator is not None
            else None
        )
        self.fallback_generator = fallback_generator or FallbackGenerator(self.config.fallback_mode)

    def _fallback_payload(self, request: CanonicalRequest, error: Optional[str] = None) -> dict:
        result = self.fallback_generator.fallback(
            request.word,
            request.length_mode,
            request.style_mode,
            request.lang_tag,
        )
        payload = result.to_payload()
        if error:
            payload["error"] = error
        return payload

    async def generate(self, fields: Optional[Mapping]) -> dict:
        """Produce the response payload for a POST body.

        Raises:
            ValidationError: When the body carries no usable word.
        """
        request = input_normalizer.normalize(fields)

        if self.bounded_generator is None:
            logger.info("No generation credential configured; serving local fallback")
            return self._fallback_payload(request)

        instruction = instruction_builder.build(request, self.config.instruction_variant)
        result = await self.bounded_generator.generate(
            instruction,
            language_registry.default_category(request.lang_tag),
        )

        if isinstance(result, Failure):
            logger.warning(
                "Upstream generation failed (%s): %s",
                result.kind.value,
                result.detail,
            )
            return self._fallback_payload(request, error=result.detail or result.kind.value)

        return {"satire": result.satire, "type": result.type}

    async def handle(self, method: str, fields: Optional[Mapping]) -> OrchestratorResponse:
        """Outer boundary: never lets an exception escape to the transport."""
        try:
            if str(method or "").upper() != ALLOWED_METHOD:
                raise MethodNotAllowed("Only POST")
            payload = await self.generate(fields)
            return OrchestratorResponse(200, payload)

        except MethodNotAllowed as exc:
            return OrchestratorResponse(exc.status_code, {"error": str(exc)})

        except ValidationError as exc:
            return OrchestratorResponse(exc.status_code, {"error": str(exc)})

        except Exception as exc:
            logger.exception("Unhandled fault while generating satire")
            fallback = self.fallback_generator.fallback(
                "", "long", "smile", language_registry.DEFAULT_TAG
            )
            payload = fallback.to_payload()
            payload["error"] = str(exc) or exc.__class__.__name__
            return OrchestratorResponse(200, payload)
