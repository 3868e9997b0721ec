"""Provider transport client for satire generation.

Architectural role:
    Executes one HTTP request against an OpenAI-compatible chat-completions
    endpoint and returns the raw assistant text. This is the `TextGenerator`
    capability consumed by `satire_api.llm.service.BoundedGenerator`.

Model invocation flow:
    `BoundedGenerator.generate` -> `ChatCompletionsGenerator(instruction)` ->
    httpx POST -> assistant message content (string, possibly empty).

Retry behavior:
    No retry loop is implemented. The caller owns the deadline; cancelling the
    awaiting task closes the in-flight connection through the `AsyncClient`
    context manager.

Failure handling model:
    - Transport errors and non-2xx statuses raise `UpstreamError` with a
      sanitized, provider-labeled message.
    - A 2xx response whose envelope is not JSON, or lacks the expected
      `choices[0].message.content` path, yields an empty string so the caller
      can classify it as unusable content.
"""

import logging
from typing import Optional, Protocol

import httpx

from satire_api.core.errors import UpstreamError
from satire_api.core.types import Instruction


logger = logging.getLogger(__name__)

# Transport-level timeout; the bounded generator enforces the tighter deadline.
TRANSPORT_TIMEOUT_SECONDS = 30.0


class TextGenerator(Protocol):
    """Async capability: instruction in, raw model text out."""

    async def __call__(self, instruction: Instruction) -> str:
        ...


def _build_sanitized_http_error(provider_name: str, status_code: Optional[int] = None) -> str:
    """Build provider-labeled HTTP error text without exposing raw internals."""
    label = str(provider_name or "provider").upper()
    if status_code:
        return f"{label} HTTP ERROR ({status_code})"
    return f"{label} REQUEST FAILED"


def extract_message_content(data) -> str:
    """Pull `choices[0].message.content` out of a decoded envelope, else `""`."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


class ChatCompletionsGenerator:
    """OpenAI-compatible chat-completions client.

    Args:
        url: Endpoint URL.
        model_name: Model identifier sent as `model`.
        api_key: Bearer credential, or `None` for keyless local endpoints.
        provider: Label used in error messages and logs.
        transport: Optional httpx transport (tests use `httpx.MockTransport`).
    """

    def __init__(
        self,
        url: str,
        model_name: str,
        api_key: Optional[str] = None,
        provider: str = "xai",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.model_name = model_name
        self.api_key = api_key
        self.provider = provider
        self.transport = transport

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def build_payload(self, instruction: Instruction) -> dict:
        return {
            "model": self.model_name,
            "messages": instruction.as_messages(),
        }

    async def __call__(self, instruction: Instruction) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=TRANSPORT_TIMEOUT_SECONDS,
                headers=self._headers(),
                transport=self.transport,
            ) as client:
                response = await client.post(self.url, json=self.build_payload(instruction))
        except httpx.RequestError as exc:
            logger.warning("%s transport failure: %s", self.provider, exc.__class__.__name__)
            raise UpstreamError(_build_sanitized_http_error(self.provider)) from exc

        if response.is_error:
            logger.warning(
                "%s returned status %s: %.200s",
                self.provider,
                response.status_code,
                response.text,
            )
            raise UpstreamError(
                _build_sanitized_http_error(self.provider, response.status_code),
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning("%s returned a non-JSON envelope", self.provider)
            return ""

        return extract_message_content(data)
