"""Deadline-bounded satire generation.

Architectural role:
    Wraps a `TextGenerator` so that exactly one upstream attempt is made under a
    hard deadline, and converts every outcome into a `GenerationResult` value.
    `satire_api.core.engine` decides what to do with failures.

Model call flow:
    instruction -> `asyncio.wait_for(text_generator(instruction), deadline)` ->
    payload parse -> `Success` or `Failure`.

Cancellation:
    On deadline expiry `wait_for` cancels the awaiting task, which unwinds the
    httpx client context and releases the connection before returning.

Output validation:
    - The payload is expected to be a JSON object `{"satire": ..., "type": ...}`,
      optionally wrapped in a Markdown code fence.
    - A parse failure is treated as an empty payload, not as a hard failure.
    - An empty `satire` after trimming is `UNUSABLE_CONTENT`.
    - A missing or blank `type` is replaced by the language default category.
"""

import asyncio
import json
import logging
import re
from typing import Optional

from satire_api.core.errors import UpstreamError
from satire_api.core.types import Failure, FailureKind, GenerationResult, Instruction, Success
from satire_api.llm.client import TextGenerator
from satire_api.llm.provider_config import UPSTREAM_TIMEOUT_SECONDS


logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")


def parse_payload(text) -> dict:
    """Decode model text into a dict; anything unusable becomes `{}`."""
    if not isinstance(text, str):
        return {}
    cleaned = _CODE_FENCE.sub("", text.strip())
    try:
        parsed = json.loads(cleaned)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


class BoundedGenerator:
    """Single-attempt, deadline-bounded upstream call.

    Args:
        text_generator: Async callable implementing the `TextGenerator` protocol.
        deadline_seconds: Default hard deadline measured from call start.
    """

    def __init__(self, text_generator: TextGenerator, deadline_seconds: float = UPSTREAM_TIMEOUT_SECONDS):
        self.text_generator = text_generator
        self.deadline_seconds = deadline_seconds

    async def generate(
        self,
        instruction: Instruction,
        default_category: str,
        deadline: Optional[float] = None,
    ) -> GenerationResult:
        """Run the upstream call once and classify the outcome.

        Args:
            instruction: Instruction pair for the request.
            default_category: Category used when the model omits `type`.
            deadline: Override for `deadline_seconds`.

        Returns:
            `Success(satire, type)` or `Failure(kind, detail)`. Never raises for
            timeouts, `UpstreamError` or unusable content.
        """
        timeout = self.deadline_seconds if deadline is None else deadline

        try:
            text = await asyncio.wait_for(self.text_generator(instruction), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Upstream call exceeded %.1fs deadline", timeout)
            return Failure(FailureKind.TIMEOUT, f"upstream timeout after {timeout:g}s")
        except UpstreamError as exc:
            return Failure(FailureKind.UPSTREAM_ERROR, str(exc))

        payload = parse_payload(text)
        satire = str(payload.get("satire") or "").strip()
        if not satire:
            logger.warning("Upstream returned no usable satire")
            return Failure(FailureKind.UNUSABLE_CONTENT, "upstream returned no usable satire")

        category = str(payload.get("type") or "").strip() or default_category
        return Success(satire=satire, type=category)
