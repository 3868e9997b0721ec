"""Request-scoped data contracts shared across the pipeline.

Architectural role:
    Defines the canonical request, instruction, generation result and fallback
    result shapes passed between normalization, prompting, the LLM layer and
    `satire_api.core.engine`.

Lifecycle:
    Every instance lives for one request only. All classes are frozen; none of
    them carry behavior beyond trivial conversion helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


LENGTH_MODES = ("short", "long")
STYLE_MODES = ("printer", "smile")


@dataclass(frozen=True)
class CanonicalRequest:
    """Normalized request produced by `nlp.input_normalizer.normalize`.

    Attributes:
        word: Non-empty trimmed phrase with UI annotations stripped.
        lang_tag: Supported language tag from the language registry.
        length_mode: `"short"` or `"long"`.
        style_mode: `"printer"` or `"smile"`; presentation hint only.
    """

    word: str
    lang_tag: str
    length_mode: str = "long"
    style_mode: str = "smile"


@dataclass(frozen=True)
class Instruction:
    """Role-tagged instruction texts sent to the upstream model."""

    system_text: str
    user_text: str

    def as_messages(self) -> list:
        return [
            {"role": "system", "content": self.system_text},
            {"role": "user", "content": self.user_text},
        ]


class FailureKind(str, Enum):
    TIMEOUT = "timeout"
    UPSTREAM_ERROR = "upstream_error"
    UNUSABLE_CONTENT = "unusable_content"


@dataclass(frozen=True)
class Success:
    satire: str
    type: str


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    detail: str = ""


GenerationResult = Union[Success, Failure]


@dataclass(frozen=True)
class FallbackResult:
    satire: str
    type: str

    def to_payload(self) -> dict:
        return {"satire": self.satire, "type": self.type}
