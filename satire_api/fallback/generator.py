"""Local, never-failing substitute for upstream generation.

Two designs share one interface and are selected by configuration:

    `templated`
        Language-aware. Picks uniformly at random among the language's short or
        long literary templates and labels the result through the topic rule
        table (`nlp.topic_classifier`), falling back to the language default
        category. An empty word becomes the language's placeholder.

    `generic`
        Ignores per-language templates and returns one of two fixed phrases that
        signal degraded operation, with the language default category. An empty
        word becomes `GENERIC_PLACEHOLDER`.

Both are total: unknown modes, tags and length values are coerced instead of
rejected, and no I/O is performed.
"""

import logging
import random
from typing import Optional

from satire_api.core.types import FallbackResult
from satire_api.nlp import language_registry
from satire_api.nlp.topic_classifier import classify_topic


logger = logging.getLogger(__name__)

TEMPLATED_MODE = "templated"
GENERIC_MODE = "generic"
FALLBACK_MODES = (TEMPLATED_MODE, GENERIC_MODE)

GENERIC_PLACEHOLDER = "this"


class FallbackGenerator:
    """Deterministic-in-shape fallback producer.

    Args:
        mode: `"templated"` or `"generic"`; anything else means `"templated"`.
        rng: Optional `random.Random` used for template choice.
    """

    def __init__(self, mode: str = TEMPLATED_MODE, rng: Optional[random.Random] = None):
        if mode not in FALLBACK_MODES:
            logger.warning("Unknown fallback mode %r, using %r", mode, TEMPLATED_MODE)
            mode = TEMPLATED_MODE
        self.mode = mode
        self.rng = rng or random.Random()

    def fallback(self, word, length_mode="long", style_mode="smile", lang_tag=language_registry.DEFAULT_TAG) -> FallbackResult:
        tag = language_registry.resolve(lang_tag)
        text = str(word or "").strip()

        if self.mode == GENERIC_MODE:
            return self._generic(text, length_mode, tag)
        return self._templated(text, length_mode, tag)

    def _templated(self, word: str, length_mode: str, tag: str) -> FallbackResult:
        word = word or language_registry.placeholder(tag)
        templates = language_registry.fallback_templates(tag)
        candidates = templates.short if length_mode == "short" else templates.long

        satire = self.rng.choice(candidates).format(word=word)

        topic = classify_topic(word)
        if topic is None:
            category = language_registry.default_category(tag)
        else:
            category = language_registry.category(tag, topic)

        return FallbackResult(satire=satire, type=category)

    def _generic(self, word: str, length_mode: str, tag: str) -> FallbackResult:
        word = word or GENERIC_PLACEHOLDER
        templates = language_registry.generic_templates()
        candidates = templates.short if length_mode == "short" else templates.long

        return FallbackResult(
            satire=candidates[0].format(word=word),
            type=language_registry.default_category(tag),
        )
