import random

import pytest

from satire_api.fallback.generator import GENERIC_PLACEHOLDER, FallbackGenerator
from satire_api.fallback.templates import GENERIC_TEMPLATES, TEMPLATES
from satire_api.nlp import language_registry


@pytest.mark.parametrize("tag", language_registry.supported_tags())
@pytest.mark.parametrize("mode", ["templated", "generic"])
@pytest.mark.parametrize("length", ["short", "long"])
def test_fallback_is_total_for_every_language(tag, mode, length):
    generator = FallbackGenerator(mode, rng=random.Random(1))
    for word in ("", "会議", "AI"):
        result = generator.fallback(word, length, "smile", tag)
        assert result.satire.strip()
        assert result.type.strip()


def test_templated_uses_language_templates():
    generator = FallbackGenerator("templated", rng=random.Random(3))
    result = generator.fallback("会議", "short", "printer", "ja")
    expected = {t.format(word="会議") for t in TEMPLATES["ja"].short}
    assert result.satire in expected


def test_templated_empty_word_uses_placeholder():
    generator = FallbackGenerator("templated", rng=random.Random(3))
    result = generator.fallback("   ", "long", "smile", "en")
    assert result.satire.startswith("it ")
    assert result.type == "Social satire"


def test_templated_classifies_topic():
    generator = FallbackGenerator("templated")
    assert generator.fallback("AI", "long", "smile", "en").type == "Tech satire"
    assert generator.fallback("上司", "long", "smile", "ja").type == "仕事風刺"
    assert generator.fallback("love", "short", "smile", "fr").type == "Satire amoureuse"
    assert generator.fallback("雨", "short", "smile", "ja").type == "社会風刺"


def test_templated_choice_is_uniform_over_candidates():
    generator = FallbackGenerator("templated", rng=random.Random(11))
    seen = {generator.fallback("x", "long", "smile", "de").satire for _ in range(200)}
    assert len(seen) == len(TEMPLATES["de"].long)


def test_generic_mode_ignores_language_templates():
    generator = FallbackGenerator("generic")
    short = generator.fallback("AI", "short", "printer", "ja")
    long = generator.fallback("", "long", "smile", "ko")
    assert short.satire == GENERIC_TEMPLATES.short[0].format(word="AI")
    assert short.type == "社会風刺"
    assert long.satire == GENERIC_TEMPLATES.long[0].format(word=GENERIC_PLACEHOLDER)
    assert long.type == "사회 풍자"


def test_unknown_mode_and_tag_are_coerced():
    generator = FallbackGenerator("mystery")
    assert generator.mode == "templated"
    result = generator.fallback(None, "weird", "weird", "xx")
    assert result.satire
    assert result.type == "Social satire"


def test_word_with_braces_is_not_reformatted():
    generator = FallbackGenerator("templated", rng=random.Random(0))
    assert "{x}" in generator.fallback("{x}", "short", "smile", "en").satire
