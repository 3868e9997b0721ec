import pytest

from satire_api.nlp import language_registry
from satire_api.nlp.language_registry import DEFAULT_TAG, FALLBACK_TAG, resolve


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ja", "ja"),
        ("EN", "en"),
        ("en-US", "en"),
        ("pt_BR", "pt"),
        ("zh", "zh-rCN"),
        ("zh-Hans", "zh-rCN"),
        ("zh_CN", "zh-rCN"),
        ("zh-rcn", "zh-rCN"),
        ("zh-Hant", "zh-rTW"),
        ("zh-TW", "zh-rTW"),
        ("zh-HK", "zh-rTW"),
        ("zh-Hant-TW", "zh-rTW"),
        (" ko ", "ko"),
    ],
)
def test_resolve_normalizes_variants(raw, expected):
    assert resolve(raw) == expected


def test_resolve_blank_uses_default_tag():
    assert resolve("") == DEFAULT_TAG
    assert resolve(None) == DEFAULT_TAG
    assert resolve("   ") == DEFAULT_TAG


@pytest.mark.parametrize("raw", ["klingon", "xx-YY", "printer", "123"])
def test_resolve_unknown_uses_fallback_tag(raw):
    assert resolve(raw) == FALLBACK_TAG


@pytest.mark.parametrize(
    "raw",
    list(language_registry.supported_tags()) + ["zh-Hant", "EN-gb", "", "nope", "zh_CN"],
)
def test_resolve_is_idempotent(raw):
    once = resolve(raw)
    assert resolve(once) == once
    assert once in language_registry.supported_tags()


def test_registry_has_twenty_languages():
    tags = language_registry.supported_tags()
    assert len(tags) == 20
    assert {"ja", "en", "zh-rCN", "zh-rTW", "vi"} <= set(tags)


@pytest.mark.parametrize("tag", language_registry.supported_tags())
def test_every_tag_has_complete_row(tag):
    row = language_registry.profile(tag)
    assert row.display_name
    assert row.default_category
    assert row.placeholder
    assert set(row.categories) == set(language_registry.TOPICS)
    assert row.templates.short and row.templates.long
    for template in row.templates.short + row.templates.long:
        assert template.count("{word}") == 1


def test_category_lookup_and_unknown_topic():
    assert language_registry.category("ja", "work") == "仕事風刺"
    assert language_registry.category("en", "tech") == "Tech satire"
    assert language_registry.category("en", "weather") == "Social satire"


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        language_registry.PROFILES["xx"] = None
