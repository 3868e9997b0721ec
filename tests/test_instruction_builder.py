import pytest

from satire_api.core.types import CanonicalRequest
from satire_api.prompting import instruction_builder


def _request(**overrides):
    values = {"word": "会議", "lang_tag": "ja", "length_mode": "long", "style_mode": "smile"}
    values.update(overrides)
    return CanonicalRequest(**values)


def test_build_is_pure():
    first = instruction_builder.build(_request())
    second = instruction_builder.build(_request())
    assert first == second
    assert first.user_text.encode("utf-8") == second.user_text.encode("utf-8")


def test_system_text_locks_language_and_json():
    instruction = instruction_builder.build(_request(lang_tag="de"))
    assert "LANG=de" in instruction.system_text
    assert "JSON" in instruction.system_text


def test_user_text_contents():
    text = instruction_builder.build(_request(lang_tag="en", word="AI")).user_text
    assert "English (LANG=en)" in text
    assert "never mix" in text
    assert "30 to 70 characters" in text
    assert "no interjections" in text
    assert "edgy but harmless" in text
    assert "doxxing" in text
    assert '{"satire":"…","type":"…"}' in text
    assert text.endswith("Word: AI")


def test_short_length_range():
    text = instruction_builder.build(_request(length_mode="short")).user_text
    assert "14 to 30 characters" in text


def test_refined_variant_adds_revision_protocol():
    standard = instruction_builder.build(_request(), "standard").user_text
    refined = instruction_builder.build(_request(), "refined").user_text
    assert "Revision protocol" not in standard
    assert "Revision protocol" in refined
    assert "Drafts must never appear" in refined
    assert "edgy but harmless" in refined


def test_unknown_variant_is_standard():
    assert instruction_builder.build(_request(), "bogus") == instruction_builder.build(_request())


def test_messages_are_role_tagged_in_order():
    messages = instruction_builder.build(_request()).as_messages()
    assert [m["role"] for m in messages] == ["system", "user"]


def test_instruction_is_immutable():
    instruction = instruction_builder.build(_request())
    with pytest.raises(AttributeError):
        instruction.user_text = "changed"
