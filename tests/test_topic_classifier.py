import pytest

from satire_api.nlp.topic_classifier import TOPIC_RULES, classify_topic


@pytest.mark.parametrize(
    "word, topic",
    [
        ("AI", "tech"),
        ("AI時代", "tech"),
        ("OpenAI", "tech"),
        ("AIs", "tech"),
        ("生成ai", "tech"),
        ("上司", "work"),
        ("Boss", "work"),
        ("经理", "work"),
        ("恋愛", "love"),
        ("amour", "love"),
        ("사랑", "love"),
    ],
)
def test_classify_topic(word, topic):
    assert classify_topic(word) == topic


@pytest.mark.parametrize("word", ["", "雨", "said", "chair", "chairs", "weather"])
def test_no_match(word):
    assert classify_topic(word) is None


def test_first_rule_wins():
    # Matches both the tech and the love rule.
    assert classify_topic("AIとの恋") == "tech"
    assert [topic for _, topic in TOPIC_RULES] == ["tech", "work", "love"]
