"""Rule-based topic sniffing for fallback category labels.

Classification model:
    - Ordered `(pattern, topic)` rule table, first match wins.
    - Patterns are multilingual keyword alternations matched against the raw
      word with `re.search`.
    - No match returns `None`; callers substitute the language default.

Determinism:
    Deterministic for identical input and the constant rule table.

Bypass risk:
    Lexical cues only. Synonyms, misspellings and unsupported languages fall
    through to the default category, which is an acceptable outcome for a
    fallback label.
"""

import re
from typing import Optional, Pattern, Tuple


TOPIC_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    # Technology. Latin "ai"/"ais" only as a standalone token so "said"/"chair" miss.
    (
        re.compile(
            r"openai|(?<![a-z])ais?(?![a-z])|ＡＩ|人工知能|人工智能|テクノロジー|ロボット|robot|"
            r"\btech|smartphone|スマホ|科技|인공지능",
            re.IGNORECASE,
        ),
        "tech",
    ),
    # Workplace authority.
    (
        re.compile(
            r"上司|会議|残業|boss|chef|jefe|patron|主管|经理|經理|老板|老闆|manager|"
            r"meeting|상사|начальник",
            re.IGNORECASE,
        ),
        "work",
    ),
    # Romance.
    (
        re.compile(
            r"恋|愛|爱|love|amor|amour|liebe|사랑|любов|cinta|aşk|प्रेम|प्यार",
            re.IGNORECASE,
        ),
        "love",
    ),
)


def classify_topic(word: str) -> Optional[str]:
    """Return the first matching topic key for `word`, or `None`.

    Examples:
        >>> classify_topic("AI時代")
        'tech'
        >>> classify_topic("boss")
        'work'
        >>> classify_topic("雨")
    """
    if not word:
        return None

    for pattern, topic in TOPIC_RULES:
        if pattern.search(word):
            return topic

    return None
