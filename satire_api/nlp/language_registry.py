"""Static language table consumed by normalization, prompting and fallback.

Architectural role:
    Single source of truth for supported output languages. Maps a canonical
    language tag to its display name, default category label, localized topic
    labels, generic placeholder word and fallback template set.

Tag resolution:
    `resolve` is a total function. Casing, `_` separators, Chinese script and
    region variants, and generic region suffixes (`en-US`) are normalized to a
    supported tag. Empty input resolves to `DEFAULT_TAG`; anything else that is
    not recognized resolves to `FALLBACK_TAG`.

Determinism:
    Fully deterministic. The table is built once at import and exposed through
    read-only mappings; nothing in this module mutates after import.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from satire_api.fallback.templates import GENERIC_TEMPLATES, TEMPLATES, TemplateSet


DEFAULT_TAG = "ja"
FALLBACK_TAG = "en"

TOPICS = ("tech", "work", "love")


@dataclass(frozen=True)
class LanguageProfile:
    """Per-language registry row.

    Attributes:
        tag: Canonical language tag.
        display_name: Endonym used inside instructions.
        default_category: Category label used when nothing more specific applies.
        placeholder: Generic word substituted for an empty input in fallbacks.
        categories: Localized labels keyed by topic (`tech`, `work`, `love`).
        templates: Short/long fallback phrase templates with a `{word}` slot.
    """

    tag: str
    display_name: str
    default_category: str
    placeholder: str
    categories: Mapping[str, str]
    templates: TemplateSet


# (tag, display name, default category, placeholder, tech, work, love)
_ROWS: Tuple[Tuple[str, str, str, str, str, str, str], ...] = (
    ("ja", "日本語", "社会風刺", "それ", "テクノロジー風刺", "仕事風刺", "恋愛風刺"),
    ("en", "English", "Social satire", "it", "Tech satire", "Work satire", "Love satire"),
    ("zh-rCN", "简体中文", "社会讽刺", "它", "科技讽刺", "职场讽刺", "爱情讽刺"),
    ("zh-rTW", "繁體中文", "社會諷刺", "它", "科技諷刺", "職場諷刺", "愛情諷刺"),
    ("es", "Español", "Sátira social", "eso", "Sátira tecnológica", "Sátira laboral", "Sátira amorosa"),
    ("fr", "Français", "Satire sociale", "cela", "Satire technologique", "Satire du travail", "Satire amoureuse"),
    ("pt", "Português", "Sátira social", "isso", "Sátira tecnológica", "Sátira de trabalho", "Sátira de amor"),
    ("de", "Deutsch", "Gesellschaftssatire", "das", "Technik-Satire", "Arbeits-Satire", "Liebes-Satire"),
    ("ko", "한국어", "사회 풍자", "그것", "기술 풍자", "직장 풍자", "연애 풍자"),
    ("hi", "हिन्दी", "सामाजिक व्यंग्य", "यह", "टेक व्यंग्य", "काम पर व्यंग्य", "प्रेम व्यंग्य"),
    ("id", "Bahasa Indonesia", "Satir sosial", "itu", "Satir teknologi", "Satir pekerjaan", "Satir cinta"),
    ("tr", "Türkçe", "Toplumsal hiciv", "bu", "Teknoloji hicvi", "İş hicvi", "Aşk hicvi"),
    ("ru", "Русский", "Социальная сатира", "это", "Технологическая сатира", "Сатира о работе", "Сатира о любви"),
    ("bn", "বাংলা", "সামাজিক ব্যঙ্গ", "ওটা", "প্রযুক্তি ব্যঙ্গ", "কর্মক্ষেত্র ব্যঙ্গ", "ভালোবাসার ব্যঙ্গ"),
    ("sw", "Kiswahili", "Udhihaka wa kijamii", "hicho", "Udhihaka wa teknolojia", "Udhihaka wa kazi", "Udhihaka wa mapenzi"),
    ("ar", "العربية", "سخرية اجتماعية", "ذلك", "سخرية تقنية", "سخرية العمل", "سخرية الحب"),
    ("mr", "मराठी", "सामाजिक उपहास", "ते", "तंत्रज्ञानावर उपहास", "कामावर उपहास", "प्रेमावर उपहास"),
    ("te", "తెలుగు", "సామాజిక వ్యంగ్యం", "అది", "సాంకేతిక వ్యంగ్యం", "పని పై వ్యంగ్యం", "ప్రేమ వ్యంగ్యం"),
    ("ta", "தமிழ்", "சமூக கிண்டல்", "அது", "தொழில்நுட்ப கிண்டல்", "வேலை கிண்டல்", "காதல் கிண்டல்"),
    ("vi", "Tiếng Việt", "Châm biếm xã hội", "điều đó", "Châm biếm công nghệ", "Châm biếm công việc", "Châm biếm tình yêu"),
)


def _build_profiles() -> Mapping[str, LanguageProfile]:
    profiles = {}
    for tag, name, default, placeholder, tech, work, love in _ROWS:
        profiles[tag] = LanguageProfile(
            tag=tag,
            display_name=name,
            default_category=default,
            placeholder=placeholder,
            categories=MappingProxyType({"tech": tech, "work": work, "love": love}),
            templates=TEMPLATES[tag],
        )
    return MappingProxyType(profiles)


PROFILES: Mapping[str, LanguageProfile] = _build_profiles()

# Case-insensitive lookup of exact tags (`zh-rcn` -> `zh-rCN`).
_EXACT = MappingProxyType({tag.lower(): tag for tag in PROFILES})

_SIMPLIFIED_CHINESE = re.compile(r"^zh(?:-(?:hans|cn|sg|rcn)(?:-.*)?)?$")
_TRADITIONAL_CHINESE = re.compile(r"^zh-(?:hant|tw|hk|mo|rtw|rhk)(?:-.*)?$")


def resolve(raw_tag) -> str:
    """Map any raw language hint to a supported tag.

    Args:
        raw_tag: Client-provided tag (`"ja"`, `"zh_TW"`, `"en-US"`, `None`, ...).

    Returns:
        Supported tag. Never raises.

    Edge cases:
        - `None`/blank input returns `DEFAULT_TAG`.
        - Unknown non-blank input returns `FALLBACK_TAG`.
    """
    text = str(raw_tag or "").replace("_", "-").strip()
    if not text:
        return DEFAULT_TAG

    key = text.lower()
    if key in _EXACT:
        return _EXACT[key]

    if _SIMPLIFIED_CHINESE.match(key):
        return "zh-rCN"
    if _TRADITIONAL_CHINESE.match(key):
        return "zh-rTW"

    primary = key.split("-", 1)[0]
    if primary != "zh" and primary in _EXACT:
        return _EXACT[primary]

    return FALLBACK_TAG


def profile(tag: str) -> LanguageProfile:
    """Return the registry row for `tag`, resolving it first."""
    return PROFILES[resolve(tag)]


def supported_tags() -> Tuple[str, ...]:
    return tuple(PROFILES)


def display_name(tag: str) -> str:
    return profile(tag).display_name


def default_category(tag: str) -> str:
    return profile(tag).default_category


def placeholder(tag: str) -> str:
    return profile(tag).placeholder


def category(tag: str, topic: str) -> str:
    """Localized label for `topic`, or the default category for unknown topics."""
    row = profile(tag)
    return row.categories.get(topic, row.default_category)


def fallback_templates(tag: str) -> TemplateSet:
    return profile(tag).templates


def generic_templates() -> TemplateSet:
    """Language-independent short/long pair used by the generic fallback."""
    return GENERIC_TEMPLATES
