"""Raw request fields -> `CanonicalRequest`.

Field lookup model:
    Several client field names carry the same concept. Each concept has an
    explicit ordered field list and the first non-empty value wins:
        - language: `lang`, `language`, `mode`, `screen`, `locale`
        - style:    `style`, `screen`, `mode`
    `mode` and `screen` are shared by both lists, so style keywords found in
    them are skipped when looking for a language.

Annotation handling:
    Client UIs append bracketed hints to the word, for example `boss(長め)` or
    `会議 [プリンター]`. Length is read from a trailing annotation, style from a
    bracketed keyword anywhere, and both are stripped before the word reaches
    prompting or fallback.

Failure handling:
    Raises `ValidationError` when no usable word remains.
"""

import logging
import re
from typing import Iterable, Mapping, Optional

from satire_api.core.errors import ValidationError
from satire_api.core.types import LENGTH_MODES, STYLE_MODES, CanonicalRequest
from satire_api.nlp import language_registry


logger = logging.getLogger(__name__)

LANGUAGE_FIELDS = ("lang", "language", "mode", "screen", "locale")
STYLE_FIELDS = ("style", "screen", "mode")
DEFAULT_LENGTH_MODE = "long"

_OPEN = r"[\[\(（]"
_CLOSE = r"[\]\)）]"

# Trailing length annotation, matched after style tags are removed:
# "(短め)", "（長め・スマイル）", "(short)".
_LENGTH_ANNOTATION = re.compile(
    _OPEN + r"\s*(短め|長め|short|long)[^\]\)）]*" + _CLOSE + r"\s*$",
    re.IGNORECASE,
)
_LENGTH_KEYWORDS = {"短め": "short", "長め": "long", "short": "short", "long": "long"}

# Style keyword inside any bracket group.
_STYLE_ANNOTATION = re.compile(
    _OPEN + r"[^\]\)）]*?(プリンター|スマイル|printer|smile)[^\]\)）]*?" + _CLOSE,
    re.IGNORECASE,
)
_BARE_STYLE = re.compile(r"\b(printer|smile)\b", re.IGNORECASE)
_STYLE_KEYWORDS = {
    "プリンター": "printer",
    "スマイル": "smile",
    "printer": "printer",
    "smile": "smile",
}

_STYLE_TAG = re.compile(
    _OPEN + r"\s*(プリンター|スマイル|printer|smile)\s*" + _CLOSE,
    re.IGNORECASE,
)


def first_non_empty(fields: Mapping, names: Iterable[str], skip=(), only=None) -> str:
    """Return the first non-empty trimmed value among `names`.

    Values whose lowercase form is in `skip` are ignored. When `only` is given,
    values whose lowercase form is not in it are ignored as well.
    """
    for name in names:
        value = fields.get(name)
        if value is None:
            continue
        text = str(value).strip()
        if not text or text.lower() in skip:
            continue
        if only is not None and text.lower() not in only:
            continue
        return text
    return ""


def resolve_length_mode(explicit: str, raw_word: str) -> str:
    mode = (explicit or "").strip().lower()
    if mode in LENGTH_MODES:
        return mode

    match = _LENGTH_ANNOTATION.search(_STYLE_TAG.sub("", raw_word))
    if match:
        return _LENGTH_KEYWORDS[match.group(1).lower()]

    return DEFAULT_LENGTH_MODE


def resolve_style_mode(explicit: str, raw_word: str, length_mode: str) -> str:
    mode = (explicit or "").strip().lower()
    if mode in STYLE_MODES:
        return mode

    match = _STYLE_ANNOTATION.search(raw_word) or _BARE_STYLE.search(raw_word)
    if match:
        return _STYLE_KEYWORDS[match.group(1).lower()]

    return "printer" if length_mode == "short" else "smile"


def strip_annotations(raw_word: str) -> str:
    """Remove bracketed style tags, then the trailing length annotation."""
    word = _STYLE_TAG.sub("", raw_word)
    word = _LENGTH_ANNOTATION.sub("", word)
    return word.strip()


def normalize(fields: Optional[Mapping]) -> CanonicalRequest:
    """Build a `CanonicalRequest` from raw inbound fields.

    Args:
        fields: Decoded request body. `None` is treated as an empty mapping.

    Returns:
        Canonical request with resolved language, length and style.

    Raises:
        ValidationError: When the word is missing, blank, or consists only of
            annotations.
    """
    fields = fields or {}

    raw_value = fields.get("word")
    raw_word = "" if raw_value is None else str(raw_value).strip()
    if not raw_word:
        raise ValidationError("word is required")

    lang_tag = language_registry.resolve(
        first_non_empty(fields, LANGUAGE_FIELDS, skip=STYLE_MODES)
    )
    length_mode = resolve_length_mode(str(fields.get("length") or ""), raw_word)
    style_mode = resolve_style_mode(
        first_non_empty(fields, STYLE_FIELDS, only=STYLE_MODES), raw_word, length_mode
    )

    word = strip_annotations(raw_word)
    if not word:
        raise ValidationError("word is required")

    logger.debug(
        "Normalized request lang=%s length=%s style=%s",
        lang_tag,
        length_mode,
        style_mode,
    )

    return CanonicalRequest(
        word=word,
        lang_tag=lang_tag,
        length_mode=length_mode,
        style_mode=style_mode,
    )
