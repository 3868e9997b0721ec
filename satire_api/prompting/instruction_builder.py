"""Instruction assembly for satire generation.

This module only turns an already normalized `CanonicalRequest` into the two
role-tagged instruction texts. Normalization, model invocation and output
validation happen elsewhere.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed ordering of instruction components.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - Safety is instruction-led, not parser-enforced.
    - The word is interpolated as raw text on its own final line.
"""

from satire_api.core.types import CanonicalRequest, Instruction
from satire_api.nlp import language_registry


STANDARD_VARIANT = "standard"
REFINED_VARIANT = "refined"
VARIANTS = (STANDARD_VARIANT, REFINED_VARIANT)

LENGTH_RANGES = {
    "short": (14, 30),
    "long": (30, 70),
}


# =========================================================
# SYSTEM TEXT
# =========================================================

def build_system_text(lang_tag: str) -> str:
    return (
        "You must always write the answer in the application-specified language only. "
        f"LANG={lang_tag}. "
        "Return a single JSON object only, with no text before or after it. "
        "Avoid hate speech, slurs, doxxing."
    )


# =========================================================
# USER TEXT COMPONENTS
# =========================================================
# Component order:
#   1) language lock
#   2) task + length range
#   3) register constraint
#   4) tone + content safety
#   5) optional self-revision protocol
#   6) output schema
#   7) the word

def language_lock_line(lang_tag: str) -> str:
    name = language_registry.display_name(lang_tag)
    return (
        f"IMPORTANT: The output language is {name} (LANG={lang_tag}) only. "
        f"Write only in {name} and never mix in any other language."
    )


def length_rule(length_mode: str) -> str:
    low, high = LENGTH_RANGES.get(length_mode, LENGTH_RANGES["long"])
    return f"{low} to {high} characters"


REGISTER_RULES = (
    "- Register: literary, declarative written prose only.\n"
    "- Never conversational: no spoken-style phrasing, no monologue, "
    "no interjections, no dialogue markers or quotation of speech.\n"
)

SAFETY_RULES = (
    "- Tone: edgy but harmless.\n"
    "- No hate speech, no personal attacks, no doxxing, no incitement.\n"
    "- Replace proper names with general terms when needed.\n"
    "- Avoid obscure vocabulary.\n"
)

SELF_REVISION_RULES = (
    "Revision protocol (internal, never shown):\n"
    "1. Draft a first candidate and treat it as the baseline.\n"
    "2. Revise it once for more surprise and coherence.\n"
    "3. Revise again, maximizing surprise, coherence and humor together.\n"
    "4. Emit only the final revision. Drafts must never appear in the output.\n"
)

OUTPUT_SCHEMA = (
    "Output exactly this JSON and nothing else:\n"
    '{"satire":"…","type":"…"}\n'
    '- "satire": one or two lines, the satirical statement itself.\n'
    '- "type": a one-word or very short category, such as social, work, '
    "love or technology satire, written in the output language.\n"
)


def build_user_text(request: CanonicalRequest, variant: str = STANDARD_VARIANT) -> str:
    """Assemble the user instruction for `request`.

    Args:
        request: Normalized request.
        variant: `"standard"` or `"refined"` (adds the self-revision protocol).

    Returns:
        User instruction text.
    """
    name = language_registry.display_name(request.lang_tag)

    parts = [
        language_lock_line(request.lang_tag) + "\n",
        (
            f"Write a sharp, biting satire about the word below in {name}, "
            f"{length_rule(request.length_mode)} long. It must be unexpected "
            "yet convincing, and funny.\n"
        ),
        REGISTER_RULES,
        SAFETY_RULES,
    ]

    if variant == REFINED_VARIANT:
        parts.append(SELF_REVISION_RULES)

    parts.append(OUTPUT_SCHEMA)
    parts.append(f"Word: {request.word}")

    return "".join(parts)


def build(request: CanonicalRequest, variant: str = STANDARD_VARIANT) -> Instruction:
    """Build the immutable instruction pair for one request.

    Unknown variants are treated as `"standard"`.
    """
    if variant not in VARIANTS:
        variant = STANDARD_VARIANT

    return Instruction(
        system_text=build_system_text(request.lang_tag),
        user_text=build_user_text(request, variant),
    )
