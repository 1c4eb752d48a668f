"""Normalization of raw model completions into a commit subject line.

Local models rarely answer with just the message: they prefix it with
meta-commentary ("Here is the commit message:"), quote it, number it, or
keep talking on following lines. clean_commit_message applies a fixed
sequence of small text transformations to reduce any completion to one
short, capitalized subject line.

Contains:
- BOILERPLATE_PHRASES: Leading phrases to strip, keyed by locale
- One function per cleaning step (each str -> str)
- clean_commit_message: The full pipeline
"""

import re

from commitgenius.config import DEFAULT_MAX_SUBJECT_LENGTH
from commitgenius.styles.constants import TRUNCATION_MARKER


# Stages are applied in this order; each strips at most one phrase
BOILERPLATE_STAGES = ("meta", "intro", "context", "label", "source")

# Regex fragments matched case-insensitively at the start of the text
BOILERPLATE_PHRASES = {
    "en": {
        "meta": [
            "here is the commit message:?",
            "here's the commit message:?",
            "this is the commit message:?",
            "the commit message is:?",
            "commit message:",
            "commit:",
            "message:",
            "here is",
            "this is",
        ],
        "intro": [
            "commit message",
            r"here are \d+ possible",
        ],
        "context": [
            "for the changes?",
            "for this diff",
            "a possible",
            "diff result",
        ],
        "label": [
            "answer:",
            "response:",
            "result:",
        ],
        "source": [
            "based on",
            "according to",
        ],
    },
    "vi": {
        "intro": [
            "đây là",
            "thông điệp commit",
            "dưới đây là",
        ],
        "context": [
            "cho những thay đổi",
        ],
        "label": [
            "trả lời:",
        ],
        "source": [
            "dựa trên",
        ],
    },
}

FILLER_WORDS = ("the", "a", "an", "that", "which", "what", "how", "when", "where")


def _compile_boilerplate_patterns(phrases: dict[str, dict[str, list[str]]]) -> list[re.Pattern]:
    """Build one anchored pattern per stage from all locales' phrases."""
    patterns = []
    for stage in BOILERPLATE_STAGES:
        fragments = [
            fragment
            for locale_phrases in phrases.values()
            for fragment in locale_phrases.get(stage, [])
        ]
        if not fragments:
            continue
        # Longest first so that "here is the commit message" wins over "here is"
        fragments.sort(key=len, reverse=True)
        patterns.append(re.compile(r"^\s*(?:" + "|".join(fragments) + ")", re.IGNORECASE))
    return patterns


BOILERPLATE_PATTERNS = _compile_boilerplate_patterns(BOILERPLATE_PHRASES)

_TRAILING_PERIOD = re.compile(r"\.\Z")
_LIST_NUMBER = re.compile(r"^\d+\.\s*")
_BULLET = re.compile(r"^[-•*]\s*")
_FILLER = re.compile(r"^(?:" + "|".join(f"{word} " for word in FILLER_WORDS) + ")", re.IGNORECASE)
_TRAILING_COLON = re.compile(r":\Z")
_SENTENCE_BREAK = re.compile(r"[.,:;]")


def strip_boilerplate(text: str) -> str:
    for pattern in BOILERPLATE_PATTERNS:
        text = pattern.sub("", text, count=1)
    return text


def strip_trailing_period(text: str) -> str:
    return _TRAILING_PERIOD.sub("", text, count=1)


def strip_quotes(text: str) -> str:
    return text.replace('"', "")


def first_line(text: str) -> str:
    return text.split("\n")[0].strip()


def strip_list_number(text: str) -> str:
    return _LIST_NUMBER.sub("", text, count=1)


def strip_bullet(text: str) -> str:
    return _BULLET.sub("", text, count=1)


def strip_filler_words(text: str) -> str:
    return _FILLER.sub("", text, count=1)


def strip_trailing_colon(text: str) -> str:
    return _TRAILING_COLON.sub("", text, count=1)


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def fit_length(text: str, max_length: int = DEFAULT_MAX_SUBJECT_LENGTH) -> str:
    """Shorten text to max_length characters.

    Prefers the clause before the first sentence delimiter (. , : ;) when
    it fits; otherwise hard-truncates and appends the truncation marker.
    """
    if len(text) <= max_length:
        return text

    head = _SENTENCE_BREAK.split(text, maxsplit=1)[0]
    if head and len(head) <= max_length:
        return head.strip()

    return text[: max_length - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER


def clean_commit_message(raw: str, max_length: int = DEFAULT_MAX_SUBJECT_LENGTH) -> str:
    """Reduce a raw model completion to a single clean commit subject.

    Args:
        raw: The completion text, possibly multi-line or empty.
        max_length: Maximum subject length.

    Returns:
        A single-line subject of at most max_length characters. Empty if
        the completion contained nothing but boilerplate.
    """
    if not raw:
        return ""

    cleaned = strip_boilerplate(raw)
    cleaned = strip_trailing_period(cleaned)
    cleaned = strip_quotes(cleaned)
    cleaned = cleaned.strip()
    cleaned = first_line(cleaned)
    cleaned = strip_list_number(cleaned)
    cleaned = strip_bullet(cleaned)
    cleaned = strip_filler_words(cleaned)
    cleaned = strip_trailing_colon(cleaned)
    cleaned = capitalize_first(cleaned)
    return fit_length(cleaned, max_length)
