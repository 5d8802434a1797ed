"""
Text normalization and word capture.

Everything downstream works on the normalized text: same length as the
input, letters folded to lower case, punctuation left alone so that offsets
found in the normalized text are valid in the raw text too.
"""

import re
from dataclasses import dataclass
from typing import Optional

from retrochat.config.constants import (
    FALLBACK_WORD,
    INPUT_MAX,
    MIN_CAPTURE_LENGTH,
    MIN_REFINE_LENGTH,
    NAME_FALLBACK,
    STOP_WORDS,
    WORD_DELIMITERS,
    WORD_MAX,
)
from retrochat.conversation.intent import InputLength, classify_length

SLOT_PATTERN = re.compile(r"\{(word|name)\}")

_CASE_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def bounded(text: str, limit: int) -> str:
    """Silently truncate text to ``limit`` characters."""
    return text[:limit]


def normalize(raw_text: str) -> str:
    """Fold letters to lower case without changing the length."""
    return raw_text.translate(_CASE_FOLD)


def read_word(text: str, start: int) -> str:
    """Return the delimited run beginning at ``start`` (possibly empty)."""
    end = start
    while end < len(text) and text[end] not in WORD_DELIMITERS:
        end += 1
    return text[start:end]


def skip_spaces(text: str, start: int) -> int:
    """Index of the first non-space character at or after ``start``."""
    while start < len(text) and text[start] == " ":
        start += 1
    return start


def capture_word(normalized_text: str) -> str:
    """
    Capture the first significant word for echoing back.

    A significant word is a delimited run of at least four characters that
    is not a stop word.

    Args:
        normalized_text: Case-folded input

    Returns:
        The word truncated to WORD_MAX characters, or "that" if none is found
    """
    pos = 0
    while pos < len(normalized_text):
        if normalized_text[pos] in WORD_DELIMITERS:
            pos += 1
            continue
        word = read_word(normalized_text, pos)
        if len(word) >= MIN_CAPTURE_LENGTH and word not in STOP_WORDS:
            return bounded(word, WORD_MAX)
        pos += len(word)
    return FALLBACK_WORD


def refine_word(normalized_text: str, match_end: int, current: str) -> str:
    """
    Prefer the word right after a matched keyword as the echo word.

    Args:
        normalized_text: Case-folded input
        match_end: Offset just past the matched keyword
        current: Word captured by capture_word

    Returns:
        The following word when it has at least three characters, else ``current``
    """
    start = skip_spaces(normalized_text, match_end)
    word = read_word(normalized_text, start)
    if len(word) >= MIN_REFINE_LENGTH:
        return bounded(word, WORD_MAX)
    return current


def render_template(template: str, word: str, name: Optional[str]) -> str:
    """
    Fill the word-echo and name-echo placeholders.

    Both placeholders are filled in one pass, so braces inside the word or
    the name are shown as typed.
    """
    values = {"word": word, "name": name if name is not None else NAME_FALLBACK}
    return SLOT_PATTERN.sub(lambda m: values[m.group(1)], template)


@dataclass(frozen=True)
class Message:
    """One analysed input line."""

    raw_text: str
    normalized_text: str
    captured_word: str
    length_class: InputLength

    @classmethod
    def from_raw(cls, raw_text: str) -> "Message":
        """Bound, normalize and analyse a raw input line."""
        raw = bounded(raw_text, INPUT_MAX)
        normalized = normalize(raw)
        return cls(
            raw_text=raw,
            normalized_text=normalized,
            captured_word=capture_word(normalized),
            length_class=classify_length(raw),
        )

    def contains(self, *phrases: str) -> bool:
        """Whether any of the phrases occurs in the normalized text."""
        return any(phrase in self.normalized_text for phrase in phrases)

    def __repr__(self) -> str:
        return f"Message('{self.raw_text[:20]}', word='{self.captured_word}', {self.length_class.value})"
