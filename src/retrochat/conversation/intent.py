"""
Intent classification by first-word and punctuation rules.

Classifies user input into a small set of utterance types. The rules are a
fixed priority chain: a question mark always wins, a short reply to a
follow-up question keeps the follow-up intent, and otherwise the first word
decides.
"""

from enum import Enum

from retrochat.config.constants import (
    GREETING_WORDS,
    LONG_INPUT_MIN,
    QUESTION_START_WORDS,
    REQUEST_WORDS,
    SHORT_INPUT_MAX,
)


class IntentType(Enum):
    """User intent categories."""

    QUESTION = "question"
    STATEMENT = "statement"
    REQUEST = "request"
    GREETING = "greeting"
    FOLLOWUP = "followup"  # Bot just asked a clarifying question


class InputLength(Enum):
    """Coarse input length classes."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


def classify_length(raw_text: str) -> InputLength:
    """Classify raw input by its length."""
    if len(raw_text) >= LONG_INPUT_MIN:
        return InputLength.LONG
    if len(raw_text) >= SHORT_INPUT_MAX:
        return InputLength.MEDIUM
    return InputLength.SHORT


def first_word(text: str) -> str:
    """Token from the first non-space character up to the next space."""
    stripped = text.lstrip(" ")
    end = stripped.find(" ")
    return stripped if end == -1 else stripped[:end]


class IntentClassifier:
    """
    Rule-based intent classifier.

    Word lists are injected so that tests can exercise the rules with
    synthetic vocabularies.

    Example:
        >>> classifier = IntentClassifier()
        >>> classifier.classify("what is a sprite", "what is a sprite", IntentType.STATEMENT)
        <IntentType.QUESTION: 'question'>
    """

    def __init__(
        self,
        question_words=QUESTION_START_WORDS,
        greeting_words=GREETING_WORDS,
        request_words=REQUEST_WORDS,
    ):
        self._question_words = frozenset(question_words)
        self._greeting_words = frozenset(greeting_words)
        self._request_words = frozenset(request_words)

    def classify(
        self, raw_text: str, normalized_text: str, last_intent: IntentType
    ) -> IntentType:
        """
        Classify the intent of one input line.

        Args:
            raw_text: Input as typed (used for its length)
            normalized_text: Case-folded input
            last_intent: Intent left by the previous turn

        Returns:
            The new intent. FOLLOWUP is returned unchanged for short replies
            to a follow-up question.
        """
        if "?" in normalized_text:
            return IntentType.QUESTION

        if len(raw_text) < SHORT_INPUT_MAX and last_intent == IntentType.FOLLOWUP:
            return IntentType.FOLLOWUP

        word = first_word(normalized_text)
        if word in self._question_words:
            return IntentType.QUESTION
        if word in self._greeting_words:
            return IntentType.GREETING
        if word in self._request_words:
            return IntentType.REQUEST
        return IntentType.STATEMENT

    def __repr__(self) -> str:
        return (
            f"IntentClassifier(question={len(self._question_words)}, "
            f"greeting={len(self._greeting_words)}, request={len(self._request_words)})"
        )
