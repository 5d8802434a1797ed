"""
Directive handlers: commands that pre-empt keyword matching.

Each directive inspects the analysed message and either answers the turn
or declines by returning None. The chain tries them in a fixed order and
the first answer wins. Directives may update the conversation state they
own (mode, user name, date).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Tuple

from retrochat.config.constants import (
    NAME_IAM_MAX_INPUT,
    RESPONSE_MAX,
    SHORT_INPUT_MAX,
    STATS_EARLY_LIMIT,
    STATS_LONG_LIMIT,
    WORD_MAX,
)
from retrochat.conversation.corpus import CONTINUE_NO, CONTINUE_YES, ResponseCorpus
from retrochat.conversation.intent import IntentType
from retrochat.conversation.state import ConversationState, Mode
from retrochat.conversation.text import Message, bounded, read_word, skip_spaces

logger = logging.getLogger(__name__)

NAME_LEARNED = "Nice to meet you, {name}! I'll remember that."


@dataclass
class DirectiveResult:
    """A directive's answer to the turn."""

    text: str  # May contain the {word} and {name} placeholders
    source: str  # Name of the directive that answered
    response_id: Optional[str] = None
    mode_changed: bool = False
    name_just_learned: bool = False

    def __repr__(self) -> str:
        return f"DirectiveResult({self.source}, '{self.text[:30]}')"


class Directive(Protocol):
    """A handler that may answer a turn before keyword matching."""

    name: str

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        ...


MODE_TRIGGERS: Tuple[Tuple[str, Mode], ...] = (
    ("be brief", Mode.CONCISE),
    ("be concise", Mode.CONCISE),
    ("be technical", Mode.TECHNICAL),
    ("be detailed", Mode.TECHNICAL),
    ("be funny", Mode.PLAYFUL),
    ("be playful", Mode.PLAYFUL),
    ("be normal", Mode.NORMAL),
)

DEPTH_TRIGGERS = ("tell me more", "more about", "go on", "elaborat")
AFFIRMATIVE_REPLIES = ("yes", "sure", "ok")
NEGATIVE_REPLIES = ("no",)

STATS_SUBJECTS = ("question", "turn", "chat", "exchang")

NAME_TRIGGERS = ("my name is ", "call me ")
IAM_TRIGGER = "i am "


class ModeSwitchDirective:
    """Switch the conversation tone on "be funny", "be brief" and friends."""

    name = "mode"

    def __init__(self, corpus: ResponseCorpus):
        self._corpus = corpus

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        for phrase, mode in MODE_TRIGGERS:
            if phrase in message.normalized_text:
                state.mode = mode
                logger.info(f"Mode switched to {mode.value}")
                return DirectiveResult(
                    text=self._corpus.mode_ack(mode), source=self.name, mode_changed=True
                )
        return None


class FollowupDirective:
    """
    Continue the previous exchange.

    Handles explicit depth requests ("tell me more") and one-word answers to
    the clarifying question the bot asked last turn. Whatever happens, the
    follow-up context is consumed: last_intent becomes STATEMENT.
    """

    name = "followup"

    def __init__(self, corpus: ResponseCorpus):
        self._corpus = corpus

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        if message.contains(*DEPTH_TRIGGERS):
            state.last_intent = IntentType.STATEMENT
            logger.debug(f"Depth request on topic {state.last_topic.value}")
            return DirectiveResult(text=self._corpus.deeper(state.last_topic), source=self.name)

        awaiting_answer = state.last_intent == IntentType.FOLLOWUP
        state.last_intent = IntentType.STATEMENT

        if not awaiting_answer or len(message.raw_text) >= SHORT_INPUT_MAX:
            return None

        if message.contains(*AFFIRMATIVE_REPLIES):
            return DirectiveResult(text=CONTINUE_YES, source=self.name)
        if message.contains(*NEGATIVE_REPLIES):
            return DirectiveResult(text=CONTINUE_NO, source=self.name)
        return None


class StatsDirective:
    """Answer "how many questions/turns/chats" and "how long" queries."""

    name = "stats"

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        asks_count = message.contains("how many") and message.contains(*STATS_SUBJECTS)
        if not (asks_count or message.contains("how long", "stats")):
            return None

        n = state.turn_count
        text = f"We've had {n} exchanges so far!"
        if n < STATS_EARLY_LIMIT:
            text += " We're just getting started."
        elif n >= STATS_LONG_LIMIT:
            text += " Quite the conversation!"
        return DirectiveResult(text=bounded(text, RESPONSE_MAX), source=self.name)


class NameDirective:
    """
    Learn the user's name from "my name is", "call me" or "i am".

    "i am" is ambiguous ("i am confused"), so it is only trusted on short
    input.
    """

    name = "name"

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        start = self._name_start(message)
        if start is None:
            return None

        text = message.normalized_text
        word = read_word(text, skip_spaces(text, start))
        if not word:
            return None

        name = bounded(word[0].upper() + word[1:], WORD_MAX)
        state.user_name = name
        logger.info(f"Learned user name: {name}")
        return DirectiveResult(
            text=NAME_LEARNED,
            source=self.name,
            name_just_learned=True,
        )

    @staticmethod
    def _name_start(message: Message) -> Optional[int]:
        text = message.normalized_text
        for trigger in NAME_TRIGGERS:
            index = text.find(trigger)
            if index != -1:
                return index + len(trigger)
        if len(message.raw_text) < NAME_IAM_MAX_INPUT:
            index = text.find(IAM_TRIGGER)
            if index != -1:
                return index + len(IAM_TRIGGER)
        return None


class DirectiveChain:
    """
    Fixed-priority chain of directives.

    Example:
        >>> chain = DirectiveChain([ModeSwitchDirective(corpus), StatsDirective()])
        >>> chain.handle(Message.from_raw("be funny"), state).mode_changed
        True
    """

    def __init__(self, directives: Iterable[Directive]):
        self._directives: List[Directive] = list(directives)

    @property
    def names(self) -> List[str]:
        """Directive names in priority order."""
        return [directive.name for directive in self._directives]

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        """Run directives in order; the first non-None result wins."""
        for directive in self._directives:
            result = directive.handle(message, state)
            if result is not None:
                logger.debug(f"Directive '{directive.name}' answered the turn")
                return result
        return None

    def __repr__(self) -> str:
        return f"DirectiveChain({', '.join(self.names)})"
