"""
Response selection: scored keyword matching with a generic fallback.

Every keyword entry is scored against the input; the best score picks the
response. Scores start at the entry's weight and earn small bonuses for
staying on the previous topic and for suiting the current mode. When no
keyword matches, one of the generic responses is picked pseudo-randomly.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from retrochat.config.constants import (
    GENERIC_COUNT,
    MODE_BONUS,
    THOUGHTFUL_PREFIX,
    TOPIC_CONTINUITY_BONUS,
)
from retrochat.conversation.corpus import ResponseCorpus
from retrochat.conversation.intent import InputLength
from retrochat.conversation.negation import is_negated
from retrochat.conversation.patterns import KeywordEntry, KeywordTable, ResponsePool
from retrochat.conversation.state import ConversationState, Mode, Topic
from retrochat.conversation.text import Message, refine_word
from retrochat.conversation.timekeeping import time_of_day_greeting
from retrochat.conversation.vocabulary import GREETING_POOL
from retrochat.protocols.clock import Clock
from retrochat.protocols.entropy import EntropySource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordMatch:
    """The winning keyword for one input."""

    entry: KeywordEntry
    match_end: int  # Offset just past the occurrence
    score: int

    @property
    def target(self) -> str:
        return self.entry.target

    @property
    def topic(self) -> Topic:
        return self.entry.topic

    @property
    def is_pool(self) -> bool:
        return self.entry.is_pool

    def __repr__(self) -> str:
        return f"KeywordMatch('{self.entry.pattern}' -> {self.target}, score={self.score})"


@dataclass
class Selection:
    """A chosen response template and the echo word to render it with."""

    template: str
    word: str
    response_id: Optional[str] = None  # None for generic responses
    match: Optional[KeywordMatch] = None

    @property
    def is_generic(self) -> bool:
        return self.match is None


def mode_bonus(mode: Mode, topic: Topic) -> int:
    """Bonus for keywords whose topic suits the current mode."""
    if mode == Mode.PLAYFUL and topic == Topic.HUMOR:
        return MODE_BONUS
    if mode == Mode.TECHNICAL and topic in (Topic.CODING, Topic.HARDWARE):
        return MODE_BONUS
    return 0


class KeywordMatcher:
    """
    Scores every keyword entry against the normalized input.

    Ties go to the later entry in the table, so more specific phrases are
    listed after the single words they contain.

    Example:
        >>> matcher = KeywordMatcher(build_keyword_table())
        >>> matcher.match("tell me about sprites", ConversationState()).target
        'sprite_pool'
    """

    def __init__(self, table: KeywordTable):
        self._table = table

    def score(self, entry: KeywordEntry, state: ConversationState) -> int:
        """Weight plus continuity and mode bonuses. The entry is not modified."""
        total = entry.weight
        if entry.topic == state.last_topic:
            total += TOPIC_CONTINUITY_BONUS
        return total + mode_bonus(state.mode, entry.topic)

    def match(self, normalized_text: str, state: ConversationState) -> Optional[KeywordMatch]:
        """
        Find the best-scoring keyword occurrence.

        Only the first occurrence of each pattern is considered; a negated
        occurrence disqualifies the entry.

        Returns:
            The winning match, or None when nothing scores above zero
        """
        best: Optional[KeywordMatch] = None
        best_score = 0

        for entry in self._table.entries:
            index = normalized_text.find(entry.pattern)
            if index == -1:
                continue
            match_end = index + len(entry.pattern)
            if is_negated(normalized_text, match_end, len(entry.pattern)):
                logger.debug(f"Keyword '{entry.pattern}' negated")
                continue

            score = self.score(entry, state)
            if score >= best_score:
                best_score = score
                best = KeywordMatch(entry=entry, match_end=match_end, score=score)

        if best is None or best_score == 0:
            return None
        logger.debug(f"Best keyword: {best!r}")
        return best


class PoolResolver:
    """Chooses a variant from a response pool according to the mode."""

    def resolve(self, pool: ResponsePool, mode: Mode) -> str:
        """
        Pick a response id from the pool.

        CONCISE always takes the first variant and PLAYFUL the last; neither
        moves the cycling index. Otherwise the current variant is taken and
        the index advances.
        """
        if mode == Mode.CONCISE:
            return pool.variants[0]
        if mode == Mode.PLAYFUL:
            return pool.variants[-1]

        response_id = pool.variants[pool.cycling_index]
        pool.advance()
        logger.debug(f"Pool {pool.pool_id} -> {response_id}, next idx={pool.cycling_index}")
        return response_id


class ResponseSelector:
    """
    Select a response when no directive answered the turn.

    Attributes:
        _table: Keyword table (owns the pools)
        _corpus: Response content
        _entropy: Source of variety for generic responses
        _clock: Clock used for time-of-day greetings
        _matcher: Keyword matcher over _table
        _pools: Pool resolver
    """

    def __init__(
        self,
        table: KeywordTable,
        corpus: ResponseCorpus,
        entropy: EntropySource,
        clock: Clock,
    ):
        self._table = table
        self._corpus = corpus
        self._entropy = entropy
        self._clock = clock
        self._matcher = KeywordMatcher(table)
        self._pools = PoolResolver()

    def select(self, message: Message, state: ConversationState) -> Selection:
        """
        Choose a response for the message.

        On a keyword match the topic is remembered and the echo word is
        refined from the text right after the keyword. Otherwise a generic
        response is chosen.
        """
        match = self._matcher.match(message.normalized_text, state)
        if match is None:
            return self.generic(message, state)

        state.last_topic = match.topic
        word = refine_word(message.normalized_text, match.match_end, message.captured_word)

        if match.is_pool:
            pool = self._table.get_pool(match.target)
            response_id = self._pools.resolve(pool, state.mode)
            template = self._corpus.get(response_id)
            if match.target == GREETING_POOL and state.time_set:
                template = time_of_day_greeting(self._clock.read()) + template
        else:
            response_id = match.target
            template = self._corpus.get(response_id)

        return Selection(template=template, word=word, response_id=response_id, match=match)

    def generic(self, message: Message, state: ConversationState) -> Selection:
        """Pick a generic response from the entropy source and the turn counter."""
        index = (self._entropy() ^ state.response_counter) % GENERIC_COUNT
        template = self._corpus.generic(index)
        if message.length_class == InputLength.LONG:
            template = THOUGHTFUL_PREFIX + template
        logger.debug(f"Generic response #{index}")
        return Selection(template=template, word=message.captured_word)

    def __repr__(self) -> str:
        return f"ResponseSelector(table={self._table!r})"
