"""Tests for keyword matching, pool resolution and generic fallback."""

import pytest

from retrochat.config.constants import THOUGHTFUL_PREFIX
from retrochat.conversation.clock import FixedClock
from retrochat.conversation.corpus import GENERIC_RESPONSES, RESPONSES
from retrochat.conversation.entropy import ConstantEntropy
from retrochat.conversation.patterns import KeywordEntry, KeywordTable, ResponsePool
from retrochat.conversation.selector import (
    KeywordMatcher,
    PoolResolver,
    ResponseSelector,
    mode_bonus,
)
from retrochat.conversation.state import Mode, Topic
from retrochat.conversation.text import Message
from retrochat.protocols.clock import ClockReading


def entry(pattern, target, weight=2, topic=Topic.GENERAL):
    return KeywordEntry(pattern, target, weight, topic)


class TestKeywordMatcher:
    """Tests for scoring and tie-breaking."""

    def test_tie_goes_to_later_entry(self, state):
        """Equal scores: the entry listed later wins."""
        table = KeywordTable([entry("cat", "first"), entry("dog", "second")])
        assert KeywordMatcher(table).match("cat and dog", state).target == "second"

    def test_tie_order_reversed(self, state):
        table = KeywordTable([entry("dog", "second"), entry("cat", "first")])
        assert KeywordMatcher(table).match("cat and dog", state).target == "first"

    def test_higher_weight_wins(self, state):
        table = KeywordTable([entry("cat", "first", 3), entry("dog", "second", 2)])
        assert KeywordMatcher(table).match("cat and dog", state).target == "first"

    def test_topic_continuity_bonus(self, state):
        """Staying on the last topic breaks an otherwise even contest."""
        table = KeywordTable(
            [entry("cat", "first", topic=Topic.HARDWARE), entry("dog", "second", topic=Topic.CODING)]
        )
        state.last_topic = Topic.HARDWARE
        match = KeywordMatcher(table).match("cat and dog", state)
        assert match.target == "first"
        assert match.score == 3

    def test_bonus_not_written_back(self, state):
        """Scoring never changes the entry's weight."""
        cat = entry("cat", "first", topic=Topic.HARDWARE)
        state.last_topic = Topic.HARDWARE
        KeywordMatcher(KeywordTable([cat])).match("cat", state)
        assert cat.weight == 2

    def test_no_match(self, state):
        table = KeywordTable([entry("cat", "first")])
        assert KeywordMatcher(table).match("a bird", state) is None

    def test_zero_score_is_no_match(self, state):
        table = KeywordTable([entry("cat", "first", 0)])
        assert KeywordMatcher(table).match("cat", state) is None

    def test_match_end_reported(self, state):
        table = KeywordTable([entry("sid", "sid")])
        assert KeywordMatcher(table).match("the sid chip", state).match_end == 7

    def test_multi_word_phrase_wins_in_default_table(self, table, state):
        """"meaning of life" beats 'meaning' and 'life'."""
        match = KeywordMatcher(table).match("what is the meaning of life", state)
        assert match.entry.pattern == "meaning of life"


class TestModeBonus:
    """Tests for mode/topic affinity."""

    def test_playful_humor(self):
        assert mode_bonus(Mode.PLAYFUL, Topic.HUMOR) == 1

    @pytest.mark.parametrize("topic", [Topic.CODING, Topic.HARDWARE])
    def test_technical(self, topic):
        assert mode_bonus(Mode.TECHNICAL, topic) == 1

    def test_no_affinity(self):
        assert mode_bonus(Mode.NORMAL, Topic.HUMOR) == 0
        assert mode_bonus(Mode.PLAYFUL, Topic.CODING) == 0

    def test_playful_prefers_jokes(self, table, state):
        """In playful mode a joke beats an equally weighted general topic."""
        state.mode = Mode.PLAYFUL
        match = KeywordMatcher(table).match("a funny recipe", state)
        assert match.target == "joke_pool"


class TestPoolResolver:
    """Tests for mode-dependent variant choice."""

    @pytest.fixture
    def pool(self):
        return ResponsePool("p", ["a", "b", "c"])

    def test_normal_cycles(self, pool):
        resolver = PoolResolver()
        picks = [resolver.resolve(pool, Mode.NORMAL) for _ in range(4)]
        assert picks == ["a", "b", "c", "a"]

    def test_concise_takes_first_without_advancing(self, pool):
        resolver = PoolResolver()
        assert resolver.resolve(pool, Mode.CONCISE) == "a"
        assert resolver.resolve(pool, Mode.CONCISE) == "a"
        assert pool.cycling_index == 0

    def test_playful_takes_last_without_advancing(self, pool):
        resolver = PoolResolver()
        assert resolver.resolve(pool, Mode.PLAYFUL) == "c"
        assert pool.cycling_index == 0

    def test_technical_cycles(self, pool):
        resolver = PoolResolver()
        resolver.resolve(pool, Mode.TECHNICAL)
        assert pool.cycling_index == 1


class TestResponseSelector:
    """Tests for the full selection step."""

    @pytest.fixture
    def clock(self):
        return FixedClock()

    @pytest.fixture
    def selector(self, table, corpus, clock):
        return ResponseSelector(table, corpus, ConstantEntropy(0), clock)

    def test_direct_response(self, selector, state):
        selection = selector.select(Message.from_raw("my cpu"), state)
        assert selection.response_id == "cpu"
        assert selection.template == RESPONSES["cpu"]
        assert not selection.is_generic

    def test_match_sets_topic_and_refines_word(self, selector, state):
        selection = selector.select(Message.from_raw("tell me about sid chips"), state)
        assert selection.response_id == "sid"
        assert selection.word == "chips"
        assert state.last_topic == Topic.HARDWARE

    def test_pool_cycles_across_turns(self, selector, state):
        ids = [selector.select(Message.from_raw("hello"), state).response_id for _ in range(4)]
        assert ids == ["hello", "hello_b", "hello_c", "hello"]

    def test_greeting_prefixed_when_time_set(self, selector, state, clock):
        clock.set(7, 44, False)
        state.time_set = True
        selection = selector.select(Message.from_raw("hello"), state)
        assert selection.template == "Good morning! " + RESPONSES["hello"]

    def test_greeting_plain_when_time_unset(self, selector, state):
        assert selector.select(Message.from_raw("hello"), state).template == RESPONSES["hello"]

    def test_other_pools_not_prefixed(self, selector, state, clock):
        clock.set(7, 44, True)
        state.time_set = True
        assert selector.select(Message.from_raw("a joke"), state).template == RESPONSES["joke"]

    def test_generic_index_from_counter(self, selector, state):
        """With zero entropy the generic index is the response counter."""
        state.response_counter = 9
        selection = selector.select(Message.from_raw("zzzz qqqq"), state)
        assert selection.is_generic
        assert selection.template == GENERIC_RESPONSES[9]
        assert selection.word == "zzzz"

    def test_generic_index_wraps(self, table, corpus, clock, state):
        selector = ResponseSelector(table, corpus, ConstantEntropy(3), clock)
        state.response_counter = 17
        selection = selector.select(Message.from_raw("zzzz"), state)
        assert selection.template == GENERIC_RESPONSES[(3 ^ 17) % 16]

    def test_generic_keeps_topic(self, selector, state):
        state.last_topic = Topic.CODING
        selector.select(Message.from_raw("zzzz"), state)
        assert state.last_topic == Topic.CODING

    def test_long_input_prefix(self, selector, state):
        selection = selector.select(Message.from_raw("zzzz " * 9), state)
        assert selection.template.startswith(THOUGHTFUL_PREFIX)

    def test_clock_reading_used_for_greeting(self, selector, state, clock):
        clock.set(8, 0, True)
        state.time_set = True
        assert selector.select(Message.from_raw("hello"), state).template.startswith("Good evening! ")
