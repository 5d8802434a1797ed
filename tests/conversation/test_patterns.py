"""Tests for keyword entries, pools and the keyword table."""

import pytest

from retrochat.conversation.patterns import KeywordEntry, KeywordTable, ResponsePool
from retrochat.conversation.state import Topic
from retrochat.conversation.vocabulary import KEYWORD_ENTRIES, POOL_DEFINITIONS


class TestKeywordEntry:
    """Tests for entry validation."""

    def test_valid_entry(self):
        entry = KeywordEntry("sid", "sid_pool", 3, Topic.HARDWARE, is_pool=True)
        assert entry.weight == 3
        assert entry.is_pool

    @pytest.mark.parametrize("weight", [-1, 128])
    def test_weight_out_of_range(self, weight):
        """Weights must fit 0-127."""
        with pytest.raises(ValueError):
            KeywordEntry("sid", "sid", weight, Topic.HARDWARE)

    def test_empty_pattern(self):
        with pytest.raises(ValueError):
            KeywordEntry("", "sid", 1, Topic.HARDWARE)


class TestResponsePool:
    """Tests for pool cycling state."""

    def test_advance_wraps(self):
        pool = ResponsePool("p", ["a", "b", "c"])
        for _ in range(3):
            pool.advance()
        assert pool.cycling_index == 0

    def test_empty_pool_rejected(self):
        with pytest.raises(ValueError):
            ResponsePool("p", [])


class TestKeywordTable:
    """Tests for table construction."""

    def test_unknown_pool_rejected(self):
        """Pool entries must point at a defined pool."""
        entry = KeywordEntry("joke", "joke_pool", 2, Topic.HUMOR, is_pool=True)
        with pytest.raises(ValueError):
            KeywordTable([entry], {})

    def test_tables_own_their_pools(self):
        """Cycling one table's pool leaves another table's alone."""
        first = KeywordTable(KEYWORD_ENTRIES, POOL_DEFINITIONS)
        second = KeywordTable(KEYWORD_ENTRIES, POOL_DEFINITIONS)
        first.get_pool("hello_pool").advance()
        assert second.get_pool("hello_pool").cycling_index == 0

    def test_order_preserved(self, table):
        """Entries come back in declared order."""
        assert table.entries[0].pattern == "hello"
        assert table.entries[-1].pattern == "generat"
        assert len(table) == len(KEYWORD_ENTRIES)

    def test_direct_targets_exclude_pools(self, table):
        targets = table.direct_targets()
        assert "hey" in targets
        assert "hello_pool" not in targets

    def test_multi_word_phrases_outweigh_single_words(self, table):
        """Phrases such as "meaning of life" carry more weight than their words."""
        weights = {entry.pattern: entry.weight for entry in table.entries}
        assert weights["meaning of life"] > weights["meaning"]
        assert weights["6502 assembl"] > weights["assembl"]
