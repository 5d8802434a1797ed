"""Tests for the response corpus."""

import pytest

from retrochat.conversation.corpus import GENERIC_RESPONSES, ResponseCorpus
from retrochat.conversation.patterns import KeywordEntry, KeywordTable
from retrochat.conversation.state import Mode, Topic


class TestResponseCorpus:
    """Tests for lookups and validation."""

    def test_default_table_validates(self, corpus, table):
        corpus.validate(table)

    def test_dangling_id_rejected(self, corpus):
        table = KeywordTable([KeywordEntry("zork", "zork", 2, Topic.GENERAL)])
        with pytest.raises(ValueError, match="zork"):
            corpus.validate(table)

    def test_dangling_pool_variant_rejected(self, corpus):
        table = KeywordTable(
            [KeywordEntry("zork", "zork_pool", 2, Topic.GENERAL, is_pool=True)],
            {"zork_pool": ["hello", "zork_b"]},
        )
        with pytest.raises(ValueError, match="zork_b"):
            corpus.validate(table)

    def test_generic_count_enforced(self):
        with pytest.raises(ValueError):
            ResponseCorpus(generics=["only one"])

    def test_every_mode_acknowledged(self, corpus):
        for mode in Mode:
            assert corpus.mode_ack(mode)

    def test_every_topic_has_deeper_response(self, corpus):
        for topic in Topic:
            assert corpus.deeper(topic)

    def test_followups(self, corpus):
        assert corpus.followup_for("help") == "What topic shall we start with?"
        assert corpus.followup_for("hello") is None

    def test_echo_placeholders(self):
        """Four generics echo the word and two echo the name."""
        assert sum("{word}" in text for text in GENERIC_RESPONSES) == 4
        assert sum("{name}" in text for text in GENERIC_RESPONSES) == 2
