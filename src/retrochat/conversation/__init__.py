"""
Conversation package: rule-based chatbot with scored keyword matching.

This package implements a deterministic conversational system that:
- Normalizes input and captures a word to echo back
- Classifies intent from punctuation and the first word
- Runs directives (mode, follow-up, stats, date/time, name) before matching
- Scores keywords with topic and mode bonuses, skipping negated mentions
- Cycles through response pools and falls back to generic responses

Components:
    - IntentClassifier: First-word intent rules
    - KeywordTable / KeywordEntry / ResponsePool: The matching vocabulary
    - KeywordMatcher / ResponseSelector: Response selection
    - DirectiveChain: Commands answered before matching
    - DateTimeDirective: Date and time commands
    - ResponseCorpus: Fixed response content
    - ConversationalChatbot: Main chatbot class
"""

from retrochat.conversation.intent import IntentClassifier, IntentType, InputLength
from retrochat.conversation.state import ConversationState, Mode, StoredDate, Topic
from retrochat.conversation.text import Message
from retrochat.conversation.patterns import KeywordEntry, KeywordTable, ResponsePool
from retrochat.conversation.corpus import ResponseCorpus
from retrochat.conversation.directives import (
    DirectiveChain,
    DirectiveResult,
    FollowupDirective,
    ModeSwitchDirective,
    NameDirective,
    StatsDirective,
)
from retrochat.conversation.timekeeping import DateTimeDirective
from retrochat.conversation.selector import KeywordMatch, KeywordMatcher, PoolResolver, ResponseSelector
from retrochat.conversation.vocabulary import build_keyword_table
from retrochat.conversation.chatbot import ConversationalChatbot, Reply

__all__ = [
    # Intent
    "IntentClassifier",
    "IntentType",
    "InputLength",
    # State
    "ConversationState",
    "Mode",
    "StoredDate",
    "Topic",
    # Text
    "Message",
    # Patterns
    "KeywordEntry",
    "KeywordTable",
    "ResponsePool",
    "build_keyword_table",
    # Corpus
    "ResponseCorpus",
    # Directives
    "DirectiveChain",
    "DirectiveResult",
    "FollowupDirective",
    "ModeSwitchDirective",
    "NameDirective",
    "StatsDirective",
    "DateTimeDirective",
    # Selection
    "KeywordMatch",
    "KeywordMatcher",
    "PoolResolver",
    "ResponseSelector",
    # Main
    "ConversationalChatbot",
    "Reply",
]
