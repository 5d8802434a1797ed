"""
Dependency Injection Container for RetroChat.

Builds the conversation components from settings and makes sure every
component of one chatbot shares the same state-bearing collaborators: one
keyword table (whose pools hold the cycling indices), one clock and one
entropy source.
"""

from typing import Optional

from retrochat.config.settings import Settings, settings as default_settings
from retrochat.conversation.chatbot import ConversationalChatbot
from retrochat.conversation.clock import RunningClock
from retrochat.conversation.corpus import ResponseCorpus
from retrochat.conversation.directives import (
    DirectiveChain,
    FollowupDirective,
    ModeSwitchDirective,
    NameDirective,
    StatsDirective,
)
from retrochat.conversation.entropy import SeededEntropy
from retrochat.conversation.intent import IntentClassifier
from retrochat.conversation.patterns import KeywordTable
from retrochat.conversation.selector import ResponseSelector
from retrochat.conversation.state import ConversationState, Mode
from retrochat.conversation.timekeeping import DateTimeDirective
from retrochat.conversation.vocabulary import build_keyword_table
from retrochat.protocols.clock import Clock
from retrochat.protocols.entropy import EntropySource


class RetroChatContainer:
    """
    Dependency injection container for the RetroChat system.

    Shared content (the response corpus) is built once; everything that
    carries per-session state is created fresh for each chatbot.

    Attributes:
        _settings: Runtime settings
        _corpus: Shared response corpus

    Example:
        >>> container = RetroChatContainer()
        >>> chatbot = container.create_conversational_chatbot()
        >>> chatbot.respond("hello").text
        "Hello! I'm RetroChat, your friendly 8-bit assistant. ..."
    """

    def __init__(self, config: Optional[Settings] = None):
        """
        Initialize container.

        Args:
            config: Settings to use (module-level settings if None)
        """
        self._settings = config or default_settings
        self._corpus = ResponseCorpus()

    @property
    def settings(self) -> Settings:
        """Runtime settings."""
        return self._settings

    @property
    def corpus(self) -> ResponseCorpus:
        """Shared response corpus."""
        return self._corpus

    def create_keyword_table(self) -> KeywordTable:
        """Fresh keyword table, validated against the corpus."""
        table = build_keyword_table()
        self._corpus.validate(table)
        return table

    def create_entropy(self, seed: Optional[int] = None) -> EntropySource:
        """Entropy source seeded from ``seed`` or the settings."""
        return SeededEntropy(seed if seed is not None else self._settings.entropy_seed)

    def create_clock(self) -> Clock:
        """A clock that has not been set."""
        return RunningClock()

    def create_directive_chain(self, clock: Clock) -> DirectiveChain:
        """Directives in priority order."""
        return DirectiveChain(
            [
                ModeSwitchDirective(self._corpus),
                FollowupDirective(self._corpus),
                StatsDirective(),
                DateTimeDirective(clock),
                NameDirective(),
            ]
        )

    def create_conversational_chatbot(
        self,
        clock: Optional[Clock] = None,
        entropy: Optional[EntropySource] = None,
        table: Optional[KeywordTable] = None,
        initial_mode: Optional[Mode] = None,
    ) -> ConversationalChatbot:
        """
        Create a fully wired ConversationalChatbot.

        Args:
            clock: Clock to use (fresh RunningClock if None)
            entropy: Entropy source (SeededEntropy from settings if None)
            table: Keyword table (fresh default table if None)
            initial_mode: Starting mode (from settings if None)

        Returns:
            Configured ConversationalChatbot with its own state

        Raises:
            ValueError: If the keyword table references unknown responses
        """
        clock = clock or self.create_clock()
        entropy = entropy or self.create_entropy()
        if table is None:
            table = self.create_keyword_table()
        else:
            self._corpus.validate(table)

        mode = initial_mode or Mode(self._settings.initial_mode)

        selector = ResponseSelector(
            table=table,
            corpus=self._corpus,
            entropy=entropy,
            clock=clock,
        )
        return ConversationalChatbot(
            intent_classifier=IntentClassifier(),
            directive_chain=self.create_directive_chain(clock),
            response_selector=selector,
            response_corpus=self._corpus,
            state=ConversationState(mode=mode),
        )

    def __repr__(self) -> str:
        return f"RetroChatContainer(mode={self._settings.initial_mode}, seed={self._settings.entropy_seed})"
