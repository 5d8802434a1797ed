"""
Main conversational chatbot orchestrating all components.

One call to ``respond`` is one turn: quit check, analysis, intent, the
directive chain, keyword selection, then the end-of-turn extras (follow-up
question, aside, milestone) and the counter update.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from retrochat.config.constants import ASIDE_INTERVAL, QUIT_WORDS
from retrochat.conversation.corpus import ASIDES, GOODBYE, MILESTONES, WELCOME, ResponseCorpus
from retrochat.conversation.directives import DirectiveChain
from retrochat.conversation.intent import IntentClassifier, IntentType
from retrochat.conversation.selector import ResponseSelector
from retrochat.conversation.state import ConversationState
from retrochat.conversation.text import Message, normalize, render_template

logger = logging.getLogger(__name__)


@dataclass
class Reply:
    """
    The assistant's answer to one turn.

    ``template`` may still contain the word and name placeholders; ``text``
    renders them together with any extra lines. The flags let a front end
    react (a sound, a colour change) without parsing the text.
    """

    template: str
    word: str = ""
    name: Optional[str] = None
    response_id: Optional[str] = None
    followup_question: Optional[str] = None
    aside: Optional[str] = None
    milestone: Optional[str] = None
    mode_changed: bool = False
    forced_followup: bool = False
    name_just_learned: bool = False
    session_ended: bool = False

    @property
    def body(self) -> str:
        """The main response with placeholders filled."""
        return render_template(self.template, self.word, self.name)

    @property
    def extras(self) -> List[str]:
        """Follow-up question, aside and milestone, in display order."""
        return [line for line in (self.followup_question, self.aside, self.milestone) if line]

    @property
    def text(self) -> str:
        """Everything to display, one part per line."""
        return "\n".join([self.body] + self.extras)

    def __str__(self) -> str:
        return self.text


@dataclass
class TurnRecord:
    """What happened on one turn, kept for session stats."""

    intent: IntentType
    source: str  # Directive name, "keyword" or "generic"


class ConversationalChatbot:
    """
    Rule-based chatbot with a per-session conversation state.

    Attributes:
        _classifier: Intent classifier
        _directives: Directive chain tried before keyword matching
        _selector: Keyword/generic response selector
        _corpus: Response content
        _state: The session's conversation state
        _history: Turn records for this session

    Example:
        >>> chatbot = container.create_conversational_chatbot()
        >>> print(chatbot.start_session())
        >>> chatbot.respond("tell me a joke").text
        "Why did the C64 go to therapy? ..."
    """

    def __init__(
        self,
        intent_classifier: IntentClassifier,
        directive_chain: DirectiveChain,
        response_selector: ResponseSelector,
        response_corpus: ResponseCorpus,
        state: Optional[ConversationState] = None,
    ):
        """
        Initialize conversational chatbot.

        Args:
            intent_classifier: Intent classification component
            directive_chain: Directives tried before keyword matching
            response_selector: Keyword and generic response selection
            response_corpus: Response content (follow-up questions)
            state: Initial conversation state (fresh state if None)
        """
        self._classifier = intent_classifier
        self._directives = directive_chain
        self._selector = response_selector
        self._corpus = response_corpus
        self._state = state if state is not None else ConversationState()
        self._history: List[TurnRecord] = []

    @property
    def state(self) -> ConversationState:
        """The session's conversation state."""
        return self._state

    @staticmethod
    def wants_to_quit(raw_text: str) -> bool:
        """Whether a quit word occurs anywhere in the line."""
        text = normalize(raw_text)
        return any(word in text for word in QUIT_WORDS)

    def start_session(self) -> str:
        """Welcome text for a new session."""
        logger.debug(f"Session started: {self._state!r}")
        return WELCOME

    def respond(self, user_input: str) -> Reply:
        """
        Answer one line of user input.

        Never raises for any input: every lookup that fails falls through to
        the next handler and finally to a generic response.

        Args:
            user_input: Raw line as typed

        Returns:
            The reply. ``session_ended`` is set when the user said goodbye,
            in which case the state is left untouched.
        """
        if self.wants_to_quit(user_input):
            logger.debug("Quit word detected")
            return Reply(template=GOODBYE, session_ended=True)

        state = self._state
        message = Message.from_raw(user_input)
        state.last_intent = self._classifier.classify(
            message.raw_text, message.normalized_text, state.last_intent
        )
        logger.debug(f"Turn {state.turn_count}: {message!r}, intent={state.last_intent.value}")

        result = self._directives.handle(message, state)
        if result is not None:
            reply = Reply(
                template=result.text,
                word=message.captured_word,
                response_id=result.response_id,
                mode_changed=result.mode_changed,
                name_just_learned=result.name_just_learned,
            )
            source = result.source
        else:
            selection = self._selector.select(message, state)
            reply = Reply(
                template=selection.template,
                word=selection.word,
                response_id=selection.response_id,
            )
            source = "generic" if selection.is_generic else "keyword"

        reply.name = state.user_name
        self._finish_turn(reply)
        self._history.append(TurnRecord(intent=state.last_intent, source=source))
        state.advance_turn()
        return reply

    def _finish_turn(self, reply: Reply) -> None:
        """Attach the follow-up question, aside and milestone for this turn."""
        state = self._state

        question = self._corpus.followup_for(reply.response_id) if reply.response_id else None
        if question is not None:
            reply.followup_question = question
            reply.forced_followup = True
            state.last_intent = IntentType.FOLLOWUP

        turn = state.turn_count
        if (
            state.last_intent in (IntentType.QUESTION, IntentType.REQUEST)
            and turn > 0
            and turn % ASIDE_INTERVAL == 0
        ):
            reply.aside = ASIDES[(turn // 2) % len(ASIDES)]

        reply.milestone = MILESTONES.get(turn)

    def get_session_stats(self) -> dict:
        """Summary of the session so far."""
        sources: dict = {}
        intents: dict = {}
        for record in self._history:
            sources[record.source] = sources.get(record.source, 0) + 1
            intents[record.intent.value] = intents.get(record.intent.value, 0) + 1
        return {
            "turns": self._state.turn_count,
            "mode": self._state.mode.value,
            "topic": self._state.last_topic.value,
            "user_name": self._state.user_name,
            "sources": sources,
            "intents": intents,
        }

    def __repr__(self) -> str:
        return f"ConversationalChatbot({self._state!r})"
