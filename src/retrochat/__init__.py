"""
RetroChat: an 8-bit style conversational assistant.

Answers are chosen, never generated: scored keyword matching, response
pools, a handful of directives and a small per-session state stand in for
a language model.

The system includes:
- The response selection engine (retrochat.conversation)
- A dependency injection container wiring it together
- An interactive REPL (python -m retrochat.chat)
"""

__version__ = "0.2.0"

from retrochat.chat import ChatInterface
from retrochat.container import RetroChatContainer
from retrochat.conversation.chatbot import ConversationalChatbot, Reply
from retrochat.conversation.intent import IntentClassifier, IntentType
from retrochat.conversation.state import ConversationState, Mode, Topic

__all__ = [
    "ChatInterface",
    "RetroChatContainer",
    "ConversationalChatbot",
    "Reply",
    "IntentClassifier",
    "IntentType",
    "ConversationState",
    "Mode",
    "Topic",
]
