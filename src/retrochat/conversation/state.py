"""
Per-session conversation state.

One ConversationState lives for the whole session and is mutated once per
turn. Each field is written by the stage that owns it: the directives own
mode, name and date, the selector owns last_topic, the orchestrator owns the
counters and last_intent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from retrochat.conversation.intent import IntentType


class Mode(Enum):
    """Conversation tone."""

    NORMAL = "normal"
    CONCISE = "concise"
    TECHNICAL = "technical"
    PLAYFUL = "playful"


class Topic(Enum):
    """Coarse subject categories used for continuity bonuses."""

    GREETING = "greeting"
    HARDWARE = "hardware"
    CODING = "coding"
    PHILOSOPHY = "philosophy"
    HUMOR = "humor"
    META = "meta"
    GENERAL = "general"


@dataclass(frozen=True)
class StoredDate:
    """A date as the user stated it. ``year`` is an offset into the century."""

    month: int  # 1-12
    day: int
    year: Optional[int] = None  # 0-99

    def __repr__(self) -> str:
        return f"StoredDate(month={self.month}, day={self.day}, year={self.year})"


@dataclass
class ConversationState:
    """Mutable state for one session."""

    mode: Mode = Mode.NORMAL
    last_topic: Topic = Topic.GREETING
    last_intent: IntentType = IntentType.QUESTION
    turn_count: int = 0
    response_counter: int = 0
    user_name: Optional[str] = None
    date: Optional[StoredDate] = None
    time_set: bool = False

    @property
    def name_known(self) -> bool:
        """Whether the user has told us their name."""
        return self.user_name is not None

    def advance_turn(self) -> None:
        """Close a turn."""
        self.turn_count += 1
        self.response_counter += 1

    def __repr__(self) -> str:
        return (
            f"ConversationState(mode={self.mode.value}, topic={self.last_topic.value}, "
            f"intent={self.last_intent.value}, turns={self.turn_count})"
        )
