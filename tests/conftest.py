"""
Shared fixtures for RetroChat tests.

Every fixture builds fresh objects: keyword tables carry pool cycling
indices and chatbots carry conversation state, so nothing may leak
between tests.
"""

import pytest

from retrochat.config.settings import Settings
from retrochat.container import RetroChatContainer
from retrochat.conversation.clock import FixedClock
from retrochat.conversation.corpus import ResponseCorpus
from retrochat.conversation.entropy import ConstantEntropy
from retrochat.conversation.state import ConversationState, Mode
from retrochat.conversation.vocabulary import build_keyword_table


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """A clock that has not been set and never moves."""
    return FixedClock()


@pytest.fixture
def entropy():
    """Entropy pinned to zero so generic picks follow the turn counter."""
    return ConstantEntropy(0)


@pytest.fixture
def config():
    """Settings isolated from any .env file."""
    return Settings(_env_file=None)


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def corpus():
    """Default response corpus."""
    return ResponseCorpus()


@pytest.fixture
def table():
    """Fresh default keyword table."""
    return build_keyword_table()


@pytest.fixture
def state():
    """Fresh conversation state."""
    return ConversationState()


@pytest.fixture
def container(config):
    """Container over isolated settings."""
    return RetroChatContainer(config)


@pytest.fixture
def chatbot(container, clock, entropy):
    """Fully wired chatbot with deterministic collaborators."""
    return container.create_conversational_chatbot(
        clock=clock, entropy=entropy, initial_mode=Mode.NORMAL
    )
