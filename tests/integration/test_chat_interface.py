"""Integration tests for the interactive REPL."""

import pytest

from retrochat.chat.interface import ChatInterface
from retrochat.conversation.corpus import GOODBYE, RESPONSES


@pytest.fixture
def feed(monkeypatch):
    """Replace input() with a scripted sequence of lines."""

    def _feed(*lines):
        queue = list(lines)

        def fake_input(prompt=""):
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


class TestChatInterface:
    """Tests for the REPL loop."""

    @pytest.fixture
    def interface(self, config):
        return ChatInterface(mode="normal", show_welcome=False, config=config)

    def test_session_until_quit(self, interface, feed, capsys):
        feed("hello", "bye")
        interface.start()
        out = capsys.readouterr().out
        assert RESPONSES["hello"] in out
        assert GOODBYE in out

    def test_eof_ends_session(self, interface, feed, capsys):
        feed("hello")
        interface.start()
        assert "Goodbye!" in capsys.readouterr().out

    def test_followup_printed_on_own_line(self, interface, feed, capsys):
        feed("compare them", "/exit")
        interface.start()
        assert "  > What are you comparing?" in capsys.readouterr().out

    def test_commands(self, interface, feed, capsys):
        feed("/help", "/state", "/stats", "/nope", "/exit")
        interface.start()
        out = capsys.readouterr().out
        assert "Commands:" in out
        assert "ConversationState(" in out
        assert "turns: 0" in out
        assert "Unknown command: /nope" in out

    def test_welcome_shown_by_default(self, config, feed, capsys):
        feed()
        ChatInterface(config=config).start()
        assert "Welcome to RetroChat!" in capsys.readouterr().out

    def test_line_reaches_chatbot_untrimmed(self, interface, feed):
        """Trailing spaces count toward the input length."""
        feed("i am sam" + " " * 15, "   ", "/exit")
        interface.start()
        assert interface.chatbot.state.user_name is None
        assert interface.chatbot.state.turn_count == 1
