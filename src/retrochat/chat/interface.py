#!/usr/bin/env python3
"""
Chat interface for RetroChat.

Provides an interactive REPL over one conversational session. Lines
starting with "/" are interface commands; everything else goes to the
chatbot.
"""

from dotenv import load_dotenv
load_dotenv()  # Load .env file before other imports

import logging
from typing import Optional

from retrochat.config.constants import INPUT_MAX
from retrochat.config.settings import Settings
from retrochat.container import RetroChatContainer
from retrochat.conversation.chatbot import Reply
from retrochat.conversation.state import Mode

logger = logging.getLogger(__name__)

PROMPT = "You: "
SPEAKER = "RetroChat: "


class ChatInterface:
    """
    Interactive chat interface.

    Commands:
    - /help - Show help
    - /state - Show the conversation state
    - /stats - Show session statistics
    - /exit - Exit

    Example session:
        You: hello
        RetroChat: Hello! I'm RetroChat, your friendly 8-bit assistant. ...

        You: debug my program
        RetroChat: Let's debug this together. ...
          > What error or behavior do you see? I can help narrow it down.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        mode: Optional[str] = None,
        debug: bool = False,
        show_welcome: Optional[bool] = None,
        config: Optional[Settings] = None,
    ):
        """
        Initialize chat interface.

        Args:
            seed: Entropy seed (settings value if None)
            mode: Initial mode name (settings value if None)
            debug: Force debug logging
            show_welcome: Print the welcome banner (settings value if None)
            config: Settings (loaded from the environment if None)
        """
        self.settings = config or Settings()
        if debug:
            self.settings = self.settings.model_copy(update={"debug": True})

        logging.basicConfig(
            level=self.settings.effective_log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )

        self.show_welcome = self.settings.show_welcome if show_welcome is None else show_welcome
        self.container = RetroChatContainer(self.settings)
        self.chatbot = self.container.create_conversational_chatbot(
            entropy=self.container.create_entropy(seed),
            initial_mode=Mode(mode) if mode else None,
        )

    def start(self) -> None:
        """Start interactive REPL."""
        print("=" * 40)
        print("  RetroChat v0.2 - AI ASSISTANT")
        print("=" * 40)
        print()

        welcome = self.chatbot.start_session()
        if self.show_welcome:
            print(welcome)
            print()

        while True:
            try:
                user_input = input(PROMPT)[:INPUT_MAX]
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break

            if not user_input.strip():
                continue

            if user_input.startswith("/"):
                if not self._handle_command(user_input):
                    break
                continue

            reply = self.chatbot.respond(user_input)
            self._show(reply)
            if reply.session_ended:
                break

    def _show(self, reply: Reply) -> None:
        print(f"\n{SPEAKER}{reply.body}")
        if reply.followup_question:
            print(f"  > {reply.followup_question}")
        if reply.aside:
            print(f"  ~ {reply.aside}")
        if reply.milestone:
            print(f"  {reply.milestone}")
        print()

    def _handle_command(self, command: str) -> bool:
        """Handle slash commands. Returns False to end the session."""
        cmd = command.split(maxsplit=1)[0].lower()

        if cmd == "/help":
            self._show_help()
        elif cmd == "/state":
            print(f"  {self.chatbot.state!r}")
        elif cmd == "/stats":
            for key, value in self.chatbot.get_session_stats().items():
                print(f"  {key}: {value}")
        elif cmd == "/exit":
            print("Goodbye!")
            return False
        else:
            print(f"Unknown command: {cmd} (try /help)")
        return True

    def _show_help(self) -> None:
        print("Talk naturally. A few things to try:")
        print("  be funny / be technical / be brief / be normal")
        print("  my name is <name>")
        print("  today is February 7, 2026      the time is 7:44 PM")
        print("  what time is it                how many questions")
        print("  tell me more")
        print("Commands: /help /state /stats /exit  (or type quit)")
