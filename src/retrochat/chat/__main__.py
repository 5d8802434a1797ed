#!/usr/bin/env python3
"""Entry point for running chat interface as a module.

Usage:
    python -m retrochat.chat
    python -m retrochat.chat --mode playful --seed 64
"""

import argparse


def main():
    parser = argparse.ArgumentParser(
        description="RetroChat conversational assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default session
  python -m retrochat.chat

  # Reproducible generic responses
  python -m retrochat.chat --seed 64

  # Start in playful mode with debug logging
  python -m retrochat.chat --mode playful --debug
        """
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for generic-response selection (default: RETROCHAT_ENTROPY_SEED or unseeded)"
    )

    parser.add_argument(
        "--mode",
        choices=["normal", "concise", "technical", "playful"],
        default=None,
        help="Conversation mode at start (default: RETROCHAT_INITIAL_MODE or normal)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log matching decisions to stderr"
    )

    parser.add_argument(
        "--no-welcome",
        action="store_true",
        help="Skip the welcome banner"
    )

    args = parser.parse_args()

    # Import here to avoid circular import warning
    from retrochat.chat.interface import ChatInterface
    interface = ChatInterface(
        seed=args.seed,
        mode=args.mode,
        debug=args.debug,
        show_welcome=False if args.no_welcome else None,
    )
    interface.start()


if __name__ == "__main__":
    main()
