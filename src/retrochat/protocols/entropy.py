"""
EntropySource Protocol: where generic-response variety comes from.

An 8-bit machine would sample a free-running hardware counter. Here the
source is injected so that a seeded generator gives reproducible sessions
and tests can pin the value outright.
"""

from typing import Protocol


class EntropySource(Protocol):
    """Callable returning a small non-negative integer on every call."""

    def __call__(self) -> int:
        ...
