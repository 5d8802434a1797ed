"""
Keyword entries, response pools and the ordered keyword table.

The keyword table is scanned in declared order and that order is part of
the behaviour: when two entries score the same, the later one wins. Pools
carry their own cycling position, which persists across turns.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from retrochat.config.constants import MAX_KEYWORD_WEIGHT
from retrochat.conversation.state import Topic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordEntry:
    """A literal keyword and the response it points at."""

    pattern: str  # Literal substring, lower case
    target: str  # Response id, or pool id when is_pool
    weight: int  # Base score 0-127
    topic: Topic
    is_pool: bool = False

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("keyword pattern must not be empty")
        if not 0 <= self.weight <= MAX_KEYWORD_WEIGHT:
            raise ValueError(
                f"keyword '{self.pattern}' weight {self.weight} outside 0-{MAX_KEYWORD_WEIGHT}"
            )

    def __repr__(self) -> str:
        kind = "pool" if self.is_pool else "direct"
        return f"Keyword('{self.pattern}' -> {self.target} [{kind}], w={self.weight}, {self.topic.value})"


@dataclass
class ResponsePool:
    """Interchangeable response variants with a persistent cycling index."""

    pool_id: str
    variants: List[str]  # Response ids in order
    cycling_index: int = 0

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError(f"pool '{self.pool_id}' has no variants")

    @property
    def count(self) -> int:
        """Number of variants."""
        return len(self.variants)

    def advance(self) -> None:
        """Move the cycling index to the next variant, wrapping around."""
        self.cycling_index = (self.cycling_index + 1) % self.count

    def __repr__(self) -> str:
        return f"ResponsePool({self.pool_id}, variants={self.count}, idx={self.cycling_index})"


class KeywordTable:
    """
    Ordered keyword entries plus the pools they may point at.

    Pools are copied on construction so that every table (and therefore
    every session) owns its cycling indices.

    Attributes:
        _entries: Keyword entries in scan order
        _pools: Pools by id

    Example:
        >>> table = KeywordTable(
        ...     [KeywordEntry("joke", "jokes", 2, Topic.HUMOR, is_pool=True)],
        ...     {"jokes": ["joke_a", "joke_b"]},
        ... )
        >>> table.get_pool("jokes").count
        2
    """

    def __init__(
        self,
        entries: Iterable[KeywordEntry],
        pools: Optional[Dict[str, List[str]]] = None,
    ):
        self._entries: Tuple[KeywordEntry, ...] = tuple(entries)
        self._pools: Dict[str, ResponsePool] = {
            pool_id: ResponsePool(pool_id, list(variants))
            for pool_id, variants in (pools or {}).items()
        }

        for entry in self._entries:
            if entry.is_pool and entry.target not in self._pools:
                raise ValueError(
                    f"keyword '{entry.pattern}' points at unknown pool '{entry.target}'"
                )

        logger.debug(
            f"Keyword table loaded: {len(self._entries)} entries, {len(self._pools)} pools"
        )

    @property
    def entries(self) -> Tuple[KeywordEntry, ...]:
        """Entries in scan order."""
        return self._entries

    @property
    def pools(self) -> Dict[str, ResponsePool]:
        """Pools by id."""
        return self._pools

    def get_pool(self, pool_id: str) -> Optional[ResponsePool]:
        """Get a pool by id."""
        return self._pools.get(pool_id)

    def direct_targets(self) -> List[str]:
        """Response ids referenced directly by entries."""
        return [entry.target for entry in self._entries if not entry.is_pool]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeywordTable(entries={len(self._entries)}, pools={len(self._pools)})"
