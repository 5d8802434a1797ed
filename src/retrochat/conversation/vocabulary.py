"""
Matching vocabulary: the ordered keyword table and the pool definitions.

Order matters. Entries are scanned top to bottom and a later entry wins a
tie, which is why the multi-word phrases sit at the end of their groups
and carry higher weights.
"""

from typing import Dict, List

from retrochat.conversation.patterns import KeywordEntry, KeywordTable
from retrochat.conversation.state import Topic

GREETING_POOL = "hello_pool"

POOL_DEFINITIONS: Dict[str, List[str]] = {
    GREETING_POOL: ["hello", "hello_b", "hello_c"],
    "howru_pool": ["howru", "howru_b"],
    "who_pool": ["who", "who_b"],
    "joke_pool": ["joke", "joke_b", "joke_c"],
    "c64_pool": ["c64", "c64_b"],
    "thanks_pool": ["thanks", "thanks_b", "thanks_c"],
    "sorry_pool": ["sorry", "sorry_b"],
    "weather_pool": ["weather", "weather_b"],
    "sprite_pool": ["sprite", "sprite_b", "sprite_c"],
    "sid_pool": ["sid", "sid_b"],
    "help_pool": ["help", "help_b"],
}
"""Pool id -> response ids, in cycling order."""


def _kw(pattern: str, target: str, weight: int, topic: Topic) -> KeywordEntry:
    return KeywordEntry(
        pattern=pattern,
        target=target,
        weight=weight,
        topic=topic,
        is_pool=target.endswith("_pool"),
    )


KEYWORD_ENTRIES: List[KeywordEntry] = [
    # Greetings
    _kw("hello", GREETING_POOL, 2, Topic.GREETING),
    _kw("hey", "hey", 2, Topic.GREETING),
    _kw("hi ", "hi", 1, Topic.GREETING),
    # Questions about self
    _kw("how are", "howru_pool", 3, Topic.GREETING),
    _kw("who are", "who_pool", 3, Topic.META),
    _kw("your name", "who_pool", 3, Topic.META),
    _kw("what are", "what", 3, Topic.META),
    # Help / meta
    _kw("help", "help_pool", 2, Topic.META),
    _kw("explain", "explain", 2, Topic.META),
    _kw("example", "example", 2, Topic.META),
    _kw("step", "steps", 2, Topic.META),
    _kw("summar", "summarize", 2, Topic.META),
    _kw("compare", "compare", 2, Topic.META),
    _kw("what is", "define", 3, Topic.META),
    _kw("continue", "continue", 2, Topic.META),
    _kw("again", "repeat", 1, Topic.META),
    _kw("confused", "confused", 2, Topic.META),
    _kw("model", "model", 2, Topic.META),
    _kw("prompt", "prompt", 2, Topic.META),
    _kw("limit", "limit", 2, Topic.META),
    _kw("plan", "plan", 2, Topic.META),
    _kw("approach", "plan", 2, Topic.META),
    _kw("design", "design", 2, Topic.CODING),
    # Humor
    _kw("joke", "joke_pool", 2, Topic.HUMOR),
    _kw("funny", "joke_pool", 2, Topic.HUMOR),
    # Hardware
    _kw("music", "sid_pool", 2, Topic.HARDWARE),
    _kw("sid", "sid_pool", 3, Topic.HARDWARE),
    _kw("game", "games", 2, Topic.HARDWARE),
    _kw("sprite", "sprite_pool", 3, Topic.HARDWARE),
    _kw("memory", "memory", 2, Topic.HARDWARE),
    _kw("ram", "ram", 2, Topic.HARDWARE),
    _kw("cpu", "cpu", 2, Topic.HARDWARE),
    _kw("6502", "6502", 3, Topic.HARDWARE),
    _kw("colo", "color", 2, Topic.HARDWARE),
    _kw("disk", "disk", 2, Topic.HARDWARE),
    _kw("hack", "hack", 2, Topic.HARDWARE),
    _kw("commodore", "commodore", 3, Topic.HARDWARE),
    _kw("c64", "c64_pool", 2, Topic.HARDWARE),
    # Programming
    _kw("basic", "basic", 2, Topic.CODING),
    _kw("program", "program", 2, Topic.CODING),
    _kw("assembl", "asm", 3, Topic.CODING),
    _kw("code", "code", 2, Topic.CODING),
    _kw("routine", "code", 2, Topic.CODING),
    _kw("sys ", "sys", 2, Topic.CODING),
    _kw("fix", "fix", 2, Topic.CODING),
    _kw("debug", "debug", 2, Topic.CODING),
    # Philosophy
    _kw("meaning", "meaning", 2, Topic.PHILOSOPHY),
    _kw("purpose", "meaning", 2, Topic.PHILOSOPHY),
    _kw("life", "life", 2, Topic.PHILOSOPHY),
    _kw("think", "think", 2, Topic.PHILOSOPHY),
    # General
    _kw("weather", "weather_pool", 2, Topic.GENERAL),
    _kw("thanks", "thanks_pool", 2, Topic.GENERAL),
    _kw("thank", "thanks_pool", 2, Topic.GENERAL),
    _kw("love", "love", 2, Topic.GENERAL),
    _kw("favo", "fave", 2, Topic.GENERAL),
    _kw("time", "time", 2, Topic.GENERAL),
    _kw("sorry", "sorry_pool", 1, Topic.GENERAL),
    _kw("secret", "secret", 2, Topic.GENERAL),
    _kw("math", "math", 2, Topic.CODING),
    _kw("fast", "speed", 2, Topic.HARDWARE),
    _kw("slow", "speed", 2, Topic.HARDWARE),
    _kw("internet", "internet", 2, Topic.GENERAL),
    # Assessment
    _kw("smart", "smart", 2, Topic.META),
    _kw("stupid", "notdumb", 2, Topic.META),
    _kw("correct", "correct", 1, Topic.GENERAL),
    _kw("right", "correct", 1, Topic.GENERAL),
    _kw("wrong", "wrong", 1, Topic.GENERAL),
    _kw("maybe", "maybe", 1, Topic.GENERAL),
    _kw("guess", "guess", 2, Topic.META),
    _kw("suggest", "idea", 2, Topic.META),
    # Simple replies
    _kw("yes", "yes", 1, Topic.GENERAL),
    _kw("no ", "no", 1, Topic.GENERAL),
    # Multi-word phrases
    _kw("sid music", "sid_pool", 4, Topic.HARDWARE),
    _kw("sprite anim", "sprite_pool", 4, Topic.HARDWARE),
    _kw("program c64", "program", 4, Topic.CODING),
    _kw("basic program", "basic", 4, Topic.CODING),
    _kw("assembly code", "asm", 4, Topic.CODING),
    _kw("6502 assembl", "6502", 5, Topic.CODING),
    _kw("meaning of life", "meaning", 5, Topic.PHILOSOPHY),
    _kw("tell me a joke", "joke_pool", 4, Topic.HUMOR),
    _kw("c64 game", "games", 4, Topic.HARDWARE),
    _kw("how to program", "program", 4, Topic.CODING),
    _kw("disk drive", "disk", 4, Topic.HARDWARE),
    _kw("demo scene", "hack", 4, Topic.HARDWARE),
    # Common assistant questions
    _kw("write", "write", 2, Topic.META),
    _kw("poem", "poem", 3, Topic.META),
    _kw("story", "story", 2, Topic.META),
    _kw(" ai", "ai", 3, Topic.META),
    _kw("artificial", "ai", 3, Topic.META),
    _kw("sentient", "sentient", 3, Topic.PHILOSOPHY),
    _kw("conscious", "sentient", 3, Topic.PHILOSOPHY),
    _kw("alive", "sentient", 2, Topic.PHILOSOPHY),
    _kw("what can you", "capable", 4, Topic.META),
    _kw("how do you work", "howwork", 5, Topic.META),
    _kw("translat", "translate", 2, Topic.GENERAL),
    _kw("recipe", "recipe", 2, Topic.GENERAL),
    _kw("recommend", "recommend", 2, Topic.GENERAL),
    _kw("best", "best", 2, Topic.GENERAL),
    _kw("differ", "differ", 2, Topic.GENERAL),
    _kw("creat", "create", 2, Topic.META),
    _kw("generat", "create", 2, Topic.META),
]
"""The full keyword table in scan order."""


def build_keyword_table() -> KeywordTable:
    """Build a fresh table (with fresh pool cycling indices)."""
    return KeywordTable(KEYWORD_ENTRIES, POOL_DEFINITIONS)
