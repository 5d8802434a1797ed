"""
Engine constants.

Buffer caps, thresholds and the small word lists the matcher relies on.
These values are part of the observable behaviour: changing them changes
responses.
"""

# ==============================================================================
# Buffer Caps
# ==============================================================================

INPUT_MAX = 76
"""Maximum characters accepted from one input line. Longer input is truncated."""

WORD_MAX = 15
"""Maximum length of a captured word or a learned name."""

RESPONSE_MAX = 160
"""Maximum length of a dynamically built response (date, stats, name...)."""

# ==============================================================================
# Input Analysis
# ==============================================================================

WORD_DELIMITERS = frozenset(" ?!.,")
"""Characters that end a word for capture, refinement and name learning."""

MIN_CAPTURE_LENGTH = 4
"""A word must be at least this long to be captured as the echo word."""

MIN_REFINE_LENGTH = 3
"""The word following a matched keyword must be at least this long to
replace the captured word."""

FALLBACK_WORD = "that"
"""Echo word used when nothing worth capturing is found."""

STOP_WORDS = frozenset(
    {
        "what", "this", "that", "your", "have", "does", "about", "tell",
        "with", "from", "they", "them", "when", "where", "like",
    }
)
"""Words never captured as the echo word."""

SHORT_INPUT_MAX = 6
"""Inputs shorter than this are SHORT (and eligible for yes/no follow-ups)."""

LONG_INPUT_MIN = 40
"""Inputs at least this long are LONG (and get a thoughtful prefix)."""

# ==============================================================================
# Intent Classification
# ==============================================================================

QUESTION_START_WORDS = (
    "what", "how", "why", "who", "when", "where", "can", "does", "is",
)
"""First words that mark a question."""

GREETING_WORDS = ("hello", "hey", "hi")
"""First words that mark a greeting."""

REQUEST_WORDS = ("tell", "show", "explain", "help", "describe")
"""First words that mark a request."""

QUIT_WORDS = ("quit", "exit", "bye")
"""Substrings that end the session before the pipeline runs."""

# ==============================================================================
# Keyword Scoring
# ==============================================================================

MAX_KEYWORD_WEIGHT = 127
"""Largest base weight a keyword entry may carry."""

NEGATION_WINDOW = 12
"""Characters inspected before a keyword for a negating phrase."""

NEGATION_PHRASES = ("not ", "don't", "hate ", "no ")
"""Negating phrases, checked in this order."""

TOPIC_CONTINUITY_BONUS = 1
"""Added when a keyword's topic equals the last topic."""

MODE_BONUS = 1
"""Added when a keyword's topic suits the current mode."""

# ==============================================================================
# Generic Fallback
# ==============================================================================

GENERIC_COUNT = 16
"""Number of generic fallback responses."""

THOUGHTFUL_PREFIX = "That's a thoughtful question. "
"""Prefix placed before a generic response when the input was LONG."""

# ==============================================================================
# Directives
# ==============================================================================

NAME_IAM_MAX_INPUT = 20
""""i am <name>" is only trusted for inputs shorter than this."""

NAME_FALLBACK = "friend"
"""Rendered in place of the user's name until it has been learned."""

STATS_EARLY_LIMIT = 5
"""Below this turn count the stats reply says we're just getting started."""

STATS_LONG_LIMIT = 20
"""From this turn count the stats reply remarks on the conversation length."""

# ==============================================================================
# Turn Orchestration
# ==============================================================================

ASIDE_INTERVAL = 3
"""Post-intent asides appear when turn_count is a multiple of this."""

# ==============================================================================
# Date / Time
# ==============================================================================

MONTH_ABBREVIATIONS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)
"""Month abbreviations searched in order; index + 1 is the month number."""

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
"""Month names used when formatting dates."""

CENTURY_PREFIX = "20"
"""Stored years are offsets into this century."""
