"""
Negation detection around keyword matches.

"I don't like sprites" mentions sprites but should not be answered as if
the user were keen on them. A keyword occurrence is negated when one of the
negating phrases starts inside the window that precedes it.
"""

from retrochat.config.constants import NEGATION_PHRASES, NEGATION_WINDOW


def is_negated(
    normalized_text: str,
    match_end: int,
    keyword_length: int = 0,
    window: int = NEGATION_WINDOW,
    phrases=NEGATION_PHRASES,
) -> bool:
    """
    Check whether a keyword occurrence is negated.

    The window starts ``window`` characters before the keyword (before
    ``match_end`` when ``keyword_length`` is 0) and runs up to ``match_end``.
    A phrase counts when it starts inside the window, even if it runs past
    its end.

    Args:
        normalized_text: Case-folded input
        match_end: Offset just past the keyword occurrence
        keyword_length: Length of the keyword occurrence
        window: Characters to look back before the keyword
        phrases: Negating phrases, checked in order

    Returns:
        True on the first phrase found in the window
    """
    start = max(0, match_end - keyword_length - window)
    for phrase in phrases:
        index = normalized_text.find(phrase, start)
        if index != -1 and index < match_end:
            return True
    return False
