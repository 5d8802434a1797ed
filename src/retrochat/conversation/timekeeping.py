"""
Date and time commands.

The assistant has no idea what day it is until told. "today is February 7,
2026" stores a date in the conversation state, "the time is 7:44 pm" sets
the clock, and questions like "what time is it" read them back. Parsing is
deliberately forgiving: month abbreviations are found anywhere in the
text, digits are read from whatever follows.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from retrochat.config.constants import (
    CENTURY_PREFIX,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    RESPONSE_MAX,
)
from retrochat.conversation.directives import DirectiveResult
from retrochat.conversation.state import ConversationState, StoredDate
from retrochat.conversation.text import Message, bounded
from retrochat.protocols.clock import Clock, ClockReading

logger = logging.getLogger(__name__)

DATE_NOT_SET = (
    "The date hasn't been set yet. Want to set it? Just say: today is February 7, 2026"
)
TIME_NOT_SET = "The time hasn't been set yet. Want to set it? Just say: the time is 3:00 PM"
TIME_HELP = "I couldn't read that time. Try: the time is 7:44 PM"
DATE_NOT_SET_SHORT = "The date is not set."
TIME_NOT_SET_SHORT = "The time is not set."

DIGITS = re.compile(r"\d+")
CLOCK_TIME = re.compile(r"(\d{1,2}):(\d{1,2})")

MORNING = "Good morning! "
AFTERNOON = "Good afternoon! "
EVENING = "Good evening! "


@dataclass(frozen=True)
class ParsedTime:
    """A time as typed, converted to a 12-hour reading."""

    hour: int  # 1-12
    minute: int
    is_pm: bool


# ==============================================================================
# Parsing
# ==============================================================================


def find_month(text: str) -> Optional[Tuple[int, int]]:
    """
    Find the first month abbreviation, in calendar order.

    "jan" is tried everywhere in the text before "feb" is tried, so the
    calendar order decides, not the position in the text.

    Returns:
        (month number 1-12, offset just past the abbreviation) or None
    """
    for number, abbreviation in enumerate(MONTH_ABBREVIATIONS, start=1):
        index = text.find(abbreviation)
        if index != -1:
            return number, index + len(abbreviation)
    return None


def next_digit_run(text: str, start: int) -> Tuple[str, int]:
    """
    Find the next run of digits at or after ``start``.

    Returns:
        (digits, offset just past them); digits is empty if there are none
    """
    match = DIGITS.search(text, start)
    if match is None:
        return "", len(text)
    return match.group(), match.end()


def parse_date(text: str) -> Optional[StoredDate]:
    """
    Parse "<month> <day>[,] [<year>]" from anywhere in the text.

    The day is the first digit run after the month (1 when absent). The
    year is the next digit run, kept only when it has at least two digits,
    and stored modulo 100.

    Returns:
        The parsed date, or None when no month is mentioned
    """
    month = find_month(text)
    if month is None:
        return None
    number, pos = month

    day_digits, pos = next_digit_run(text, pos)
    if not day_digits:
        return StoredDate(month=number, day=1)

    year = None
    year_digits, _ = next_digit_run(text, pos)
    if len(year_digits) >= 2:
        year = int(year_digits) % 100

    return StoredDate(month=number, day=int(day_digits) or 1, year=year)


def parse_time(text: str) -> Optional[ParsedTime]:
    """
    Parse "H:MM" or "HH:MM" with optional am/pm, or a 24-hour time.

    "pm" is looked for before "am", anywhere in the text. Without either,
    the hour is read as 24-hour time.

    Returns:
        The parsed time, or None when the digits are missing or out of range
    """
    match = CLOCK_TIME.search(text)
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))

    if hour > 23 or minute > 59:
        return None

    if "pm" in text:
        is_pm = True
    elif "am" in text:
        is_pm = False
    else:
        hour, is_pm = _from_24_hour(hour)

    if not 1 <= hour <= 12:
        return None
    return ParsedTime(hour=hour, minute=minute, is_pm=is_pm)


def _from_24_hour(hour: int) -> Tuple[int, bool]:
    if hour == 0:
        return 12, False
    if hour < 12:
        return hour, False
    if hour == 12:
        return 12, True
    return hour - 12, True


# ==============================================================================
# Formatting
# ==============================================================================


def format_date(date: StoredDate) -> str:
    """"February 7, 2026" or "February 7" when the year is unknown."""
    text = f"{MONTH_NAMES[date.month - 1]} {date.day}"
    if date.year is not None:
        text += f", {CENTURY_PREFIX}{date.year:02d}"
    return text


def format_time(reading: ClockReading) -> str:
    """"7:44 PM"."""
    return f"{reading.hour}:{reading.minute:02d} {'PM' if reading.is_pm else 'AM'}"


def time_of_day_greeting(reading: Optional[ClockReading]) -> str:
    """
    Salutation for the current time, or "" when the clock was never set.

    Morning runs 5-11 AM, afternoon noon to 5 PM, evening is everything else.
    """
    if reading is None:
        return ""
    if not reading.is_pm:
        return MORNING if 5 <= reading.hour <= 11 else EVENING
    if reading.hour == 12 or 1 <= reading.hour <= 5:
        return AFTERNOON
    return EVENING


# ==============================================================================
# Directive
# ==============================================================================


class DateTimeDirective:
    """
    Set and read the conversation's date and the clock.

    Attributes:
        _clock: Clock the time is stored in

    Example:
        >>> directive = DateTimeDirective(FixedClock())
        >>> directive.handle(Message.from_raw("the time is 7:44 PM"), state).text
        'Time set to 7:44 PM!'
    """

    name = "datetime"

    def __init__(self, clock: Clock):
        self._clock = clock

    def handle(self, message: Message, state: ConversationState) -> Optional[DirectiveResult]:
        text = message.normalized_text

        if (
            "date" in text
            and "time" in text
            and find_month(text) is None
            and ":" not in text
        ):
            return self._result(self.read_both(state))

        if "today" in text or "the date" in text:
            if find_month(text) is not None:
                return self._result(self.set_date(text, state))
            return self._result(self.read_date(state))

        if "what day" in text:
            return self._result(self.read_date(state))

        if "what time" in text:
            return self._result(self.read_time(state))

        if "the time" in text or "time is" in text:
            if ":" in text:
                return self._result(self.set_time(text, state))
            return self._result(self.read_time(state))

        return None

    def set_date(self, text: str, state: ConversationState) -> str:
        """Parse and store a date. The caller has checked a month is present."""
        date = parse_date(text)
        if date is None:
            return DATE_NOT_SET
        state.date = date
        logger.info(f"Date set: {date!r}")
        return f"Date set to {format_date(date)}!"

    def set_time(self, text: str, state: ConversationState) -> str:
        """Parse a time and set the clock, or explain the expected format."""
        parsed = parse_time(text)
        if parsed is None:
            logger.debug(f"Unreadable time in '{text}'")
            return TIME_HELP
        self._clock.set(parsed.hour, parsed.minute, parsed.is_pm)
        state.time_set = True
        reading = ClockReading(parsed.hour, parsed.minute, parsed.is_pm)
        logger.info(f"Clock set: {reading!r}")
        return f"Time set to {format_time(reading)}!"

    def read_date(self, state: ConversationState) -> str:
        if state.date is None:
            return DATE_NOT_SET
        return f"The date is {format_date(state.date)}."

    def read_time(self, state: ConversationState) -> str:
        reading = self._clock.read() if state.time_set else None
        if reading is None:
            return TIME_NOT_SET
        return f"The time is {format_time(reading)}."

    def read_both(self, state: ConversationState) -> str:
        date_line = (
            f"The date is {format_date(state.date)}." if state.date else DATE_NOT_SET_SHORT
        )
        reading = self._clock.read() if state.time_set else None
        time_line = f"The time is {format_time(reading)}." if reading else TIME_NOT_SET_SHORT
        return f"{date_line}\n{time_line}"

    def _result(self, text: str) -> DirectiveResult:
        return DirectiveResult(text=bounded(text, RESPONSE_MAX), source=self.name)

    def __repr__(self) -> str:
        return f"DateTimeDirective(clock={self._clock!r})"
