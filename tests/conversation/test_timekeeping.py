"""Tests for date and time commands."""

import pytest

from retrochat.conversation.clock import FixedClock
from retrochat.conversation.state import StoredDate
from retrochat.conversation.text import Message
from retrochat.conversation.timekeeping import (
    AFTERNOON,
    DATE_NOT_SET,
    EVENING,
    MORNING,
    TIME_HELP,
    TIME_NOT_SET,
    DateTimeDirective,
    ParsedTime,
    find_month,
    next_digit_run,
    format_date,
    format_time,
    parse_date,
    parse_time,
    time_of_day_greeting,
)
from retrochat.protocols.clock import ClockReading


class TestDigitRuns:
    """Tests for digit-run scanning."""

    def test_finds_run_after_start(self):
        assert next_digit_run("feb 7, 2026", 3) == ("7", 5)
        assert next_digit_run("feb 7, 2026", 5) == ("2026", 11)

    def test_no_digits(self):
        assert next_digit_run("february", 3) == ("", 8)


class TestParseDate:
    """Tests for date parsing."""

    @pytest.mark.parametrize(
        "text",
        ["today is february 7 2026", "today is february 7, 2026", "today is feb 7th, 2026"],
    )
    def test_full_date(self, text):
        assert parse_date(text) == StoredDate(month=2, day=7, year=26)

    def test_month_only_defaults_day(self):
        assert parse_date("today is march") == StoredDate(month=3, day=1)

    def test_single_digit_year_ignored(self):
        assert parse_date("today is dec 25 5") == StoredDate(month=12, day=25)

    def test_year_2000_kept(self):
        assert parse_date("today is jan 1 2000") == StoredDate(month=1, day=1, year=0)

    def test_no_month(self):
        assert parse_date("today is the 7th") is None

    def test_calendar_order_decides(self):
        """Abbreviations are tried jan..dec, not left to right."""
        assert find_month("may or march") == (3, 10)


class TestParseTime:
    """Tests for time parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("the time is 7:44 pm", ParsedTime(7, 44, True)),
            ("the time is 19:44", ParsedTime(7, 44, True)),
            ("the time is 9:05 am", ParsedTime(9, 5, False)),
            ("the time is 0:15", ParsedTime(12, 15, False)),
            ("the time is 12:00", ParsedTime(12, 0, True)),
            ("the time is 11:30", ParsedTime(11, 30, False)),
            ("time is 12:30 am", ParsedTime(12, 30, False)),
            ("note: the time is 8:30 pm", ParsedTime(8, 30, True)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_time(text) == expected

    @pytest.mark.parametrize(
        "text", ["the time is 25:00", "the time is 7:75", "the time is :30", "the time is 7:"]
    )
    def test_malformed(self, text):
        assert parse_time(text) is None


class TestFormatting:
    """Tests for date/time rendering."""

    def test_date_with_year(self):
        assert format_date(StoredDate(2, 7, 26)) == "February 7, 2026"

    def test_date_without_year(self):
        assert format_date(StoredDate(12, 25)) == "December 25"

    def test_single_digit_year_padded(self):
        assert format_date(StoredDate(1, 1, 5)) == "January 1, 2005"

    def test_time(self):
        assert format_time(ClockReading(7, 4, True)) == "7:04 PM"


class TestTimeOfDayGreeting:
    """Tests for the salutation boundaries."""

    @pytest.mark.parametrize(
        "reading,expected",
        [
            (ClockReading(4, 59, False), EVENING),
            (ClockReading(5, 0, False), MORNING),
            (ClockReading(11, 59, False), MORNING),
            (ClockReading(12, 0, False), EVENING),
            (ClockReading(12, 0, True), AFTERNOON),
            (ClockReading(5, 59, True), AFTERNOON),
            (ClockReading(6, 0, True), EVENING),
        ],
    )
    def test_boundaries(self, reading, expected):
        assert time_of_day_greeting(reading) == expected

    def test_unset_clock(self):
        assert time_of_day_greeting(None) == ""


class TestDateTimeDirective:
    """Tests for dispatch, set and read."""

    @pytest.fixture
    def clock(self):
        return FixedClock()

    @pytest.fixture
    def directive(self, clock):
        return DateTimeDirective(clock)

    def ask(self, directive, text, state):
        result = directive.handle(Message.from_raw(text), state)
        return None if result is None else result.text

    def test_set_and_read_date(self, directive, state):
        assert self.ask(directive, "Today is February 7, 2026", state) == "Date set to February 7, 2026!"
        assert state.date == StoredDate(2, 7, 26)
        assert self.ask(directive, "what day is it", state) == "The date is February 7, 2026."

    def test_set_and_read_time(self, directive, state, clock):
        assert self.ask(directive, "the time is 7:44 PM", state) == "Time set to 7:44 PM!"
        assert state.time_set
        assert clock.read() == ClockReading(7, 44, True)
        assert self.ask(directive, "what time is it", state) == "The time is 7:44 PM."

    def test_24_hour_time_stored_as_pm(self, directive, state, clock):
        self.ask(directive, "the time is 19:44", state)
        assert clock.read() == ClockReading(7, 44, True)

    def test_unset_reads(self, directive, state):
        assert self.ask(directive, "what time is it", state) == TIME_NOT_SET
        assert self.ask(directive, "what is the date", state) == DATE_NOT_SET
        assert self.ask(directive, "what day is it", state) == DATE_NOT_SET

    def test_time_phrase_without_colon_reads(self, directive, state):
        assert self.ask(directive, "tell me the time", state) == TIME_NOT_SET

    def test_combined_read(self, directive, state):
        assert self.ask(directive, "date and time please", state) == (
            "The date is not set.\nThe time is not set."
        )
        self.ask(directive, "today is jul 4", state)
        self.ask(directive, "the time is 10:00 am", state)
        assert self.ask(directive, "date and time please", state) == (
            "The date is July 4.\nThe time is 10:00 AM."
        )

    def test_malformed_time(self, directive, state):
        assert self.ask(directive, "the time is 25:00", state) == TIME_HELP
        assert not state.time_set

    def test_unrelated_text_declined(self, directive, state):
        assert self.ask(directive, "tell me a joke", state) is None
