"""
Clock Protocol: Abstract interface for the time-of-day collaborator.

The engine never reads the host's wall clock. The user tells it the time
("the time is 7:44 pm") and from then on the clock keeps it, the way a
time-of-day register does once it has been written. Until the first
``set`` the clock has no reading at all.

Keeping the clock behind a protocol lets tests inject a fake that never
moves.
"""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class ClockReading:
    """A 12-hour clock reading."""

    hour: int  # 1-12
    minute: int  # 0-59
    is_pm: bool

    def __repr__(self) -> str:
        return f"ClockReading({self.hour}:{self.minute:02d} {'PM' if self.is_pm else 'AM'})"


class Clock(Protocol):
    """
    Abstract protocol for the time-of-day clock.

    Implementations must:
    1. Return None from ``read`` until ``set`` has been called once
    2. Accept hour 1-12, minute 0-59 and an AM/PM flag in ``set``
    3. Report 12-hour readings from ``read``
    """

    def set(self, hour: int, minute: int, is_pm: bool) -> None:
        """
        Set the clock.

        Args:
            hour: Hour on a 12-hour dial (1-12)
            minute: Minute (0-59)
            is_pm: True for PM, False for AM

        Raises:
            ValueError: If hour or minute is out of range
        """
        ...

    def read(self) -> Optional[ClockReading]:
        """
        Read the clock.

        Returns:
            Current reading, or None if the clock was never set
        """
        ...
