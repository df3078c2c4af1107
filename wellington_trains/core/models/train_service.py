"""
Train Service Model

A single scheduled run of a train line.
"""

from dataclasses import dataclass
from typing import Tuple


def format_time(hhmm: int) -> str:
    """
    Format an HHMM departure time for display.

    Args:
        hhmm: Time as an integer, e.g. 605 for 6:05am

    Returns:
        Time string in HH:MM format
    """
    hours, minutes = divmod(hhmm, 100)
    return f"{hours:02d}:{minutes:02d}"


def is_valid_time(hhmm: int) -> bool:
    """Check that an HHMM value is a clock time between 0000 and 2359."""
    if hhmm < 0:
        return False
    hours, minutes = divmod(hhmm, 100)
    return hours < 24 and minutes < 60


@dataclass(frozen=True)
class TrainService:
    """
    Immutable record of one service on a line.

    Services are created through ``TrainLine.add_service`` so that
    ``line_name`` always names the owning line.
    """

    line_name: str
    times: Tuple[int, ...]

    def __post_init__(self):
        """Validate service data."""
        if not self.times:
            raise ValueError(f"Service on {self.line_name} must have at least one time")

        if not isinstance(self.times, tuple):
            object.__setattr__(self, 'times', tuple(self.times))

        for time_value in self.times:
            if not is_valid_time(time_value):
                raise ValueError(f"Invalid departure time {time_value} on {self.line_name}")

    @property
    def departure_time(self) -> int:
        """Get the first departure time of the service."""
        return self.times[0]

    def get_display_times(self) -> str:
        """Get the service times formatted for display."""
        return ", ".join(format_time(t) for t in self.times)

    def __str__(self) -> str:
        return self.get_display_times()
