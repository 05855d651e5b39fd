"""
Closed integer interval value used as the payload of the interval tree.
"""

from dataclasses import dataclass


class InvalidIntervalError(ValueError):
    """Raised when an interval is constructed with start > end."""

    def __init__(self, start: int, end: int):
        super().__init__(f"Invalid interval: start {start} cannot be greater than end {end}")
        self.start = start
        self.end = end


@dataclass(frozen=True)
class Interval:
    """An immutable closed interval [start, end] with start <= end."""
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidIntervalError(self.start, self.end)

    def overlaps(self, other: 'Interval') -> bool:
        return self.start <= other.end and other.start <= self.end

    def contains(self, point: int) -> bool:
        return self.start <= point <= self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"
