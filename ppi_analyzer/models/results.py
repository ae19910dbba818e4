"""Query results.

Empty outcomes are values, not exceptions: callers branch with isinstance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AverageResult:
    average: float
    count: int


@dataclass(frozen=True)
class NoDataInRange:
    """No present-valued observation fell inside [start_date, end_date]."""

    start_date: str
    end_date: str


@dataclass(frozen=True)
class Extreme:
    value: float
    date: str


@dataclass(frozen=True)
class Extremes:
    max: Extreme
    min: Extreme


@dataclass(frozen=True)
class NoDataAvailable:
    """The series has no present-valued observations."""
