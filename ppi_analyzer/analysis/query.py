"""Summary statistics over an ObservationSeries.

All functions are pure: they only read the series and never raise on an
empty series. Dates are compared as ISO strings.
"""

from typing import Iterable, Iterator

from ppi_analyzer.data.store import ObservationStore
from ppi_analyzer.models.observation import Observation, ObservationSeries
from ppi_analyzer.models.results import (
    AverageResult,
    Extreme,
    Extremes,
    NoDataAvailable,
    NoDataInRange,
)


def average_in_range(
    series: ObservationSeries, start_date: str, end_date: str
) -> AverageResult | NoDataInRange:
    """Mean of present values with start_date <= date <= end_date."""
    total = 0.0
    count = 0
    for obs in series:
        if obs.value is None:
            continue
        if start_date <= obs.date <= end_date:
            total += obs.value
            count += 1

    if count == 0:
        return NoDataInRange(start_date, end_date)
    return AverageResult(average=total / count, count=count)


def find_extremes(series: ObservationSeries) -> Extremes | NoDataAvailable:
    """
    Max and min present values with their dates.

    Strict comparisons: on ties the first observation in series order wins.
    """
    high: Extreme | None = None
    low: Extreme | None = None
    for obs in series:
        if obs.value is None:
            continue
        if high is None or obs.value > high.value:
            high = Extreme(obs.value, obs.date)
        if low is None or obs.value < low.value:
            low = Extreme(obs.value, obs.date)

    if high is None or low is None:
        return NoDataAvailable()
    return Extremes(max=high, min=low)


class RangeFilter:
    """Lazy, re-iterable view of observations with min_value <= value <= max_value."""

    def __init__(self, observations: Iterable[Observation], min_value: float, max_value: float) -> None:
        self._observations = observations
        self.min_value = min_value
        self.max_value = max_value

    def __iter__(self) -> Iterator[Observation]:
        for obs in self._observations:
            if obs.value is not None and self.min_value <= obs.value <= self.max_value:
                yield obs

    def __repr__(self) -> str:
        return f"RangeFilter(min_value={self.min_value!r}, max_value={self.max_value!r})"


def filter_by_range(
    series: Iterable[Observation], min_value: float, max_value: float
) -> RangeFilter:
    """Observations whose present value lies in [min_value, max_value], in order.

    Accepts an ObservationSeries or any re-iterable of observations, so the
    output of a previous filter can be filtered again.
    """
    return RangeFilter(series, min_value, max_value)


def latest_entries(series: ObservationSeries, n: int) -> tuple[Observation, ...]:
    """Last min(n, len(series)) observations, oldest first."""
    if n <= 0:
        return ()
    return tuple(series[-n:])


class QueryEngine:
    """Runs queries against whatever series the store currently holds.

    Every method raises NoDataLoaded if nothing has been loaded yet.
    """

    def __init__(self, store: ObservationStore) -> None:
        self.store = store

    def average_in_range(self, start_date: str, end_date: str) -> AverageResult | NoDataInRange:
        return average_in_range(self.store.current(), start_date, end_date)

    def find_extremes(self) -> Extremes | NoDataAvailable:
        return find_extremes(self.store.current())

    def filter_by_range(self, min_value: float, max_value: float) -> RangeFilter:
        return filter_by_range(self.store.current(), min_value, max_value)

    def latest_entries(self, n: int) -> tuple[Observation, ...]:
        return latest_entries(self.store.current(), n)
