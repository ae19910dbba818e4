"""Data fetching and in-memory storage."""

from .fred_fetcher import FredFetcher, parse_observations
from .selector import SeriesSelector
from .store import ObservationStore

__all__ = ["FredFetcher", "parse_observations", "SeriesSelector", "ObservationStore"]
