"""Observation and query result types."""

from ppi_analyzer.models.observation import Observation, ObservationSeries
from ppi_analyzer.models.results import (
    AverageResult,
    Extreme,
    Extremes,
    NoDataAvailable,
    NoDataInRange,
)

__all__ = [
    "Observation",
    "ObservationSeries",
    "AverageResult",
    "Extreme",
    "Extremes",
    "NoDataAvailable",
    "NoDataInRange",
]
