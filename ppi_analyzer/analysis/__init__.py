"""Queries over a loaded observation series."""

from ppi_analyzer.analysis.query import (
    QueryEngine,
    RangeFilter,
    average_in_range,
    filter_by_range,
    find_extremes,
    latest_entries,
)

__all__ = [
    "QueryEngine",
    "RangeFilter",
    "average_in_range",
    "filter_by_range",
    "find_extremes",
    "latest_entries",
]
