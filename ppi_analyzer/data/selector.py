"""Map menu choices to FRED series and load them into the store."""

import logging
from typing import Callable

import httpx

from ppi_analyzer.config import PPI_SERIES, SERIES_TITLES
from ppi_analyzer.data.store import ObservationStore
from ppi_analyzer.errors import FetchFailed, InvalidSelection
from ppi_analyzer.models.observation import ObservationSeries


logger = logging.getLogger(__name__)

FetchFn = Callable[[str], ObservationSeries]


class SeriesSelector:
    """Translates a menu choice into a fetch and a store load."""

    def __init__(
        self,
        store: ObservationStore,
        fetch: FetchFn,
        series_map: dict[int, str] | None = None,
    ) -> None:
        self.store = store
        self.fetch = fetch
        self.series_map = series_map if series_map is not None else PPI_SERIES

    def options(self) -> list[tuple[int, str, str]]:
        """Menu rows as (choice, series_id, title)."""
        return [
            (choice, series_id, SERIES_TITLES.get(series_id, series_id))
            for choice, series_id in sorted(self.series_map.items())
        ]

    def resolve(self, choice: int | str) -> str:
        """Return the series ID for a choice, or raise InvalidSelection."""
        try:
            key = int(str(choice).strip())
        except ValueError:
            raise InvalidSelection(choice) from None
        if key not in self.series_map:
            raise InvalidSelection(choice)
        return self.series_map[key]

    def select(self, choice: int | str) -> ObservationSeries:
        """
        Fetch the series for ``choice`` and load it.

        The store is left untouched on InvalidSelection or FetchFailed.
        """
        series_id = self.resolve(choice)

        try:
            series = self.fetch(series_id)
        except FetchFailed:
            raise
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"Error fetching {series_id}: {e}")
            raise FetchFailed(f"{series_id}: {e}") from e

        self.store.load(series)
        return series
