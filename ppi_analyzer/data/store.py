"""In-memory holder for the currently selected series."""

import logging
import threading

from ppi_analyzer.errors import NoDataLoaded
from ppi_analyzer.models.observation import ObservationSeries


logger = logging.getLogger(__name__)


class ObservationStore:
    """Owns exactly one ObservationSeries at a time."""

    def __init__(self) -> None:
        self._series: ObservationSeries | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._series is not None

    def load(self, series: ObservationSeries) -> None:
        """Replace the current series wholesale."""
        with self._lock:
            self._series = series
        logger.info(f"Loaded {series.series_id}: {len(series)} observations")

    def current(self) -> ObservationSeries:
        """Return the loaded series, or raise NoDataLoaded."""
        with self._lock:
            series = self._series
        if series is None:
            raise NoDataLoaded()
        return series
