"""FRED API observation fetcher."""

import logging
import math
from datetime import date

import httpx

from ppi_analyzer.config import Settings, SERIES_TITLES
from ppi_analyzer.errors import FetchFailed, MalformedObservation
from ppi_analyzer.models.observation import Observation, ObservationSeries, is_iso_date


logger = logging.getLogger(__name__)

# FRED reports missing values as "." ; other sources use an empty string
MISSING_MARKERS = frozenset({"", "."})


def _parse_value(obs_date: str, raw: object) -> float | None:
    if raw is None:
        return None
    text = str(raw).strip()
    if text in MISSING_MARKERS:
        return None
    try:
        value = float(text)
    except ValueError:
        raise MalformedObservation(obs_date, raw) from None
    if not math.isfinite(value):
        raise MalformedObservation(obs_date, raw)
    return value


def parse_observations(series_id: str, payload: dict, title: str = "") -> ObservationSeries:
    """
    Convert a decoded FRED observations response into an ObservationSeries.

    Args:
        series_id: FRED series ID
        payload: JSON body with an "observations" list of {date, value} dicts
        title: Human-readable series title

    Returns:
        Series in source order. Missing values become None; malformed
        values are dropped and counted in ``skipped``.
    """
    if not isinstance(payload, dict) or "observations" not in payload:
        raise FetchFailed(f"{series_id}: response has no 'observations' field")

    entries = payload["observations"]
    if not isinstance(entries, list):
        raise FetchFailed(f"{series_id}: 'observations' is not a list: {type(entries).__name__}")

    observations = []
    skipped = 0
    for entry in entries:
        try:
            obs_date = str(entry["date"])
        except (KeyError, TypeError):
            raise FetchFailed(f"{series_id}: observation without a date: {entry!r}") from None

        try:
            if not is_iso_date(obs_date):
                raise MalformedObservation(obs_date, obs_date, field="date")
            value = _parse_value(obs_date, entry.get("value"))
        except MalformedObservation as e:
            logger.warning(f"  Skipping {series_id} {e}")
            skipped += 1
            continue

        observations.append(Observation(date=obs_date, value=value))

    if skipped:
        logger.warning(f"  {series_id}: skipped {skipped} malformed observations")

    return ObservationSeries(
        series_id=series_id,
        observations=tuple(observations),
        title=title,
        skipped=skipped,
    )


class FredFetcher:
    """Fetches observation series from the FRED API."""

    BASE_URL = "https://api.stlouisfed.org/fred"

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client: httpx.Client | None = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.request_timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FredFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _fetch_observations(
        self, series_id: str, start_date: date | None = None, end_date: date | None = None
    ) -> dict:
        params = {
            "series_id": series_id,
            "api_key": self.settings.fred_api_key,
            "file_type": "json",
        }
        if start_date:
            params["observation_start"] = start_date.isoformat()
        if end_date:
            params["observation_end"] = end_date.isoformat()

        response = self.client.get(
            f"{self.BASE_URL}/series/observations",
            params=params,
        )
        response.raise_for_status()
        return response.json()

    def fetch_series(
        self, series_id: str, start_date: date | None = None, end_date: date | None = None
    ) -> ObservationSeries:
        """
        Fetch a complete series.

        Args:
            series_id: FRED series ID
            start_date: Optional first observation date
            end_date: Optional last observation date

        Raises:
            FetchFailed: on HTTP, transport or decoding errors
        """
        logger.info(f"Fetching {series_id}...")

        try:
            payload = self._fetch_observations(series_id, start_date, end_date)
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching {series_id}: {e.response.status_code}")
            raise FetchFailed(f"{series_id}: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {series_id}: {e}")
            raise FetchFailed(f"{series_id}: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON for {series_id}: {e}")
            raise FetchFailed(f"{series_id}: invalid JSON response") from e

        series = parse_observations(series_id, payload, SERIES_TITLES.get(series_id, ""))
        logger.info(f"  Received {len(series)} observations")
        return series

    def __call__(self, series_id: str) -> ObservationSeries:
        return self.fetch_series(series_id)
