"""Data models for series observations."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator

import pandas as pd


def is_iso_date(text: str) -> bool:
    """True only for a canonical YYYY-MM-DD calendar date."""
    try:
        return date.fromisoformat(text).isoformat() == text
    except (TypeError, ValueError):
        return False


@dataclass(frozen=True)
class Observation:
    """Single observation from a FRED series.

    ``value`` is None when the source reported it as missing.
    """

    date: str  # YYYY-MM-DD
    value: float | None

    @property
    def is_present(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class ObservationSeries:
    """Ordered observations for one series, as delivered by the source."""

    series_id: str
    observations: tuple[Observation, ...] = ()
    title: str = ""
    skipped: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "observations", tuple(self.observations))

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)

    def __getitem__(self, index):
        return self.observations[index]

    @property
    def first_date(self) -> str | None:
        return self.observations[0].date if self.observations else None

    @property
    def last_date(self) -> str | None:
        return self.observations[-1].date if self.observations else None

    def to_frame(self) -> pd.DataFrame:
        """
        Convert to a DataFrame for charting.

        Returns:
            DataFrame with DatetimeIndex and 'value' column (NaN where missing)
        """
        if not self.observations:
            return pd.DataFrame(columns=["value"])

        df = pd.DataFrame(
            {
                "date": [obs.date for obs in self.observations],
                "value": [obs.value for obs in self.observations],
            }
        )
        df["date"] = pd.to_datetime(df["date"])
        df["value"] = pd.to_numeric(df["value"])
        df.set_index("date", inplace=True)
        return df
