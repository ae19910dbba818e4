"""Shared fixtures: sample series and a fake fetch collaborator."""
import pytest

from ppi_analyzer.data.store import ObservationStore
from ppi_analyzer.models.observation import Observation, ObservationSeries


def make_series(pairs, series_id="TEST"):
    """Build a series from (date, value) pairs; value may be None."""
    return ObservationSeries(
        series_id=series_id,
        observations=tuple(Observation(d, v) for d, v in pairs),
    )


@pytest.fixture
def sample_series():
    """Three months with a gap in February."""
    return make_series([
        ("2020-01-01", 10.0),
        ("2020-02-01", None),
        ("2020-03-01", 20.0),
    ])


@pytest.fixture
def empty_series():
    return make_series([])


@pytest.fixture
def store():
    return ObservationStore()


class FakeFetch:
    """Records requested IDs and returns canned series or raises."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, series_id):
        self.calls.append(series_id)
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return make_series([("2021-01-01", 1.0)], series_id=series_id)


@pytest.fixture
def fake_fetch():
    return FakeFetch()
