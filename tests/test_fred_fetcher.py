# =============================================================================
# UNIT TESTS — FRED fetcher and ingestion (HTTP faked with MockTransport)
# =============================================================================

import json
import logging
from datetime import date

import httpx
import pytest

from ppi_analyzer.config import Settings
from ppi_analyzer.data.fred_fetcher import FredFetcher, parse_observations
from ppi_analyzer.errors import FetchFailed


def _payload(*pairs):
    return {"observations": [{"date": d, "value": v} for d, v in pairs]}


def _fetcher(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return FredFetcher(Settings(fred_api_key="test-key"), client=client)


# =============================================================================
# INGESTION
# =============================================================================

class TestParseObservations:

    def test_numeric_strings_become_floats(self):
        series = parse_observations("WPU06", _payload(("2020-01-01", "10"), ("2020-02-01", "12.5")))
        assert [obs.value for obs in series] == [10.0, 12.5]
        assert series.series_id == "WPU06"

    def test_empty_and_dot_are_missing(self):
        series = parse_observations("X", _payload(("2020-01-01", ""), ("2020-02-01", "."), ("2020-03-01", "1")))
        assert [obs.value for obs in series] == [None, None, 1.0]
        assert series.skipped == 0

    def test_malformed_values_skipped_and_counted(self, caplog):
        with caplog.at_level(logging.WARNING):
            series = parse_observations("X", _payload(
                ("2020-01-01", "abc"),
                ("2020-02-01", "nan"),
                ("2020-03-01", "7"),
            ))
        assert [obs.date for obs in series] == ["2020-03-01"]
        assert series.skipped == 2
        assert "malformed" in caplog.text

    def test_zero_is_kept(self):
        series = parse_observations("X", _payload(("2020-01-01", "0")))
        assert series[0].value == 0.0

    def test_order_preserved(self):
        series = parse_observations("X", _payload(("2020-02-01", "2"), ("2020-01-01", "1")))
        assert [obs.date for obs in series] == ["2020-02-01", "2020-01-01"]

    def test_missing_observations_key(self):
        with pytest.raises(FetchFailed):
            parse_observations("X", {"error_message": "Bad Request"})

    def test_entry_without_date(self):
        with pytest.raises(FetchFailed):
            parse_observations("X", {"observations": [{"value": "1"}]})

    def test_title_carried(self):
        assert parse_observations("X", _payload(), title="Chemicals").title == "Chemicals"

    @pytest.mark.parametrize("observations", [None, "2020-01-01", {"date": "2020-01-01"}, 3])
    def test_observations_not_a_list(self, observations):
        with pytest.raises(FetchFailed, match="not a list"):
            parse_observations("X", {"observations": observations})

    def test_non_iso_dates_skipped_and_counted(self):
        series = parse_observations("X", _payload(
            ("01/02/2020", "1"),
            ("2020-W05-1", "2"),
            ("2020-1-1", "3"),
            ("2020-03-01", "4"),
        ))
        assert [obs.date for obs in series] == ["2020-03-01"]
        assert series.skipped == 3


# =============================================================================
# HTTP
# =============================================================================

class TestFredFetcher:

    def test_requires_api_key(self):
        with pytest.raises(ValueError, match="FRED_API_KEY"):
            FredFetcher(Settings(fred_api_key=""))

    def test_request_parameters(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=_payload(("2020-01-01", "1")))

        with _fetcher(handler) as fetcher:
            fetcher.fetch_series("PCU325325", start_date=date(2019, 1, 1), end_date=date(2020, 12, 31))

        assert seen["path"] == "/fred/series/observations"
        assert seen["params"]["series_id"] == "PCU325325"
        assert seen["params"]["api_key"] == "test-key"
        assert seen["params"]["file_type"] == "json"
        assert seen["params"]["observation_start"] == "2019-01-01"
        assert seen["params"]["observation_end"] == "2020-12-31"

    def test_fetch_returns_series_with_title(self):
        def handler(request):
            return httpx.Response(200, json=_payload(("2020-01-01", "100.5"), ("2020-02-01", ".")))

        with _fetcher(handler) as fetcher:
            series = fetcher("PCU325325")

        assert len(series) == 2
        assert series[0].value == 100.5
        assert series[1].value is None
        assert "Chemical" in series.title

    def test_http_error_becomes_fetch_failed(self):
        def handler(request):
            return httpx.Response(400, json={"error_message": "Bad Request"})

        with _fetcher(handler) as fetcher:
            with pytest.raises(FetchFailed, match="HTTP 400"):
                fetcher.fetch_series("WPU06")

    def test_transport_error_becomes_fetch_failed(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with _fetcher(handler) as fetcher:
            with pytest.raises(FetchFailed):
                fetcher.fetch_series("WPU06")

    def test_invalid_json_becomes_fetch_failed(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>not json</html>")

        with _fetcher(handler) as fetcher:
            with pytest.raises(FetchFailed, match="invalid JSON"):
                fetcher.fetch_series("WPU06")

    def test_close_releases_client(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, content=json.dumps(_payload())))
        fetcher.close()
        assert fetcher._client is None

    def test_null_observations_becomes_fetch_failed(self):
        def handler(request):
            return httpx.Response(200, json={"observations": None})

        with _fetcher(handler) as fetcher:
            with pytest.raises(FetchFailed, match="not a list"):
                fetcher.fetch_series("WPU06")
