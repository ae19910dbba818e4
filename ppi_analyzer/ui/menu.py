"""Numbered text menu over the analysis engine.

Usage:
    ppi-analyzer [--series N] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from typing import Callable

from ppi_analyzer.analysis.query import QueryEngine
from ppi_analyzer.config import Settings
from ppi_analyzer.data.fred_fetcher import FredFetcher
from ppi_analyzer.data.selector import SeriesSelector
from ppi_analyzer.data.store import ObservationStore
from ppi_analyzer.errors import FetchFailed, InvalidSelection, NoDataLoaded
from ppi_analyzer.models.observation import Observation, is_iso_date
from ppi_analyzer.models.results import NoDataAvailable, NoDataInRange


logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = """
PPI Analyzer
------------------------------
1. Select series
2. Average over date range
3. Maximum and minimum
4. Filter by value range
5. Show latest entries
6. Exit"""


def format_value(value: float | None) -> str:
    """Two decimals, or N/A for a missing value."""
    return "N/A" if value is None else f"{value:.2f}"


def format_observation(obs: Observation) -> str:
    return f"  {obs.date} | {format_value(obs.value):>10}"


def prompt_date(input_fn: InputFn, output_fn: OutputFn, label: str) -> str:
    """Ask until the user enters a YYYY-MM-DD date."""
    while True:
        raw = input_fn(f"{label} (YYYY-MM-DD): ").strip()
        if not is_iso_date(raw):
            output_fn(f"Invalid date: {raw!r}. Use YYYY-MM-DD.")
            continue
        return raw


def prompt_float(input_fn: InputFn, output_fn: OutputFn, label: str) -> float:
    while True:
        raw = input_fn(f"{label}: ").strip()
        try:
            return float(raw)
        except ValueError:
            output_fn(f"Invalid number: {raw!r}")


def prompt_int(input_fn: InputFn, output_fn: OutputFn, label: str) -> int:
    while True:
        raw = input_fn(f"{label}: ").strip()
        try:
            return int(raw)
        except ValueError:
            output_fn(f"Invalid integer: {raw!r}")


class Menu:
    """Interactive loop. Input and output are injectable for testing."""

    def __init__(
        self,
        selector: SeriesSelector,
        engine: QueryEngine,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.selector = selector
        self.engine = engine
        self.input = input_fn
        self.output = output_fn

    def select_series(self) -> None:
        self.output("\nAvailable series:")
        for choice, series_id, title in self.selector.options():
            self.output(f"  {choice}. {series_id:10} | {title}")

        choice = self.input("Choice: ")
        try:
            series = self.selector.select(choice)
        except InvalidSelection as e:
            self.output(str(e))
            return
        except FetchFailed as e:
            self.output(str(e))
            if self.engine.store.is_loaded:
                self.output(f"Keeping {self.engine.store.current().series_id}")
            return

        self.output(f"Loaded {series.series_id}: {len(series)} observations")
        if series.skipped:
            self.output(f"  ({series.skipped} malformed observations skipped)")

    def show_average(self) -> None:
        start = prompt_date(self.input, self.output, "Start date")
        end = prompt_date(self.input, self.output, "End date")
        result = self.engine.average_in_range(start, end)
        if isinstance(result, NoDataInRange):
            self.output(f"No valid data in range {start} to {end}")
            return
        self.output(f"Average: {result.average:.2f} ({result.count} observations)")

    def show_extremes(self) -> None:
        result = self.engine.find_extremes()
        if isinstance(result, NoDataAvailable):
            self.output("No data available")
            return
        self.output(f"Maximum: {result.max.value:.2f} on {result.max.date}")
        self.output(f"Minimum: {result.min.value:.2f} on {result.min.date}")

    def show_filter(self) -> None:
        low = prompt_float(self.input, self.output, "Minimum value")
        high = prompt_float(self.input, self.output, "Maximum value")
        matches = list(self.engine.filter_by_range(low, high))
        if not matches:
            self.output("No observations in range")
            return
        self.output(f"{len(matches)} observations between {low:.2f} and {high:.2f}:")
        for obs in matches:
            self.output(format_observation(obs))

    def show_latest(self) -> None:
        n = prompt_int(self.input, self.output, "Number of entries")
        if n <= 0:
            self.output("Number of entries must be positive")
            return
        for obs in self.engine.latest_entries(n):
            self.output(format_observation(obs))

    def run(self) -> None:
        actions = {
            "1": self.select_series,
            "2": self.show_average,
            "3": self.show_extremes,
            "4": self.show_filter,
            "5": self.show_latest,
        }
        try:
            while True:
                self.output(MENU)
                option = self.input("Option: ").strip()
                if option == "6":
                    self.output("Goodbye.")
                    return
                action = actions.get(option)
                if action is None:
                    self.output(f"Unknown option: {option!r}")
                    continue
                try:
                    action()
                except NoDataLoaded as e:
                    self.output(str(e))
        except EOFError:
            self.output("\nGoodbye.")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Analyze FRED producer price indices")
    parser.add_argument(
        "--series",
        type=str,
        help="Load this menu choice (1-3) before showing the menu",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: PPI_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        fetcher = FredFetcher(settings)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    with fetcher:
        store = ObservationStore()
        selector = SeriesSelector(store, fetcher)
        menu = Menu(selector, QueryEngine(store))

        if args.series:
            try:
                selector.select(args.series)
            except (InvalidSelection, FetchFailed) as e:
                print(e)

        menu.run()


if __name__ == "__main__":
    main()
